"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: network/models.py
Description:
    Data models for the weighted matchup graph.
    A MatchupGraph is an undirected weighted graph: nodes are teams,
    edges are team pairs aggregated over every matchup that passed the
    builder's filters.  Edge weight is inverse average leverage, so
    high-leverage pairs are "short" connections.

    PathResult and SubgraphModel hold the outputs of the path finder and
    the subgraph extractor (paths.py, subgraph.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from matchup_graph.core.models import Matchup
from matchup_graph.core.types import PairKey, TeamId, pair_key

# Leverage floor applied before inversion; bounds the worst-case weight.
LEVERAGE_EPSILON = 1e-6


@dataclass(frozen=True)
class PairEdge:
    """All passing matchups between one unordered pair of teams."""

    key: PairKey
    matchups: tuple[Matchup, ...]

    @property
    def count(self) -> int:
        return len(self.matchups)

    @property
    def average_leverage(self) -> float:
        """Mean leverage of the matchups on this pair (missing counts as 0)."""
        if not self.matchups:
            return 0.0
        return sum(m.leverage_value for m in self.matchups) / len(self.matchups)

    @property
    def weight(self) -> float:
        """Inverse-leverage distance: 1 / max(ε, average leverage)."""
        return 1.0 / max(LEVERAGE_EPSILON, self.average_leverage)

    def other(self, team_id: TeamId) -> TeamId:
        """The opposite endpoint of this edge."""
        a, b = self.key
        return b if team_id == a else a


@dataclass(frozen=True)
class Neighbor:
    """One side of a PairEdge, as seen from a team's adjacency list."""

    neighbor: TeamId
    pair_key: PairKey
    weight: float
    average_leverage: float
    matchups: tuple[Matchup, ...]


@dataclass(frozen=True)
class MatchupGraph:
    """Undirected weighted matchup graph.

    adjacency: team_id → [Neighbor, ...]   (symmetric)
    edges:     pair_key → PairEdge

    Both dicts keep insertion order, which follows the order in which pairs
    first appear in the input matchups.  That order is the tie-break order
    for the path finder and the subgraph extractor.
    """

    adjacency: dict[TeamId, list[Neighbor]]
    edges: dict[PairKey, PairEdge]
    category: str
    min_leverage: float

    @property
    def teams(self) -> list[TeamId]:
        return list(self.adjacency)

    def neighbors(self, team_id: TeamId) -> list[Neighbor]:
        """Adjacency records for a team; empty for unknown teams."""
        return self.adjacency.get(team_id, [])

    def neighbor_ids(self, team_id: TeamId) -> list[TeamId]:
        return [n.neighbor for n in self.neighbors(team_id)]

    def edge_between(self, a: TeamId, b: TeamId) -> PairEdge | None:
        return self.edges.get(pair_key(a, b))

    def are_adjacent(self, a: TeamId, b: TeamId) -> bool:
        return self.edge_between(a, b) is not None

    def __contains__(self, team_id: object) -> bool:
        return team_id in self.adjacency


@dataclass(frozen=True)
class PathResult:
    """Lowest-cost route between two teams.

    teams: source → destination, inclusive.
    edges: pair keys traversed, one per hop, in travel order.
    """

    teams: tuple[TeamId, ...]
    edges: tuple[PairKey, ...]
    cost: float

    @property
    def source(self) -> TeamId:
        return self.teams[0]

    @property
    def destination(self) -> TeamId:
        return self.teams[-1]

    @property
    def hops(self) -> int:
        return len(self.edges)

    @property
    def is_trivial(self) -> bool:
        """True for the self-path (source == destination)."""
        return self.hops == 0


@dataclass(frozen=True)
class SubgraphModel:
    """The teams and pairs drawn for one two-team comparison.

    degrees maps each included team to its degree label.  Source and
    destination are always labelled 0: they are anchors, not intermediates.
    path is the weighted shortest path used as a layout anchor (may be empty).
    """

    source: TeamId
    destination: TeamId
    teams: tuple[TeamId, ...]
    edges: tuple[PairKey, ...]
    degrees: dict[TeamId, int] = field(default_factory=dict)
    path: tuple[TeamId, ...] = ()

    @property
    def is_empty(self) -> bool:
        """No connection found: only the endpoints, no edges."""
        return not self.edges

    def contains(self, team_id: TeamId) -> bool:
        return team_id in self.degrees

    def degree_of(self, team_id: TeamId) -> int | None:
        return self.degrees.get(team_id)
