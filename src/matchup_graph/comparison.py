"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: comparison.py
Description:
    Main comparison entry point.
    Takes the season's matchups and a two-team query, builds the filtered
    graph, finds the leverage-weighted shortest path, extracts the
    degree-bounded subgraph and lays it out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal

from matchup_graph.core.models import ALL_CATEGORIES, Matchup, Team
from matchup_graph.core.types import TeamId
from matchup_graph.layout.engine import compute_layered_layout
from matchup_graph.layout.models import DEFAULT_LAYOUT, LayoutConfig, LayoutResult
from matchup_graph.network.builder import build_matchup_graph
from matchup_graph.network.models import MatchupGraph, PathResult, SubgraphModel
from matchup_graph.network.paths import shortest_path
from matchup_graph.network.subgraph import extract_subgraph

logger = logging.getLogger(__name__)

ComparisonStatus = Literal["ok", "no-path", "same-team"]


@dataclass(frozen=True)
class ComparisonQuery:
    """Parameters of one two-team comparison."""

    source: TeamId
    destination: TeamId
    max_degrees: int = 1
    category: str = ALL_CATEGORIES
    min_leverage: float = 0.0

    def __post_init__(self) -> None:
        if self.max_degrees < 0:
            raise ValueError(f"max_degrees must be non-negative, got {self.max_degrees}")
        if self.min_leverage < 0:
            raise ValueError(f"min_leverage must be non-negative, got {self.min_leverage}")

    @property
    def is_same_team(self) -> bool:
        return self.source == self.destination


@dataclass(frozen=True)
class Comparison:
    """Everything produced for one query, ready to be drawn."""

    query: ComparisonQuery
    status: ComparisonStatus
    graph: MatchupGraph
    path: PathResult | None
    subgraph: SubgraphModel
    layout: LayoutResult

    @property
    def connected(self) -> bool:
        return self.status == "ok"

    def summary(self) -> str:
        """One-line human-readable outcome."""
        q = self.query
        if self.status == "same-team":
            return f"{q.source}: pick two different teams"
        if self.path is None:
            return f"{q.source} → {q.destination}: no connection"
        return (
            f"{' → '.join(self.path.teams)} "
            f"({self.path.hops} hops, cost {self.path.cost:.3f}, "
            f"{len(self.subgraph.teams)} teams, {len(self.subgraph.edges)} pairs)"
        )


def compare_teams(
    matchups: Iterable[Matchup],
    query: ComparisonQuery,
    teams: Mapping[TeamId, Team] | None = None,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Comparison:
    """Run the full comparison pipeline for one query.

    Args:
        matchups: Every matchup of the season (unfiltered).
        query: Source, destination and filters.
        teams: Optional team lookup; names become ordering labels.
        config: Layout canvas and spacing.

    Returns:
        Comparison.  A missing connection is reported through ``status``
        ("no-path"), never raised; source == destination is reported as
        "same-team" without searching.
    """
    graph = build_matchup_graph(matchups, category=query.category, min_leverage=query.min_leverage)
    labels = {tid: t.label for tid, t in teams.items()} if teams else {}

    status: ComparisonStatus
    path: PathResult | None
    if query.is_same_team:
        status, path = "same-team", None
        subgraph = SubgraphModel(
            source=query.source,
            destination=query.destination,
            teams=(query.source,),
            edges=(),
            degrees={query.source: 0},
        )
    else:
        path = shortest_path(query.source, query.destination, graph)
        status = "ok" if path is not None else "no-path"
        subgraph = extract_subgraph(
            query.source, query.destination, query.max_degrees, graph, shortest_path=path
        )

    layout = compute_layered_layout(subgraph, labels=labels, config=config)
    comparison = Comparison(
        query=query,
        status=status,
        graph=graph,
        path=path,
        subgraph=subgraph,
        layout=layout,
    )
    logger.info("Comparison [%s] %s", status, comparison.summary())
    return comparison
