"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: network/builder.py
Description:
    Builds a MatchupGraph from a flat list of Matchup objects.

    Algorithm:
    1. Group matchups by canonical pair key, in first-seen order.
    2. Keep only the matchups on each pair that pass the category filter
       and the minimum-leverage threshold; drop pairs with none left.
    3. Aggregate the survivors into a PairEdge (average leverage, weight).
    4. Record the edge on both endpoints' adjacency lists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from matchup_graph.core.models import ALL_CATEGORIES, Matchup
from matchup_graph.core.types import PairKey, TeamId, pair_key
from matchup_graph.network.models import MatchupGraph, Neighbor, PairEdge

logger = logging.getLogger(__name__)


def group_by_pair(matchups: Iterable[Matchup]) -> dict[PairKey, list[Matchup]]:
    """Group matchups by unordered team pair, preserving first-seen order.

    Self-matchups (same id on both sides) carry no connectivity and are
    skipped.
    """
    pairs: dict[PairKey, list[Matchup]] = {}
    for m in matchups:
        if m.is_self_matchup:
            continue
        pairs.setdefault(pair_key(m.home_team_id, m.away_team_id), []).append(m)
    return pairs


def build_matchup_graph(
    matchups: Iterable[Matchup],
    category: str = ALL_CATEGORIES,
    min_leverage: float = 0.0,
) -> MatchupGraph:
    """Build the weighted undirected matchup graph.

    Args:
        matchups: Every known matchup; multiple per pair are aggregated.
        category: "ALL" or an exact category tag to keep.
        min_leverage: Matchups below this leverage are ignored.

    Returns:
        MatchupGraph whose adjacency is symmetric and whose edge weights are
        computed from the passing matchups only.

    Raises:
        ValueError: If min_leverage is negative.
    """
    if min_leverage < 0:
        raise ValueError(f"min_leverage must be non-negative, got {min_leverage}")

    adjacency: dict[TeamId, list[Neighbor]] = {}
    edges: dict[PairKey, PairEdge] = {}

    for key, pair_matchups in group_by_pair(matchups).items():
        passing = tuple(m for m in pair_matchups if m.passes(category, min_leverage))
        if not passing:
            continue

        edge = PairEdge(key=key, matchups=passing)
        edges[key] = edge

        # The home side of the first passing game is recorded first so the
        # adjacency order follows the input, not the sorted key.
        first = passing[0]
        for team, other in (
            (first.home_team_id, first.away_team_id),
            (first.away_team_id, first.home_team_id),
        ):
            adjacency.setdefault(team, []).append(
                Neighbor(
                    neighbor=other,
                    pair_key=key,
                    weight=edge.weight,
                    average_leverage=edge.average_leverage,
                    matchups=passing,
                )
            )

    logger.debug(
        "Built matchup graph: %d teams, %d pairs (category=%s, min_leverage=%s)",
        len(adjacency),
        len(edges),
        category,
        min_leverage,
    )

    return MatchupGraph(
        adjacency=adjacency,
        edges=edges,
        category=category,
        min_leverage=min_leverage,
    )
