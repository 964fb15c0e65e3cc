"""Weighted matchup graph — construction, shortest path, subgraph extraction."""

from matchup_graph.network.builder import build_matchup_graph, group_by_pair
from matchup_graph.network.models import (
    LEVERAGE_EPSILON,
    MatchupGraph,
    Neighbor,
    PairEdge,
    PathResult,
    SubgraphModel,
)
from matchup_graph.network.paths import shortest_path
from matchup_graph.network.subgraph import extract_subgraph

__all__ = [
    "LEVERAGE_EPSILON",
    "MatchupGraph",
    "Neighbor",
    "PairEdge",
    "PathResult",
    "SubgraphModel",
    "build_matchup_graph",
    "extract_subgraph",
    "group_by_pair",
    "shortest_path",
]
