"""
MatchupGraph — Leverage-weighted team comparisons and layered layouts.

Usage::

    from matchup_graph import (
        Team, Matchup,
        build_matchup_graph, shortest_path, extract_subgraph,
        compute_layered_layout, LayoutConfig,
        ComparisonQuery, compare_teams,
        matchups_from_records, teams_from_records,
    )
"""

from importlib.metadata import version
__version__ = version("matchup-graph")

# Core models
from matchup_graph.core.models import ALL_CATEGORIES, Matchup, Team

# Network
from matchup_graph.network.builder import build_matchup_graph
from matchup_graph.network.models import (
    MatchupGraph,
    PairEdge,
    PathResult,
    SubgraphModel,
)
from matchup_graph.network.paths import shortest_path
from matchup_graph.network.subgraph import extract_subgraph

# Layout
from matchup_graph.layout.engine import compute_layered_layout
from matchup_graph.layout.models import (
    DEFAULT_LAYOUT,
    Layer,
    LayoutConfig,
    LayoutResult,
    Position,
)

# Comparison pipeline
from matchup_graph.comparison import Comparison, ComparisonQuery, compare_teams

# Data loading convenience
from matchup_graph.data.records import (
    matchups_from_frame,
    matchups_from_records,
    teams_from_records,
)

__all__ = [
    # Core
    "ALL_CATEGORIES",
    "Matchup",
    "Team",
    # Network
    "MatchupGraph",
    "PairEdge",
    "PathResult",
    "SubgraphModel",
    "build_matchup_graph",
    "extract_subgraph",
    "shortest_path",
    # Layout
    "DEFAULT_LAYOUT",
    "Layer",
    "LayoutConfig",
    "LayoutResult",
    "Position",
    "compute_layered_layout",
    # Comparison
    "Comparison",
    "ComparisonQuery",
    "compare_teams",
    # Data
    "matchups_from_frame",
    "matchups_from_records",
    "teams_from_records",
]
