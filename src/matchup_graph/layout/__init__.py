"""Layered (Sugiyama-style) layout for comparison subgraphs."""

from matchup_graph.layout.collision import min_vertical_gap, resolve_collisions
from matchup_graph.layout.engine import compute_layered_layout, edge_hop_degrees
from matchup_graph.layout.layering import assign_layers, bfs_hops, subgraph_adjacency
from matchup_graph.layout.models import (
    DEFAULT_LAYOUT,
    Layer,
    LayerAssignment,
    LayoutConfig,
    LayoutResult,
    Position,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "Layer",
    "LayerAssignment",
    "LayoutConfig",
    "LayoutResult",
    "Position",
    "assign_layers",
    "bfs_hops",
    "compute_layered_layout",
    "edge_hop_degrees",
    "min_vertical_gap",
    "resolve_collisions",
    "subgraph_adjacency",
]
