"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/engine.py
Description:
    Sugiyama-style layered layout for a comparison subgraph.

    Pipeline (one call, no state kept between calls):
    1. Layer assignment      — BFS hops from the source + bridge promotion
    2. In-layer ordering     — barycenter sweeps, top-down then bottom-up
    3. Coordinate assignment — x by layer value, y stacked on the midline;
                               source / destination pinned left / right
    4. Collision resolution  — vertical push-apart of close teams

    The input SubgraphModel is never modified; derived data (layers, edge
    hop degrees) is returned next to the positions in a LayoutResult.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from matchup_graph.core.types import PairKey, TeamId
from matchup_graph.layout.collision import min_vertical_gap, resolve_collisions
from matchup_graph.layout.coordinates import pin_endpoints
from matchup_graph.layout.layering import assign_layers, subgraph_adjacency
from matchup_graph.layout.models import (
    DEFAULT_LAYOUT,
    LayerAssignment,
    LayoutConfig,
    LayoutResult,
    Position,
)
from matchup_graph.layout.ordering import OrderingContext, ideal_layer_y, sweep_layers
from matchup_graph.network.models import SubgraphModel

logger = logging.getLogger(__name__)


def compute_layered_layout(
    subgraph: SubgraphModel,
    labels: Mapping[TeamId, str] | None = None,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> LayoutResult:
    """Lay out a comparison subgraph left (source) to right (destination).

    Args:
        subgraph: Output of extract_subgraph().
        labels: Display names used as the final ordering tie-breaker;
            team ids are used where missing.
        config: Canvas size and spacing constants.

    Returns:
        LayoutResult.  When the destination is unreachable from the source
        inside the subgraph, only the two pinned endpoints are positioned
        and ``layers`` is None.
    """
    labels = labels or {}
    source, destination = subgraph.source, subgraph.destination

    adjacency = subgraph_adjacency(subgraph)
    assignment = assign_layers(subgraph, adjacency)
    if assignment is None:
        logger.debug("No connection %s → %s; pinning endpoints only", source, destination)
        return _endpoints_only(source, destination, config)

    ctx = OrderingContext(
        assignment=assignment,
        adjacency=adjacency,
        labels=labels,
        endpoints=(source, destination),
        ideal_y=ideal_layer_y(assignment, labels, config),
        center_y=config.center_y,
    )
    _, positions = sweep_layers(ctx, config)
    pin_endpoints(positions, source, destination, config)

    resolved = resolve_collisions(
        positions,
        fixed=(source, destination),
        x_threshold=config.x_threshold,
        min_separation=config.min_separation,
        passes=config.collision_passes,
    )
    logger.debug(
        "Layout %s → %s: %d teams, %d bridges, min gap %.1f",
        source,
        destination,
        len(resolved),
        len(assignment.bridges),
        min_vertical_gap(resolved, config.x_threshold),
    )

    return LayoutResult(
        positions=resolved,
        layers=assignment,
        edge_hop_degree=edge_hop_degrees(subgraph, assignment),
    )


def edge_hop_degrees(
    subgraph: SubgraphModel,
    assignment: LayerAssignment,
) -> dict[PairKey, int]:
    """Smaller source-hop distance of each edge's endpoints (for colouring)."""
    hops = assignment.hops_from_source
    result: dict[PairKey, int] = {}
    for key in subgraph.edges:
        reachable = [hops[t] for t in key if t in hops]
        if reachable:
            result[key] = min(reachable)
    return result


def _endpoints_only(
    source: TeamId,
    destination: TeamId,
    config: LayoutConfig,
) -> LayoutResult:
    positions: dict[TeamId, Position] = {}
    pin_endpoints(positions, source, destination, config)
    return LayoutResult(positions=positions)
