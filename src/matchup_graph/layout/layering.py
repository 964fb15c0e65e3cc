"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/layering.py
Description:
    Phase 1 of the layered layout: assign every team a layer.

    Layer index = BFS hop distance from the source over the subgraph's
    edges.  Two adjustments follow:

    - Destination is placed on the last layer of the weighted shortest
      path when that path is longer (in hops) than the BFS distance, so
      the destination always closes the main route.
    - Bridge promotion: a team off the weighted path that touches the
      destination directly and offers a route with fewer hops than the
      weighted path moves half a layer right (Layer(index, bridge=True)).
      The rule is hop count only; leverage does not enter into it.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence

from matchup_graph.core.types import TeamId
from matchup_graph.layout.models import Layer, LayerAssignment
from matchup_graph.network.models import SubgraphModel

logger = logging.getLogger(__name__)


def subgraph_adjacency(subgraph: SubgraphModel) -> dict[TeamId, list[TeamId]]:
    """Undirected adjacency over the subgraph's edges, in edge order."""
    adjacency: dict[TeamId, list[TeamId]] = {t: [] for t in subgraph.teams}
    for a, b in subgraph.edges:
        adjacency.setdefault(a, [])
        adjacency.setdefault(b, [])
        if b not in adjacency[a]:
            adjacency[a].append(b)
        if a not in adjacency[b]:
            adjacency[b].append(a)
    return adjacency


def bfs_hops(
    start: TeamId,
    adjacency: Mapping[TeamId, Sequence[TeamId]],
) -> dict[TeamId, int]:
    """Hop distance from start to every reachable team."""
    if start not in adjacency:
        return {}
    dist: dict[TeamId, int] = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for nxt in adjacency.get(current, ()):
            if nxt not in dist:
                dist[nxt] = dist[current] + 1
                queue.append(nxt)
    return dist


def assign_layers(
    subgraph: SubgraphModel,
    adjacency: Mapping[TeamId, Sequence[TeamId]] | None = None,
) -> LayerAssignment | None:
    """Assign layers to every team reachable from the source.

    Args:
        subgraph: Extracted comparison subgraph.
        adjacency: Precomputed subgraph adjacency (built if omitted).

    Returns:
        LayerAssignment, or None when the destination cannot be reached
        from the source inside the subgraph.
    """
    source, destination = subgraph.source, subgraph.destination
    if adjacency is None:
        adjacency = subgraph_adjacency(subgraph)

    from_source = bfs_hops(source, adjacency)
    if source == destination or destination not in from_source:
        return None
    to_destination = bfs_hops(destination, adjacency)

    path_set = set(subgraph.path)
    path_hops = max(len(subgraph.path) - 1, 0)

    unreachable = [t for t in subgraph.teams if t not in from_source]
    if unreachable:
        logger.debug("Teams unreachable from %s are not laid out: %s", source, unreachable)

    # Subgraph order first, then anything reached only through edge endpoints.
    ordered = [t for t in subgraph.teams if t in from_source]
    seen = set(ordered)
    ordered += [t for t in from_source if t not in seen]

    layers: dict[TeamId, Layer] = {t: Layer(from_source[t]) for t in ordered}
    layers[destination] = Layer(max(from_source[destination], path_hops))

    destination_neighbors = set(adjacency.get(destination, ()))
    for team in ordered:
        if team in (source, destination) or team in path_set:
            continue
        if team not in destination_neighbors:
            continue
        hops = from_source[team]
        if hops + 1 < path_hops:
            layers[team] = Layer(hops, bridge=True)
            logger.debug(
                "Bridge: %s at layer %d offers a %d-hop route vs %d-hop weighted path",
                team,
                hops,
                hops + 1,
                path_hops,
            )

    return LayerAssignment(
        layers=layers,
        hops_from_source=from_source,
        hops_to_destination=to_destination,
        path_hops=path_hops,
    )
