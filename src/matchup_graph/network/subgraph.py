"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: network/subgraph.py
Description:
    Degree-bounded subgraph extraction for a two-team comparison.

    Selection rules, applied in order:
    1. Source and destination are always included at degree 0.
    2. max_degrees == 0: only the direct pair between them, if it exists.
    3. The weighted shortest path (when supplied) is always included;
       each team is labelled by its index along the path.
    4. Common opponents (adjacent to both endpoints) join at degree 1.
    5. For max_degrees ≥ 2, neighbours of degree-d teams join at d + 1
       when they are themselves adjacent to an endpoint.

    Every non-endpoint team enters together with the edges that justify it,
    so no intermediate team is ever drawn without a connection.
"""

from __future__ import annotations

import logging

from matchup_graph.core.types import PairKey, TeamId, pair_key
from matchup_graph.network.models import MatchupGraph, PathResult, SubgraphModel

logger = logging.getLogger(__name__)


def extract_subgraph(
    source: TeamId,
    destination: TeamId,
    max_degrees: int,
    graph: MatchupGraph,
    shortest_path: PathResult | None = None,
) -> SubgraphModel:
    """Select the teams and pairs relevant to comparing two teams.

    Args:
        source: Left-hand team of the comparison.
        destination: Right-hand team of the comparison.
        max_degrees: Maximum degree of separation to expand to (≥ 0).
        graph: Filtered matchup graph.
        shortest_path: Weighted shortest path between the endpoints, if one
            was found.  Its teams and edges are always kept.

    Returns:
        SubgraphModel naming source and destination even when nothing
        connects them.

    Raises:
        ValueError: If max_degrees is negative.
    """
    if max_degrees < 0:
        raise ValueError(f"max_degrees must be non-negative, got {max_degrees}")

    degrees: dict[TeamId, int] = {source: 0, destination: 0}
    # dict used as an insertion-ordered set
    edges: dict[PairKey, None] = {}

    path = _usable_path(source, destination, shortest_path)

    direct = graph.edge_between(source, destination)
    if direct is not None:
        edges[direct.key] = None

    if max_degrees == 0:
        # Only a direct path survives a zero-degree budget as an anchor.
        direct_path = path if path is not None and path.hops == 1 else None
        return _to_model(source, destination, degrees, edges, direct_path)

    endpoints = (source, destination)

    # ------------------------------------------------------------------ #
    # Weighted shortest path: always drawn, labelled by position          #
    # ------------------------------------------------------------------ #
    if path is not None:
        for index, team in enumerate(path.teams):
            if team not in endpoints:
                _include(degrees, team, index)
        for key in path.edges:
            edges[key] = None

    # ------------------------------------------------------------------ #
    # Common opponents: alternate direct bridges at degree 1              #
    # ------------------------------------------------------------------ #
    for team in graph.neighbor_ids(source):
        if team in endpoints or not graph.are_adjacent(team, destination):
            continue
        _include(degrees, team, 1)
        edges[pair_key(source, team)] = None
        edges[pair_key(team, destination)] = None

    # ------------------------------------------------------------------ #
    # Extended degrees: grow outward while staying tied to an endpoint    #
    # ------------------------------------------------------------------ #
    for d in range(1, max_degrees):
        frontier = [t for t, deg in degrees.items() if deg == d and t not in endpoints]
        for team in frontier:
            for edge in graph.neighbors(team):
                candidate = edge.neighbor
                if candidate in degrees:
                    continue
                touches_source = graph.are_adjacent(candidate, source)
                touches_destination = graph.are_adjacent(candidate, destination)
                if not (touches_source or touches_destination):
                    continue
                degrees[candidate] = d + 1
                edges[edge.pair_key] = None
                if touches_source:
                    edges[pair_key(candidate, source)] = None
                if touches_destination:
                    edges[pair_key(candidate, destination)] = None

    return _to_model(source, destination, degrees, edges, path)


def _include(degrees: dict[TeamId, int], team: TeamId, degree: int) -> None:
    """Add a team, keeping the smaller label if it is already present."""
    current = degrees.get(team)
    if current is None or degree < current:
        degrees[team] = degree


def _usable_path(
    source: TeamId,
    destination: TeamId,
    path: PathResult | None,
) -> PathResult | None:
    if path is None or path.is_trivial:
        return None
    if path.source != source or path.destination != destination:
        logger.warning(
            "Ignoring shortest path %s → %s for comparison %s → %s",
            path.source,
            path.destination,
            source,
            destination,
        )
        return None
    return path


def _to_model(
    source: TeamId,
    destination: TeamId,
    degrees: dict[TeamId, int],
    edges: dict[PairKey, None],
    path: PathResult | None,
) -> SubgraphModel:
    # Destination is an anchor, never an intermediate.
    degrees[destination] = 0
    degrees[source] = 0

    model = SubgraphModel(
        source=source,
        destination=destination,
        teams=tuple(degrees),
        edges=tuple(edges),
        degrees=dict(degrees),
        path=path.teams if path is not None and not path.is_trivial else (),
    )
    logger.debug(
        "Subgraph %s → %s: %d teams, %d edges",
        source,
        destination,
        len(model.teams),
        len(model.edges),
    )
    return model
