"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: network/paths.py
Description:
    Leverage-weighted shortest path between two teams.

    Dijkstra on the MatchupGraph with edge distance = 1 / average leverage
    (higher leverage → shorter distance).  Weights are strictly positive,
    so Dijkstra is exact.  A route with more hops wins whenever its summed
    inverse leverage is lower.

    Ties are deterministic: the frontier heap is keyed by
    (distance, push sequence), and relaxation only replaces a predecessor
    on a strictly shorter distance, so the first route discovered in graph
    order is kept.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from matchup_graph.core.types import PairKey, TeamId
from matchup_graph.network.models import MatchupGraph, PathResult

logger = logging.getLogger(__name__)


def shortest_path(
    source: TeamId,
    destination: TeamId,
    graph: MatchupGraph,
) -> PathResult | None:
    """Find the lowest cumulative inverse-leverage route.

    Args:
        source: Starting team id.
        destination: Target team id.
        graph: Filtered matchup graph from build_matchup_graph().

    Returns:
        PathResult from source to destination, or None when the destination
        cannot be reached under the graph's filters.  source == destination
        yields the trivial single-team path; callers must treat that as a
        "pick two different teams" case, not as a connection.
    """
    if source == destination:
        return PathResult(teams=(source,), edges=(), cost=0.0)

    dist: dict[TeamId, float] = {source: 0.0}
    prev: dict[TeamId, TeamId] = {}
    prev_edge: dict[TeamId, PairKey] = {}
    visited: set[TeamId] = set()

    seq = itertools.count()
    heap: list[tuple[float, int, TeamId]] = [(0.0, next(seq), source)]

    while heap:
        d, _, u = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)
        if u == destination:
            break

        for edge in graph.neighbors(u):
            v = edge.neighbor
            if v in visited:
                continue
            alt = d + edge.weight
            if alt < dist.get(v, float("inf")):
                dist[v] = alt
                prev[v] = u
                prev_edge[v] = edge.pair_key
                heapq.heappush(heap, (alt, next(seq), v))

    if destination not in prev:
        logger.debug("No path from %s to %s", source, destination)
        return None

    teams: list[TeamId] = []
    edges: list[PairKey] = []
    cur = destination
    while cur != source:
        teams.append(cur)
        edges.append(prev_edge[cur])
        cur = prev[cur]
    teams.append(source)

    teams.reverse()
    edges.reverse()

    logger.debug(
        "Shortest path %s → %s: %s (%d hops, cost %.4f)",
        source,
        destination,
        " → ".join(teams),
        len(edges),
        dist[destination],
    )
    return PathResult(teams=tuple(teams), edges=tuple(edges), cost=dist[destination])
