"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/collision.py
Description:
    Phase 4 of the layered layout: vertical collision resolution.

    Teams are visited in (x, y, id) order.  Each team is checked against
    every team already settled in this pass (fixed teams are settled from
    the start).  A settled team closer than x_threshold horizontally and
    min_separation vertically pushes the visiting team to exactly
    min_separation beyond it: below when the visitor is level with or below
    it, above otherwise.  The push keeps its direction until the visitor is
    clear, so every checked pair ends at least min_separation apart and an
    already-resolved layout is left untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping

from matchup_graph.core.types import TeamId
from matchup_graph.layout.models import Position

logger = logging.getLogger(__name__)

# Float slack so a gap of exactly min_separation never counts as a collision.
_EPS = 1e-9


def resolve_collisions(
    positions: Mapping[TeamId, Position],
    fixed: Collection[TeamId] = (),
    *,
    x_threshold: float,
    min_separation: float,
    passes: int = 2,
) -> dict[TeamId, Position]:
    """Push overlapping teams apart vertically.

    Args:
        positions: Current team positions (not modified).
        fixed: Teams that never move (the pinned endpoints).
        x_threshold: Teams closer than this horizontally may collide.
        min_separation: Required vertical gap between colliding teams.
        passes: Maximum number of passes; stops early once nothing moves.

    Returns:
        New team → Position mapping in the input's key order.
    """
    xs = {t: p.x for t, p in positions.items()}
    ys = {t: p.y for t, p in positions.items()}
    fixed_set = set(fixed)

    for pass_no in range(passes):
        order = sorted(positions, key=lambda t: (xs[t], ys[t], t))
        settled = [t for t in order if t in fixed_set]
        moved = 0

        for team in order:
            if team in fixed_set:
                continue
            new_y = _clear_y(team, xs, ys, settled, x_threshold, min_separation)
            if new_y != ys[team]:
                logger.debug("Collision pass %d: %s y %.1f → %.1f", pass_no, team, ys[team], new_y)
                ys[team] = new_y
                moved += 1
            settled.append(team)

        if not moved:
            break

    return {t: Position(x=xs[t], y=ys[t]) for t in positions}


def _clear_y(
    team: TeamId,
    xs: Mapping[TeamId, float],
    ys: Mapping[TeamId, float],
    settled: list[TeamId],
    x_threshold: float,
    min_separation: float,
) -> float:
    """First y, moving away from the first blocker, that clears all settled teams."""
    x = xs[team]
    y = ys[team]
    direction = 0

    while True:
        blocker = _first_blocker(x, y, xs, ys, settled, x_threshold, min_separation)
        if blocker is None:
            return y
        if direction == 0:
            direction = 1 if y >= ys[blocker] else -1
        y = ys[blocker] + direction * min_separation


def _first_blocker(
    x: float,
    y: float,
    xs: Mapping[TeamId, float],
    ys: Mapping[TeamId, float],
    settled: list[TeamId],
    x_threshold: float,
    min_separation: float,
) -> TeamId | None:
    for other in settled:
        if abs(xs[other] - x) >= x_threshold:
            continue
        if abs(ys[other] - y) < min_separation - _EPS:
            return other
    return None


def min_vertical_gap(
    positions: Mapping[TeamId, Position],
    x_threshold: float,
) -> float:
    """Smallest vertical gap between any two teams closer than x_threshold.

    Returns inf when no pair is that close horizontally.
    """
    items = sorted(positions.values(), key=lambda p: (p.x, p.y))
    gap = float("inf")
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if b.x - a.x >= x_threshold:
                break
            gap = min(gap, abs(b.y - a.y))
    return gap
