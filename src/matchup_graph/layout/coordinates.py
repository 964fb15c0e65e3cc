"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/coordinates.py
Description:
    Phase 3 of the layered layout: turn layer values and in-layer order
    into canvas coordinates.

    x: linear interpolation of the layer value between the left and right
       margins over the maximum layer value (half layers land between
       their neighbours).
    y: first team on the midline, then alternating above / below in
       growing steps: 0, −1, +1, −2, +2, … × vertical spacing.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from matchup_graph.core.types import TeamId
from matchup_graph.layout.models import LayoutConfig, Position


def layer_x(
    values: Iterable[float],
    max_value: float,
    config: LayoutConfig,
) -> dict[float, float]:
    """Map each layer value to its x coordinate."""
    values = list(values)
    if max_value <= 0:
        return {v: config.left_x for v in values}
    xs = np.interp(values, [0.0, max_value], [config.left_x, config.right_x])
    return {v: float(x) for v, x in zip(values, xs)}


def slot_offset(index: int) -> int:
    """Signed step count for the index-th team of a layer.

    0 → 0, 1 → −1, 2 → +1, 3 → −2, 4 → +2, …
    """
    if index == 0:
        return 0
    step = math.ceil(index / 2)
    return -step if index % 2 == 1 else step


def stack_layer(
    ordered: Sequence[TeamId],
    x: float,
    center_y: float,
    spacing: float,
) -> dict[TeamId, Position]:
    """Positions for one layer, centred on the midline in the given order."""
    return {
        team: Position(x=x, y=center_y + slot_offset(i) * spacing)
        for i, team in enumerate(ordered)
    }


def pin_endpoints(
    positions: dict[TeamId, Position],
    source: TeamId,
    destination: TeamId,
    config: LayoutConfig,
) -> None:
    """Source at the left margin, destination at the right, both on the midline."""
    positions[source] = Position(x=config.left_x, y=config.center_y)
    if destination != source:
        positions[destination] = Position(x=config.right_x, y=config.center_y)
