"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/ordering.py
Description:
    Phase 2 of the layered layout: order teams within each layer to
    reduce edge crossings.

    Each team is ranked by its barycenter: the mean y of its neighbours in
    the layer directly before it (parents) and directly after it
    (children), combined 2:1 in favour of parents when both exist.
    Neighbours that have no position yet fall back to an "ideal" y: their
    slot in an alphabetical stacking of their own layer.

    Ties break by, in order:
      1. hop distance to the destination, ascending
      2. raw barycenter (mean neighbour layer value), descending
      3. fan-out (neighbours in another layer), descending
      4. label, case-insensitive, ascending (then team id)

    The source and destination always take the first (midline) slot of
    their layer.  One top-down sweep is followed by one bottom-up sweep,
    re-stacking each layer as soon as it is ordered.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property

from matchup_graph.core.types import TeamId
from matchup_graph.layout.coordinates import layer_x, stack_layer
from matchup_graph.layout.models import LayerAssignment, LayoutConfig, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderingContext:
    """Everything the ordering sweeps read; built once per layout."""

    assignment: LayerAssignment
    adjacency: Mapping[TeamId, Sequence[TeamId]]
    labels: Mapping[TeamId, str]
    endpoints: tuple[TeamId, TeamId]
    ideal_y: Mapping[TeamId, float]
    center_y: float

    def label(self, team: TeamId) -> str:
        return (self.labels.get(team) or team).lower()

    def layered_neighbors(self, team: TeamId) -> list[TeamId]:
        layers = self.assignment.layers
        return [n for n in self.adjacency.get(team, ()) if n in layers]

    @cached_property
    def layer_values(self) -> list[float]:
        """Distinct layer values, ascending."""
        return sorted({layer.value for layer in self.assignment.layers.values()})

    def adjacent_values(self, value: float) -> tuple[float | None, float | None]:
        """Layer values directly before and after value (None at either end)."""
        values = self.layer_values
        lo = bisect_left(values, value)
        hi = bisect_right(values, value)
        before = values[lo - 1] if lo > 0 else None
        after = values[hi] if hi < len(values) else None
        return before, after


def ideal_layer_y(
    assignment: LayerAssignment,
    labels: Mapping[TeamId, str],
    config: LayoutConfig,
) -> dict[TeamId, float]:
    """Alphabetical stacking of each layer, centred on the midline."""
    spacing = config.vertical_spacing
    ideal: dict[TeamId, float] = {}
    for teams in assignment.groups().values():
        ordered = sorted(teams, key=lambda t: ((labels.get(t) or t).lower(), t))
        n = len(ordered)
        for i, team in enumerate(ordered):
            ideal[team] = config.center_y + (i - (n - 1) / 2) * spacing
    return ideal


def combined_barycenter(
    team: TeamId,
    ctx: OrderingContext,
    positions: Mapping[TeamId, Position],
) -> float:
    """Parent/child weighted barycenter (2:1) of a team's neighbours.

    Parents sit in the layer directly before the team's own, children in
    the layer directly after; neighbours further away do not count.
    """
    layers = ctx.assignment.layers
    parent_value, child_value = ctx.adjacent_values(layers[team].value)
    parents: list[float] = []
    children: list[float] = []

    for n in ctx.layered_neighbors(team):
        if n in positions:
            y = positions[n].y
        elif n in ctx.ideal_y:
            y = ctx.ideal_y[n]
        else:
            continue
        value = layers[n].value
        if value == parent_value:
            parents.append(y)
        elif value == child_value:
            children.append(y)

    if parents and children:
        return (2 * _mean(parents) + _mean(children)) / 3
    if parents:
        return _mean(parents)
    if children:
        return _mean(children)
    return ctx.center_y


def raw_barycenter(team: TeamId, ctx: OrderingContext) -> float:
    """Mean layer value of a team's neighbours (its own layer if isolated)."""
    layers = ctx.assignment.layers
    values = [layers[n].value for n in ctx.layered_neighbors(team)]
    return _mean(values) if values else layers[team].value


def fan_out(team: TeamId, ctx: OrderingContext) -> int:
    """Number of neighbours sitting in a different layer."""
    layers = ctx.assignment.layers
    own = layers[team].value
    return sum(1 for n in ctx.layered_neighbors(team) if layers[n].value != own)


def order_layer(
    teams: Iterable[TeamId],
    ctx: OrderingContext,
    positions: Mapping[TeamId, Position],
) -> list[TeamId]:
    """Sort one layer using the current positions of its neighbours."""
    hops_to_destination = ctx.assignment.hops_to_destination

    def sort_key(team: TeamId) -> tuple:
        return (
            0 if team in ctx.endpoints else 1,
            combined_barycenter(team, ctx, positions),
            hops_to_destination.get(team, math.inf),
            -raw_barycenter(team, ctx),
            -fan_out(team, ctx),
            ctx.label(team),
            team,
        )

    return sorted(teams, key=sort_key)


def sweep_layers(
    ctx: OrderingContext,
    config: LayoutConfig,
) -> tuple[dict[float, list[TeamId]], dict[TeamId, Position]]:
    """Top-down then bottom-up ordering sweep.

    Returns:
        (order, positions): the final order of every layer (by layer value)
        and the stacked positions produced by the last sweep.
    """
    groups = ctx.assignment.groups()
    xs = layer_x(groups, ctx.assignment.max_value, config)
    spacing = config.vertical_spacing

    positions: dict[TeamId, Position] = {}
    order: dict[float, list[TeamId]] = {}

    for values in (list(groups), list(reversed(groups))):
        for value in values:
            ordered = order_layer(groups[value], ctx, positions)
            order[value] = ordered
            positions.update(stack_layer(ordered, xs[value], config.center_y, spacing))

    for value in groups:
        logger.debug("Layer %s order: %s", value, order[value])

    return {value: order[value] for value in groups}, positions


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)
