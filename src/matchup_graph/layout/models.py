"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: layout/models.py
Description:
    Data models for the layered layout engine:
    Layer, LayerAssignment, Position, LayoutResult and LayoutConfig.

    Canvas coordinates follow screen convention: x grows to the right,
    y grows downward, so "above the midline" means a smaller y.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from matchup_graph.core.types import PairKey, TeamId

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True, order=True)
class Layer:
    """A team's column in the layered drawing.

    index is the BFS hop distance from the source.  A bridge sits half a
    step to the right of its own column, between two standard layers.
    """

    index: int
    bridge: bool = False

    @property
    def value(self) -> float:
        """Numeric layer position used for x interpolation."""
        return self.index + 0.5 if self.bridge else float(self.index)


@dataclass(frozen=True)
class Position:
    """Canvas position of a team."""

    x: float
    y: float


@dataclass(frozen=True)
class LayerAssignment:
    """Output of the layer-assignment phase.

    layers: team_id → Layer for every team that is laid out.
    hops_from_source / hops_to_destination: BFS distances over the
        subgraph's edges (destination may be unreachable for some teams).
    path_hops: hop count of the weighted shortest path (0 if none).
    """

    layers: dict[TeamId, Layer]
    hops_from_source: dict[TeamId, int]
    hops_to_destination: dict[TeamId, int]
    path_hops: int

    @property
    def bridges(self) -> list[TeamId]:
        return [t for t, layer in self.layers.items() if layer.bridge]

    @property
    def max_value(self) -> float:
        return max((layer.value for layer in self.layers.values()), default=0.0)

    def groups(self) -> dict[float, list[TeamId]]:
        """Teams grouped by layer value, in ascending layer order."""
        grouped: dict[float, list[TeamId]] = {}
        for team, layer in self.layers.items():
            grouped.setdefault(layer.value, []).append(team)
        return {value: grouped[value] for value in sorted(grouped)}


@dataclass(frozen=True)
class LayoutResult:
    """Positions for one comparison plus derived drawing data.

    layers is None when the endpoints are not connected and only the pinned
    source/destination positions were produced.
    edge_hop_degree maps each drawn pair to the smaller source-hop distance
    of its endpoints (used to colour edges by degree).
    """

    positions: dict[TeamId, Position]
    layers: LayerAssignment | None = None
    edge_hop_degree: dict[PairKey, int] = field(default_factory=dict)

    def to_df(self) -> pd.DataFrame:
        """Convert positions to a DataFrame.

        Columns: team_id, x, y, layer, bridge
        """
        import pandas as _pd

        rows = []
        for team_id, pos in self.positions.items():
            layer = self.layers.layers.get(team_id) if self.layers else None
            rows.append({
                "team_id": team_id,
                "x": pos.x,
                "y": pos.y,
                "layer": layer.value if layer else None,
                "bridge": layer.bridge if layer else False,
            })
        return _pd.DataFrame(rows, columns=["team_id", "x", "y", "layer", "bridge"])


@dataclass(frozen=True)
class LayoutConfig:
    """Canvas size and spacing constants for the layered layout."""

    width: float = 800.0
    height: float = 600.0
    side_margin: float = 50.0  # left/right margin for source/destination

    # Vertical step between teams in one layer:
    # clamp(height × spacing_height_fraction, min_vertical_spacing, max_vertical_spacing)
    min_vertical_spacing: float = 40.0
    max_vertical_spacing: float = 80.0
    spacing_height_fraction: float = 0.12

    x_threshold: float = 80.0  # horizontal distance under which teams may collide
    min_separation: float = 40.0  # minimum vertical gap between colliding teams
    collision_passes: int = 2

    def __post_init__(self) -> None:
        if self.width <= 2 * self.side_margin:
            raise ValueError(
                f"width ({self.width}) must exceed twice the side margin ({self.side_margin})"
            )
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")
        if not 0 < self.min_vertical_spacing <= self.max_vertical_spacing:
            raise ValueError(
                "vertical spacing bounds must satisfy 0 < min <= max, got "
                f"{self.min_vertical_spacing}..{self.max_vertical_spacing}"
            )
        if self.x_threshold < 0 or self.min_separation <= 0:
            raise ValueError("x_threshold must be >= 0 and min_separation > 0")
        # Both endpoints are pinned to the midline and never move.
        if self.width - 2 * self.side_margin < self.x_threshold:
            raise ValueError(
                f"endpoint span ({self.width - 2 * self.side_margin}) must be at least "
                f"x_threshold ({self.x_threshold})"
            )
        if self.collision_passes < 1:
            raise ValueError(f"collision_passes must be >= 1, got {self.collision_passes}")

    @property
    def left_x(self) -> float:
        return self.side_margin

    @property
    def right_x(self) -> float:
        return self.width - self.side_margin

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def vertical_spacing(self) -> float:
        step = self.height * self.spacing_height_fraction
        return max(self.min_vertical_spacing, min(self.max_vertical_spacing, step))


# Default layout, used when no overrides are supplied.
DEFAULT_LAYOUT = LayoutConfig()
