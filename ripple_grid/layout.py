"""Screen-space grid layout: tile size, centers and wave reach."""
from __future__ import annotations

import math

from ripple_grid.types import Point

# Square half-side factor shared with the shape cache.
_SQUARE_FACTOR = 1.4142 * 0.95


class GridLayout:
    def __init__(
        self,
        width: float,
        height: float,
        rows: int,
        cols: int,
        gap: float,
        base_radius: float = 120.0,
        reach_margin: float = 200.0,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must have positive dimensions, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._gap = gap
        self._base_radius = base_radius
        self._reach_margin = reach_margin
        self.resize(width, height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def tile_diam(self) -> float:
        return self._tile_diam

    @property
    def tile_radius(self) -> float:
        return self._tile_radius

    @property
    def shape_scale(self) -> float:
        """Factor from shape-cache coordinates to screen pixels."""
        return self._tile_radius / self._base_radius

    @property
    def margin(self) -> Point:
        return (self._margin_x, self._margin_y)

    @property
    def max_reach_dist(self) -> float:
        return self._max_reach

    def resize(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        gap = self._gap
        diam_x = (width - gap * (self._cols - 1)) / self._cols
        diam_y = (height - gap * (self._rows - 1)) / self._rows
        self._tile_diam = max(min(diam_x, diam_y), 0.0)
        self._tile_radius = self._tile_diam / (2 * _SQUARE_FACTOR) * 0.95
        used_w = self._cols * self._tile_diam + (self._cols - 1) * gap
        used_h = self._rows * self._tile_diam + (self._rows - 1) * gap
        self._margin_x = (width - used_w) * 0.5
        self._margin_y = (height - used_h) * 0.5

        top_left = self.tile_center(0, 0)
        bottom_right = self.tile_center(self._rows - 1, self._cols - 1)
        self._max_reach = (
            math.dist(top_left, bottom_right) + 2 * self._tile_diam + self._reach_margin
        )

    def tile_center(self, row: int, col: int) -> Point:
        d = self._tile_diam
        return (
            self._margin_x + d * (col + 0.5) + self._gap * col,
            self._margin_y + d * (row + 0.5) + self._gap * row,
        )
