"""Tile animation grid: per-tile shape-cycle state machines."""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ripple_grid.easing import ease_in_out_cubic

if TYPE_CHECKING:
    from ripple_grid.emitters import EmitterField
    from ripple_grid.types import Point

logger = logging.getLogger(__name__)


class TilePhase(enum.Enum):
    UNSET = "unset"
    ANIMATING = "animating"
    DONE = "done"


@dataclass(slots=True)
class Tile:
    """One grid cell.

    ``triggered_at_ms`` is set only while ``ANIMATING``.
    ``planned_stop_at_ms`` stays ``None`` until the first frame sampled after
    the gesture is released, then holds the cycle boundary to stop at.
    """

    phase: TilePhase = TilePhase.UNSET
    triggered_at_ms: float | None = None
    planned_stop_at_ms: float | None = None

    def reset(self) -> None:
        self.phase = TilePhase.UNSET
        self.triggered_at_ms = None
        self.planned_stop_at_ms = None


@dataclass(frozen=True, slots=True)
class TileFrame:
    """What the renderer draws: stage ``stage`` of the cycle interpolated by ``k``."""

    stage: int
    k: float


REST_FRAME = TileFrame(stage=0, k=0.0)


@dataclass(frozen=True, slots=True)
class Timing:
    half_ms: float
    hold_ms: float

    @property
    def segment_ms(self) -> float:
        return self.half_ms + self.hold_ms

    @property
    def cycle_ms(self) -> float:
        return 3 * self.segment_ms


def cycle_frame(
    elapsed: float,
    timing: Timing,
    easing: Callable[[float], float] = ease_in_out_cubic,
) -> TileFrame:
    """Map time since trigger to a stage and an eased interpolation factor.

    Each segment is a ``half_ms`` transition followed by a dwell at the
    target silhouette, so ``k`` holds at 1.0 for the rest of the segment.
    """
    p = elapsed % timing.cycle_ms
    stage = min(int(p // timing.segment_ms), 2)
    within = p - stage * timing.segment_ms
    if within >= timing.half_ms:
        return TileFrame(stage, 1.0)
    return TileFrame(stage, easing(max(within, 0.0) / timing.half_ms))


class TileGrid:
    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must have positive dimensions, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._tiles = [[Tile() for _ in range(cols)] for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"({row}, {col}) out of bounds for {self._rows}x{self._cols} grid"
            )

    def tile(self, row: int, col: int) -> Tile:
        self._check_bounds(row, col)
        return self._tiles[row][col]

    def cells(self) -> list[tuple[int, int, Tile]]:
        return [
            (row, col, tile)
            for row, line in enumerate(self._tiles)
            for col, tile in enumerate(line)
        ]

    def count(self, phase: TilePhase) -> int:
        return sum(1 for _, _, tile in self.cells() if tile.phase is phase)

    def reset(self) -> None:
        logger.debug("tile grid reset (%dx%d)", self._rows, self._cols)
        for _, _, tile in self.cells():
            tile.reset()

    def sample(
        self,
        now: float,
        is_long_press: bool,
        timing: Timing,
        field: EmitterField,
        center_of: Callable[[int, int], Point],
    ) -> tuple[list[tuple[int, int]], list[tuple[int, int]]]:
        """Advance every tile's state machine by one frame.

        While the long press is held, untriggered tiles hit by a ring start
        animating. After release, animating tiles plan a stop at the next
        cycle boundary and finish there. Returns ``(triggered, finished)``
        cell coordinates.
        """
        triggered: list[tuple[int, int]] = []
        finished: list[tuple[int, int]] = []
        for row, col, tile in self.cells():
            if is_long_press and tile.phase is TilePhase.UNSET:
                x, y = center_of(row, col)
                if field.covers_point(now, x, y):
                    tile.phase = TilePhase.ANIMATING
                    tile.triggered_at_ms = now
                    tile.planned_stop_at_ms = None
                    triggered.append((row, col))

            if (
                tile.phase is not TilePhase.ANIMATING
                or is_long_press
                or tile.triggered_at_ms is None
            ):
                continue

            if tile.planned_stop_at_ms is None:
                elapsed = now - tile.triggered_at_ms
                cycles = math.ceil(elapsed / timing.cycle_ms)
                tile.planned_stop_at_ms = tile.triggered_at_ms + cycles * timing.cycle_ms
            if now >= tile.planned_stop_at_ms:
                tile.phase = TilePhase.DONE
                tile.triggered_at_ms = None
                finished.append((row, col))
        return triggered, finished

    def frame_at(self, row: int, col: int, now: float, timing: Timing) -> TileFrame:
        tile = self.tile(row, col)
        if tile.phase is not TilePhase.ANIMATING or tile.triggered_at_ms is None:
            return REST_FRAME
        return cycle_frame(now - tile.triggered_at_ms, timing)

    def frames(self, now: float, timing: Timing) -> list[list[TileFrame]]:
        return [
            [self.frame_at(row, col, now, timing) for col in range(self._cols)]
            for row in range(self._rows)
        ]
