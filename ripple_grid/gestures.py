"""Drag-to-emit gesture controller."""
from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ripple_grid.emitters import Emitter, EmitterField
    from ripple_grid.tiles import TileGrid
    from ripple_grid.types import Point

logger = logging.getLogger(__name__)


class DragPhase(enum.Enum):
    IDLE = "idle"
    PRESSED = "pressed"
    LONGPRESS = "longpress"


class DragController:
    """Turns press/move/release into long-press detection and an emitter trail.

    A press becomes a long press once it has been held ``longpress_ms`` of
    logical time. The long press starts a fresh gesture (grid and field are
    reset) and then drops an emitter at the latest pointer position every
    ``emit_interval_ms``. Releasing stops emission; tiles already triggered
    keep animating until their planned stop.
    """

    def __init__(
        self,
        longpress_ms: float,
        emit_interval_ms: float,
        on_transition: Callable[[DragPhase, DragPhase], None] | None = None,
    ) -> None:
        self._longpress_ms = longpress_ms
        self._emit_interval_ms = emit_interval_ms
        self._on_transition = on_transition
        self._phase = DragPhase.IDLE
        self._down_at_ms = 0.0
        self._last_emit_ms = 0.0
        self._position: Point = (0.0, 0.0)

    @property
    def phase(self) -> DragPhase:
        return self._phase

    @property
    def is_down(self) -> bool:
        return self._phase is not DragPhase.IDLE

    @property
    def is_long_press(self) -> bool:
        return self._phase is DragPhase.LONGPRESS

    @property
    def position(self) -> Point:
        return self._position

    @property
    def down_at_ms(self) -> float:
        return self._down_at_ms

    def _set_phase(self, phase: DragPhase) -> None:
        old = self._phase
        if old is phase:
            return
        self._phase = phase
        logger.debug("drag %s -> %s", old.value, phase.value)
        if self._on_transition is not None:
            self._on_transition(old, phase)

    def press(self, now: float, point: Point) -> None:
        self._down_at_ms = now
        self._position = point
        self._set_phase(DragPhase.PRESSED)

    def move(self, point: Point) -> None:
        self._position = point

    def release(self) -> None:
        self._set_phase(DragPhase.IDLE)

    def advance(self, now: float, field: EmitterField, grid: TileGrid) -> list[Emitter]:
        """Run long-press detection and periodic emission for this frame.

        Returns the emitters spawned this frame.
        """
        spawned: list[Emitter] = []
        if self._phase is DragPhase.PRESSED and now - self._down_at_ms >= self._longpress_ms:
            grid.reset()
            field.clear()
            self._set_phase(DragPhase.LONGPRESS)
            spawned.append(self._emit(now, field))
        elif (
            self._phase is DragPhase.LONGPRESS
            and now - self._last_emit_ms >= self._emit_interval_ms
        ):
            spawned.append(self._emit(now, field))
        return spawned

    def _emit(self, now: float, field: EmitterField) -> Emitter:
        self._last_emit_ms = now
        x, y = self._position
        return field.spawn(now, x, y)
