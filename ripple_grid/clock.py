"""Pausable logical clock driving all animation timing."""

from ripple_grid.types import TickContext


class LogicalClock:
    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = start_ms
        self._paused = False
        self._frame_number = 0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def tick(self, wall_delta_ms: float) -> float:
        """Advance by ``wall_delta_ms`` unless paused. Returns the new time.

        The frame counter advances either way; negative deltas count as 0.
        """
        self._frame_number += 1
        if not self._paused and wall_delta_ms > 0:
            self._now_ms += wall_delta_ms
        return self._now_ms

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def context(self) -> TickContext:
        return TickContext(
            frame_number=self._frame_number,
            now_ms=self._now_ms,
            paused=self._paused,
        )
