"""Pinch-to-tune knob controller.

Two contacts enter tuning mode: the logical clock freezes and the distance
between the fingers becomes a dial for ``hold_ms``. A single tap leaves
tuning mode and resumes the clock. The mode is the only source of truth for
both the pause and the overlay's visibility.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from ripple_grid.types import Mode

if TYPE_CHECKING:
    from ripple_grid.clock import LogicalClock
    from ripple_grid.types import Point

logger = logging.getLogger(__name__)

POINTER_MIN_DEG = -150.0
POINTER_MAX_DEG = 150.0


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class KnobController:
    def __init__(
        self,
        clock: LogicalClock,
        hold_ms: float,
        hold_min: float,
        hold_max: float,
        sensitivity: float,
        spin: float = 0.6,
        on_mode_change: Callable[[Mode, Mode], None] | None = None,
    ) -> None:
        if hold_min > hold_max:
            raise ValueError(f"invalid hold bounds [{hold_min}, {hold_max}]")
        self._clock = clock
        self._hold_min = hold_min
        self._hold_max = hold_max
        self._hold_ms = _clamp(hold_ms, hold_min, hold_max)
        self._sensitivity = sensitivity
        self._spin = spin
        self._on_mode_change = on_mode_change

        self._mode = Mode.PLAYING
        self._center: Point = (0.0, 0.0)
        self._base_distance = 0.0
        self._last_distance = 0.0
        self._angle = 0.0
        self._entered_at_ms = 0.0

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def active(self) -> bool:
        return self._mode is Mode.TUNING

    @property
    def hold_ms(self) -> float:
        return self._hold_ms

    @property
    def bounds(self) -> tuple[float, float]:
        return (self._hold_min, self._hold_max)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def base_distance(self) -> float:
        return self._base_distance

    @property
    def last_distance(self) -> float:
        return self._last_distance

    @property
    def angle(self) -> float:
        """Cosmetic spin accumulated from pinch deltas, in degrees."""
        return self._angle

    @property
    def entered_at_ms(self) -> float:
        return self._entered_at_ms

    @property
    def pointer_degrees(self) -> float:
        """``hold_ms`` mapped linearly onto the dial's -150..150 degree sweep."""
        span = self._hold_max - self._hold_min
        t = 0.0 if span == 0 else (self._hold_ms - self._hold_min) / span
        t = _clamp(t, 0.0, 1.0)
        return POINTER_MIN_DEG + (POINTER_MAX_DEG - POINTER_MIN_DEG) * t

    def _set_mode(self, mode: Mode) -> None:
        old = self._mode
        self._mode = mode
        if mode is Mode.TUNING:
            self._clock.pause()
        else:
            self._clock.resume()
        if old is not mode:
            logger.debug("knob %s -> %s (hold_ms=%.0f)", old.value, mode.value, self._hold_ms)
            if self._on_mode_change is not None:
                self._on_mode_change(old, mode)

    def enter(self, p1: Point, p2: Point, now: float) -> None:
        """Capture the finger pair and freeze the clock.

        Re-entering while already tuning re-captures center and distances.
        """
        self._center = _midpoint(p1, p2)
        self._base_distance = math.dist(p1, p2)
        self._last_distance = self._base_distance
        self._angle = 0.0
        self._entered_at_ms = now
        self._set_mode(Mode.TUNING)

    def pinch(self, p1: Point, p2: Point) -> float:
        """Apply one pinch update. Returns the new ``hold_ms``.

        Ignored outside tuning mode. No smoothing: each delta applies as is.
        """
        if not self.active:
            return self._hold_ms
        distance = math.dist(p1, p2)
        self._center = _midpoint(p1, p2)
        delta = distance - self._last_distance
        self._angle += delta * self._spin
        self._hold_ms = _clamp(
            self._hold_ms + delta * self._sensitivity, self._hold_min, self._hold_max
        )
        self._last_distance = distance
        return self._hold_ms

    def exit(self) -> None:
        if self.active:
            self._set_mode(Mode.PLAYING)


def _midpoint(p1: Point, p2: Point) -> Point:
    return ((p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2)
