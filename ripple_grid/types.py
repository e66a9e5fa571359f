"""Shared types for the ripple grid simulation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class TickContext:
    frame_number: int
    now_ms: float
    paused: bool


class Mode(enum.Enum):
    """Interaction mode. ``TUNING`` freezes the clock and shows the knob."""

    PLAYING = "playing"
    TUNING = "tuning"
