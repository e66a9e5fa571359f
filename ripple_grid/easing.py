"""Easing curves for the shape-to-shape transitions."""
from __future__ import annotations

from typing import Callable


def linear(t: float) -> float:
    return t


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in_out_cubic": ease_in_out_cubic,
}
