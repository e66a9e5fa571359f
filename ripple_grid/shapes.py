"""Precomputed silhouettes resampled to N matching vertices."""
from __future__ import annotations

import math

from ripple_grid.types import Point

Polygon = tuple[Point, ...]

# Stage index -> (from, to) silhouette names.
STAGES: tuple[tuple[str, str], ...] = (
    ("square", "circle"),
    ("circle", "triangle"),
    ("triangle", "square"),
)


def _lerp_point(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def resample(outline: list[Point], n: int) -> Polygon:
    """Place ``n`` evenly spaced points along a closed outline.

    ``outline`` must repeat its first point at the end. A zero-length
    segment yields its start point.
    """
    if len(outline) < 2:
        raise ValueError("outline needs at least two points")
    perimeter = sum(math.dist(outline[i], outline[i + 1]) for i in range(len(outline) - 1))
    step = perimeter / n
    walked = 0.0
    seg = 0
    a, b = outline[0], outline[1]
    points: list[Point] = []
    for i in range(n):
        target = i * step
        while seg < len(outline) - 2 and walked + math.dist(a, b) < target:
            walked += math.dist(a, b)
            seg += 1
            a, b = outline[seg], outline[seg + 1]
        length = math.dist(a, b)
        t = 0.0 if length == 0 else (target - walked) / length
        points.append(_lerp_point(a, b, t))
    return tuple(points)


def triangle(n: int, r: float) -> Polygon:
    corners = [
        (r * math.cos(-math.pi / 2 + 2 * math.pi * i / 3),
         r * math.sin(-math.pi / 2 + 2 * math.pi * i / 3))
        for i in range(3)
    ]
    return resample(corners + [corners[0]], n)


def square(n: int, r: float) -> Polygon:
    s = r * 1.4142 * 0.95
    return resample([(-s, -s), (s, -s), (s, s), (-s, s), (-s, -s)], n)


def circle(n: int, r: float) -> Polygon:
    return tuple(
        (r * math.cos(2 * math.pi * i / n), r * math.sin(2 * math.pi * i / n))
        for i in range(n)
    )


def morph(a: Polygon, b: Polygon, k: float) -> Polygon:
    return tuple(_lerp_point(pa, pb, k) for pa, pb in zip(a, b, strict=True))


class ShapeCache:
    """Square, circle and triangle with ``n`` vertices each, built once."""

    def __init__(self, n: int = 120, radius: float = 120.0) -> None:
        if n < 3:
            raise ValueError("n must be at least 3")
        self._n = n
        self._radius = radius
        self._shapes: dict[str, Polygon] = {
            "square": square(n, radius),
            "circle": circle(n, radius),
            "triangle": triangle(n, radius),
        }

    @property
    def n(self) -> int:
        return self._n

    @property
    def radius(self) -> float:
        return self._radius

    def get(self, name: str) -> Polygon:
        return self._shapes[name]

    def names(self) -> list[str]:
        return list(self._shapes)

    def outline(self, pair: tuple[str, str], k: float) -> Polygon:
        """Interpolated outline between ``pair[0]`` and ``pair[1]``."""
        src, dst = pair
        if k <= 0.0:
            return self._shapes[src]
        if k >= 1.0:
            return self._shapes[dst]
        return morph(self._shapes[src], self._shapes[dst], k)

    def pair(self, stage: int) -> tuple[str, str]:
        """Silhouette names morphed during cycle stage 0, 1 or 2."""
        if not 0 <= stage < len(STAGES):
            raise IndexError(f"stage {stage} out of range")
        return STAGES[stage]
