"""EmitterField - bounded, time-ordered wave sources with ring hit-testing."""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Emitter:
    x: float
    y: float
    emitted_at_ms: float


class EmitterField:
    """Emitters in spawn order; each one's ring grows at ``wave_speed``.

    Spawn times follow the logical clock, so the front of the collection is
    always the oldest emitter and carries the largest ring.
    """

    def __init__(
        self,
        wave_speed: float,
        activation_band: float,
        max_emitters: int,
    ) -> None:
        if max_emitters <= 0:
            raise ValueError("max_emitters must be positive")
        self._wave_speed = wave_speed
        self._band = activation_band
        self._emitters: deque[Emitter] = deque(maxlen=max_emitters)

    @property
    def capacity(self) -> int:
        return self._emitters.maxlen or 0

    def __len__(self) -> int:
        return len(self._emitters)

    def __iter__(self) -> Iterator[Emitter]:
        return iter(self._emitters)

    def radius_of(self, emitter: Emitter, now: float) -> float:
        return (now - emitter.emitted_at_ms) * self._wave_speed

    def spawn(self, now: float, x: float, y: float) -> Emitter:
        # deque(maxlen) drops from the front once full
        emitter = Emitter(x, y, now)
        self._emitters.append(emitter)
        return emitter

    def covers_point(self, now: float, x: float, y: float) -> bool:
        """True if ``(x, y)`` lies within the activation band of any live ring."""
        for emitter in reversed(self._emitters):
            age = now - emitter.emitted_at_ms
            if age < 0:
                continue
            radius = age * self._wave_speed
            d = math.hypot(x - emitter.x, y - emitter.y)
            if abs(d - radius) <= self._band:
                return True
        return False

    def prune(self, now: float, max_reach_dist: float) -> int:
        """Drop emitters whose ring has reached ``max_reach_dist``.

        Scans from the oldest and stops at the first one still in reach.
        Returns the number removed.
        """
        removed = 0
        while self._emitters:
            if self.radius_of(self._emitters[0], now) < max_reach_dist:
                break
            self._emitters.popleft()
            removed += 1
        return removed

    def clear(self) -> None:
        self._emitters.clear()
