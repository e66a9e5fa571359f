"""Simulation configuration dataclass."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class RippleConfig:
    """Immutable numeric constants for the ripple grid, fixed at startup.

    Attributes:
        cols: Number of tile columns.
        rows: Number of tile rows.
        gap: Pixel gap between neighbouring tiles.
        vertex_count: Vertices per resampled silhouette.
        base_radius: Radius the silhouettes are built at before scaling.
        half_ms: Duration of one shape-to-shape transition.
        hold_ms: Initial dwell after each transition (knob-adjustable).
        hold_min: Lower bound of ``hold_ms``.
        hold_max: Upper bound of ``hold_ms``.
        longpress_ms: Logical time a press must last to become a long press.
        wave_speed: Ring growth in pixels per logical millisecond.
        activation_band: Half-width of the annulus around a ring that hits.
        emit_interval_ms: Logical time between emitters during a long press.
        max_emitters: Cap on live emitters; the oldest are dropped first.
        knob_sensitivity: Milliseconds of ``hold_ms`` per pixel of pinch.
        knob_spin: Degrees of cosmetic knob rotation per pixel of pinch.
        knob_radius: Knob overlay radius in pixels.
        reach_margin: Extra distance beyond the grid an emitter ring may
            travel before it is pruned.
    """

    cols: int = 6
    rows: int = 8
    gap: float = 16.0
    vertex_count: int = 120
    base_radius: float = 120.0
    half_ms: float = 300.0
    hold_ms: float = 1500.0
    hold_min: float = 30.0
    hold_max: float = 3000.0
    longpress_ms: float = 350.0
    wave_speed: float = 0.8
    activation_band: float = 40.0
    emit_interval_ms: float = 40.0
    max_emitters: int = 800
    knob_sensitivity: float = 3.0
    knob_spin: float = 0.6
    knob_radius: float = 80.0
    reach_margin: float = 200.0

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(
                f"grid must have positive dimensions, got {self.cols}x{self.rows}"
            )
        if self.gap < 0:
            raise ValueError("gap must be non-negative")
        if self.vertex_count < 3:
            raise ValueError("vertex_count must be at least 3")
        if self.base_radius <= 0:
            raise ValueError("base_radius must be positive")
        if self.half_ms <= 0:
            raise ValueError("half_ms must be positive")
        if self.hold_min < 0 or self.hold_min > self.hold_max:
            raise ValueError(
                f"invalid hold bounds [{self.hold_min}, {self.hold_max}]"
            )
        if not self.hold_min <= self.hold_ms <= self.hold_max:
            raise ValueError(
                f"hold_ms {self.hold_ms} outside [{self.hold_min}, {self.hold_max}]"
            )
        if self.longpress_ms < 0:
            raise ValueError("longpress_ms must be non-negative")
        if self.wave_speed <= 0:
            raise ValueError("wave_speed must be positive")
        if self.activation_band < 0:
            raise ValueError("activation_band must be non-negative")
        if self.emit_interval_ms <= 0:
            raise ValueError("emit_interval_ms must be positive")
        if self.max_emitters <= 0:
            raise ValueError("max_emitters must be positive")

    def replace(self, **overrides: object) -> RippleConfig:
        """Return a copy with ``overrides`` applied (validated again)."""
        return dataclasses.replace(self, **overrides)
