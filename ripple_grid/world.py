"""RippleWorld - the simulation context every system operates on."""
from __future__ import annotations

from typing import Callable

from ripple_grid.clock import LogicalClock
from ripple_grid.config import RippleConfig
from ripple_grid.emitters import EmitterField
from ripple_grid.gestures import DragController, DragPhase
from ripple_grid.knob import KnobController
from ripple_grid.layout import GridLayout
from ripple_grid.shapes import ShapeCache
from ripple_grid.tiles import TileGrid, Timing
from ripple_grid.types import Mode


class RippleWorld:
    """Owns all mutable simulation state: clock, field, grid and controllers."""

    def __init__(
        self,
        config: RippleConfig,
        width: float,
        height: float,
        on_drag_transition: Callable[[DragPhase, DragPhase], None] | None = None,
        on_mode_change: Callable[[Mode, Mode], None] | None = None,
    ) -> None:
        self.config = config
        self.clock = LogicalClock()
        self.layout = GridLayout(
            width,
            height,
            rows=config.rows,
            cols=config.cols,
            gap=config.gap,
            base_radius=config.base_radius,
            reach_margin=config.reach_margin,
        )
        self.field = EmitterField(
            wave_speed=config.wave_speed,
            activation_band=config.activation_band,
            max_emitters=config.max_emitters,
        )
        self.grid = TileGrid(config.rows, config.cols)
        self.drag = DragController(
            longpress_ms=config.longpress_ms,
            emit_interval_ms=config.emit_interval_ms,
            on_transition=on_drag_transition,
        )
        self.knob = KnobController(
            self.clock,
            hold_ms=config.hold_ms,
            hold_min=config.hold_min,
            hold_max=config.hold_max,
            sensitivity=config.knob_sensitivity,
            spin=config.knob_spin,
            on_mode_change=on_mode_change,
        )
        self.shapes = ShapeCache(config.vertex_count, config.base_radius)

    @property
    def mode(self) -> Mode:
        return self.knob.mode

    @property
    def timing(self) -> Timing:
        """Segment and cycle lengths for the current ``hold_ms``."""
        return Timing(half_ms=self.config.half_ms, hold_ms=self.knob.hold_ms)
