"""Engine - the single driver that owns the world and runs each frame."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ripple_grid.config import RippleConfig
from ripple_grid.emitters import Emitter
from ripple_grid.gestures import DragPhase
from ripple_grid.input import InputEvent, InputQueue, PointerDown, PointerMove, PointerUp
from ripple_grid.signals import SignalBus
from ripple_grid.systems import (
    System,
    make_gesture_system,
    make_input_system,
    make_prune_system,
    make_signal_system,
    make_tile_system,
    register_input_handlers,
)
from ripple_grid.tiles import TileFrame
from ripple_grid.types import Mode, Point, TickContext
from ripple_grid.world import RippleWorld

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KnobView:
    """Everything the knob overlay needs for one frame."""

    active: bool
    center: Point
    hold_ms: float
    hold_min: float
    hold_max: float
    pointer_degrees: float
    angle: float
    radius: float


class Engine:
    def __init__(
        self,
        config: RippleConfig | None = None,
        width: float = 720.0,
        height: float = 960.0,
    ) -> None:
        self._config = config if config is not None else RippleConfig()
        self._bus = SignalBus()
        self._input = InputQueue()
        register_input_handlers(self._input)
        self._world = RippleWorld(
            self._config,
            width,
            height,
            on_drag_transition=self._on_drag_transition,
            on_mode_change=self._on_mode_change,
        )
        self._systems: list[System] = [
            make_input_system(self._input, on_ignored=self._on_ignored),
            make_gesture_system(on_spawn=self._on_spawn),
            make_prune_system(),
            make_tile_system(on_trigger=self._on_trigger, on_finish=self._on_finish),
            make_signal_system(self._bus),
        ]

    @property
    def config(self) -> RippleConfig:
        return self._config

    @property
    def world(self) -> RippleWorld:
        return self._world

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def now_ms(self) -> float:
        return self._world.clock.now_ms

    @property
    def mode(self) -> Mode:
        return self._world.mode

    def add_system(self, system: System) -> None:
        """Append a system; it runs after the signal flush of each frame."""
        self._systems.append(system)

    # --- input ---

    def push(self, event: InputEvent) -> None:
        self._input.push(event)

    def press(self, x: float, y: float) -> None:
        self._input.push(PointerDown(((x, y),)))

    def move(self, *contacts: Point) -> None:
        self._input.push(PointerMove(tuple(contacts)))

    def release(self, *remaining: Point) -> None:
        self._input.push(PointerUp(tuple(remaining)))

    def pinch_start(self, p1: Point, p2: Point) -> None:
        self._input.push(PointerDown((p1, p2)))

    # --- frame loop ---

    def step(self, wall_delta_ms: float) -> TickContext:
        """Run one frame: clock, input, gestures, prune, tiles, signals."""
        self._world.clock.tick(wall_delta_ms)
        ctx = self._world.clock.context()
        for system in self._systems:
            system(self._world, ctx)
        return ctx

    def run(self, deltas: Iterable[float]) -> TickContext | None:
        ctx = None
        for delta in deltas:
            ctx = self.step(delta)
        return ctx

    def resize(self, width: float, height: float) -> None:
        self._world.layout.resize(width, height)

    # --- render queries ---

    def frames(self) -> list[list[TileFrame]]:
        return self._world.grid.frames(self.now_ms, self._world.timing)

    def knob_view(self) -> KnobView:
        knob = self._world.knob
        hold_min, hold_max = knob.bounds
        return KnobView(
            active=knob.active,
            center=knob.center,
            hold_ms=knob.hold_ms,
            hold_min=hold_min,
            hold_max=hold_max,
            pointer_degrees=knob.pointer_degrees,
            angle=knob.angle,
            radius=self._config.knob_radius,
        )

    # --- notifications ---

    def _on_drag_transition(self, old: DragPhase, new: DragPhase) -> None:
        self._bus.publish("drag_transition", old=old, new=new)

    def _on_mode_change(self, old: Mode, new: Mode) -> None:
        self._bus.publish("mode_changed", old=old, new=new)

    def _on_spawn(self, emitter: Emitter) -> None:
        self._bus.publish(
            "emitter_spawned", x=emitter.x, y=emitter.y, at_ms=emitter.emitted_at_ms
        )

    def _on_trigger(self, row: int, col: int, now: float) -> None:
        self._bus.publish("tile_triggered", row=row, col=col, at_ms=now)

    def _on_finish(self, row: int, col: int, now: float) -> None:
        self._bus.publish("tile_finished", row=row, col=col, at_ms=now)

    def _on_ignored(self, event: Any, ctx: TickContext) -> None:
        logger.debug("frame %d: ignored input %r", ctx.frame_number, event)
