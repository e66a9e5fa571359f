"""Per-frame systems and the input handlers they dispatch to.

Systems run in a fixed order each frame: input, gesture, prune, tiles,
signals. Tile sampling must see the emitters spawned earlier in the frame.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from ripple_grid.input import InputQueue, PointerDown, PointerMove, PointerUp
from ripple_grid.signals import SignalBus

if TYPE_CHECKING:
    from ripple_grid.emitters import Emitter
    from ripple_grid.types import TickContext
    from ripple_grid.world import RippleWorld

System = Callable[["RippleWorld", "TickContext"], None]


def on_pointer_down(event: PointerDown, world: RippleWorld, ctx: TickContext) -> bool:
    contacts = event.contacts
    if len(contacts) >= 2:
        world.knob.enter(contacts[0], contacts[1], ctx.now_ms)
        return True
    if world.knob.active:
        # the tap that leaves tuning mode does not start a press
        world.knob.exit()
    else:
        world.drag.press(ctx.now_ms, contacts[0])
    return True


def on_pointer_move(event: PointerMove, world: RippleWorld, ctx: TickContext) -> bool:
    contacts = event.contacts
    if world.knob.active and len(contacts) >= 2:
        world.knob.pinch(contacts[0], contacts[1])
        return True
    world.drag.move(contacts[0])
    return True


def on_pointer_up(event: PointerUp, world: RippleWorld, ctx: TickContext) -> bool:
    if event.contacts:
        return False
    world.drag.release()
    return True


def register_input_handlers(queue: InputQueue) -> None:
    queue.handle(PointerDown, on_pointer_down)
    queue.handle(PointerMove, on_pointer_move)
    queue.handle(PointerUp, on_pointer_up)


def make_input_system(
    queue: InputQueue,
    on_ignored: Callable[[Any, TickContext], None] | None = None,
) -> System:
    """Return a system that drains the input queue at the start of the frame.

    ``on_ignored(event, ctx)`` fires for events that changed nothing.
    """

    def input_system(world: RippleWorld, ctx: TickContext) -> None:
        for event, applied in queue.drain(world, ctx):
            if not applied and on_ignored is not None:
                on_ignored(event, ctx)

    return input_system


def make_gesture_system(
    on_spawn: Callable[[Emitter], None] | None = None,
) -> System:
    """Return a system running long-press detection and emitter spawning."""

    def gesture_system(world: RippleWorld, ctx: TickContext) -> None:
        if world.knob.active:
            return
        spawned = world.drag.advance(ctx.now_ms, world.field, world.grid)
        if on_spawn is not None:
            for emitter in spawned:
                on_spawn(emitter)

    return gesture_system


def make_prune_system() -> System:
    def prune_system(world: RippleWorld, ctx: TickContext) -> None:
        if world.knob.active:
            return
        world.field.prune(ctx.now_ms, world.layout.max_reach_dist)

    return prune_system


def make_tile_system(
    on_trigger: Callable[[int, int, float], None] | None = None,
    on_finish: Callable[[int, int, float], None] | None = None,
) -> System:
    """Return a system that samples the emitter field into the tile grid."""

    def tile_system(world: RippleWorld, ctx: TickContext) -> None:
        triggered, finished = world.grid.sample(
            ctx.now_ms,
            world.drag.is_long_press,
            world.timing,
            world.field,
            world.layout.tile_center,
        )
        if on_trigger is not None:
            for row, col in triggered:
                on_trigger(row, col, ctx.now_ms)
        if on_finish is not None:
            for row, col in finished:
                on_finish(row, col, ctx.now_ms)

    return tile_system


def make_signal_system(bus: SignalBus) -> System:
    def signal_system(world: RippleWorld, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
