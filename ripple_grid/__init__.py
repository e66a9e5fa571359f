"""ripple_grid - Gesture-driven ripple grid simulation."""

from ripple_grid.clock import LogicalClock
from ripple_grid.config import RippleConfig
from ripple_grid.emitters import Emitter, EmitterField
from ripple_grid.engine import Engine, KnobView
from ripple_grid.gestures import DragController, DragPhase
from ripple_grid.input import InputQueue, PointerDown, PointerMove, PointerUp
from ripple_grid.knob import KnobController
from ripple_grid.layout import GridLayout
from ripple_grid.shapes import STAGES, ShapeCache
from ripple_grid.signals import SignalBus
from ripple_grid.tiles import Tile, TileFrame, TileGrid, TilePhase, Timing
from ripple_grid.types import Mode, TickContext
from ripple_grid.world import RippleWorld

__all__ = [
    "Engine",
    "KnobView",
    "RippleConfig",
    "RippleWorld",
    "LogicalClock",
    "TickContext",
    "Mode",
    "Emitter",
    "EmitterField",
    "Tile",
    "TileGrid",
    "TilePhase",
    "TileFrame",
    "Timing",
    "STAGES",
    "DragController",
    "DragPhase",
    "KnobController",
    "InputQueue",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "GridLayout",
    "ShapeCache",
    "SignalBus",
]
