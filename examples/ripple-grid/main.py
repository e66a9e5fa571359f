"""Ripple Grid: hold and drag to send waves through a grid of morphing tiles.

Exercises ripple_grid: logical clock, emitter field, tile grid, drag and
knob controllers.

Controls:
  Hold + drag        Emit a trail of wave pulses (after 350 ms)
  Release            Stop emitting; tiles finish their loop back to a square
  Two fingers        Freeze and show the HOLD_MS knob; pinch to tune
  Right click        Desktop stand-in for two fingers
  Mouse wheel        Spread/close the virtual fingers while tuning
  Click / tap        Leave the knob and resume
  Esc                Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ripple_grid import DragPhase, Engine, PointerDown, PointerMove, PointerUp, RippleConfig

from ui.constants import (
    BG_COLOR,
    FPS,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
    VIRTUAL_PINCH_SPREAD,
    VIRTUAL_PINCH_STEP,
)
from ui.knob import draw_knob
from ui.status import draw_status_bar
from ui.tiles import draw_tiles


class AppState:
    """Holds the engine plus the host-side contact bookkeeping."""

    def __init__(self, config: RippleConfig, width: int, height: int) -> None:
        self.engine = Engine(config, width=width, height=height - STATUS_H)
        self.fingers: dict[int, tuple[float, float]] = {}
        self.virtual_spread = 0.0
        self.finished_count = 0
        self.engine.bus.subscribe("tile_finished", self._on_tile_finished)
        self.engine.bus.subscribe("drag_transition", self._on_drag_transition)

    def _on_tile_finished(self, signal: str, data: dict) -> None:
        self.finished_count += 1

    def _on_drag_transition(self, signal: str, data: dict) -> None:
        if data["new"] is DragPhase.LONGPRESS:
            self.finished_count = 0

    def contacts(self) -> tuple[tuple[float, float], ...]:
        return tuple(self.fingers.values())

    def virtual_pair(self) -> tuple[tuple[float, float], tuple[float, float]]:
        cx, cy = self.engine.knob_view().center
        half = self.virtual_spread / 2
        return (cx - half, cy), (cx + half, cy)

    def start_virtual_pinch(self, x: float, y: float) -> None:
        self.virtual_spread = VIRTUAL_PINCH_SPREAD
        half = self.virtual_spread / 2
        self.engine.pinch_start((x - half, y), (x + half, y))

    def scroll_virtual_pinch(self, notches: int) -> None:
        if not self.engine.knob_view().active:
            return
        self.virtual_spread = max(self.virtual_spread + notches * VIRTUAL_PINCH_STEP, 0.0)
        self.engine.move(*self.virtual_pair())

    def resize(self, width: int, height: int) -> None:
        self.engine.resize(width, height - STATUS_H)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ripple grid demo")
    parser.add_argument("--cols", type=int, default=6)
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--hold", type=float, default=1500.0, help="initial HOLD_MS")
    parser.add_argument("--width", type=int, default=SCREEN_W)
    parser.add_argument("--height", type=int, default=SCREEN_H)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--verbose", action="store_true", help="log gesture transitions")
    args = parser.parse_args(argv)
    try:
        args.config = RippleConfig().replace(cols=args.cols, rows=args.rows, hold_ms=args.hold)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def handle_event(state: AppState, event: pygame.event.Event, size: tuple[int, int]) -> bool:
    """Translate one pygame event into engine input. Returns False to quit."""
    engine = state.engine
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False

    if event.type == pygame.VIDEORESIZE:
        state.resize(event.w, event.h)

    # SDL synthesizes mouse events from touches; fingers are handled below
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION) and getattr(
        event, "touch", False
    ):
        pass

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        engine.press(*event.pos)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
        state.start_virtual_pinch(*event.pos)
    elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
        engine.move(event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        engine.release()
    elif event.type == pygame.MOUSEWHEEL:
        state.scroll_virtual_pinch(event.y)

    elif event.type == pygame.FINGERDOWN:
        w, h = size
        state.fingers[event.finger_id] = (event.x * w, event.y * h)
        engine.push(PointerDown(state.contacts()))
    elif event.type == pygame.FINGERMOTION:
        w, h = size
        state.fingers[event.finger_id] = (event.x * w, event.y * h)
        engine.push(PointerMove(state.contacts()))
    elif event.type == pygame.FINGERUP:
        state.fingers.pop(event.finger_id, None)
        engine.push(PointerUp(state.contacts()))
    return True


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Ripple Grid")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)
    big_font = pygame.font.SysFont("monospace", 18)

    state = AppState(args.config, args.width, args.height)

    running = True
    while running:
        dt_ms = clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if not handle_event(state, event, screen.get_size()):
                running = False

        # --- Frame ---
        state.engine.step(float(dt_ms))

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_tiles(screen, state.engine)
        draw_knob(screen, state.engine.knob_view(), font, big_font)
        draw_status_bar(screen, font, state.engine, state.finished_count)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
