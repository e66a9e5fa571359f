"""Bottom status bar."""
from __future__ import annotations

import pygame

from ripple_grid import Engine, Mode, TilePhase

from ui.constants import STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM, TUNING_COLOR


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    engine: Engine,
    finished_count: int,
) -> None:
    w, h = surface.get_size()
    y = h - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, w, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (w, y))

    world = engine.world
    tuning = engine.mode is Mode.TUNING
    mode_label = "TUNING" if tuning else world.drag.phase.value.upper()
    stats = (
        f"{mode_label}  hold={round(world.knob.hold_ms)}ms  "
        f"emitters={len(world.field)}  "
        f"animating={world.grid.count(TilePhase.ANIMATING)}  done={finished_count}"
    )
    surface.blit(font.render(stats, True, TUNING_COLOR if tuning else TEXT_COLOR), (8, y + 2))

    hint = "[Hold+drag] Ripple  [Right-click/2 fingers] Knob  [Wheel/pinch] Tune  [Click] Resume  [Esc] Quit"
    surface.blit(font.render(hint, True, TEXT_DIM), (8, y + STATUS_H // 2 + 1))
