"""Tile grid renderer."""
from __future__ import annotations

import pygame

from ripple_grid import Engine

from ui.constants import TILE_COLOR, TILE_STROKE


def draw_tiles(surface: pygame.Surface, engine: Engine) -> None:
    """Draw every tile at its current interpolation frame."""
    world = engine.world
    layout = world.layout
    scale = layout.shape_scale
    for row, line in enumerate(engine.frames()):
        for col, frame in enumerate(line):
            cx, cy = layout.tile_center(row, col)
            outline = world.shapes.outline(world.shapes.pair(frame.stage), frame.k)
            points = [(cx + x * scale, cy + y * scale) for x, y in outline]
            pygame.draw.polygon(surface, TILE_COLOR, points, TILE_STROKE)
