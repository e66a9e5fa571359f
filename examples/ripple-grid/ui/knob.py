"""Knob overlay drawn while tuning mode freezes the grid."""
from __future__ import annotations

import math

import pygame

from ripple_grid import KnobView

from ui.constants import (
    KNOB_LABEL,
    KNOB_MAJOR_TICKS,
    KNOB_MINOR,
    KNOB_MINOR_PER_MAJOR,
    KNOB_POINTER,
    KNOB_RING,
    KNOB_SWEEP_DEG,
    KNOB_TICK,
    OVERLAY_ALPHA,
    TEXT_COLOR,
    TEXT_DIM,
)


def _polar(cx: float, cy: float, r: float, deg: float) -> tuple[float, float]:
    rad = math.radians(deg)
    return (cx + r * math.cos(rad), cy + r * math.sin(rad))


def _blit_centered(
    surface: pygame.Surface, font: pygame.font.Font, text: str, color, pos
) -> None:
    label = font.render(text, True, color)
    surface.blit(label, label.get_rect(center=(int(pos[0]), int(pos[1]))))


def draw_knob(
    surface: pygame.Surface,
    view: KnobView,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
) -> None:
    if not view.active:
        return

    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, OVERLAY_ALPHA))
    surface.blit(shade, (0, 0))

    cx, cy = view.center
    r = view.radius
    lo_deg, hi_deg = KNOB_SWEEP_DEG
    pygame.draw.circle(surface, KNOB_RING, (int(cx), int(cy)), int(r), 3)

    # Major ticks, every other one labelled in ms
    for i in range(KNOB_MAJOR_TICKS + 1):
        t = i / KNOB_MAJOR_TICKS
        deg = lo_deg + (hi_deg - lo_deg) * t
        pygame.draw.line(surface, KNOB_TICK, _polar(cx, cy, r - 12, deg), _polar(cx, cy, r, deg), 2)
        if i % 2 == 0:
            ms = round(view.hold_min + (view.hold_max - view.hold_min) * t)
            _blit_centered(surface, font, str(ms), KNOB_LABEL, _polar(cx, cy, r + 20, deg))

    # Minor subdivisions
    for i in range(KNOB_MAJOR_TICKS):
        for j in range(1, KNOB_MINOR_PER_MAJOR):
            t = (i + j / KNOB_MINOR_PER_MAJOR) / KNOB_MAJOR_TICKS
            deg = lo_deg + (hi_deg - lo_deg) * t
            pygame.draw.line(surface, KNOB_MINOR, _polar(cx, cy, r - 8, deg), _polar(cx, cy, r, deg), 1)

    pygame.draw.line(
        surface, KNOB_POINTER, (cx, cy), _polar(cx, cy, r - 16, view.pointer_degrees), 6
    )
    pygame.draw.circle(surface, KNOB_POINTER, (int(cx), int(cy)), 3)

    _blit_centered(
        surface, big_font, f"HOLD_MS = {round(view.hold_ms)} ms", TEXT_COLOR, (cx, cy + r + 28)
    )
    _blit_centered(
        surface,
        font,
        f"Range: {round(view.hold_min)}-{round(view.hold_max)} ms",
        TEXT_DIM,
        (cx, cy + r + 46),
    )
