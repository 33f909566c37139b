"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from tick_interp import RateMode

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rate: float,
    rate_mode: RateMode,
    moving: int,
    targets_issued: int,
    tps: int,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    mode_label = "Duration" if rate_mode is RateMode.DURATION else "Speed"
    surface.blit(font.render(f"Mode: {mode_label}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    unit = "s" if rate_mode is RateMode.DURATION else "/s"
    surface.blit(font.render(f"Rate: {rate:.2f}{unit}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Moving: {moving}/{LANE_COUNT}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Targets: {targets_issued}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"TPS: {tps}", True, TEXT_DIM), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = (
        "[Space] Flip  [Click] Target  [RClick] Range from 0  [R] Replay  "
        "[M] Mode  [+/-] Rate  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
