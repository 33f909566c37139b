"""Lane rendering: label, curve plot and a marker track per interpolator."""
from __future__ import annotations

import pygame

from tick_interp import ValueInterpolator

from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_COUNT,
    LANE_H,
    MARKER_RADIUS,
    SETTLED_COLOR,
    SHAPING_COLORS,
    SHAPING_NAMES,
    TEXT_DIM,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import curve_progress, draw_curve_plot

TRACK_X = LABEL_W + CURVE_W


def track_fraction(mx: int) -> float:
    """Map a mouse x coordinate to a [0, 1] position along the rail."""
    rail_left = TRACK_X + TRACK_PAD
    rail_w = TRACK_W - 2 * TRACK_PAD
    return (mx - rail_left) / rail_w


def lane_at(mx: int, my: int) -> int | None:
    """Return the lane index under the cursor if it is over a track."""
    if not (TRACK_X <= mx < TRACK_X + TRACK_W):
        return None
    lane = my // LANE_H
    return lane if 0 <= lane < LANE_COUNT else None


def draw_lanes(
    surface: pygame.Surface,
    lanes: list[ValueInterpolator],
    curves: dict[str, list[float]],
    font: pygame.font.Font,
) -> None:
    """Draw one lane per interpolator."""
    rail_left = TRACK_X + TRACK_PAD
    rail_right = TRACK_X + TRACK_W - TRACK_PAD

    for i, (name, interp) in enumerate(zip(SHAPING_NAMES, lanes)):
        lane_y = i * LANE_H
        value = interp.value
        start, end = interp.range

        pygame.draw.rect(surface, LANE_BG, (0, lane_y, TRACK_X + TRACK_W, LANE_H))
        pygame.draw.line(
            surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (TRACK_X + TRACK_W, lane_y + LANE_H - 1)
        )

        # Label and live readout
        label = font.render(name, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height()))
        readout = font.render(f"{value:.3f}", True, TEXT_DIM)
        surface.blit(readout, (10, lane_y + LANE_H // 2 + 2))

        draw_curve_plot(
            surface,
            name,
            curves[name],
            LABEL_W,
            lane_y + 8,
            CURVE_W,
            LANE_H - 16,
            curve_progress(name, interp.time, interp.duration),
        )

        pygame.draw.rect(surface, TRACK_BG, (TRACK_X, lane_y, TRACK_W, LANE_H))
        rail_y = lane_y + LANE_H // 2
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        # Range endpoints
        color = SHAPING_COLORS.get(name, (200, 200, 200))
        dim_color = tuple(c // 3 for c in color)
        for v in (start, end):
            px = int(rail_left + v * (rail_right - rail_left))
            pygame.draw.circle(surface, dim_color, (px, rail_y), 4)

        # Marker: white once settled
        fill = SETTLED_COLOR if interp.is_settled else color
        mx = int(rail_left + value * (rail_right - rail_left))
        pygame.draw.circle(surface, fill, (mx, rail_y), MARKER_RADIUS)
        outline = tuple(min(c + 40, 255) for c in fill)
        pygame.draw.circle(surface, outline, (mx, rail_y), MARKER_RADIUS, 1)
