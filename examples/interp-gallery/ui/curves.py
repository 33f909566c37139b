"""Shaping curve plot renderer."""
from __future__ import annotations

import pygame

from tick_interp import Damped, make_shaping

from ui.constants import CURVE_BG, SHAPING_COLORS, TEXT_DIM

_SAMPLES = 80
# The damped curve is plotted over this many smoothing times.
_DAMPED_SPAN = 4.0


def sample_curve(name: str) -> list[float]:
    """Sample a shaping strategy moving 0 -> 1 at evenly spaced times."""
    fn = make_shaping(name)
    if isinstance(fn, Damped):
        step = _DAMPED_SPAN / _SAMPLES
        return [fn(i * step, 0.0, 1.0, 1.0) for i in range(_SAMPLES + 1)]
    return [fn(i / _SAMPLES, 0.0, 1.0, 1.0) for i in range(_SAMPLES + 1)]


def curve_progress(name: str, elapsed: float, duration: float) -> float:
    """Horizontal position of the tracking dot, or -1 when idle."""
    if elapsed <= 0.0 or duration <= 0.0:
        return -1.0
    span = duration * _DAMPED_SPAN if name == "damped" else duration
    return min(elapsed / span, 1.0)


def draw_curve_plot(
    surface: pygame.Surface,
    name: str,
    samples: list[float],
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw a shaping curve with a tracking dot."""
    pad = 10
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - 2 * pad
    plot_h = h - 2 * pad

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Axes
    pygame.draw.line(
        surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h)
    )
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    color = SHAPING_COLORS.get(name, (200, 200, 200))
    last = len(samples) - 1
    points = [
        (plot_x + i / last * plot_w, plot_y + plot_h - v * plot_h)
        for i, v in enumerate(samples)
    ]
    if len(points) > 1:
        pygame.draw.lines(surface, color, False, points, 2)

    if 0.0 <= current_t <= 1.0:
        v = samples[round(current_t * last)]
        dot_x = int(plot_x + current_t * plot_w)
        dot_y = int(plot_y + plot_h - v * plot_h)
        pygame.draw.circle(surface, (255, 255, 255), (dot_x, dot_y), 4)
        pygame.draw.circle(surface, color, (dot_x, dot_y), 3)
