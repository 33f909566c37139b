"""Interpolation Gallery - side-by-side ValueInterpolator lanes.

One lane per shaping strategy, each with its own ValueInterpolator bounded
to [0, 1]. The frame loop pushes a fixed time step into every lane.

Controls:
  Space        Flip every lane's target between 0 and 1
  Click        Target the clicked position (that lane)
  Right-click  Restart the lane from 0 toward the clicked position
  R            Replay all lanes from 0 to 1
  M            Toggle rate mode (duration / speed)
  +/-          Adjust rate
  Esc          Quit

Pass -v to log every motion the lanes start and settle.
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_interp import RateMode, ValueInterpolator

from ui.constants import (
    BG_COLOR,
    FPS,
    RATE_MAX,
    RATE_MIN,
    RATE_STEP,
    SCREEN_H,
    SCREEN_W,
    SHAPING_NAMES,
    TPS,
)
from ui.curves import sample_curve
from ui.lanes import draw_lanes, lane_at, track_fraction
from ui.status import draw_sidebar, draw_status_bar


class GalleryState:
    """Holds the lanes and the shared rate settings."""

    def __init__(self) -> None:
        self.rate = 1.0
        self.rate_mode = RateMode.DURATION
        self.targets_issued = 0
        self.lanes = [
            ValueInterpolator(
                0.0,
                minimum=0.0,
                maximum=1.0,
                shaping=name,
                rate_mode=self.rate_mode,
                rate=self.rate,
            )
            for name in SHAPING_NAMES
        ]
        self.curves = {name: sample_curve(name) for name in SHAPING_NAMES}

    def flip(self) -> None:
        for interp in self.lanes:
            _, end = interp.range
            interp.set_target(0.0 if end >= 0.5 else 1.0)
        self.targets_issued += len(self.lanes)

    def replay(self) -> None:
        for interp in self.lanes:
            interp.set_range(1.0, 0.0)
        self.targets_issued += len(self.lanes)

    def target_lane(self, lane: int, fraction: float, from_zero: bool) -> None:
        # Out-of-track fractions are clamped by the lane's bounds.
        interp = self.lanes[lane]
        if from_zero:
            interp.set_range(fraction, 0.0)
        else:
            interp.set_target(fraction)
        self.targets_issued += 1

    def toggle_mode(self) -> None:
        self.rate_mode = (
            RateMode.SPEED if self.rate_mode is RateMode.DURATION else RateMode.DURATION
        )
        self._apply_rate()

    def adjust_rate(self, delta: float) -> None:
        self.rate = min(max(self.rate + delta, RATE_MIN), RATE_MAX)
        self._apply_rate()

    def _apply_rate(self) -> None:
        for interp in self.lanes:
            interp.set_rate(self.rate, self.rate_mode)

    def step(self, dt: float) -> None:
        for interp in self.lanes:
            interp.update(dt)

    @property
    def moving(self) -> int:
        return sum(1 for interp in self.lanes if not interp.is_settled)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Interpolation Gallery - tick-interp demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.flip()
                elif event.key == pygame.K_r:
                    state.replay()
                elif event.key == pygame.K_m:
                    state.toggle_mode()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.adjust_rate(RATE_STEP)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.adjust_rate(-RATE_STEP)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                mx, my = event.pos
                lane = lane_at(mx, my)
                if lane is not None:
                    state.target_lane(lane, track_fraction(mx), from_zero=event.button == 3)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step(tick_interval)
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.lanes, state.curves, font)
        draw_sidebar(
            screen,
            font,
            rate=state.rate,
            rate_mode=state.rate_mode,
            moving=state.moving,
            targets_issued=state.targets_issued,
            tps=TPS,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
