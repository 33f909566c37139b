"""Damped shaping: a critically damped spring toward the end value.

Unlike the functions in ``tick_interp.easing`` this strategy is stateful.
It keeps its own position and velocity between calls and treats ``d`` as
the smoothing time rather than a fixed duration, so it approaches
``b + c`` asymptotically instead of arriving at ``t == d``.
"""
from __future__ import annotations

import math

_MIN_SMOOTH_TIME = 1e-4


class Damped:
    """Critically damped smoothing (the SmoothDamp integrator).

    Conforms to the StatefulShaping protocol. The time step for each call is
    the difference between successive ``t`` values; a call with ``t <= 0``
    starts over from ``b``.

    Args:
        max_speed: Optional cap on the speed of approach, in value units per
            time unit. Defaults to unlimited.
    """

    def __init__(self, max_speed: float = math.inf) -> None:
        if max_speed <= 0.0:
            raise ValueError("max_speed must be positive")
        self._max_speed = max_speed
        self._position: float | None = None
        self._velocity = 0.0
        self._last_t = 0.0

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def reset(self) -> None:
        self._position = None
        self._velocity = 0.0
        self._last_t = 0.0

    def __call__(self, t: float, b: float, c: float, d: float) -> float:
        target = b + c
        if self._position is None or t <= 0.0:
            self._position = b
            self._velocity = 0.0
            self._last_t = 0.0
            if t <= 0.0:
                return b

        dt = t - self._last_t
        if dt <= 0.0:
            return self._position
        self._last_t = t

        smooth_time = max(_MIN_SMOOTH_TIME, d)
        omega = 2.0 / smooth_time
        x = omega * dt
        decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

        max_change = self._max_speed * smooth_time
        change = max(-max_change, min(max_change, self._position - target))
        goal = self._position - change

        temp = (self._velocity + omega * change) * dt
        self._velocity = (self._velocity - omega * temp) * decay
        out = goal + (change + temp) * decay

        # Never step past the target.
        if (target - self._position > 0.0) == (out > target):
            out = target
            self._velocity = 0.0

        self._position = out
        return out
