"""ValueInterpolator - a scalar that moves toward its targets over time."""
from __future__ import annotations

import logging
import math
import threading

from tick_interp.config import EPSILON, InterpolatorConfig
from tick_interp.easing import make_shaping
from tick_interp.types import InterpState, RateMode, Shaping, StatefulShaping

logger = logging.getLogger(__name__)


def equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    return abs(a - b) < tolerance


def _bound(value: float | None) -> float | None:
    # NaN is the legacy "unlimited" marker.
    if value is None or math.isnan(value):
        return None
    return value


def _check_rate(rate: float, mode: RateMode) -> None:
    if mode is RateMode.SPEED and not rate > 0.0:
        raise ValueError("rate must be positive in SPEED mode")
    if mode is RateMode.DURATION and not rate >= 0.0:
        raise ValueError("rate must be non-negative in DURATION mode")


def _check_duration(duration: float | None) -> None:
    if duration is not None and not duration >= 0.0:
        raise ValueError("duration must be non-negative")


def _check_limits(minimum: float | None, maximum: float | None) -> None:
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")


class ValueInterpolator:
    """A managed scalar that is set, targeted and advanced by the caller.

    The value is either settled (resting on its end value) or moving from
    ``range[0]`` toward ``range[1]``. Motion only advances when the caller
    pushes elapsed time in through update(); nothing is scheduled
    internally.

    Every public method and property runs under one per-instance lock, so
    concurrent callers never observe a half-updated range.

    Args:
        value: Initial value, clamped to the bounds.
        minimum: Optional inclusive lower bound.
        maximum: Optional inclusive upper bound.
        shaping: Shaping callable or a name known to make_shaping().
        rate_mode: Whether ``rate`` is a duration or a speed. Defaults to
            ``config.default_rate_mode``.
        rate: Duration of every motion (DURATION) or distance per time unit
            (SPEED). Defaults to ``config.default_rate``.
        config: Tolerance and defaults. Defaults to InterpolatorConfig().
    """

    def __init__(
        self,
        value: float = 0.0,
        *,
        minimum: float | None = None,
        maximum: float | None = None,
        shaping: Shaping | str = "linear",
        rate_mode: RateMode | None = None,
        rate: float | None = None,
        config: InterpolatorConfig | None = None,
    ) -> None:
        self._config = config if config is not None else InterpolatorConfig()
        self._rate_mode = rate_mode if rate_mode is not None else self._config.default_rate_mode
        self._rate = rate if rate is not None else self._config.default_rate
        _check_rate(self._rate, self._rate_mode)

        self._min = _bound(minimum)
        self._max = _bound(maximum)
        _check_limits(self._min, self._max)

        self._shaping = make_shaping(shaping) if isinstance(shaping, str) else shaping

        self._lock = threading.Lock()
        self._value = 0.0
        self._start = 0.0
        self._end = 0.0
        self._elapsed = 0.0
        self._duration = 0.0
        self._duration_override: float | None = None
        self._moving = False
        self._set_immediate(value)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"ValueInterpolator(value={self._value!r}, range=({self._start!r}, "
                f"{self._end!r}), elapsed={self._elapsed!r}, duration={self._duration!r})"
            )

    # --- Accessors ---

    @property
    def value(self) -> float:
        with self._lock:
            return self._value

    @property
    def time(self) -> float:
        """Time accumulated since the current motion began."""
        with self._lock:
            return self._elapsed

    @property
    def duration(self) -> float:
        with self._lock:
            return self._duration

    @property
    def range(self) -> tuple[float, float]:
        with self._lock:
            return (self._start, self._end)

    @property
    def rate(self) -> float:
        with self._lock:
            return self._rate

    @property
    def rate_mode(self) -> RateMode:
        with self._lock:
            return self._rate_mode

    @property
    def minimum(self) -> float | None:
        with self._lock:
            return self._min

    @property
    def maximum(self) -> float | None:
        with self._lock:
            return self._max

    @property
    def limits(self) -> tuple[float | None, float | None]:
        with self._lock:
            return (self._min, self._max)

    @property
    def state(self) -> InterpState:
        with self._lock:
            return InterpState.MOVING if self._moving else InterpState.SETTLED

    @property
    def is_settled(self) -> bool:
        with self._lock:
            return not self._moving

    @property
    def shaping(self) -> Shaping:
        return self._shaping

    @property
    def config(self) -> InterpolatorConfig:
        return self._config

    # --- Value operations ---

    def set_value(self, value: float, relative: bool = False) -> None:
        """Jump to ``value`` (or by ``value`` if relative), cancelling any motion."""
        with self._lock:
            self._set_immediate(value, relative)

    def set_target(
        self, target: float, relative: bool = False, duration: float | None = None
    ) -> None:
        """Start moving from the current value toward ``target``.

        A relative target is added to the previous end value, not to the
        current value. ``duration`` overrides the rate-derived duration for
        this motion only.
        """
        _check_duration(duration)
        with self._lock:
            self._set_interpolation(target, relative, duration)

    def set_range(
        self,
        target: float,
        origin: float,
        relative: bool = False,
        duration: float | None = None,
    ) -> None:
        """Jump to ``origin`` and start moving toward ``target`` from there.

        ``origin`` is always absolute; ``relative`` applies to ``target`` only.
        """
        _check_duration(duration)
        with self._lock:
            self._value = self._sanitize(origin)
            self._set_interpolation(target, relative, duration)

    def update(self, dt: float) -> None:
        """Advance the current motion by ``dt`` time units."""
        if dt < 0.0:
            raise ValueError("dt must be non-negative")
        with self._lock:
            if equal(self._value, self._end, self._config.tolerance):
                if self._moving:
                    logger.debug("settled at %g after %g", self._end, self._elapsed)
                self._set_immediate(self._end)
                return

            self._elapsed += dt
            self._value = self._shaping(
                self._elapsed, self._start, self._end - self._start, self._duration
            )

    def sanitize(self, f: float) -> float:
        """Clamp ``f`` to whichever bounds are set."""
        with self._lock:
            return self._sanitize(f)

    # --- Rate and bounds ---

    def set_rate(self, rate: float, mode: RateMode | None = None) -> None:
        """Replace the rate; applies from the next set_target()/set_range()."""
        with self._lock:
            mode = mode if mode is not None else self._rate_mode
            _check_rate(rate, mode)
            self._rate = rate
            self._rate_mode = mode
            logger.debug("rate set to %g (%s)", rate, mode.value)

    def set_min(self, minimum: float | None) -> None:
        with self._lock:
            self._set_limits(_bound(minimum), self._max)

    def set_max(self, maximum: float | None) -> None:
        with self._lock:
            self._set_limits(self._min, _bound(maximum))

    def set_limits(self, minimum: float | None, maximum: float | None) -> None:
        with self._lock:
            self._set_limits(_bound(minimum), _bound(maximum))

    def unset_min(self) -> None:
        self.set_min(None)

    def unset_max(self) -> None:
        self.set_max(None)

    def unset_limits(self) -> None:
        self.set_limits(None, None)

    # --- Internals (lock held) ---

    def _sanitize(self, f: float) -> float:
        if self._min is not None and f < self._min:
            return self._min
        if self._max is not None and f > self._max:
            return self._max
        return f

    def _reset_shaping(self) -> None:
        if isinstance(self._shaping, StatefulShaping):
            self._shaping.reset()

    def _set_immediate(self, value: float, relative: bool = False) -> None:
        if relative:
            value = self._value + value
        self._value = self._sanitize(value)
        self._start = self._value
        self._end = self._value
        self._elapsed = 0.0
        self._moving = False
        self._reset_shaping()

    def _set_interpolation(
        self, target: float, relative: bool, duration: float | None
    ) -> None:
        end = self._end + target if relative else target
        self._end = self._sanitize(end)
        self._duration_override = duration
        self._begin_motion()

    def _begin_motion(self) -> None:
        self._start = self._value
        self._elapsed = 0.0
        self._moving = True
        self._reset_shaping()

        if self._duration_override is not None:
            self._duration = self._duration_override
        elif self._rate_mode is RateMode.SPEED:
            self._duration = abs(self._end - self._value) / self._rate
        else:
            self._duration = self._rate

        logger.debug(
            "moving %g -> %g over %g", self._start, self._end, self._duration
        )

    def _set_limits(self, minimum: float | None, maximum: float | None) -> None:
        _check_limits(minimum, maximum)
        self._min = minimum
        self._max = maximum
        if not self._moving:
            self._end = self._sanitize(self._end)
            self._value = self._end
            self._start = self._end
        elif any(self._sanitize(v) != v for v in (self._start, self._value, self._end)):
            # A motion that left the new bounds restarts from the clamped value.
            self._value = self._sanitize(self._value)
            self._end = self._sanitize(self._end)
            self._begin_motion()
        logger.debug("limits set to [%s, %s]", minimum, maximum)
