"""Interpolator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_interp.types import RateMode

EPSILON = 1e-4
DEFAULT_DURATION = 1.0


@dataclass(frozen=True)
class InterpolatorConfig:
    """Immutable defaults for ValueInterpolator.

    Attributes:
        tolerance: Distance to the end value under which a motion counts as
            arrived and is snapped to it on the next update.
        default_rate: Rate used when the constructor is given none.
        default_rate_mode: Rate mode used when the constructor is given none.
    """

    tolerance: float = EPSILON
    default_rate: float = DEFAULT_DURATION
    default_rate_mode: RateMode = RateMode.DURATION
