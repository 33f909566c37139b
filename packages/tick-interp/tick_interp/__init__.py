"""tick-interp - Smooth scalar interpolation driven by caller-supplied time."""
from __future__ import annotations

from tick_interp.config import DEFAULT_DURATION, EPSILON, InterpolatorConfig
from tick_interp.damped import Damped
from tick_interp.easing import SHAPINGS, make_shaping
from tick_interp.interpolator import ValueInterpolator, equal
from tick_interp.types import (
    InterpState,
    RateMode,
    Shaping,
    StatefulShaping,
    UnknownShapingError,
)

__all__ = [
    "ValueInterpolator",
    "InterpolatorConfig",
    "RateMode",
    "InterpState",
    "Shaping",
    "StatefulShaping",
    "Damped",
    "SHAPINGS",
    "make_shaping",
    "equal",
    "EPSILON",
    "DEFAULT_DURATION",
    "UnknownShapingError",
]
