"""Shared types and protocols for tick-interp."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol, runtime_checkable

# (t, b, c, d) -> value: elapsed time, begin value, change, duration.
Shaping = Callable[[float, float, float, float], float]


class RateMode(Enum):
    """How a rate value is turned into a motion duration."""

    DURATION = "duration"
    SPEED = "speed"


class InterpState(Enum):
    SETTLED = "settled"
    MOVING = "moving"


@runtime_checkable
class StatefulShaping(Protocol):
    """Shaping strategy that carries state (e.g. velocity) between calls.

    The interpolator calls reset() whenever a new motion starts or the value
    is set immediately. Instances must not be shared between interpolators.
    """

    def __call__(self, t: float, b: float, c: float, d: float) -> float: ...

    def reset(self) -> None: ...


class UnknownShapingError(KeyError):
    """Raised when a shaping strategy is looked up by an unregistered name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown shaping {name!r}")
