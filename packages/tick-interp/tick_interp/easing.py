"""Time-based shaping functions in (t, b, c, d) form.

Each function maps elapsed time ``t``, begin value ``b``, change ``c`` and
duration ``d`` to the value at ``t``. Progress ``t / d`` is clamped to
[0, 1], so the result stays on the end value once ``t`` runs past ``d``.
A non-positive duration means the motion is already complete.
"""
from __future__ import annotations

from tick_interp.damped import Damped
from tick_interp.types import Shaping, UnknownShapingError


def _progress(t: float, d: float) -> float:
    if d <= 0.0:
        return 1.0
    return max(0.0, min(1.0, t / d))


def linear(t: float, b: float, c: float, d: float) -> float:
    return b + c * _progress(t, d)


def quad_in(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d)
    return b + c * p * p


def quad_out(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d)
    return b + c * p * (2 - p)


def quad_in_out(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d)
    if p < 0.5:
        return b + c * 2 * p * p
    return b + c * (1 - (-2 * p + 2) ** 2 / 2)


def cubic_in(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d)
    return b + c * p * p * p


def cubic_out(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d) - 1
    return b + c * (p * p * p + 1)


def cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    p = _progress(t, d)
    if p < 0.5:
        return b + c * 4 * p * p * p
    return b + c * (1 - (-2 * p + 2) ** 3 / 2)


def smooth_step(t: float, b: float, c: float, d: float) -> float:
    """Hermite smooth-step: zero slope at both ends."""
    p = _progress(t, d)
    return b + c * p * p * (3 - 2 * p)


SHAPINGS: dict[str, Shaping] = {
    "linear": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "smooth_step": smooth_step,
}


def make_shaping(name: str) -> Shaping:
    """Look up a shaping strategy by name.

    ``"damped"`` returns a new Damped instance on every call.
    """
    if name == "damped":
        return Damped()
    fn = SHAPINGS.get(name)
    if fn is None:
        raise UnknownShapingError(name)
    return fn
