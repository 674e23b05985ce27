"""Easing functions for tween interpolation.

Curves work on a normalized position ``t`` in [0, 1] and map 0 to 0 and 1 to 1.
Back, elastic and bounce curves leave [0, 1] between the endpoints.

Every family is built from its "in" curve: "out" mirrors it and "in_out"
runs "in" over the first half and "out" over the second.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, Union

from tick_tweener.types import ratio, scale

Curve = Callable[[float], float]

_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def linear(t: float) -> float:
    return t


def _power_in(exponent: int) -> Curve:
    def curve(t: float) -> float:
        return t**exponent

    curve.__name__ = f"power{exponent}_in"
    return curve


def sine_in(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2.0)


def expo_in(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * t - 10.0)


def circ_in(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))


def back_in(t: float) -> float:
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def elastic_in(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((10.0 * t - 10.75) * _ELASTIC_C4)


def bounce_out(t: float) -> float:
    if t < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2.0 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def mirror(curve: Curve) -> Curve:
    """Turn an "in" curve into its "out" counterpart, and back."""

    def mirrored(t: float) -> float:
        return 1.0 - curve(1.0 - t)

    return mirrored


def in_out(curve_in: Curve) -> Curve:
    """First half follows curve_in, second half its mirror; both meet at 0.5."""

    def composed(t: float) -> float:
        if t < 0.5:
            return curve_in(2.0 * t) / 2.0
        return 1.0 - curve_in(2.0 - 2.0 * t) / 2.0

    return composed


class Easing(str, Enum):
    """Every available easing variant. Values are the keys of EASINGS."""

    LINEAR = "linear"
    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_IN_OUT = "sine_in_out"
    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD_IN_OUT = "quad_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"
    QUART_IN = "quart_in"
    QUART_OUT = "quart_out"
    QUART_IN_OUT = "quart_in_out"
    QUINT_IN = "quint_in"
    QUINT_OUT = "quint_out"
    QUINT_IN_OUT = "quint_in_out"
    EXPO_IN = "expo_in"
    EXPO_OUT = "expo_out"
    EXPO_IN_OUT = "expo_in_out"
    CIRC_IN = "circ_in"
    CIRC_OUT = "circ_out"
    CIRC_IN_OUT = "circ_in_out"
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"


def _family(name: str, curve_in: Curve, curve_out: Curve | None = None) -> dict[str, Curve]:
    if curve_out is None:
        curve_out = mirror(curve_in)
    return {
        f"{name}_in": curve_in,
        f"{name}_out": curve_out,
        f"{name}_in_out": in_out(curve_in),
    }


EASINGS: dict[str, Curve] = {
    "linear": linear,
    **_family("sine", sine_in),
    **_family("quad", _power_in(2)),
    **_family("cubic", _power_in(3)),
    **_family("quart", _power_in(4)),
    **_family("quint", _power_in(5)),
    **_family("expo", expo_in),
    **_family("circ", circ_in),
    **_family("back", back_in),
    **_family("elastic", elastic_in),
    **_family("bounce", mirror(bounce_out), bounce_out),
}

EasingSpec = Union[Easing, str, Curve]


def get_easing(easing: EasingSpec) -> Curve:
    """Resolve an Easing member, its name, or a custom curve to a curve."""
    if isinstance(easing, str):
        return EASINGS[Easing(easing).value]
    if callable(easing):
        return easing
    raise TypeError(f"easing must be an Easing, a name or a callable, got {easing!r}")


def ease(curve: Curve, start: Any, end: Any, duration: Any, position: Any) -> Any:
    """Interpolate from start to end at position along duration.

    Returns start exactly at position <= 0 and end exactly at
    position >= duration.
    """
    if position <= 0:
        return start
    if position >= duration:
        return end
    return start + scale(end - start, curve(ratio(position, duration)))
