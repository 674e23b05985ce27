"""Numeric protocols, errors and time helpers shared by tweens and tweeners."""
from __future__ import annotations

import math
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class TweenValue(Protocol):
    """A value that can be interpolated.

    Needs ``+`` and ``-`` against its own type and ``*`` by a float ratio.
    ``int`` and ``float`` qualify, as do most vector types.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: float) -> Any: ...


@runtime_checkable
class TweenTime(Protocol):
    """A time value: ``int`` frames or ``float`` seconds."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __truediv__(self, other: Any) -> Any: ...


V = TypeVar("V", bound=TweenValue)
T = TypeVar("T", bound=TweenTime)


class InvalidDuration(ValueError):
    """Raised when a tween is built with a duration that is not positive."""

    def __init__(self, duration: Any) -> None:
        self.duration = duration
        super().__init__(f"duration must be > 0, got {duration}")


# Relative tolerance for float boundary checks.
TIME_EPSILON = 1e-9


def reached(elapsed: Any, duration: Any) -> bool:
    """Return True when elapsed is at or past duration.

    Float times within TIME_EPSILON (relative) of the duration count as reached.
    """
    if elapsed >= duration:
        return True
    if isinstance(elapsed, float) or isinstance(duration, float):
        return math.isclose(elapsed, duration, rel_tol=TIME_EPSILON)
    return False


def ratio(position: Any, duration: Any) -> float:
    """Position as a fraction of duration."""
    return float(position / duration)


def scale(delta: Any, factor: float) -> Any:
    """Multiply a value delta by a ratio, truncating toward zero for ints."""
    if isinstance(delta, int) and not isinstance(delta, bool):
        return int(delta * factor)
    return delta * factor
