"""Tween record: one easing curve plus its start, end and duration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic

from tick_tweener.easing import Curve, Easing, EasingSpec, ease, get_easing
from tick_tweener.types import InvalidDuration, T, V


@dataclass(frozen=True)
class Tween(Generic[V, T]):
    """Immutable interpolation from start to end over duration.

    Stateless: value_at can be called any number of times with any position.

    Attributes:
        start: Value at position 0.
        end: Value at position duration.
        duration: Length of the tween (ticks or seconds). Must be > 0.
        easing: An Easing member, its name, or a custom curve on [0, 1].
    """

    start: V
    end: V
    duration: T
    easing: EasingSpec = Easing.LINEAR
    curve: Curve = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.duration > 0:
            raise InvalidDuration(self.duration)
        object.__setattr__(self, "curve", get_easing(self.easing))

    @property
    def initial_value(self) -> V:
        return self.start

    @property
    def final_value(self) -> V:
        return self.end

    def value_at(self, position: Any) -> V:
        """Value at position, clamped into [0, duration]."""
        if position < 0:
            position = 0
        elif position > self.duration:
            position = self.duration
        return ease(self.curve, self.start, self.end, self.duration, position)
