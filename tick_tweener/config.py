"""Playback configuration for tweeners."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    ONCE = "once"
    LOOP = "loop"
    YOYO = "yoyo"


@dataclass(frozen=True)
class Playback:
    """Immutable playback settings for a Tweener.

    Attributes:
        mode: ONCE runs a single cycle, LOOP restarts forward after each
            cycle, YOYO alternates direction every cycle.
        cycles: Cycle limit for LOOP and YOYO (None for unbounded).
    """

    mode: Mode = Mode.ONCE
    cycles: int | None = None

    def __post_init__(self) -> None:
        if self.mode is Mode.ONCE and self.cycles is not None:
            raise ValueError("cycles is only valid for LOOP and YOYO playback")
        if self.cycles is not None and self.cycles < 1:
            raise ValueError(f"cycles must be >= 1, got {self.cycles}")

    @classmethod
    def once(cls) -> Playback:
        return cls(Mode.ONCE)

    @classmethod
    def loop(cls, cycles: int | None = None) -> Playback:
        return cls(Mode.LOOP, cycles)

    @classmethod
    def yoyo(cls, cycles: int | None = None) -> Playback:
        return cls(Mode.YOYO, cycles)

    @property
    def bounded(self) -> bool:
        """True when playback stops after a known number of cycles."""
        return self.mode is Mode.ONCE or self.cycles is not None
