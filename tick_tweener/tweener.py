"""Tweener - drives a Tween forward with per-frame time deltas."""
from __future__ import annotations

import math
from typing import Any, Generic, Iterator

import structlog

from tick_tweener.config import Mode, Playback
from tick_tweener.tween import Tween
from tick_tweener.types import T, V, reached

logger = structlog.get_logger(__name__)


class Tweener(Generic[V, T]):
    """Stateful driver around one Tween.

    Tracks elapsed time within the current cycle, the number of completed
    cycles and whether playback has finished. advance() returns the value for
    the new position, or None once finished.

    Time past the end of a LOOP or YOYO cycle carries into the next cycle.
    Time before the start of a cycle clamps to 0.
    """

    def __init__(self, tween: Tween[V, T], playback: Playback | None = None) -> None:
        self._tween = tween
        self._playback = playback if playback is not None else Playback()
        self._zero: Any = tween.duration - tween.duration
        self._elapsed: Any = self._zero
        self._cycles = 0
        self._finished = False

    @property
    def tween(self) -> Tween[V, T]:
        return self._tween

    @property
    def playback(self) -> Playback:
        return self._playback

    @property
    def elapsed(self) -> T:
        return self._elapsed

    @property
    def cycles_completed(self) -> int:
        return self._cycles

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def reversed(self) -> bool:
        """True while a YOYO cycle runs from end back to start."""
        return self._cycle_reversed(self._cycles)

    def advance(self, delta: Any) -> V | None:
        """Move elapsed time by delta (may be negative) and return the value."""
        return self.move_to(self._elapsed + delta)

    def move_to(self, position: Any) -> V | None:
        """Jump to an absolute position within the current cycle."""
        if self._finished:
            return None

        duration = self._tween.duration
        if position < 0:
            position = self._zero

        if not reached(position, duration):
            self._elapsed = position
            return self._evaluate(position)

        if self._playback.mode is Mode.ONCE:
            completed, remainder, limit = 1, self._zero, 1
        else:
            completed, remainder = self._split(position)
            limit = self._playback.cycles

        if limit is not None and self._cycles + completed >= limit:
            self._cycles = limit
            self._elapsed = duration
            self._finished = True
            logger.debug("tween_finished", cycles=self._cycles)
            return self._boundary(limit - 1)

        self._cycles += completed
        self._elapsed = remainder
        logger.debug("tween_cycle_completed", cycles=self._cycles, carry=remainder)
        return self._boundary(self._cycles - 1)

    def reset(self) -> None:
        """Rewind to the start of the first cycle."""
        self._elapsed = self._zero
        self._cycles = 0
        self._finished = False
        logger.debug("tween_reset")

    def iter_values(self, delta: Any) -> Iterator[V]:
        """Yield advance(delta) until finished.

        Endless for unbounded loops, and for ONCE playback when delta <= 0.
        """
        while not self._finished:
            yield self.advance(delta)

    def _cycle_reversed(self, index: int) -> bool:
        return self._playback.mode is Mode.YOYO and index % 2 == 1

    def _evaluate(self, position: Any) -> V:
        if self._cycle_reversed(self._cycles):
            return self._tween.value_at(self._tween.duration - position)
        return self._tween.value_at(position)

    def _boundary(self, index: int) -> V:
        """Endpoint reached by the cycle at index."""
        if self._cycle_reversed(index):
            return self._tween.value_at(self._zero)
        return self._tween.value_at(self._tween.duration)

    def _split(self, position: Any) -> tuple[int, Any]:
        """Split a position past the boundary into (cycles completed, carry)."""
        duration = self._tween.duration
        if isinstance(position, float) and not math.isfinite(position):
            limit = self._playback.cycles
            if limit is not None:
                return max(limit - self._cycles, 1), self._zero
            return 1, self._zero
        completed = int(position // duration)
        if completed == 0:
            # Within float tolerance of the boundary.
            return 1, self._zero
        remainder = max(position - completed * duration, self._zero)
        if reached(remainder, duration):
            return completed + 1, self._zero
        return completed, remainder
