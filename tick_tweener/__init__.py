"""tick-tweener - Eased interpolation between two values, driven by time deltas."""
from __future__ import annotations

from tick_tweener.config import Mode, Playback
from tick_tweener.easing import EASINGS, Easing, ease, get_easing
from tick_tweener.systems import make_tween_system
from tick_tweener.tween import Tween
from tick_tweener.tweener import Tweener
from tick_tweener.types import InvalidDuration, TweenTime, TweenValue

__all__ = [
    "Tween",
    "Tweener",
    "Easing",
    "EASINGS",
    "Mode",
    "Playback",
    "InvalidDuration",
    "TweenValue",
    "TweenTime",
    "ease",
    "get_easing",
    "make_tween_system",
]
