"""System factory for driving a collection of tweeners each frame."""
from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar

from tick_tweener.tweener import Tweener

K = TypeVar("K", bound=Hashable)


def make_tween_system(
    on_update: Callable[[Any, Any], None] | None = None,
    on_complete: Callable[[Any, Tweener], None] | None = None,
) -> Callable[[dict[K, Tweener], Any], dict[K, Any]]:
    """Return a system that advances every tweener in a dict by delta.

    Finished tweeners are removed from the dict before on_complete runs, so the
    callback can install a follow-up tweener under the same key.
    """

    def tween_system(tweeners: dict[K, Tweener], delta: Any) -> dict[K, Any]:
        values: dict[K, Any] = {}
        for key, tweener in list(tweeners.items()):
            value = tweener.advance(delta)
            if value is not None:
                values[key] = value
                if on_update is not None:
                    on_update(key, value)

            if tweener.finished:
                del tweeners[key]
                if on_complete is not None:
                    on_complete(key, tweener)

        return values

    return tween_system
