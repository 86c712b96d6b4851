from __future__ import annotations
from typing import Callable, Optional

CompletionCallback = Callable[[], None]


class CompletionChannel:
    """Single-subscriber slot notified when a popup finishes a show/hide cycle.

    Only one callback is held at a time; ``set`` replaces the previous one.
    Each show opens a numbered cycle via ``begin_cycle``; ``fire(cycle)``
    invokes the callback at most once for that cycle, even if a newer cycle
    has already begun (a popup re-shown from its own hide completion).
    The callback is kept after firing so the owner can reuse the popup
    without registering again.
    """

    def __init__(self):
        self._callback: Optional[CompletionCallback] = None
        self._cycle = 0
        self._last_fired = -1

    @property
    def has_subscriber(self) -> bool:
        return self._callback is not None

    @property
    def cycle(self) -> int:
        return self._cycle

    def fired(self, cycle: Optional[int] = None) -> bool:
        cycle = self._cycle if cycle is None else cycle
        return cycle <= self._last_fired

    def set(self, callback: Optional[CompletionCallback]) -> None:
        self._callback = callback

    def clear(self) -> None:
        self._callback = None

    def begin_cycle(self) -> int:
        self._cycle += 1
        return self._cycle

    def fire(self, cycle: Optional[int] = None) -> bool:
        """Invoke the callback for ``cycle`` (default: current) unless it already fired.

        Returns True if the callback ran.
        """
        cycle = self._cycle if cycle is None else cycle
        if cycle <= self._last_fired:
            return False
        self._last_fired = cycle
        if self._callback is None:
            return False
        self._callback()
        return True

__all__ = ["CompletionChannel", "CompletionCallback"]
