from __future__ import annotations
import logging
from collections import defaultdict
from typing import Any, Callable, Iterable, Optional
from popups.core.popup_event import PopupEvent, PopupEventType

logger = logging.getLogger(__name__)

Subscriber = Callable[[PopupEvent], None]

class EventListener:
    """Central hub for publishing PopupEvents to subscribed callbacks.

    Subscribers can optionally specify a set of PopupEventType filters and/or a
    ``source`` (usually one popup); events not matching are not delivered.
    A coordinator juggling several popups subscribes once per popup instead of
    checking ``event.source`` in every callback.
    """

    def __init__(self):
        self._subs_all: list[Subscriber] = []
        self._subs_specific: dict[PopupEventType, list[Subscriber]] = defaultdict(list)
        # callback -> required event source (absent: any source)
        self._sources: dict[Subscriber, Any] = {}
        # Events published during a callback are queued and processed afterward
        self._queue: list[PopupEvent] = []
        self._dispatching: bool = False

    def subscribe(self, callback: Subscriber, types: Optional[Iterable[PopupEventType]] = None,
                  source: Any = None):
        if types is None:
            if callback not in self._subs_all:
                self._subs_all.append(callback)
        else:
            for t in types:
                lst = self._subs_specific[t]
                if callback not in lst:
                    lst.append(callback)
        if source is not None:
            self._sources[callback] = source

    def unsubscribe(self, callback: Subscriber):
        if callback in self._subs_all:
            self._subs_all.remove(callback)
        for lst in self._subs_specific.values():
            if callback in lst:
                lst.remove(callback)
        self._sources.pop(callback, None)

    def _accepts(self, callback: Subscriber, event: PopupEvent) -> bool:
        if callback not in self._sources:
            return True
        return event.source is self._sources[callback]

    def publish(self, event: PopupEvent):
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                ev = self._queue.pop(0)
                # All-subscribers first, then type-specific
                for cb in list(self._subs_all) + list(self._subs_specific.get(ev.type, [])):
                    if not self._accepts(cb, ev):
                        continue
                    try:
                        cb(ev)
                    except Exception:
                        logger.exception("subscriber %r failed handling %r", cb, ev)
        finally:
            self._dispatching = False

__all__ = ["EventListener", "Subscriber"]
