# EventBus for pathfinder monitoring events
"""
In-process pub/sub for MonitoringEvents.

Subscribers may ask for every event or only for some EventTypes, e.g. a
JSONL log of finished searches only:

    bus.subscribe(on_done, event_types={EventType.PATH_FOUND, EventType.PATH_NOT_FOUND})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, FrozenSet, Iterable, List, Optional

from .events import EventType, MonitoringEvent

logger = logging.getLogger(__name__)

SubscriberFn = Callable[[MonitoringEvent], None]


@dataclass(frozen=True)
class _Subscription:
    fn: SubscriberFn
    event_types: Optional[FrozenSet[EventType]] = None

    def wants(self, event: MonitoringEvent) -> bool:
        return self.event_types is None or event.event_type in self.event_types


class EventBus:
    """
    Thread-safe event bus. Delivery order follows subscription order; a
    subscriber that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._subscriptions: List[_Subscription] = []
        self._lock = Lock()

    def subscribe(
        self,
        fn: SubscriberFn,
        event_types: Optional[Iterable[EventType]] = None,
    ) -> None:
        """Register `fn` for all events, or only for `event_types`."""
        types = None if event_types is None else frozenset(event_types)
        with self._lock:
            self._subscriptions.append(_Subscription(fn, types))

    def unsubscribe(self, fn: SubscriberFn) -> None:
        """Remove every subscription of `fn`; unknown callbacks are ignored."""
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s.fn != fn]

    def publish(self, event: MonitoringEvent) -> None:
        # Deliver outside the lock so subscribers may publish or unsubscribe.
        with self._lock:
            targets = [s.fn for s in self._subscriptions if s.wants(event)]

        for fn in targets:
            try:
                fn(event)
            except Exception:
                logger.exception("Monitoring subscriber %r failed", fn)

    def clear(self) -> None:
        with self._lock:
            self._subscriptions.clear()
