# JSON logger subscribing to EventBus
"""
Structured event logging for the pathfinder.

Provides:
- JsonFileLogger: subscribes to an EventBus and writes MonitoringEvents as JSONL.
- log_event: convenience helper for publishing MonitoringEvents via the EventBus.

Usage:

    from pathlib import Path
    from monitoring.bus import EventBus
    from monitoring.logger import JsonFileLogger
    from nav import PathGrid, find_path

    bus = EventBus()
    events = JsonFileLogger(Path("logs/pathfinder/events.log"), bus)
    find_path(PathGrid(5, 5), (0, 0), (4, 0), bus=bus)
    events.close()
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .bus import EventBus
from .events import EventType, MonitoringEvent

logger = logging.getLogger(__name__)


# ============================================================
# JSONL File Logger
# ============================================================

class JsonFileLogger:
    """
    JSON-lines logger for MonitoringEvent instances.

    - Subscribes to an EventBus and writes one JSON object per line.
    - UTF-8, append mode; parent directory is created if missing.
    """

    def __init__(
        self,
        path: Path,
        bus: EventBus,
        event_types: Optional[Iterable[EventType]] = None,
    ) -> None:
        self._path = path
        self._bus = bus
        self._ensure_parent_dir(path)
        self._file = path.open("a", encoding="utf-8")
        bus.subscribe(self._on_event, event_types)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def _ensure_parent_dir(path: Path) -> None:
        parent = path.parent
        if not parent.exists():
            parent.mkdir(parents=True, exist_ok=True)

    def _on_event(self, event: MonitoringEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False)
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except OSError:
            # Logging must not crash the search; report once per failure.
            logger.warning("Could not write monitoring event to %s", self._path)

    def close(self) -> None:
        """Unsubscribe and close the underlying file handle."""
        self._bus.unsubscribe(self._on_event)
        if not self._file.closed:
            self._file.close()


# ============================================================
# Convenience helper for emitting events
# ============================================================

def log_event(
    bus: EventBus,
    module: str,
    event_type: EventType,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """
    Create and publish a MonitoringEvent.

    Parameters
    ----------
    bus:
        EventBus instance to publish the event to.
    module:
        String identifying the source module ("nav.pathfinder", "snake.planner").
    event_type:
        EventType enum member describing what kind of event this is.
    message:
        Short human-readable description.
    payload:
        Structured JSON-safe data attached to this event.
    correlation_id:
        Optional ID linking related events (per tick, per session).
    """
    event = MonitoringEvent(
        ts=time.time(),
        module=module,
        event_type=event_type,
        message=message,
        payload=payload or {},
        correlation_id=correlation_id,
    )
    bus.publish(event)
