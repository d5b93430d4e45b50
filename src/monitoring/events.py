# path: src/monitoring/events.py
"""
Event schemas for monitoring the pathfinder.

This module defines:
- EventType enum
- MonitoringEvent (structured system events)
- LoggingEventSink, which mirrors bus events into stdlib logging

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

if TYPE_CHECKING:
    from .bus import EventBus

logger = logging.getLogger(__name__)


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed monitoring events emitted by the grid and the search."""

    # Grid construction / cost refresh
    GRID_BUILT = auto()

    # Search lifecycle
    PATH_SEARCH_STARTED = auto()
    PATH_FOUND = auto()
    PATH_NOT_FOUND = auto()

    # Generic log messages
    LOG = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Runtime event emitted by the pathfinder, the snake planner or the CLI.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("nav.pathfinder", "snake.planner")
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (start, goal, path, status)
    correlation_id: Optional[str] = None  # Groups events per game tick / session

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data


# ============================================================
# Logging sink
# ============================================================

class LoggingEventSink:
    """
    Bus subscriber that forwards events (all, or only event_types) to logging.

    Enough for quick grep-able traces without a JSONL file.
    """

    def __init__(
        self,
        bus: "EventBus",
        level: int = logging.INFO,
        event_types: Optional[Iterable[EventType]] = None,
    ) -> None:
        self._level = level
        bus.subscribe(self.emit, event_types)

    def emit(self, event: MonitoringEvent) -> None:
        logger.log(
            self._level,
            "%s [%s] %s %s",
            event.module,
            event.event_type.name,
            event.message,
            event.payload,
        )
