# PathfinderSettings and its section dataclasses
# src/env/schema.py

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GridSettings:
    """Default board dimensions when the caller does not pass any."""
    width: int = 20
    height: int = 20


@dataclass
class SearchSettings:
    """Knobs for nav.find_path."""
    stones_passable: bool = False         # False: stones are walls
    max_expansions: Optional[int] = None  # None: search until the open set is empty


@dataclass
class LoggingSettings:
    """Where and how loudly to log."""
    level: str = "INFO"
    events_path: Optional[str] = None     # JSONL monitoring log, disabled if None


@dataclass
class PathfinderSettings:
    """Resolved settings for one run."""
    grid: GridSettings = field(default_factory=GridSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
