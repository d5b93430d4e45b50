from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .schema import GridSettings, LoggingSettings, PathfinderSettings, SearchSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG = CONFIG_ROOT / "pathfinding.yaml"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from disk."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(value)}")
    return value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def settings_from_dict(raw: Dict[str, Any]) -> PathfinderSettings:
    """Build PathfinderSettings from an already-parsed mapping."""
    grid_raw = _section(raw, "grid")
    search_raw = _section(raw, "search")
    log_raw = _section(raw, "logging")

    defaults = PathfinderSettings()

    grid = GridSettings(
        width=int(grid_raw.get("width", defaults.grid.width)),
        height=int(grid_raw.get("height", defaults.grid.height)),
    )

    max_expansions = search_raw.get("max_expansions", defaults.search.max_expansions)
    search = SearchSettings(
        stones_passable=bool(
            search_raw.get("stones_passable", defaults.search.stones_passable)
        ),
        max_expansions=None if max_expansions is None else int(max_expansions),
    )

    log = LoggingSettings(
        level=str(log_raw.get("level", defaults.logging.level)).upper(),
        events_path=log_raw.get("events_path", defaults.logging.events_path),
    )

    settings = PathfinderSettings(grid=grid, search=search, logging=log)
    _validate_settings(settings)
    return settings


def load_settings(path: Optional[Path] = None) -> PathfinderSettings:
    """
    Main entry point: returns resolved PathfinderSettings.

    An explicit path must exist. Without one, config/pathfinding.yaml is
    used if present, otherwise built-in defaults.
    """
    if path is None:
        if not DEFAULT_CONFIG.exists():
            logger.debug("No %s, using default settings", DEFAULT_CONFIG)
            return PathfinderSettings()
        path = DEFAULT_CONFIG

    raw = _load_yaml(Path(path))
    return settings_from_dict(raw)


def _validate_settings(settings: PathfinderSettings) -> None:
    """Minimal sanity checks."""
    if settings.grid.width <= 0 or settings.grid.height <= 0:
        raise ValueError(
            f"Grid dimensions must be positive, got "
            f"{settings.grid.width}x{settings.grid.height}"
        )
    if settings.search.max_expansions is not None and settings.search.max_expansions <= 0:
        raise ValueError(
            f"max_expansions must be positive or null, got {settings.search.max_expansions}"
        )
    if settings.logging.level not in _LEVELS:
        raise ValueError(f"Invalid logging level: {settings.logging.level}")
