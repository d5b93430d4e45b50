"""
Grid navigation for the snake agent.

Provides:
- PathGrid: dense cost grid built from stone and snake-body snapshots
- CostModel: whether stones are walls or merely prohibitive
- A* pathfinding: find_path -> PathfindingResult
"""

from __future__ import annotations

from .grid import (
    PROHIBITIVE_COST,
    CellKind,
    Coord,
    CostModel,
    NavCell,
    OutOfGridError,
    PathGrid,
    contains_coord,
)
from .pathfinder import PathStatus, PathfindingResult, find_path, manhattan

__all__ = [
    "PROHIBITIVE_COST",
    "CellKind",
    "Coord",
    "CostModel",
    "NavCell",
    "OutOfGridError",
    "PathGrid",
    "contains_coord",
    "PathStatus",
    "PathfindingResult",
    "find_path",
    "manhattan",
]
