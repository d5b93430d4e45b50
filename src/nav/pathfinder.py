# A* pathfinding over PathGrid
# src/nav/pathfinder.py
"""
A* pathfinding over PathGrid.

- Manhattan distance heuristic.
- 4-directional neighbors, no diagonals.
- Per-call SearchState, so a grid can be searched any number of times.
- Optional max_expansions guard for callers that need a hard bound.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import List, Optional, Tuple

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event

from .grid import Coord, PathGrid

logger = logging.getLogger(__name__)


class PathStatus(Enum):
    FOUND = "found"
    ALREADY_AT_GOAL = "already_at_goal"
    NO_PATH = "no_path"
    EXPANSION_LIMIT = "expansion_limit"


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    status: PathStatus
    path: List[Coord] = field(default_factory=list)
    cost: float = 0
    expansions: int = 0
    crosses_obstacle: bool = False

    @property
    def success(self) -> bool:
        return self.status in (PathStatus.FOUND, PathStatus.ALREADY_AT_GOAL)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "success": self.success,
            "path": [list(c) for c in self.path],
            "cost": self.cost,
            "expansions": self.expansions,
            "crosses_obstacle": self.crosses_obstacle,
        }


@dataclass
class SearchState:
    """
    Scratch state for one search, keyed by cell index.

    open_order records when a cell first entered the open set (-1 if
    never); it is the heap tie-breaker, so among equal total scores the
    earliest-discovered cell is expanded first.
    """

    g_score: List[float]
    heuristic: List[int]
    total_score: List[float]
    predecessor: List[int]
    open_order: List[int]
    closed: List[bool]
    open_heap: List[Tuple[float, int, int]] = field(default_factory=list)
    next_order: int = 0

    @classmethod
    def for_grid(cls, grid: PathGrid) -> "SearchState":
        n = len(grid)
        return cls(
            g_score=[inf] * n,
            heuristic=[0] * n,
            total_score=[inf] * n,
            predecessor=[-1] * n,
            open_order=[-1] * n,
            closed=[False] * n,
        )

    def is_open(self, index: int) -> bool:
        return self.open_order[index] >= 0 and not self.closed[index]

    def update(self, index: int, parent: int, g: float) -> None:
        self.predecessor[index] = parent
        self.g_score[index] = g
        self.total_score[index] = g + self.heuristic[index]

    def push(self, index: int) -> None:
        if self.open_order[index] < 0:
            self.open_order[index] = self.next_order
            self.next_order += 1
        heapq.heappush(
            self.open_heap,
            (self.total_score[index], self.open_order[index], index),
        )


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance heuristic for A*."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(
    grid: PathGrid,
    start: Coord,
    goal: Coord,
    *,
    max_expansions: Optional[int] = None,
    bus: Optional[EventBus] = None,
    correlation_id: Optional[str] = None,
) -> PathfindingResult:
    """
    A* search for the lowest-cost path from start to goal on a PathGrid.

    Returns a PathfindingResult whose path excludes start and includes
    goal. An empty path means either ALREADY_AT_GOAL (start == goal) or
    a failure status; check result.status to tell them apart.

    Raises OutOfGridError if start or goal lies outside the grid.
    """
    start_idx = grid.index_of(start)
    goal_idx = grid.index_of(goal)

    _publish(
        bus,
        EventType.PATH_SEARCH_STARTED,
        "Path search started",
        {"start": list(start), "goal": list(goal)},
        correlation_id,
    )

    if start_idx == goal_idx:
        result = PathfindingResult(status=PathStatus.ALREADY_AT_GOAL)
        _finish(grid, start, goal, result, bus, correlation_id)
        return result

    state = SearchState.for_grid(grid)
    state.heuristic[start_idx] = manhattan(start, goal)
    state.update(start_idx, -1, 0)
    state.push(start_idx)

    cells = grid.cells
    expansions = 0
    result: Optional[PathfindingResult] = None

    while state.open_heap:
        f, _, current = heapq.heappop(state.open_heap)

        # Ignore stale heap entries
        if state.closed[current] or f != state.total_score[current]:
            continue

        if current == goal_idx:
            path_idx = _reconstruct_path(state, current)
            result = PathfindingResult(
                status=PathStatus.FOUND,
                path=[cells[i].coord for i in path_idx],
                cost=state.g_score[current],
                expansions=expansions,
                crosses_obstacle=any(grid.is_prohibitive(i) for i in path_idx),
            )
            break

        if max_expansions is not None and expansions >= max_expansions:
            result = PathfindingResult(
                status=PathStatus.EXPANSION_LIMIT,
                expansions=expansions,
            )
            break

        state.closed[current] = True
        expansions += 1

        for nxt in grid.neighbors(current):
            if state.closed[nxt] or not grid.is_passable(nxt):
                continue

            tentative_g = state.g_score[current] + cells[nxt].base_cost

            if not state.is_open(nxt):
                state.heuristic[nxt] = manhattan(cells[nxt].coord, goal)
                state.update(nxt, current, tentative_g)
                state.push(nxt)
            elif tentative_g < state.g_score[nxt]:
                # heuristic is fixed per cell for this goal
                state.update(nxt, current, tentative_g)
                state.push(nxt)

    if result is None:
        result = PathfindingResult(status=PathStatus.NO_PATH, expansions=expansions)

    _finish(grid, start, goal, result, bus, correlation_id)
    return result


def _reconstruct_path(state: SearchState, current: int) -> List[int]:
    """Follow predecessor links back to the start; the start itself is dropped."""
    path: List[int] = []
    while state.predecessor[current] >= 0:
        path.append(current)
        current = state.predecessor[current]
    path.reverse()
    return path


def _finish(
    grid: PathGrid,
    start: Coord,
    goal: Coord,
    result: PathfindingResult,
    bus: Optional[EventBus],
    correlation_id: Optional[str],
) -> None:
    logger.debug(
        "find_path %s -> %s on %dx%d: %s (len=%d, cost=%s, expansions=%d)",
        start,
        goal,
        grid.width,
        grid.height,
        result.status.value,
        len(result.path),
        result.cost,
        result.expansions,
    )
    event_type = EventType.PATH_FOUND if result.success else EventType.PATH_NOT_FOUND
    _publish(
        bus,
        event_type,
        f"Path search finished: {result.status.value}",
        {"start": list(start), "goal": list(goal), **result.to_dict()},
        correlation_id,
    )


def _publish(
    bus: Optional[EventBus],
    event_type: EventType,
    message: str,
    payload: dict,
    correlation_id: Optional[str],
) -> None:
    if bus is None:
        return
    log_event(
        bus=bus,
        module="nav.pathfinder",
        event_type=event_type,
        message=message,
        payload=payload,
        correlation_id=correlation_id,
    )
