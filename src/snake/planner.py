# route the snake head to the food
# src/snake/planner.py
"""
Snake planner: board snapshot -> route -> next direction.

A fresh PathGrid is built from every snapshot because the body moves
every tick; no search state survives between calls.
"""

from __future__ import annotations

import logging
from typing import Optional

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from nav.grid import CostModel, PathGrid
from nav.pathfinder import PathStatus, PathfindingResult, find_path

from .board import SnakeBoard
from .moves import Direction, can_turn, direction_between

logger = logging.getLogger(__name__)


def build_grid(
    board: SnakeBoard,
    cost_model: Optional[CostModel] = None,
    bus: Optional[EventBus] = None,
) -> PathGrid:
    grid = PathGrid(
        width=board.width,
        height=board.height,
        stones=board.stones,
        snake_body=board.body,
        cost_model=cost_model,
    )
    if bus is not None:
        log_event(
            bus=bus,
            module="snake.planner",
            event_type=EventType.GRID_BUILT,
            message="Grid built from board snapshot",
            payload={
                "width": grid.width,
                "height": grid.height,
                "stones": len(grid.stones),
                "body": len(grid.snake_body),
            },
        )
    return grid


def plan_route(
    board: SnakeBoard,
    *,
    cost_model: Optional[CostModel] = None,
    max_expansions: Optional[int] = None,
    bus: Optional[EventBus] = None,
    correlation_id: Optional[str] = None,
) -> PathfindingResult:
    """
    Search from the snake's head to the food.

    With no food on the board the result is NO_PATH with zero expansions.
    """
    if board.food is None:
        return PathfindingResult(status=PathStatus.NO_PATH)

    grid = build_grid(board, cost_model=cost_model, bus=bus)
    return find_path(
        grid,
        board.head,
        board.food,
        max_expansions=max_expansions,
        bus=bus,
        correlation_id=correlation_id,
    )


def next_direction(
    board: SnakeBoard,
    current: Optional[Direction] = None,
    **kwargs,
) -> Optional[Direction]:
    """
    First Direction of the route to the food, or None.

    None means: no food, no route, already on the food, or the first step
    would reverse the snake (only possible when the route crosses its own
    neck). The game loop then keeps its current heading.
    """
    result = plan_route(board, **kwargs)
    if result.status is not PathStatus.FOUND:
        return None

    step = direction_between(board.head, result.path[0])
    if not can_turn(current, step):
        logger.debug("Route starts by reversing %s; keeping heading", current)
        return None
    return step
