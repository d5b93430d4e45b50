# SnakeBoard snapshot handed to the planner
# src/snake/board.py
"""
Board snapshot for the snake planner.

The game loop (input, rendering, timers) lives outside this package; it
hands the planner an immutable SnakeBoard each tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from nav.grid import Coord


@dataclass(frozen=True)
class SnakeBoard:
    """
    One tick's view of the board.

    body[0] is the head; stones never move; food may be None between
    spawns.
    """

    width: int
    height: int
    body: Tuple[Coord, ...]
    stones: frozenset = frozenset()
    food: Optional[Coord] = None

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake body must contain at least the head")

    @property
    def head(self) -> Coord:
        return self.body[0]

    @classmethod
    def initial(
        cls,
        width: int,
        height: int,
        length: int = 2,
        stones: Iterable[Coord] = (),
        food: Optional[Coord] = None,
    ) -> "SnakeBoard":
        """
        Starting layout: the body lies on row 0, head at x = length - 1,
        tail at x = 0, moving right.
        """
        if length <= 0 or length > width:
            raise ValueError(f"Snake length {length} does not fit a {width}-wide board")
        body = tuple((x, 0) for x in range(length - 1, -1, -1))
        return cls(
            width=width,
            height=height,
            body=body,
            stones=frozenset(stones),
            food=food,
        )
