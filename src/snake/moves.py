# convert paths into per-tick snake directions
# src/snake/moves.py
"""
Directions and path-to-move conversion.

This module only owns:
- the four movement directions and their grid deltas
- the "no reversing onto yourself" turning rule
- path -> sequence of Directions

It does NOT tick the game or move the body.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from nav.grid import Coord


class Direction(Enum):
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.delta
        return Direction((-dx, -dy))

    def apply(self, coord: Coord) -> Coord:
        dx, dy = self.delta
        return (coord[0] + dx, coord[1] + dy)


def can_turn(current: Optional[Direction], new: Direction) -> bool:
    """A snake may take any direction except straight back the way it came."""
    return current is None or new is not current.opposite


def direction_between(a: Coord, b: Coord) -> Direction:
    """Direction of a single 4-adjacent step from a to b."""
    try:
        return Direction((b[0] - a[0], b[1] - a[1]))
    except ValueError:
        raise ValueError(f"{a} -> {b} is not a single 4-adjacent step") from None


def path_to_directions(start: Coord, path: Sequence[Coord]) -> List[Direction]:
    """
    Convert a pathfinder path (start excluded) into per-tick Directions.

    Higher layers may run only a prefix; the snake usually replans every tick.
    """
    directions: List[Direction] = []
    prev = start
    for step in path:
        directions.append(direction_between(prev, step))
        prev = step
    return directions
