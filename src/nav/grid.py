# dense cost grid built from obstacle snapshots
# src/nav/grid.py
"""
PathGrid: dense 2D cost grid over a snake board.

This module does not search. It only:
- Builds one NavCell per in-range coordinate from obstacle snapshots.
- Assigns traversal costs (free cells cost 1, obstacles are prohibitive).
- Exposes neighbor and membership queries for the pathfinder.

Cells live in a flat arena addressed by index (y * width + x); search
scratch state is kept elsewhere (see nav.pathfinder.SearchState).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# (x, y) integer coordinates
Coord = Tuple[int, int]

# Baseline cost of crossing an obstacle. Grids larger than this get
# width * height + 1 instead so a detour is always cheaper.
PROHIBITIVE_COST = 999_999

FREE_COST = 1


class OutOfGridError(ValueError):
    """Raised when a coordinate passed to the search lies outside the grid."""


class CellKind(Enum):
    FREE = "free"
    STONE = "stone"
    BODY = "body"


@dataclass(frozen=True)
class NavCell:
    """One grid position and its traversal cost."""

    x: int
    y: int
    base_cost: int
    kind: CellKind = CellKind.FREE

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class CostModel:
    """
    How obstacles are treated by the search.

    Both stones and snake body get the prohibitive base cost. When
    stones_passable is False, stones are also walls the search never
    enters; body cells are always crossable as a last resort.
    """

    stones_passable: bool = False


def contains_coord(coords: FrozenSet[Coord], coord: Coord) -> bool:
    """Membership test for an obstacle set."""
    return coord in coords


def _as_coord_set(coords: Iterable[Coord]) -> FrozenSet[Coord]:
    return frozenset((int(x), int(y)) for x, y in coords)


@dataclass
class PathGrid:
    """
    Dense grid of NavCells for one obstacle layout.

    Responsibilities:
    - Own exactly one NavCell per coordinate in [0, width) x [0, height).
    - Answer bounds, neighbor and passability queries.

    It does NOT:
    - Hold any per-search state (g scores, predecessors).
    - Know about food, directions or game ticks.
    """

    width: int
    height: int
    stones: Iterable[Coord] = ()
    snake_body: Iterable[Coord] = ()
    cost_model: Optional[CostModel] = None

    cells: List[NavCell] = field(init=False, default_factory=list)
    prohibitive_cost: int = field(init=False, default=PROHIBITIVE_COST)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.cost_model is None:
            self.cost_model = CostModel()
        self.prohibitive_cost = max(PROHIBITIVE_COST, self.width * self.height + 1)
        self.refresh(self.stones, self.snake_body)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def refresh(self, stones: Iterable[Coord], snake_body: Iterable[Coord]) -> None:
        """
        Re-derive every cell cost from a new obstacle snapshot.

        Out-of-range obstacle coordinates never match a cell and are
        silently ignored.
        """
        self.stones = _as_coord_set(stones)
        self.snake_body = _as_coord_set(snake_body)

        cells: List[NavCell] = []
        for y in range(self.height):
            for x in range(self.width):
                cells.append(self._make_cell(x, y))
        self.cells = cells

        logger.debug(
            "PathGrid %dx%d built: %d stones, %d body cells",
            self.width,
            self.height,
            len(self.stones),
            len(self.snake_body),
        )

    def _make_cell(self, x: int, y: int) -> NavCell:
        coord = (x, y)
        if contains_coord(self.stones, coord):
            return NavCell(x, y, self.prohibitive_cost, CellKind.STONE)
        if contains_coord(self.snake_body, coord):
            return NavCell(x, y, self.prohibitive_cost, CellKind.BODY)
        return NavCell(x, y, FREE_COST)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.cells)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, coord: Coord) -> int:
        """Arena index of a coordinate; raises OutOfGridError if out of range."""
        if not self.in_bounds(coord):
            raise OutOfGridError(
                f"Coordinate {coord} outside {self.width}x{self.height} grid"
            )
        x, y = coord
        return y * self.width + x

    def cell_at(self, coord: Coord) -> NavCell:
        return self.cells[self.index_of(coord)]

    def is_passable(self, index: int) -> bool:
        """Whether the search may enter the cell at all."""
        cell = self.cells[index]
        if cell.kind is CellKind.STONE:
            return self.cost_model.stones_passable
        return True

    def is_prohibitive(self, index: int) -> bool:
        return self.cells[index].base_cost >= self.prohibitive_cost

    def neighbors(self, index: int) -> List[int]:
        """
        Indices of the in-range 4-neighbors of a cell.

        Order is fixed: west, east, north, south.
        """
        w = self.width
        x = index % w
        y = index // w
        out: List[int] = []

        if x - 1 >= 0:
            out.append(index - 1)
        if x + 1 < w:
            out.append(index + 1)
        if y - 1 >= 0:
            out.append(index - w)
        if y + 1 < self.height:
            out.append(index + w)

        return out
