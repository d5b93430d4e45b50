# tests/test_nav_grid.py
"""
Tests for nav.grid.PathGrid construction, cost model and neighbor queries.
"""

from __future__ import annotations

import pytest

import nav.grid as grid_module
from nav.grid import (
    FREE_COST,
    PROHIBITIVE_COST,
    CellKind,
    CostModel,
    OutOfGridError,
    PathGrid,
    contains_coord,
)


def test_every_coordinate_has_exactly_one_cell() -> None:
    grid = PathGrid(4, 3)

    coords = [cell.coord for cell in grid.cells]

    assert len(grid) == 12
    assert sorted(coords) == sorted((x, y) for x in range(4) for y in range(3))
    for coord in coords:
        assert grid.cell_at(coord).coord == coord


def test_costs_follow_obstacles() -> None:
    grid = PathGrid(3, 3, stones=[(0, 0)], snake_body=[(1, 1), (2, 1)])

    assert grid.cell_at((0, 0)).kind is CellKind.STONE
    assert grid.cell_at((0, 0)).base_cost == grid.prohibitive_cost
    assert grid.cell_at((1, 1)).kind is CellKind.BODY
    assert grid.cell_at((2, 1)).base_cost == grid.prohibitive_cost
    assert grid.cell_at((2, 2)).kind is CellKind.FREE
    assert grid.cell_at((2, 2)).base_cost == FREE_COST


def test_stone_wins_when_listed_in_both_sets() -> None:
    grid = PathGrid(2, 2, stones=[(1, 1)], snake_body=[(1, 1)])

    assert grid.cell_at((1, 1)).kind is CellKind.STONE


def test_out_of_range_obstacles_are_ignored() -> None:
    grid = PathGrid(3, 3, stones=[(5, 5), (-1, 0)], snake_body=[(3, 0), (0, 3)])

    assert all(cell.kind is CellKind.FREE for cell in grid.cells)


def test_prohibitive_cost_exceeds_any_detour() -> None:
    grid = PathGrid(10, 10)

    assert grid.prohibitive_cost == PROHIBITIVE_COST
    assert grid.prohibitive_cost > grid.width * grid.height


def test_prohibitive_cost_grows_with_large_grids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(grid_module, "PROHIBITIVE_COST", 5)

    grid = PathGrid(4, 4)

    assert grid.prohibitive_cost == 17


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        PathGrid(width, height)


def test_neighbors_order_is_west_east_north_south() -> None:
    grid = PathGrid(3, 3)
    center = grid.index_of((1, 1))

    coords = [grid.cells[i].coord for i in grid.neighbors(center)]

    assert coords == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_clip_at_edges() -> None:
    grid = PathGrid(3, 2)

    corner = [grid.cells[i].coord for i in grid.neighbors(grid.index_of((0, 0)))]
    far = [grid.cells[i].coord for i in grid.neighbors(grid.index_of((2, 1)))]

    assert corner == [(1, 0), (0, 1)]
    assert far == [(1, 1), (2, 0)]


def test_single_cell_grid_has_no_neighbors() -> None:
    grid = PathGrid(1, 1)

    assert grid.neighbors(0) == []


def test_index_of_rejects_out_of_range() -> None:
    grid = PathGrid(3, 3)

    with pytest.raises(OutOfGridError):
        grid.index_of((3, 0))


def test_passability_depends_on_cost_model() -> None:
    walls = PathGrid(2, 1, stones=[(1, 0)], snake_body=[(0, 0)])
    crossable = PathGrid(
        2, 1, stones=[(1, 0)], cost_model=CostModel(stones_passable=True)
    )

    assert not walls.is_passable(walls.index_of((1, 0)))
    assert walls.is_passable(walls.index_of((0, 0)))
    assert crossable.is_passable(crossable.index_of((1, 0)))


def test_refresh_replaces_costs() -> None:
    grid = PathGrid(2, 2, snake_body=[(0, 0)])

    grid.refresh(stones=[], snake_body=[(1, 1)])

    assert grid.cell_at((0, 0)).kind is CellKind.FREE
    assert grid.cell_at((1, 1)).kind is CellKind.BODY
    assert contains_coord(grid.snake_body, (1, 1))
    assert not contains_coord(grid.snake_body, (0, 0))
