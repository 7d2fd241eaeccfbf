# tests/unit/test_grid.py

import pytest

from grid_escape.components import GridSize, Position, Vehicle
from grid_escape.errors import PuzzleConfigError
from grid_escape.types import Direction, Orientation
from grid_escape.utils.grid import (
    axis_coordinate,
    deduce_exit_direction,
    is_in_bounds,
    vehicle_cells,
    with_axis_coordinate,
)


@pytest.mark.parametrize(
    "exit, expected",
    [
        ((2, 5), Direction.RIGHT),
        ((2, 0), Direction.LEFT),
        ((4, 3), Direction.DOWN),
        ((0, 3), Direction.UP),
        # corners: columns take precedence
        ((0, 5), Direction.RIGHT),
        ((4, 0), Direction.LEFT),
    ],
)
def test_deduce_exit_direction(exit: tuple[int, int], expected: Direction) -> None:
    assert deduce_exit_direction(Position(*exit), GridSize(5, 6)) == expected


def test_deduce_exit_direction_rejects_interior_cell() -> None:
    with pytest.raises(PuzzleConfigError, match="periphery"):
        deduce_exit_direction(Position(2, 2), GridSize(5, 6))


@pytest.mark.parametrize("exit", [(2, 7), (2, 6), (-1, 3), (5, 3), (9, 1), (0, -1)])
def test_deduce_exit_direction_rejects_cells_outside_grid(exit: tuple[int, int]) -> None:
    with pytest.raises(PuzzleConfigError, match="outside"):
        deduce_exit_direction(Position(*exit), GridSize(5, 6))


def test_puzzle_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        deduce_exit_direction(Position(1, 1), GridSize(3, 3))


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, -1)])
def test_grid_size_must_be_positive(rows: int, cols: int) -> None:
    with pytest.raises(PuzzleConfigError):
        GridSize(rows, cols)


def test_vehicle_length_must_be_positive() -> None:
    with pytest.raises(PuzzleConfigError):
        Vehicle("vehicle-0", Position(0, 0), 0, Orientation.VERTICAL)


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((0, 0), True),
        ((2, 3), True),
        ((3, 0), False),
        ((0, 4), False),
        ((-1, 0), False),
        ((0, -1), False),
    ],
)
def test_is_in_bounds(pos: tuple[int, int], expected: bool) -> None:
    assert is_in_bounds(GridSize(3, 4), Position(*pos)) is expected


def test_vehicle_cells_follow_orientation() -> None:
    horizontal = Vehicle("a", Position(0, 0), 3, Orientation.HORIZONTAL)
    vertical = Vehicle("b", Position(0, 0), 2, Orientation.VERTICAL)
    assert vehicle_cells(horizontal, Position(1, 1)) == [
        Position(1, 1),
        Position(1, 2),
        Position(1, 3),
    ]
    assert vehicle_cells(vertical, Position(1, 1)) == [Position(1, 1), Position(2, 1)]


def test_axis_helpers() -> None:
    pos = Position(2, 5)
    assert axis_coordinate(Orientation.HORIZONTAL, pos) == 5
    assert axis_coordinate(Orientation.VERTICAL, pos) == 2
    assert with_axis_coordinate(Orientation.HORIZONTAL, pos, 1) == Position(2, 1)
    assert with_axis_coordinate(Orientation.VERTICAL, pos, 1) == Position(1, 5)
