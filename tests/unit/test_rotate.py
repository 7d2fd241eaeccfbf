# tests/unit/test_rotate.py

import pytest

from grid_escape.components import GridSize, Position
from grid_escape.examples.tutorial_levels import build_tutorial_levels
from grid_escape.levels.factories import create_obstacle, create_player, create_vehicle
from grid_escape.levels.rotate import rotate_anchor, rotate_position, rotate_puzzle_90cw
from grid_escape.puzzle import Puzzle
from grid_escape.types import Direction, ObstacleType, Orientation, VehicleColor
from grid_escape.validation import validate_puzzle
from tests.test_utils import H, V, make_puzzle, moves


def make_asymmetric_puzzle() -> Puzzle:
    """4 rows x 6 cols with both vehicle orientations, an obstacle and a trace."""
    return make_puzzle(
        4,
        6,
        (1, 5),
        create_player(1, 0, 2, H),
        vehicles=[
            create_vehicle(0, 0, 3, 3, V, color=VehicleColor.PURPLE),
            create_vehicle(1, 3, 1, 2, H),
        ],
        obstacles=[create_obstacle(0, 0, 0, ObstacleType.SIDEWALK)],
        validation=moves(("vehicle-0", 1, 3), ("player", 1, 1), ("vehicle-1", 3, 3)),
    )


def rotate_n(puzzle: Puzzle, n: int) -> Puzzle:
    for _ in range(n):
        puzzle = rotate_puzzle_90cw(puzzle)
    return puzzle


def test_rotate_position() -> None:
    # (r, c) -> (c, R - 1 - r)
    assert rotate_position(Position(0, 0), 4) == Position(0, 3)
    assert rotate_position(Position(3, 5), 4) == Position(5, 0)
    assert rotate_position(Position(1, 2), 4) == Position(2, 2)


def test_rotate_anchor_depends_on_orientation() -> None:
    # horizontal keeps the mapped anchor
    assert rotate_anchor(Position(1, 0), 2, Orientation.HORIZONTAL, 4) == Position(0, 2)
    # vertical takes the mapped bottom cell
    assert rotate_anchor(Position(0, 3), 3, Orientation.VERTICAL, 4) == Position(3, 1)


def test_grid_dimensions_swap() -> None:
    rotated = rotate_puzzle_90cw(make_asymmetric_puzzle())
    assert rotated.grid_size == GridSize(rows=6, cols=4)


def test_vehicles_flip_orientation_and_keep_attributes() -> None:
    original = make_asymmetric_puzzle()
    rotated = rotate_puzzle_90cw(original)

    assert rotated.player.orientation == Orientation.VERTICAL
    assert rotated.player.anchor == Position(0, 2)
    assert rotated.player.length == 2

    v0 = rotated.get_vehicle("vehicle-0")
    assert v0 is not None
    assert v0.orientation == Orientation.HORIZONTAL
    assert v0.anchor == Position(3, 1)
    assert v0.length == 3
    assert v0.color == VehicleColor.PURPLE

    v1 = rotated.get_vehicle("vehicle-1")
    assert v1 is not None
    assert v1.orientation == Orientation.VERTICAL
    assert v1.anchor == Position(1, 0)


def test_obstacles_and_exit_map_like_cells() -> None:
    rotated = rotate_puzzle_90cw(make_asymmetric_puzzle())
    assert rotated.obstacles[0].position == Position(0, 3)
    assert rotated.obstacles[0].type == ObstacleType.SIDEWALK
    # exit (1,5) on the right edge -> (5,2) on the bottom edge
    assert rotated.exit.position == Position(5, 2)
    assert rotated.exit.direction == Direction.DOWN


def test_exit_direction_is_rededuced_not_rotated() -> None:
    # corner exit: right edge before and after (columns take precedence)
    puzzle = make_puzzle(3, 3, (0, 2), create_player(0, 0, 2, H))
    rotated = rotate_puzzle_90cw(puzzle)
    assert rotated.exit.position == Position(2, 2)
    assert rotated.exit.direction == Direction.RIGHT


def test_trace_waypoints_use_vehicle_anchor_rule() -> None:
    rotated = rotate_puzzle_90cw(make_asymmetric_puzzle())
    assert rotated.validation is not None
    assert list(rotated.validation) == moves(
        ("vehicle-0", 3, 0),  # vertical: bottom cell (3,3) -> (3,0)
        ("player", 1, 2),  # horizontal: anchor (1,1) -> (1,2)
        ("vehicle-1", 3, 0),  # horizontal: anchor (3,3) -> (3,0)
    )


def test_rotation_does_not_modify_input() -> None:
    original = make_asymmetric_puzzle()
    snapshot = make_asymmetric_puzzle()
    rotate_puzzle_90cw(original)
    assert original == snapshot


def test_four_rotations_reproduce_template() -> None:
    original = make_asymmetric_puzzle()
    assert rotate_n(original, 4) == original
    for n in (1, 2, 3):
        assert rotate_n(original, n) != original


def test_four_rotations_keep_unknown_waypoints() -> None:
    original = make_puzzle(
        3,
        4,
        (1, 3),
        create_player(1, 0, 2, H),
        validation=moves(("ghost", 0, 1), ("obstacle-3", 2, 2)),
    )
    assert rotate_n(original, 4) == original


@pytest.mark.parametrize("puzzle", build_tutorial_levels(), ids=lambda p: p.id)
def test_rotated_tutorials_stay_valid(puzzle: Puzzle) -> None:
    expected = validate_puzzle(puzzle)
    assert expected.is_valid
    for n in range(4):
        result = validate_puzzle(rotate_n(puzzle, n))
        assert result == expected
    assert rotate_n(puzzle, 4) == puzzle


def test_rotated_trace_fails_at_the_same_step() -> None:
    original = make_asymmetric_puzzle()
    # step 3 slides vehicle-1 into vehicle-0's new bottom cell
    assert validate_puzzle(original).error == "invalid move at step 3"
    for n in range(1, 4):
        assert validate_puzzle(rotate_n(original, n)).error == "invalid move at step 3"
