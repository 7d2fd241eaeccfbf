from dataclasses import replace

import pytest

from grid_escape.components import Exit, Position, Vehicle
from grid_escape.objectives import exit_objective_fn, player_at_exit
from grid_escape.systems.terminal import win_system
from grid_escape.types import Direction, Orientation
from tests.test_utils import make_state, make_straight_exit_puzzle

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


@pytest.mark.parametrize(
    "orientation, length, anchor, exit, direction, expected",
    [
        # horizontal, right: trailing-to-leading edge reaches the exit column
        (H, 2, (1, 3), (1, 4), Direction.RIGHT, True),
        (H, 2, (1, 2), (1, 4), Direction.RIGHT, False),
        (H, 2, (0, 3), (1, 4), Direction.RIGHT, False),
        (H, 3, (1, 2), (1, 4), Direction.RIGHT, True),
        # horizontal, left: anchor on the exit
        (H, 2, (1, 0), (1, 0), Direction.LEFT, True),
        (H, 2, (1, 1), (1, 0), Direction.LEFT, False),
        # vertical, down
        (V, 3, (2, 2), (4, 2), Direction.DOWN, True),
        (V, 3, (1, 2), (4, 2), Direction.DOWN, False),
        (V, 3, (2, 1), (4, 2), Direction.DOWN, False),
        # vertical, up
        (V, 2, (0, 2), (0, 2), Direction.UP, True),
        (V, 2, (1, 2), (0, 2), Direction.UP, False),
        # orientation does not run toward the exit edge
        (H, 1, (0, 2), (0, 2), Direction.UP, False),
        (H, 1, (4, 2), (4, 2), Direction.DOWN, False),
        (V, 1, (2, 4), (2, 4), Direction.RIGHT, False),
        (V, 1, (2, 0), (2, 0), Direction.LEFT, False),
    ],
)
def test_player_at_exit(
    orientation: Orientation,
    length: int,
    anchor: tuple[int, int],
    exit: tuple[int, int],
    direction: Direction,
    expected: bool,
) -> None:
    player = Vehicle("player", Position(*anchor), length, orientation)
    assert (
        player_at_exit(player, Position(*anchor), Exit(Position(*exit), direction))
        is expected
    )


@pytest.mark.parametrize(
    "orientation, anchor, exit, winning",
    [
        (H, (1, 3), (1, 4), Direction.RIGHT),
        (H, (1, 0), (1, 0), Direction.LEFT),
        (V, (3, 2), (4, 2), Direction.DOWN),
        (V, (0, 2), (0, 2), Direction.UP),
    ],
)
def test_only_the_exit_direction_wins(
    orientation: Orientation,
    anchor: tuple[int, int],
    exit: tuple[int, int],
    winning: Direction,
) -> None:
    player = Vehicle("player", Position(*anchor), 2, orientation)
    for direction in Direction:
        result = player_at_exit(player, Position(*anchor), Exit(Position(*exit), direction))
        assert result is (direction == winning)


def test_win_system_sets_flag_once_objective_met() -> None:
    state = make_state(make_straight_exit_puzzle())
    assert exit_objective_fn(state) is False
    assert win_system(state) is state

    at_exit = replace(state, position=state.position.set("player", Position(1, 1)))
    assert exit_objective_fn(at_exit) is True
    won = win_system(at_exit)
    assert won.win is True
    # idempotent
    assert win_system(won) is won


def test_win_system_never_clears_flag() -> None:
    state = make_state(make_straight_exit_puzzle())
    state = replace(state, win=True)
    assert win_system(state, objective_fn=lambda s: False).win is True
