"""Objective predicate functions.

The objective answers: *"Has the player's leading edge reached the exit?"*
It is a pure predicate; :func:`grid_escape.systems.terminal.win_system`
evaluates it after each applied move to set ``state.win``.

The leading edge is the player cell closest to the exit in the exit's
direction. A player whose orientation does not run toward the exit edge
(e.g. horizontal with an ``UP`` exit) can never win.
"""

from grid_escape.components import Exit, Position, Vehicle
from grid_escape.state import State
from grid_escape.types import Direction, Orientation


def player_at_exit(player: Vehicle, anchor: Position, exit: Exit) -> bool:
    """Return True if ``player`` anchored at ``anchor`` touches ``exit``.

    Args:
        player (Vehicle): Player vehicle (orientation and length are used).
        anchor (Position): Player's current anchor.
        exit (Exit): Goal cell and edge.
    """
    target = exit.position
    if player.orientation == Orientation.HORIZONTAL:
        if exit.direction == Direction.RIGHT:
            return (
                anchor.row == target.row
                and anchor.col + player.length - 1 == target.col
            )
        if exit.direction == Direction.LEFT:
            return anchor.row == target.row and anchor.col == target.col
    else:
        if exit.direction == Direction.DOWN:
            return (
                anchor.col == target.col
                and anchor.row + player.length - 1 == target.row
            )
        if exit.direction == Direction.UP:
            return anchor.col == target.col and anchor.row == target.row
    return False


def exit_objective_fn(state: State) -> bool:
    """Player's leading edge coincides with the puzzle exit."""
    player = state.puzzle.player
    return player_at_exit(player, state.position[player.id], state.puzzle.exit)
