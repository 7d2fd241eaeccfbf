"""State reducer.

This module wires the systems together to implement a single move
transition. The exported :func:`step` is the only gameplay mutation entry
point and is pure: it returns a *new* :class:`grid_escape.state.State`, or
the very same object when the move is rejected.

Ordering:

1. Reject outright if the session is complete and the config freezes
   completed sessions.
2. ``movement_system`` applies the anchor change (legality and no-op checks).
3. If the position changed, bump ``move_count`` and append to ``history``.
4. ``win_system`` evaluates the objective and raises ``win``.
"""

from dataclasses import replace

from grid_escape.components import PuzzleMove
from grid_escape.config import DEFAULT_CONFIG, EngineConfig
from grid_escape.puzzle import Puzzle
from grid_escape.state import State, initial_state
from grid_escape.systems.movement import movement_system
from grid_escape.systems.terminal import win_system
from grid_escape.utils.logging_config import get_logger

logger = get_logger(__name__)


def step(state: State, move: PuzzleMove, config: EngineConfig = DEFAULT_CONFIG) -> State:
    """Apply one move.

    Args:
        state (State): Previous immutable state.
        move (PuzzleMove): Vehicle identity and target anchor.
        config (EngineConfig): Engine behavior switches.

    Returns:
        State: Next state. The input object itself is returned when the move
            is illegal, a no-op, or the session is frozen after completion.
    """
    if state.win and config.freeze_on_complete:
        logger.debug("Rejected move of %s: puzzle already complete", move.entity_id)
        return state

    moved = movement_system(state, move.entity_id, move.position)
    if moved is state:
        return state

    moved = replace(
        moved,
        move_count=state.move_count + 1,
        history=state.history.append(move),
    )
    moved = win_system(moved)
    logger.debug(
        "Moved %s to (%d,%d), move %d",
        move.entity_id,
        move.position.row,
        move.position.col,
        moved.move_count,
    )
    if moved.win and not state.win:
        logger.info(
            "Puzzle %s complete in %d moves", moved.puzzle.id, moved.move_count
        )
    return moved


def reset_state(puzzle: Puzzle) -> State:
    """Discard all session progress and rebuild the state from ``puzzle``."""
    return initial_state(puzzle)
