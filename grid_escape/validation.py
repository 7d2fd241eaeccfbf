"""Replay-based puzzle validation.

A puzzle's validation trace is an ordered list of moves asserted to solve it.
:func:`validate_puzzle` replays the trace on a fresh
:class:`grid_escape.engine.GameEngine` and reports whether it reaches the win
state; if so the trace length becomes the puzzle's *par* score.

Validation failures are routine (authors refine puzzles iteratively) and are
always returned as a :class:`ValidationResult`, never raised. Replay is
fail-fast: the first rejected move ends it.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional

from pyrsistent import pvector

from grid_escape.components import PuzzleMove
from grid_escape.config import EngineConfig
from grid_escape.engine import GameEngine
from grid_escape.puzzle import Puzzle
from grid_escape.utils.logging_config import get_logger

logger = get_logger(__name__)

NO_TRACE_ERROR = "no trace provided"
NO_WIN_ERROR = "trace does not reach a winning state"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of replaying a validation trace.

    Attributes:
        is_valid: True iff every move applied and the final state is complete.
        par: Number of moves in the trace; only set when valid.
        error: Human readable reason; only set when invalid.
    """

    is_valid: bool
    par: Optional[int] = None
    error: Optional[str] = None


def invalid_step_error(step_index: int) -> str:
    return f"invalid move at step {step_index}"


def validate_puzzle(
    puzzle: Puzzle, config: Optional[EngineConfig] = None
) -> ValidationResult:
    """Replay ``puzzle.validation`` and score it.

    Args:
        puzzle (Puzzle): Template carrying the trace. Left untouched.
        config (EngineConfig | None): Configuration of the throwaway engine.

    Returns:
        ValidationResult: ``is_valid`` with ``par`` on success; otherwise
            ``error`` naming the first failing step (1-based) or the terminal
            reason.
    """
    if not puzzle.validation:
        return ValidationResult(is_valid=False, error=NO_TRACE_ERROR)

    engine = GameEngine(puzzle, config)
    for index, move in enumerate(puzzle.validation, start=1):
        if not engine.move_vehicle(move.entity_id, move.position):
            logger.info("Puzzle %s: trace fails at step %d", puzzle.id, index)
            return ValidationResult(is_valid=False, error=invalid_step_error(index))

    if not engine.get_state().is_complete:
        logger.info("Puzzle %s: trace does not reach the exit", puzzle.id)
        return ValidationResult(is_valid=False, error=NO_WIN_ERROR)

    logger.info("Puzzle %s: valid, par %d", puzzle.id, len(puzzle.validation))
    return ValidationResult(is_valid=True, par=len(puzzle.validation))


def record_validation(puzzle: Puzzle, moves: Iterable[PuzzleMove]) -> Puzzle:
    """Return a copy of ``puzzle`` whose validation trace is ``moves``.

    Typically fed with :meth:`GameEngine.get_move_history` after an author
    has played a fresh solution.
    """
    return replace(puzzle, validation=pvector(moves))


def score_puzzles(puzzles: Iterable[Puzzle]) -> Dict[str, ValidationResult]:
    """Validate every puzzle that carries a trace, keyed by puzzle id."""
    return {
        puzzle.id: validate_puzzle(puzzle)
        for puzzle in puzzles
        if puzzle.validation is not None
    }
