"""Interactive puzzle engine.

:class:`GameEngine` is the stateful facade consumed by rendering, input and
authoring collaborators. It owns exactly one session: the latest immutable
:class:`grid_escape.state.State` plus a list of observers. Every mutation goes
through the pure reducer in :mod:`grid_escape.step`; the engine only swaps in
the new snapshot and fans it out to observers.

Example:

>>> from grid_escape.engine import GameEngine
>>> from grid_escape.components import Position
>>> engine = GameEngine(puzzle)  # doctest: +SKIP
>>> engine.move_vehicle("player", Position(1, 1))  # doctest: +SKIP
True

The engine is single threaded and synchronous. Observers are invoked in
registration order before ``move_vehicle`` / ``reset`` return and must not
call back into the engine's mutating methods.
"""

from typing import TYPE_CHECKING, Callable, List, Optional

from grid_escape.components import Position, PuzzleMove, Vehicle
from grid_escape.config import DEFAULT_CONFIG, EngineConfig
from grid_escape.puzzle import Puzzle
from grid_escape.state import State, initial_state
from grid_escape.step import reset_state, step
from grid_escape.systems.movement import can_move
from grid_escape.systems.slide import SlideRange, slide_range
from grid_escape.types import EntityID, ObserverFn
from grid_escape.utils.logging_config import get_logger

if TYPE_CHECKING:
    from grid_escape.validation import ValidationResult

logger = get_logger(__name__)


class GameEngine:
    """One playable session of a :class:`Puzzle`.

    Args:
        puzzle (Puzzle): Template to play. Shared read-only; never mutated.
        config (EngineConfig | None): Behavior switches; defaults to
            :data:`grid_escape.config.DEFAULT_CONFIG`.
    """

    def __init__(self, puzzle: Puzzle, config: Optional[EngineConfig] = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self._state: State = initial_state(puzzle)
        self._observers: List[ObserverFn] = []

    @property
    def puzzle(self) -> Puzzle:
        return self._state.puzzle

    def get_state(self) -> State:
        """Return the current immutable snapshot."""
        return self._state

    # -------- Observers --------

    def subscribe(self, observer: ObserverFn) -> Callable[[], None]:
        """Register ``observer`` and return a function that unregisters it.

        The returned function is idempotent.
        """
        self._observers.append(observer)
        logger.debug("Observer registered (%d total)", len(self._observers))

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self._state)

    # -------- Queries --------

    def get_vehicle(self, entity_id: EntityID) -> Optional[Vehicle]:
        return self.puzzle.get_vehicle(entity_id)

    def can_move(self, entity_id: EntityID, position: Position) -> bool:
        return can_move(self._state, entity_id, position)

    def get_slide_range(self, entity_id: EntityID) -> SlideRange:
        return slide_range(self._state, entity_id)

    def get_move_history(self) -> List[PuzzleMove]:
        """Applied moves in order, as a fresh list."""
        return list(self._state.history)

    # -------- Mutations --------

    def move_vehicle(self, entity_id: EntityID, position: Position) -> bool:
        """Slide ``entity_id`` so its anchor rests at ``position``.

        Returns:
            bool: True iff the move was applied. Rejected moves (illegal,
                no-op, or frozen after completion) leave the state untouched
                and notify nobody.
        """
        next_state = step(self._state, PuzzleMove(entity_id, position), self.config)
        if next_state is self._state:
            return False
        self._state = next_state
        self._notify()
        return True

    def reset(self) -> None:
        """Rebuild the session from the template and notify observers."""
        self._state = reset_state(self.puzzle)
        self._notify()

    @staticmethod
    def validate_puzzle(
        puzzle: Puzzle, config: Optional[EngineConfig] = None
    ) -> "ValidationResult":
        """Replay ``puzzle.validation`` on a throwaway engine.

        See :func:`grid_escape.validation.validate_puzzle`.
        """
        from grid_escape.validation import validate_puzzle

        return validate_puzzle(puzzle, config)
