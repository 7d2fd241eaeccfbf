"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one
session's snapshot of a puzzle after some number of moves. Systems are pure
functions that take a previous ``State`` plus inputs (e.g. a
:class:`grid_escape.components.PuzzleMove`) and return a *new* ``State``; no
mutation happens in place. The :class:`grid_escape.engine.GameEngine` merely
holds the latest snapshot, so observers and callers can never alias mutable
engine storage.

Design notes:

* ``position`` is a **persistent map** (``pyrsistent.PMap``) from vehicle
  identity to current anchor. Obstacles are immovable and are read from the
  template instead.
* ``history`` records every applied move in order; ``move_count`` always
  equals ``len(history)``.
* ``win`` is the completion flag: the objective was satisfied when last
  evaluated.

See :mod:`grid_escape.step` for how the reducer orchestrates systems.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pyrsistent import PMap, PVector, pmap, pvector

from grid_escape.components import Position, PuzzleMove
from grid_escape.puzzle import Puzzle
from grid_escape.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable per-session puzzle state.

    Attributes:
        puzzle (Puzzle): Template the session was created from (read-only, shared).
        position (PMap[EntityID, Position]): Current anchor of every vehicle.
        move_count (int): Number of moves applied so far.
        history (PVector[PuzzleMove]): Applied moves in order.
        win (bool): True if the exit objective was met after the last move.
    """

    puzzle: Puzzle
    position: PMap[EntityID, Position] = pmap()
    move_count: int = 0
    history: PVector[PuzzleMove] = pvector()
    win: bool = False

    @property
    def is_complete(self) -> bool:
        return self.win

    @property
    def description(self) -> Dict[str, Any]:
        """Plain snapshot of the state for diagnostics.

        Returns:
            Dict[str, Any]: ``puzzle`` id, ``positions`` as ``(row, col)``
            tuples, ``move_count`` and ``is_complete``.
        """
        return {
            "puzzle": self.puzzle.id,
            "positions": {
                eid: (pos.row, pos.col) for eid, pos in sorted(self.position.items())
            },
            "move_count": self.move_count,
            "is_complete": self.win,
        }


def initial_state(puzzle: Puzzle) -> State:
    """Derive the starting ``State`` of ``puzzle``.

    Every vehicle (player included) starts at its template anchor; the move
    counter is zero and the completion flag is cleared.
    """
    return State(
        puzzle=puzzle,
        position=pmap({v.id: v.anchor for v in puzzle.all_vehicles()}),
    )
