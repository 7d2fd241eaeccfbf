"""Recorded move component.

A ``PuzzleMove`` is one waypoint of a validation trace or of the engine's
move history: the anchor position ``entity_id`` was slid to.
"""

from dataclasses import dataclass

from grid_escape.components.position import Position
from grid_escape.types import EntityID


@dataclass(frozen=True)
class PuzzleMove:
    """Anchor target of a single applied (or asserted) move."""

    entity_id: EntityID
    position: Position
