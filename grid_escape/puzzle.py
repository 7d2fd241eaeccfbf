"""Immutable puzzle template.

A :class:`Puzzle` is the static definition an engine is constructed from:
grid size, exit, the player vehicle, the other vehicles, the obstacles and an
optional validation trace. It is created once (usually by
:func:`grid_escape.levels.convert.hydrate_puzzle`) and never mutated; every
engine built from it derives its own :class:`grid_escape.state.State`.

Entities form a small tagged union. The player is a :class:`Vehicle` tagged
``EntityKind.PLAYER``, other vehicles are tagged ``EntityKind.VEHICLE`` and
obstacles ``EntityKind.OBSTACLE``. Identities are resolved through an index
built from the template, never by inspecting the identifier string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pyrsistent import PVector, pmap, pvector

from grid_escape.components import Exit, GridSize, Obstacle, PuzzleMove, Vehicle
from grid_escape.errors import PuzzleConfigError
from grid_escape.types import Difficulty, EntityID, EntityKind
from grid_escape.utils.grid import deduce_exit_direction

Entity = Union[Vehicle, Obstacle]


@dataclass(frozen=True)
class Puzzle:
    """Puzzle template.

    Attributes:
        id: Template identifier (file stem or storage key of the definition).
        name: Human readable name.
        difficulty: Descriptive difficulty tag.
        grid_size: Grid dimensions.
        exit: Goal cell and the edge it sits on.
        player: The distinguished vehicle that must reach the exit.
        vehicles: Other movable vehicles, in definition order.
        obstacles: Immovable single-cell blockers, in definition order.
        validation: Ordered moves asserted to solve the puzzle, if any.
    """

    id: str
    name: str
    difficulty: Difficulty
    grid_size: GridSize
    exit: Exit
    player: Vehicle
    vehicles: PVector[Vehicle] = pvector()
    obstacles: PVector[Obstacle] = pvector()
    validation: Optional[PVector[PuzzleMove]] = None

    def __post_init__(self) -> None:
        # Accept any sequence from callers; store persistent vectors so the
        # template stays hashable.
        object.__setattr__(self, "vehicles", pvector(self.vehicles))
        object.__setattr__(self, "obstacles", pvector(self.obstacles))
        if self.validation is not None:
            object.__setattr__(self, "validation", pvector(self.validation))
        expected = deduce_exit_direction(self.exit.position, self.grid_size)
        if self.exit.direction != expected:
            raise PuzzleConfigError(
                f"Exit at ({self.exit.position.row},{self.exit.position.col}) faces "
                f"{self.exit.direction}, expected {expected}"
            )
        _entity_index(self)

    def entity_kind(self, entity_id: EntityID) -> Optional[EntityKind]:
        """Return the variant tag for ``entity_id`` or ``None`` if unknown."""
        entry = _entity_index(self).get(entity_id)
        return entry[0] if entry is not None else None

    def get_entity(self, entity_id: EntityID) -> Optional[Entity]:
        entry = _entity_index(self).get(entity_id)
        return entry[1] if entry is not None else None

    def get_vehicle(self, entity_id: EntityID) -> Optional[Vehicle]:
        """Return the vehicle (player included) named ``entity_id``.

        Obstacles and unknown identities yield ``None``.
        """
        entry = _entity_index(self).get(entity_id)
        if entry is None or entry[0] == EntityKind.OBSTACLE:
            return None
        vehicle = entry[1]
        assert isinstance(vehicle, Vehicle)
        return vehicle

    def all_vehicles(self) -> List[Vehicle]:
        """Player first, then the other vehicles in definition order."""
        return [self.player, *self.vehicles]


@lru_cache(maxsize=1024)
def _entity_index(puzzle: Puzzle) -> Mapping[EntityID, Tuple[EntityKind, Entity]]:
    """Build the identity -> (kind, entity) index of a template.

    Templates are immutable and hashable, so the index is computed once per
    distinct template. Duplicate identities are a configuration error.
    """
    index: Dict[EntityID, Tuple[EntityKind, Entity]] = {}
    entries: List[Tuple[EntityKind, Entity]] = [(EntityKind.PLAYER, puzzle.player)]
    entries += [(EntityKind.VEHICLE, v) for v in puzzle.vehicles]
    entries += [(EntityKind.OBSTACLE, o) for o in puzzle.obstacles]
    for kind, entity in entries:
        if entity.id in index:
            raise PuzzleConfigError(f"Duplicate entity id {entity.id!r}")
        index[entity.id] = (kind, entity)
    return pmap(index)
