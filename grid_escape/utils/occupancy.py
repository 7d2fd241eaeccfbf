"""Occupancy queries.

Helpers resolving which cells are taken by which entity without putting
iteration logic into systems. All functions are pure and operate on the
immutable :class:`grid_escape.state.State` snapshot.

Performance: ``occupied_cells`` builds its index through a cache keyed on the
(hashable) template and position store, so repeated legality probes against
one snapshot (e.g. a slide-range walk) reuse a single index.
"""

from functools import lru_cache
from typing import Dict, Mapping, Optional

from grid_escape.components import Position
from grid_escape.puzzle import Puzzle
from grid_escape.state import State
from grid_escape.types import EntityID
from grid_escape.utils.grid import vehicle_cells


@lru_cache(maxsize=4096)
def _occupancy_index(
    puzzle: Puzzle,
    position_store: Mapping[EntityID, Position],
    exclude: Optional[EntityID],
) -> Mapping[Position, EntityID]:
    """Build a cell -> owner index for one snapshot.

    The position store is a persistent PMap, hashable and thus safe to use
    with ``lru_cache``; every new ``State`` produces a distinct key.
    """
    index: Dict[Position, EntityID] = {}
    for vehicle in puzzle.all_vehicles():
        if vehicle.id == exclude:
            continue
        anchor = position_store.get(vehicle.id, vehicle.anchor)
        for cell in vehicle_cells(vehicle, anchor):
            index[cell] = vehicle.id
    for obstacle in puzzle.obstacles:
        if obstacle.id == exclude:
            continue
        index[obstacle.position] = obstacle.id
    return index


def occupied_cells(
    state: State, exclude: Optional[EntityID] = None
) -> Dict[Position, EntityID]:
    """Return every occupied cell tagged with its owning entity.

    Args:
        state (State): Current snapshot.
        exclude (EntityID | None): Entity whose own cells are left out, so a
            moving vehicle does not block itself.

    Returns:
        Dict[Position, EntityID]: Fresh mapping; callers may mutate it freely.
    """
    return dict(_occupancy_index(state.puzzle, state.position, exclude))


def entity_at(state: State, pos: Position) -> Optional[EntityID]:
    """Return the identity occupying ``pos`` or ``None`` if the cell is free."""
    return _occupancy_index(state.puzzle, state.position, None).get(pos)
