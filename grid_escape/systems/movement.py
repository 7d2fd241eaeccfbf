"""Vehicle movement system.

Legality rules for sliding a vehicle's anchor to a target position, checked
in order and short-circuiting on the first failure:

1. The identity must name a vehicle (player included). Obstacles never move.
2. The coordinate perpendicular to the vehicle's orientation must not change
   (no turning).
3. Every cell occupied at the target must lie inside the grid.
4. No cell occupied at the target may intersect another entity's cells.

Only the resting cells are checked here; callers that need to honor
interposed blockers walk one cell at a time (see
:mod:`grid_escape.systems.slide`).
"""

from dataclasses import replace

from grid_escape.components import Position
from grid_escape.state import State
from grid_escape.types import EntityID, Orientation
from grid_escape.utils.grid import is_in_bounds, vehicle_cells
from grid_escape.utils.logging_config import get_logger
from grid_escape.utils.occupancy import occupied_cells

logger = get_logger(__name__)


def can_move(state: State, entity_id: EntityID, target: Position) -> bool:
    """Return True if ``entity_id`` may rest with its anchor at ``target``.

    Never raises for an unknown identity; it is simply not movable.
    """
    vehicle = state.puzzle.get_vehicle(entity_id)
    if vehicle is None:
        return False

    current = state.position[entity_id]
    if vehicle.orientation == Orientation.HORIZONTAL and target.row != current.row:
        return False
    if vehicle.orientation == Orientation.VERTICAL and target.col != current.col:
        return False

    cells = vehicle_cells(vehicle, target)
    if not all(is_in_bounds(state.puzzle.grid_size, cell) for cell in cells):
        return False

    occupied = occupied_cells(state, exclude=entity_id)
    return not any(cell in occupied for cell in cells)


def movement_system(state: State, entity_id: EntityID, target: Position) -> State:
    """Move a vehicle's anchor to ``target`` if allowed.

    A target equal to the current anchor is a no-op and is rejected like an
    illegal move.

    Args:
        state (State): Current state.
        entity_id (EntityID): Vehicle to move.
        target (Position): Desired anchor position.

    Returns:
        State: Same state if rejected, otherwise a new state with the updated
            position. Counters and history are left to the reducer.
    """
    if not can_move(state, entity_id, target):
        logger.debug("Rejected move of %s to %s", entity_id, target)
        return state

    if state.position[entity_id] == target:
        logger.debug("Rejected no-op move of %s", entity_id)
        return state

    return replace(state, position=state.position.set(entity_id, target))
