"""Slide range system.

Computes the inclusive interval of anchor coordinates, along a vehicle's own
axis, reachable by sliding. The walk probes one cell at a time from the
current anchor in each direction and stops at the first illegal candidate, so
a vehicle can never jump over an interposed obstacle or vehicle even though
``can_move`` only checks resting cells.

The walk assumes legality is monotonic along the axis (once blocked, blocked
further out). This holds for the rectangular occupants modelled here; a
non-rectangular occupant type would invalidate it.
"""

from dataclasses import dataclass

from grid_escape.state import State
from grid_escape.systems.movement import can_move
from grid_escape.types import EntityID
from grid_escape.utils.grid import axis_coordinate, axis_limit, with_axis_coordinate


@dataclass(frozen=True)
class SlideRange:
    """Inclusive anchor-coordinate interval along a vehicle's axis."""

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max


def slide_range(state: State, entity_id: EntityID) -> SlideRange:
    """Return the reachable anchor interval of ``entity_id``.

    Both bounds equal the current coordinate when the vehicle is boxed in.

    Raises:
        KeyError: If ``entity_id`` does not name a vehicle.
    """
    vehicle = state.puzzle.get_vehicle(entity_id)
    if vehicle is None:
        raise KeyError(entity_id)

    current = state.position[entity_id]
    start = axis_coordinate(vehicle.orientation, current)
    limit = axis_limit(vehicle.orientation, state.puzzle.grid_size)

    low = start
    while low > 0:
        candidate = with_axis_coordinate(vehicle.orientation, current, low - 1)
        if not can_move(state, entity_id, candidate):
            break
        low -= 1

    high = start
    while high + vehicle.length < limit:
        candidate = with_axis_coordinate(vehicle.orientation, current, high + 1)
        if not can_move(state, entity_id, candidate):
            break
        high += 1

    return SlideRange(min=low, max=high)
