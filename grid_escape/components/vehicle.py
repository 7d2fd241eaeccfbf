"""Vehicle component.

A vehicle occupies ``length`` contiguous cells extending from its anchor
(topmost cell when vertical, leftmost cell when horizontal) along its
orientation axis. Orientation and length never change after creation;
gameplay only moves the anchor, and only along the orientation axis.
"""

from dataclasses import dataclass
from typing import Optional

from grid_escape.components.position import Position
from grid_escape.errors import PuzzleConfigError
from grid_escape.types import EntityID, Orientation, VehicleColor, VehicleType


@dataclass(frozen=True)
class Vehicle:
    """Movable entity definition (template position).

    Attributes:
        id: Stable identity (``"player"`` or ``"vehicle-<index>"``).
        anchor: Topmost / leftmost occupied cell at template time.
        length: Number of occupied cells (>= 1).
        orientation: Axis the vehicle may slide along.
        color: Display color; irrelevant to simulation.
        type: Display kind; irrelevant to simulation.
    """

    id: EntityID
    anchor: Position
    length: int
    orientation: Orientation
    color: Optional[VehicleColor] = None
    type: Optional[VehicleType] = None

    def __post_init__(self) -> None:
        if self.length < 1:
            raise PuzzleConfigError(
                f"Vehicle {self.id!r} must have length >= 1, got {self.length}"
            )
