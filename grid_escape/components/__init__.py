"""grid_escape.components
=======================

Aggregate import surface for the immutable value objects a puzzle is built
from. Every class here is a frozen ``@dataclass`` carrying no behavior beyond
field validation; systems in :mod:`grid_escape.systems` compute occupancy,
legality and win conditions from them.

    from grid_escape.components import Position, Vehicle, Obstacle

"""

from .exit import Exit
from .move import PuzzleMove
from .obstacle import Obstacle
from .position import GridSize, Position
from .vehicle import Vehicle

__all__ = [
    "Exit",
    "GridSize",
    "Obstacle",
    "Position",
    "PuzzleMove",
    "Vehicle",
]
