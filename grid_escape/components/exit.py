from dataclasses import dataclass

from grid_escape.components.position import Position
from grid_escape.types import Direction


@dataclass(frozen=True)
class Exit:
    """Goal cell on the grid periphery.

    ``direction`` names the edge the exit sits on and is always derived from
    the grid (see :func:`grid_escape.utils.grid.deduce_exit_direction`),
    never supplied by puzzle definitions.
    """

    position: Position
    direction: Direction
