"""Grid math helpers.

Pure geometry used by occupancy, movement, hydration and rotation. Nothing
here knows about a live ``State``; callers pass the grid and anchors
explicitly so the same helpers serve templates and sessions alike.
"""

from typing import List

from grid_escape.components import GridSize, Position, Vehicle
from grid_escape.errors import PuzzleConfigError
from grid_escape.types import Direction, Orientation


def is_in_bounds(grid_size: GridSize, pos: Position) -> bool:
    """Return True if ``pos`` lies within ``[0, rows) x [0, cols)``."""
    return 0 <= pos.row < grid_size.rows and 0 <= pos.col < grid_size.cols


def vehicle_cells(vehicle: Vehicle, anchor: Position) -> List[Position]:
    """Cells ``vehicle`` would occupy with its anchor at ``anchor``."""
    if vehicle.orientation == Orientation.HORIZONTAL:
        return [Position(anchor.row, anchor.col + i) for i in range(vehicle.length)]
    return [Position(anchor.row + i, anchor.col) for i in range(vehicle.length)]


def axis_coordinate(orientation: Orientation, pos: Position) -> int:
    """Coordinate of ``pos`` along ``orientation`` (column if horizontal)."""
    return pos.col if orientation == Orientation.HORIZONTAL else pos.row


def with_axis_coordinate(
    orientation: Orientation, pos: Position, value: int
) -> Position:
    """Return ``pos`` with its coordinate along ``orientation`` set to ``value``."""
    if orientation == Orientation.HORIZONTAL:
        return Position(pos.row, value)
    return Position(value, pos.col)


def axis_limit(orientation: Orientation, grid_size: GridSize) -> int:
    """Number of cells along ``orientation`` (columns if horizontal)."""
    return grid_size.cols if orientation == Orientation.HORIZONTAL else grid_size.rows


def deduce_exit_direction(pos: Position, grid_size: GridSize) -> Direction:
    """Derive which edge an exit cell sits on.

    Columns take precedence over rows, so a corner exit resolves to ``RIGHT``
    or ``LEFT``.

    Raises:
        PuzzleConfigError: If ``pos`` lies outside the grid or is not on its
            periphery.
    """
    if not is_in_bounds(grid_size, pos):
        raise PuzzleConfigError(
            f"Exit at ({pos.row},{pos.col}) is outside the "
            f"{grid_size.rows}x{grid_size.cols} grid"
        )
    if pos.col == grid_size.cols - 1:
        return Direction.RIGHT
    if pos.col == 0:
        return Direction.LEFT
    if pos.row == grid_size.rows - 1:
        return Direction.DOWN
    if pos.row == 0:
        return Direction.UP
    raise PuzzleConfigError(
        f"Exit at ({pos.row},{pos.col}) is not on the grid periphery"
    )
