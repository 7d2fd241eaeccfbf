"""Position and grid size components.

Immutable integer grid coordinates. ``State.position`` maps every vehicle
identity to its current anchor ``Position``; obstacles keep the cell recorded
on the puzzle template.
"""

from dataclasses import dataclass

from grid_escape.errors import PuzzleConfigError


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int


@dataclass(frozen=True)
class GridSize:
    """Grid dimensions in cells. Both must be at least 1."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise PuzzleConfigError(
                f"Grid must be at least 1x1, got {self.rows}x{self.cols}"
            )
