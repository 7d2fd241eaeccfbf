"""Whole-puzzle rotation.

:func:`rotate_puzzle_90cw` maps a template to its 90-degree clockwise
equivalent so an author can rotate a level without recomputing positions by
hand. For an original grid of ``R`` rows:

- the grid dimensions swap (``rows, cols -> cols, R``);
- any cell ``(r, c)`` maps to ``(c, R - 1 - r)``;
- vehicles flip orientation and keep their length. Their new anchor depends
  on the original orientation because an anchor is the topmost / leftmost
  cell: a horizontal vehicle keeps the mapped cell of its anchor, while a
  vertical vehicle takes the mapped cell of its *bottom* cell, which becomes
  the new leftmost cell;
- the exit cell maps like any cell and its direction is re-deduced from the
  rotated grid;
- validation waypoints are anchors at a point in time, so they go through
  the same orientation-aware anchor mapping, using the orientation and
  length of the vehicle they name.

Applying the rotation four times reproduces the original template exactly.
"""

from dataclasses import replace

from grid_escape.components import Exit, GridSize, Obstacle, Position, PuzzleMove, Vehicle
from grid_escape.puzzle import Puzzle
from grid_escape.types import Orientation
from grid_escape.utils.grid import deduce_exit_direction


def rotate_position(pos: Position, rows: int) -> Position:
    """Map a cell of a grid with ``rows`` rows 90 degrees clockwise."""
    return Position(pos.col, rows - 1 - pos.row)


def rotate_anchor(
    anchor: Position, length: int, orientation: Orientation, rows: int
) -> Position:
    """Rotated anchor of a vehicle of ``orientation`` and ``length`` at ``anchor``."""
    if orientation == Orientation.HORIZONTAL:
        return rotate_position(anchor, rows)
    bottom = Position(anchor.row + length - 1, anchor.col)
    return rotate_position(bottom, rows)


def _flip(orientation: Orientation) -> Orientation:
    if orientation == Orientation.HORIZONTAL:
        return Orientation.VERTICAL
    return Orientation.HORIZONTAL


def _rotate_vehicle(vehicle: Vehicle, rows: int) -> Vehicle:
    return replace(
        vehicle,
        anchor=rotate_anchor(vehicle.anchor, vehicle.length, vehicle.orientation, rows),
        orientation=_flip(vehicle.orientation),
    )


def _rotate_obstacle(obstacle: Obstacle, rows: int) -> Obstacle:
    return replace(obstacle, position=rotate_position(obstacle.position, rows))


def _rotate_move(puzzle: Puzzle, move: PuzzleMove) -> PuzzleMove:
    rows = puzzle.grid_size.rows
    vehicle = puzzle.get_vehicle(move.entity_id)
    if vehicle is None:
        # Not a vehicle: replay rejects it anyway; keep the cell mapping
        # invertible.
        return replace(move, position=rotate_position(move.position, rows))
    return replace(
        move,
        position=rotate_anchor(move.position, vehicle.length, vehicle.orientation, rows),
    )


def rotate_puzzle_90cw(puzzle: Puzzle) -> Puzzle:
    """Return ``puzzle`` rotated 90 degrees clockwise.

    Identities, lengths, colors, kinds, obstacle types and metadata are
    preserved; the input template is not modified.

    Args:
        puzzle (Puzzle): Template to rotate.

    Returns:
        Puzzle: New rotated template.
    """
    rows = puzzle.grid_size.rows
    grid_size = GridSize(rows=puzzle.grid_size.cols, cols=rows)
    exit_pos = rotate_position(puzzle.exit.position, rows)

    validation = None
    if puzzle.validation is not None:
        validation = [_rotate_move(puzzle, m) for m in puzzle.validation]

    return replace(
        puzzle,
        grid_size=grid_size,
        exit=Exit(position=exit_pos, direction=deduce_exit_direction(exit_pos, grid_size)),
        player=_rotate_vehicle(puzzle.player, rows),
        vehicles=[_rotate_vehicle(v, rows) for v in puzzle.vehicles],
        obstacles=[_rotate_obstacle(o, rows) for o in puzzle.obstacles],
        validation=validation,
    )
