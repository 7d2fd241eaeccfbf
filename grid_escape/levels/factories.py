"""Convenience factory functions for authoring puzzle entities.

Identities are assigned by index (``"player"``, ``"vehicle-<i>"``,
``"obstacle-<i>"``) so that a compact puzzle definition, which carries no
identities, always hydrates to the same template.
"""

from __future__ import annotations

from typing import Optional, Sequence

from grid_escape.components import Exit, GridSize, Obstacle, Position, PuzzleMove, Vehicle
from grid_escape.puzzle import Puzzle
from grid_escape.types import (
    Difficulty,
    EntityID,
    ObstacleType,
    Orientation,
    VehicleColor,
    VehicleType,
)
from grid_escape.utils.grid import deduce_exit_direction

PLAYER_ID: EntityID = "player"


def vehicle_id(index: int) -> EntityID:
    return f"vehicle-{index}"


def obstacle_id(index: int) -> EntityID:
    return f"obstacle-{index}"


def create_player(
    row: int, col: int, length: int = 2, orientation: Orientation = Orientation.HORIZONTAL
) -> Vehicle:
    """Player vehicle anchored at ``(row, col)``."""
    return Vehicle(
        id=PLAYER_ID,
        anchor=Position(row, col),
        length=length,
        orientation=Orientation(orientation),
    )


def create_vehicle(
    index: int,
    row: int,
    col: int,
    length: int = 2,
    orientation: Orientation = Orientation.HORIZONTAL,
    color: Optional[VehicleColor] = None,
    type: Optional[VehicleType] = None,
) -> Vehicle:
    """Non-player vehicle number ``index``."""
    return Vehicle(
        id=vehicle_id(index),
        anchor=Position(row, col),
        length=length,
        orientation=Orientation(orientation),
        color=None if color is None else VehicleColor(color),
        type=None if type is None else VehicleType(type),
    )


def create_obstacle(
    index: int, row: int, col: int, type: ObstacleType = ObstacleType.TREE
) -> Obstacle:
    """Obstacle number ``index`` at ``(row, col)``."""
    return Obstacle(id=obstacle_id(index), position=Position(row, col), type=ObstacleType(type))


def create_exit(row: int, col: int, grid_size: GridSize) -> Exit:
    """Exit at ``(row, col)`` with its direction derived from ``grid_size``.

    Raises:
        PuzzleConfigError: If the cell is not on the grid periphery.
    """
    pos = Position(row, col)
    return Exit(position=pos, direction=deduce_exit_direction(pos, grid_size))


def create_puzzle(
    rows: int,
    cols: int,
    exit: Position,
    player: Vehicle,
    vehicles: Sequence[Vehicle] = (),
    obstacles: Sequence[Obstacle] = (),
    validation: Optional[Sequence[PuzzleMove]] = None,
    puzzle_id: str = "puzzle",
    name: str = "",
    difficulty: Difficulty = Difficulty.TUTORIAL,
) -> Puzzle:
    """Assemble a template, deriving the exit direction from the grid."""
    grid_size = GridSize(rows, cols)
    return Puzzle(
        id=puzzle_id,
        name=name or puzzle_id,
        difficulty=difficulty,
        grid_size=grid_size,
        exit=create_exit(exit.row, exit.col, grid_size),
        player=player,
        vehicles=list(vehicles),
        obstacles=list(obstacles),
        validation=None if validation is None else list(validation),
    )
