"""Obstacle component.

Immovable single-cell blocker. The ``type`` tag is purely descriptive.
"""

from dataclasses import dataclass

from grid_escape.components.position import Position
from grid_escape.types import EntityID, ObstacleType


@dataclass(frozen=True)
class Obstacle:
    """Fixed blocker occupying ``position`` for the whole session."""

    id: EntityID
    position: Position
    type: ObstacleType
