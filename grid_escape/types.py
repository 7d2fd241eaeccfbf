"""Common type aliases and enumerations.

``ObjectiveFn`` and ``ObserverFn`` are the two callable extension points of
the engine: the win predicate evaluated after every applied move and the
callbacks notified with each new :class:`grid_escape.state.State`.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from grid_escape.state import State

EntityID = str

ObjectiveFn = Callable[["State"], bool]
ObserverFn = Callable[["State"], None]


class Orientation(StrEnum):
    """Axis a vehicle translates along. Fixed at creation."""

    HORIZONTAL = auto()
    VERTICAL = auto()


class Direction(StrEnum):
    """Grid edge an exit sits on."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class EntityKind(StrEnum):
    """Tag of the entity variant an identity resolves to."""

    PLAYER = auto()
    VEHICLE = auto()
    OBSTACLE = auto()


class VehicleType(StrEnum):
    CAR = auto()
    TRUCK = auto()


class VehicleColor(StrEnum):
    BLUE = auto()
    GREEN = auto()
    YELLOW = auto()
    PURPLE = auto()


class ObstacleType(StrEnum):
    TREE = auto()
    SIDEWALK = auto()
    BARRIER = auto()


class Difficulty(StrEnum):
    """Descriptive difficulty tag carried by puzzle definitions."""

    TUTORIAL = auto()
    EASY = auto()
    MEDIUM = auto()
    HARD = auto()
