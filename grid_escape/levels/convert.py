"""Conversion between compact puzzle definitions and templates.

A *puzzle definition* is the plain record authors write and storage layers
keep (JSON-shaped, camelCase keys, no identities, no exit direction)::

    {
        "name": "First Steps",
        "difficulty": "tutorial",
        "gridSize": {"rows": 3, "cols": 3},
        "exit": {"row": 1, "col": 2},
        "playerCar": {"row": 1, "col": 0, "length": 2, "orientation": "horizontal"},
        "vehicles": [{"row": 0, "col": 2, "length": 2, "orientation": "vertical"}],
        "obstacles": [{"row": 2, "col": 0, "type": "tree"}],
        "validation": [{"vehicleId": "player", "row": 1, "col": 1}],
    }

:func:`hydrate_puzzle` expands it into an immutable :class:`Puzzle`:

- identities are assigned by index (see :mod:`grid_escape.levels.factories`);
- the exit direction is deduced from the grid, and an exit off the periphery
  raises :class:`grid_escape.errors.PuzzleConfigError`;
- vehicles without a color get one from :data:`VEHICLE_COLORS`, preferring
  colors the definition does not already use.

:func:`dehydrate_puzzle` is the inverse used when a template must be stored
again (e.g. after rotation in an editor).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Set, Type, TypeVar

from grid_escape.components import GridSize, Position, PuzzleMove
from grid_escape.errors import PuzzleConfigError
from grid_escape.levels.factories import (
    create_exit,
    create_obstacle,
    create_player,
    create_vehicle,
)
from grid_escape.puzzle import Puzzle
from grid_escape.types import (
    Difficulty,
    ObstacleType,
    Orientation,
    VehicleColor,
    VehicleType,
)
from grid_escape.utils.logging_config import get_logger

logger = get_logger(__name__)

VEHICLE_COLORS: List[VehicleColor] = [
    VehicleColor.BLUE,
    VehicleColor.GREEN,
    VehicleColor.YELLOW,
    VehicleColor.PURPLE,
]

E = TypeVar("E", Difficulty, ObstacleType, Orientation, VehicleColor, VehicleType)


def _require(raw: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in raw:
        raise PuzzleConfigError(f"Missing {key!r} in {where}")
    return raw[key]


def _require_int(raw: Mapping[str, Any], key: str, where: str) -> int:
    value = _require(raw, key, where)
    # bool is an int subclass but never a valid coordinate or length
    if isinstance(value, bool) or not isinstance(value, int):
        raise PuzzleConfigError(f"{key!r} must be an integer in {where}, got {value!r}")
    return value


def _enum(enum_cls: Type[E], value: Any, where: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise PuzzleConfigError(
            f"Invalid {enum_cls.__name__} {value!r} in {where}"
        ) from None


class _ColorAllocator:
    """Hands out palette colors, skipping those already in use."""

    def __init__(self, used: Set[VehicleColor]) -> None:
        self.used = set(used)
        self.index = 0

    def next(self) -> VehicleColor:
        n = len(VEHICLE_COLORS)
        for i in range(n):
            candidate = VEHICLE_COLORS[(self.index + i) % n]
            if candidate not in self.used:
                self.index = (self.index + i + 1) % n
                self.used.add(candidate)
                return candidate
        # Palette exhausted: cycle.
        color = VEHICLE_COLORS[self.index % n]
        self.index += 1
        return color


def hydrate_puzzle(raw: Mapping[str, Any], puzzle_id: str) -> Puzzle:
    """Expand a puzzle definition into a :class:`Puzzle` template.

    Args:
        raw (Mapping[str, Any]): Definition record (see module docstring).
        puzzle_id (str): Identifier for the template (file stem, storage key).

    Returns:
        Puzzle: Fully specified immutable template.

    Raises:
        PuzzleConfigError: If the exit is not on the grid periphery, a
            required key is missing, a number is not an integer, or a value
            is out of range.
    """
    where = f"puzzle {puzzle_id!r}"
    size = _require(raw, "gridSize", where)
    grid_size = GridSize(
        rows=_require_int(size, "rows", where), cols=_require_int(size, "cols", where)
    )
    exit_raw = _require(raw, "exit", where)
    exit = create_exit(
        _require_int(exit_raw, "row", where),
        _require_int(exit_raw, "col", where),
        grid_size,
    )

    player_raw = _require(raw, "playerCar", where)
    player = create_player(
        row=_require_int(player_raw, "row", where),
        col=_require_int(player_raw, "col", where),
        length=_require_int(player_raw, "length", where),
        orientation=_enum(Orientation, _require(player_raw, "orientation", where), where),
    )

    vehicles_raw: List[Mapping[str, Any]] = list(raw.get("vehicles") or [])
    allocator = _ColorAllocator(
        {_enum(VehicleColor, v["color"], where) for v in vehicles_raw if v.get("color")}
    )
    vehicles = []
    for i, v in enumerate(vehicles_raw):
        color: Optional[VehicleColor] = (
            _enum(VehicleColor, v["color"], where) if v.get("color") else allocator.next()
        )
        vehicles.append(
            create_vehicle(
                i,
                row=_require_int(v, "row", where),
                col=_require_int(v, "col", where),
                length=_require_int(v, "length", where),
                orientation=_enum(Orientation, _require(v, "orientation", where), where),
                color=color,
                type=_enum(VehicleType, v["type"], where) if v.get("type") else None,
            )
        )

    obstacles = [
        create_obstacle(
            i,
            row=_require_int(o, "row", where),
            col=_require_int(o, "col", where),
            type=_enum(ObstacleType, _require(o, "type", where), where),
        )
        for i, o in enumerate(raw.get("obstacles") or [])
    ]

    validation: Optional[List[PuzzleMove]] = None
    if raw.get("validation") is not None:
        validation = [
            PuzzleMove(
                entity_id=str(_require(m, "vehicleId", where)),
                position=Position(_require_int(m, "row", where), _require_int(m, "col", where)),
            )
            for m in raw["validation"]
        ]

    puzzle = Puzzle(
        id=puzzle_id,
        name=str(raw.get("name", puzzle_id)),
        difficulty=_enum(Difficulty, raw.get("difficulty", Difficulty.TUTORIAL), where),
        grid_size=grid_size,
        exit=exit,
        player=player,
        vehicles=vehicles,
        obstacles=obstacles,
        validation=validation,
    )
    logger.debug(
        "Hydrated %s: %dx%d grid, %d vehicles, %d obstacles",
        puzzle_id,
        grid_size.rows,
        grid_size.cols,
        len(vehicles),
        len(obstacles),
    )
    return puzzle


def dehydrate_puzzle(puzzle: Puzzle) -> Dict[str, Any]:
    """Produce the compact definition record of ``puzzle``.

    Identities and the exit direction are dropped; both are re-derived by
    :func:`hydrate_puzzle`. Assigned colors are kept so they stay stable.
    """
    raw: Dict[str, Any] = {
        "name": puzzle.name,
        "difficulty": str(puzzle.difficulty),
        "gridSize": {"rows": puzzle.grid_size.rows, "cols": puzzle.grid_size.cols},
        "exit": {"row": puzzle.exit.position.row, "col": puzzle.exit.position.col},
        "playerCar": {
            "row": puzzle.player.anchor.row,
            "col": puzzle.player.anchor.col,
            "length": puzzle.player.length,
            "orientation": str(puzzle.player.orientation),
        },
        "vehicles": [],
        "obstacles": [
            {"row": o.position.row, "col": o.position.col, "type": str(o.type)}
            for o in puzzle.obstacles
        ],
    }
    for v in puzzle.vehicles:
        entry: Dict[str, Any] = {
            "row": v.anchor.row,
            "col": v.anchor.col,
            "length": v.length,
            "orientation": str(v.orientation),
        }
        if v.color is not None:
            entry["color"] = str(v.color)
        if v.type is not None:
            entry["type"] = str(v.type)
        raw["vehicles"].append(entry)
    if puzzle.validation is not None:
        raw["validation"] = [
            {"vehicleId": m.entity_id, "row": m.position.row, "col": m.position.col}
            for m in puzzle.validation
        ]
    return raw
