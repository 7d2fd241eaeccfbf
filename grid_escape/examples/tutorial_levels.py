"""Tutorial puzzles.

A small ramp of definitions in the compact record format, each carrying a
validation trace. :func:`build_tutorial_levels` hydrates them in id order.

L0 introduces sliding, L1 a blocking vehicle, L2 obstacles and several
blockers, L3 a vertical player leaving through the bottom edge.
"""

from __future__ import annotations

from typing import Any, Dict, List

from grid_escape.levels.convert import hydrate_puzzle
from grid_escape.puzzle import Puzzle

RAW_TUTORIAL_LEVELS: Dict[str, Dict[str, Any]] = {
    "00-first-steps": {
        "name": "First Steps",
        "difficulty": "tutorial",
        "gridSize": {"rows": 3, "cols": 3},
        "exit": {"row": 1, "col": 2},
        "playerCar": {"row": 1, "col": 0, "length": 2, "orientation": "horizontal"},
        "vehicles": [],
        "obstacles": [],
        "validation": [{"vehicleId": "player", "row": 1, "col": 1}],
    },
    "01-blocked-lane": {
        "name": "Blocked Lane",
        "difficulty": "tutorial",
        "gridSize": {"rows": 4, "cols": 4},
        "exit": {"row": 1, "col": 3},
        "playerCar": {"row": 1, "col": 0, "length": 2, "orientation": "horizontal"},
        "vehicles": [{"row": 0, "col": 2, "length": 2, "orientation": "vertical"}],
        "obstacles": [],
        "validation": [
            {"vehicleId": "vehicle-0", "row": 2, "col": 2},
            {"vehicleId": "player", "row": 1, "col": 2},
        ],
    },
    "02-around-the-tree": {
        "name": "Around the Tree",
        "difficulty": "easy",
        "gridSize": {"rows": 5, "cols": 5},
        "exit": {"row": 2, "col": 4},
        "playerCar": {"row": 2, "col": 0, "length": 2, "orientation": "horizontal"},
        "vehicles": [
            {"row": 1, "col": 2, "length": 2, "orientation": "vertical", "type": "car"},
            {"row": 2, "col": 4, "length": 2, "orientation": "vertical", "type": "car"},
        ],
        "obstacles": [{"row": 3, "col": 2, "type": "tree"}],
        "validation": [
            {"vehicleId": "vehicle-0", "row": 0, "col": 2},
            {"vehicleId": "vehicle-1", "row": 3, "col": 4},
            {"vehicleId": "player", "row": 2, "col": 3},
        ],
    },
    "03-down-the-chute": {
        "name": "Down the Chute",
        "difficulty": "easy",
        "gridSize": {"rows": 4, "cols": 4},
        "exit": {"row": 3, "col": 1},
        "playerCar": {"row": 0, "col": 1, "length": 2, "orientation": "vertical"},
        "vehicles": [
            {"row": 2, "col": 0, "length": 2, "orientation": "horizontal", "type": "truck"}
        ],
        "obstacles": [{"row": 1, "col": 3, "type": "barrier"}],
        "validation": [
            {"vehicleId": "vehicle-0", "row": 2, "col": 2},
            {"vehicleId": "player", "row": 2, "col": 1},
        ],
    },
}


def build_tutorial_levels() -> List[Puzzle]:
    """Hydrate every tutorial definition, sorted by id.

    Returns:
        list[Puzzle]: Immutable templates ready for :class:`GameEngine`.
    """
    return [
        hydrate_puzzle(RAW_TUTORIAL_LEVELS[puzzle_id], puzzle_id)
        for puzzle_id in sorted(RAW_TUTORIAL_LEVELS)
    ]
