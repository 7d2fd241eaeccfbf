"""Exceptions raised by the engine.

Illegal moves and failed validations are reported as values; the only
condition that aborts is a malformed puzzle definition.
"""


class PuzzleConfigError(ValueError):
    """Raised when a puzzle definition cannot produce a playable template.

    Examples: an exit that is not on the grid periphery, a grid smaller than
    one cell, or a vehicle shorter than one cell.
    """
