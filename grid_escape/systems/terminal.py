"""Terminal condition system.

Sets ``state.win`` once the objective is met. The flag is only ever raised
here; it is cleared solely by rebuilding the state from the template.
"""

from dataclasses import replace

from grid_escape.objectives import exit_objective_fn
from grid_escape.state import State
from grid_escape.types import ObjectiveFn


def win_system(state: State, objective_fn: ObjectiveFn = exit_objective_fn) -> State:
    """Set ``win`` if ``objective_fn`` holds for the state (idempotent)."""
    if state.win:
        return state
    if objective_fn(state):
        return replace(state, win=True)
    return state
