"""Engine configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Tunable engine behavior.

    Attributes:
        freeze_on_complete: Reject every move while the puzzle is complete.
            Off by default, so a completed session keeps accepting moves until
            it is reset.
    """

    freeze_on_complete: bool = False


DEFAULT_CONFIG = EngineConfig()
