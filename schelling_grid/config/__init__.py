"""Configuration layer: constants and typed config dataclasses."""

from schelling_grid.config.constants import (
    DEFAULT_HAPPINESS_THRESHOLD,
    DEFAULT_PPM_FILENAME,
    DEFAULT_SIMULATION_COUNT,
    ISOLATED_CELL_HAPPINESS,
    RUN_UNTIL_CONVERGED,
)
from schelling_grid.config.types import (
    GenerationRecord,
    SimulationConfig,
    SimulationResult,
    TerminationReason,
)

__all__ = [
    "DEFAULT_HAPPINESS_THRESHOLD",
    "DEFAULT_PPM_FILENAME",
    "DEFAULT_SIMULATION_COUNT",
    "GenerationRecord",
    "ISOLATED_CELL_HAPPINESS",
    "RUN_UNTIL_CONVERGED",
    "SimulationConfig",
    "SimulationResult",
    "TerminationReason",
]
