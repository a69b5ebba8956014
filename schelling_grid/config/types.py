"""Configuration and result dataclasses for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from schelling_grid.config.constants import (
    DEFAULT_HAPPINESS_THRESHOLD,
    DEFAULT_SIMULATION_COUNT,
    MAX_HAPPINESS_THRESHOLD,
    MIN_HAPPINESS_THRESHOLD,
    RUN_UNTIL_CONVERGED,
)

if TYPE_CHECKING:
    from schelling_grid.domain.grid import Grid

__all__ = [
    "GenerationRecord",
    "SimulationConfig",
    "SimulationResult",
    "TerminationReason",
]


class TerminationReason(str, Enum):
    """Why a simulation run stopped."""

    CONVERGED = "converged"
    GENERATION_LIMIT = "generation_limit"
    GENERATION_CAP = "generation_cap"


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one simulation run.

    ``simulation_count == 0`` runs until convergence. ``max_generations``
    optionally bounds that mode; it is ignored for fixed-count runs.
    """

    happiness_threshold: int = DEFAULT_HAPPINESS_THRESHOLD
    simulation_count: int = DEFAULT_SIMULATION_COUNT
    max_generations: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if not MIN_HAPPINESS_THRESHOLD <= self.happiness_threshold <= MAX_HAPPINESS_THRESHOLD:
            raise ValueError(
                f"happiness_threshold must be in [{MIN_HAPPINESS_THRESHOLD}, "
                f"{MAX_HAPPINESS_THRESHOLD}]"
            )
        if self.simulation_count < 0:
            raise ValueError("simulation_count must be >= 0")
        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError("max_generations must be >= 0")

    @property
    def runs_until_converged(self) -> bool:
        return self.simulation_count == RUN_UNTIL_CONVERGED


@dataclass(frozen=True)
class GenerationRecord:
    """Population summary of the grid after one generation (0 = initial grid)."""

    generation: int
    unhappy_count: int
    moved: int
    red_count: int
    blue_count: int
    empty_count: int
    same_color_fraction: float


@dataclass(frozen=True)
class SimulationResult:
    """Final state and trajectory of one simulation run."""

    grid: Grid
    generations: int
    unhappy_count: int
    termination_reason: TerminationReason
    history: tuple[GenerationRecord, ...] = ()

    @property
    def converged(self) -> bool:
        return self.unhappy_count == 0
