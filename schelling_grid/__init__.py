"""Schelling segregation simulation on bounded rectangular grids."""

from schelling_grid.config.types import SimulationConfig, SimulationResult, TerminationReason
from schelling_grid.domain.grid import CellState, Grid, GridFormatError
from schelling_grid.domain.happiness import (
    calculate_happiness,
    get_jumpable_coordinates,
    get_unhappy_count,
    is_happy,
)
from schelling_grid.simulation.engine import run_simulation, run_simulation_detailed
from schelling_grid.simulation.step import run_one_generation

__all__ = [
    "CellState",
    "Grid",
    "GridFormatError",
    "SimulationConfig",
    "SimulationResult",
    "TerminationReason",
    "calculate_happiness",
    "get_jumpable_coordinates",
    "get_unhappy_count",
    "is_happy",
    "run_one_generation",
    "run_simulation",
    "run_simulation_detailed",
]
