"""Simulation engine: generation stepping, run loops and log persistence."""

from schelling_grid.simulation.engine import (
    run_finite_simulation,
    run_simulation,
    run_simulation_detailed,
    run_until_converged,
)
from schelling_grid.simulation.persistence import records_to_table, write_generation_log
from schelling_grid.simulation.step import run_one_generation, step_with_stats

__all__ = [
    "records_to_table",
    "run_finite_simulation",
    "run_one_generation",
    "run_simulation",
    "run_simulation_detailed",
    "run_until_converged",
    "step_with_stats",
    "write_generation_log",
]
