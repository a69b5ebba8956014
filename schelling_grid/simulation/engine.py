"""Simulation driver: fixed-count and run-until-converged loops."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from random import Random

from schelling_grid.config.constants import RUN_UNTIL_CONVERGED
from schelling_grid.config.types import (
    GenerationRecord,
    SimulationConfig,
    SimulationResult,
    TerminationReason,
)
from schelling_grid.domain.grid import CellState, Grid
from schelling_grid.domain.happiness import get_unhappy_count
from schelling_grid.metrics.spatial import same_color_adjacency_fraction
from schelling_grid.simulation.persistence import write_generation_log
from schelling_grid.simulation.step import step_with_stats

logger = logging.getLogger(__name__)

GenerationCallback = Callable[[int, Grid, int, int], None]
"""Called after each generation with ``(generation, grid, moved, unhappy_count)``."""


def _check_generation_args(simulation_count: int, max_generations: int | None) -> None:
    if simulation_count < 0:
        raise ValueError("simulation_count must be >= 0")
    if max_generations is not None and max_generations < 0:
        raise ValueError("max_generations must be >= 0")


def _run_generations(
    grid: Grid,
    simulation_count: int,
    threshold: int,
    rng: Random,
    max_generations: int | None = None,
    on_generation: GenerationCallback | None = None,
) -> tuple[Grid, int, int, TerminationReason]:
    """Shared run loop; returns ``(grid, generations, unhappy_count, reason)``.

    ``simulation_count == 0`` steps while any agent is unhappy, re-checking
    the freshly produced grid before every step. ``max_generations`` only
    bounds that mode.
    """
    _check_generation_args(simulation_count, max_generations)
    converge_mode = simulation_count == RUN_UNTIL_CONVERGED
    unhappy_count = get_unhappy_count(grid, threshold)
    generation = 0
    while True:
        if converge_mode:
            if unhappy_count == 0:
                reason = TerminationReason.CONVERGED
                break
            if max_generations is not None and generation >= max_generations:
                logger.warning(
                    "Stopped after %d generations with %d unhappy agents",
                    generation,
                    unhappy_count,
                )
                reason = TerminationReason.GENERATION_CAP
                break
        elif generation >= simulation_count:
            reason = TerminationReason.GENERATION_LIMIT
            break
        grid, moved = step_with_stats(grid, threshold, rng)
        generation += 1
        unhappy_count = get_unhappy_count(grid, threshold)
        logger.debug("generation=%d moved=%d unhappy=%d", generation, moved, unhappy_count)
        if on_generation is not None:
            on_generation(generation, grid, moved, unhappy_count)
    return grid, generation, unhappy_count, reason


def run_finite_simulation(
    grid: Grid, simulation_count: int, threshold: int, rng: Random | None = None
) -> Grid:
    """Apply exactly *simulation_count* generations, converged or not."""
    if simulation_count == RUN_UNTIL_CONVERGED:
        return grid
    rng = rng if rng is not None else Random()
    return _run_generations(grid, simulation_count, threshold, rng)[0]


def run_until_converged(
    grid: Grid,
    threshold: int,
    rng: Random | None = None,
    max_generations: int | None = None,
) -> Grid:
    """Step until no agent is unhappy, or until *max_generations* steps.

    Without a cap this may never return for thresholds no arrangement
    can satisfy.
    """
    rng = rng if rng is not None else Random()
    return _run_generations(grid, RUN_UNTIL_CONVERGED, threshold, rng, max_generations)[0]


def run_simulation(
    grid: Grid,
    simulation_count: int,
    threshold: int,
    rng: Random | None = None,
    max_generations: int | None = None,
) -> Grid:
    """Run the simulation and return the final grid.

    ``simulation_count == 0`` runs until convergence (optionally capped by
    *max_generations*); any positive value runs that many generations.
    """
    rng = rng if rng is not None else Random()
    return _run_generations(grid, simulation_count, threshold, rng, max_generations)[0]


def _record(grid: Grid, generation: int, unhappy_count: int, moved: int) -> GenerationRecord:
    counts = grid.counts()
    return GenerationRecord(
        generation=generation,
        unhappy_count=unhappy_count,
        moved=moved,
        red_count=counts[CellState.RED],
        blue_count=counts[CellState.BLUE],
        empty_count=counts[CellState.EMPTY],
        same_color_fraction=same_color_adjacency_fraction(grid),
    )


def run_simulation_detailed(
    grid: Grid,
    config: SimulationConfig,
    log_path: Path | None = None,
    rng: Random | None = None,
) -> SimulationResult:
    """Run the simulation described by *config* and keep per-generation records.

    Generation 0 in the history is the initial grid. When *rng* is omitted a
    generator seeded from ``config.seed`` is used. If *log_path* is given the
    history is also written there as Parquet.
    """
    rng = rng if rng is not None else Random(config.seed)
    threshold = config.happiness_threshold
    history = [_record(grid, 0, get_unhappy_count(grid, threshold), 0)]

    def _on_generation(generation: int, new_grid: Grid, moved: int, unhappy: int) -> None:
        history.append(_record(new_grid, generation, unhappy, moved))

    grid, generations, unhappy_count, reason = _run_generations(
        grid,
        config.simulation_count,
        threshold,
        rng,
        config.max_generations,
        on_generation=_on_generation,
    )

    logger.info(
        "Simulation finished: reason=%s generations=%d unhappy=%d",
        reason.value,
        generations,
        unhappy_count,
    )
    if log_path is not None:
        write_generation_log(history, log_path)
        logger.info("Wrote generation log to %s", log_path)

    return SimulationResult(
        grid=grid,
        generations=generations,
        unhappy_count=unhappy_count,
        termination_reason=reason,
        history=tuple(history),
    )
