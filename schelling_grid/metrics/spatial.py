"""Spatial metrics: same-color adjacency and happy fraction."""

from __future__ import annotations

from schelling_grid.domain.grid import Grid
from schelling_grid.domain.happiness import get_unhappy_count


def same_color_adjacency_fraction(grid: Grid) -> float:
    """Fraction of occupied neighbor pairs sharing the same color.

    Returns a value in [0, 1]. Returns NaN when no occupied neighbor pairs
    exist (fewer than 2 agents, or none adjacent).
    """
    same = 0
    total = 0
    for row, col in grid.coordinates():
        state = grid[(row, col)]
        if not state.is_occupied:
            continue
        # Right and down only, so each pair is visited once.
        for n_row, n_col in ((row, col + 1), (row + 1, col)):
            if not grid.in_bounds(n_row, n_col):
                continue
            neighbor = grid[(n_row, n_col)]
            if not neighbor.is_occupied:
                continue
            total += 1
            if neighbor is state:
                same += 1
    if total == 0:
        return float("nan")
    return same / total


def happy_fraction(grid: Grid, threshold: int) -> float:
    """Percentage of agents that are happy; 100.0 for a grid with no agents."""
    counts = grid.counts()
    population = sum(n for state, n in counts.items() if state.is_occupied)
    if population == 0:
        return 100.0
    return (population - get_unhappy_count(grid, threshold)) / population * 100
