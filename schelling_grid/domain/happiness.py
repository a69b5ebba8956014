"""Happiness evaluation and mobility classification.

A neighbor is *acceptable* when it is empty or holds the same state as the
cell being evaluated. Only the four axis-aligned neighbors inside the grid
bounds are considered.
"""

from __future__ import annotations

from schelling_grid.config.constants import ISOLATED_CELL_HAPPINESS, NEIGHBOR_OFFSETS
from schelling_grid.domain.grid import CellState, Coordinate, Grid


def neighbors_of(coord: Coordinate, grid: Grid) -> list[Coordinate]:
    """Return the in-bounds von Neumann neighbors of *coord*."""
    row, col = coord
    result: list[Coordinate] = []
    for d_row, d_col in NEIGHBOR_OFFSETS:
        n_row, n_col = row + d_row, col + d_col
        if grid.in_bounds(n_row, n_col):
            result.append((n_row, n_col))
    return result


def calculate_happiness(coord: Coordinate, grid: Grid) -> float:
    """Percentage of acceptable in-bounds neighbors around *coord*.

    The comparison uses the state at *coord* even when that cell is empty,
    so empty cells get a (meaningless but well-defined) value too. A cell
    with no in-bounds neighbors is :data:`ISOLATED_CELL_HAPPINESS`.
    """
    own_state = grid[coord]
    neighbors = neighbors_of(coord, grid)
    if not neighbors:
        return ISOLATED_CELL_HAPPINESS
    acceptable = 0
    for neighbor in neighbors:
        state = grid[neighbor]
        if state is CellState.EMPTY or state is own_state:
            acceptable += 1
    return acceptable / len(neighbors) * 100


def is_happy(coord: Coordinate, grid: Grid, threshold: int) -> bool:
    return calculate_happiness(coord, grid) >= threshold


def get_unhappy_coordinates(grid: Grid, threshold: int) -> list[Coordinate]:
    """Occupied, unhappy coordinates in row-major order."""
    return [
        coord
        for coord in grid.coordinates()
        if grid[coord].is_occupied and not is_happy(coord, grid, threshold)
    ]


def get_unhappy_count(grid: Grid, threshold: int) -> int:
    """Number of occupied cells that are not happy; empty cells never count."""
    return len(get_unhappy_coordinates(grid, threshold))


def get_jumpable_coordinates(grid: Grid, threshold: int) -> list[Coordinate]:
    """Row-major coordinates that are unhappy or empty.

    These are both the agents that must move this generation and the slots
    they may land in. Every empty cell is included regardless of its own
    computed happiness.
    """
    return [
        coord
        for coord in grid.coordinates()
        if not is_happy(coord, grid, threshold) or grid[coord] is CellState.EMPTY
    ]
