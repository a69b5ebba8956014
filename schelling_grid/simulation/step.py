"""One synchronous relocation round over the whole grid."""

from __future__ import annotations

from random import Random

from schelling_grid.domain.grid import Grid
from schelling_grid.domain.happiness import get_jumpable_coordinates, get_unhappy_coordinates


def step_with_stats(grid: Grid, threshold: int, rng: Random | None = None) -> tuple[Grid, int]:
    """Advance one generation and return ``(new_grid, moved_count)``.

    Every unhappy agent lands on one slot of a shuffled permutation of the
    jumpable coordinates (unhappy agents plus empty cells); happy agents stay
    put. All classification reads *grid* only, and *grid* is never mutated.
    """
    rng = rng if rng is not None else Random()
    jumpable = get_jumpable_coordinates(grid, threshold)
    rng.shuffle(jumpable)
    unhappy = set(get_unhappy_coordinates(grid, threshold))

    new_grid = Grid.empty(grid.height, grid.width)
    index = 0
    for coord in grid.coordinates():
        state = grid[coord]
        if coord in unhappy:
            new_grid[jumpable[index]] = state
            index += 1
        elif state.is_occupied:
            new_grid[coord] = state
    return new_grid, index


def run_one_generation(grid: Grid, threshold: int, rng: Random | None = None) -> Grid:
    """Return the grid after one relocation round.

    Pass a seeded :class:`random.Random` as *rng* for reproducible runs;
    ``None`` uses a fresh unseeded generator.
    """
    new_grid, _ = step_with_stats(grid, threshold, rng)
    return new_grid
