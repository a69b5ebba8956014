"""Domain layer: grid model and happiness evaluation."""

from schelling_grid.domain.grid import CellState, Coordinate, Grid, GridFormatError
from schelling_grid.domain.happiness import (
    calculate_happiness,
    get_jumpable_coordinates,
    get_unhappy_coordinates,
    get_unhappy_count,
    is_happy,
    neighbors_of,
)

__all__ = [
    "CellState",
    "Coordinate",
    "Grid",
    "GridFormatError",
    "calculate_happiness",
    "get_jumpable_coordinates",
    "get_unhappy_coordinates",
    "get_unhappy_count",
    "is_happy",
    "neighbors_of",
]
