"""Bounded rectangular grid of red, blue and empty cells.

Coordinates are ``(row, col)`` pairs, 0-indexed from the top-left corner.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

Coordinate = tuple[int, int]
"""A ``(row, col)`` position on the grid."""


class GridFormatError(ValueError):
    """Raised when rows cannot form a non-empty rectangular grid."""


class CellState(Enum):
    """Occupancy of one grid cell."""

    RED = "red"
    BLUE = "blue"
    EMPTY = "empty"

    @property
    def is_occupied(self) -> bool:
        return self is not CellState.EMPTY


@dataclass
class Grid:
    """Row-major snapshot of cell states.

    All rows have the same length. Build instances through :meth:`from_rows`
    or :meth:`empty` so the rectangular invariant is checked once at the
    boundary; the simulation core does not re-validate.
    """

    rows: list[list[CellState]]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellState]]) -> Grid:
        """Copy *rows* into a new grid, rejecting empty or ragged input."""
        if not rows or not rows[0]:
            raise GridFormatError("grid must have at least one row and one column")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise GridFormatError(
                    f"grid is not rectangular: row {i} has {len(row)} cells, expected {width}"
                )
        return cls(rows=[list(row) for row in rows])

    @classmethod
    def empty(cls, height: int, width: int) -> Grid:
        """Return a ``height`` x ``width`` grid of empty cells."""
        if height < 1 or width < 1:
            raise GridFormatError("grid dimensions must be >= 1x1")
        return cls(rows=[[CellState.EMPTY] * width for _ in range(height)])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def __getitem__(self, coord: Coordinate) -> CellState:
        row, col = coord
        return self.rows[row][col]

    def __setitem__(self, coord: Coordinate, state: CellState) -> None:
        row, col = coord
        self.rows[row][col] = state

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def copy(self) -> Grid:
        return Grid(rows=[list(row) for row in self.rows])

    def counts(self) -> Counter[CellState]:
        """Number of cells in each state (states with no cells are omitted)."""
        return Counter(state for row in self.rows for state in row)
