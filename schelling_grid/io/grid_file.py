"""Text grid loading and printing.

One line per row, one character per cell: ``R`` is red, ``B`` is blue and
any other character is empty. Grids are written back with ``E`` for empty.
"""

from __future__ import annotations

from pathlib import Path

from schelling_grid.config.constants import BLUE_SYMBOL, EMPTY_SYMBOL, RED_SYMBOL
from schelling_grid.domain.grid import CellState, Grid, GridFormatError

_CHAR_TO_CELL: dict[str, CellState] = {
    RED_SYMBOL: CellState.RED,
    BLUE_SYMBOL: CellState.BLUE,
}

_CELL_TO_CHAR: dict[CellState, str] = {
    CellState.RED: RED_SYMBOL,
    CellState.BLUE: BLUE_SYMBOL,
    CellState.EMPTY: EMPTY_SYMBOL,
}


def char_to_cell(char: str) -> CellState:
    return _CHAR_TO_CELL.get(char, CellState.EMPTY)


def cell_to_char(cell: CellState) -> str:
    return _CELL_TO_CHAR[cell]


def _split_rows(text: str) -> list[str]:
    r"""Split on ``\n`` only, dropping one trailing ``\r`` per line and blank lines."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    return [line for line in lines if line]


def parse_grid(text: str) -> Grid:
    r"""Parse grid text; blank lines are skipped, row and column order kept.

    Only ``\n`` and ``\r\n`` end a row; every other character is a cell.
    Raises :exc:`GridFormatError` for empty or non-rectangular input.
    """
    rows = [[char_to_cell(char) for char in line] for line in _split_rows(text)]
    if not rows:
        raise GridFormatError("grid text contains no rows")
    return Grid.from_rows(rows)


def load_grid(path: Path) -> Grid:
    """Read and parse the grid file at *path*.

    Undecodable bytes are replaced, so they read as empty cells.
    """
    return parse_grid(Path(path).read_text(encoding="utf-8", errors="replace"))


def format_grid(grid: Grid) -> str:
    """Render *grid* one line per row, without a trailing newline."""
    return "\n".join("".join(cell_to_char(cell) for cell in row) for row in grid.rows)
