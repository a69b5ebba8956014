"""Plain-text PPM (P3) image output for final grids."""

from __future__ import annotations

from pathlib import Path

from schelling_grid.config.constants import BLUE_RGB, EMPTY_RGB, PPM_MAX_COLOR, RED_RGB
from schelling_grid.domain.grid import CellState, Grid

CELL_RGB: dict[CellState, tuple[int, int, int]] = {
    CellState.RED: RED_RGB,
    CellState.BLUE: BLUE_RGB,
    CellState.EMPTY: EMPTY_RGB,
}


def format_ppm(grid: Grid) -> str:
    """Return the P3 image text: one pixel per cell, one line per grid row.

    Each RGB triplet is followed by a single space, so every pixel line ends
    with a trailing space before the newline.
    """
    lines = [f"P3 {grid.width} {grid.height} {PPM_MAX_COLOR}\n"]
    for row in grid.rows:
        pixels = "".join(" ".join(str(c) for c in CELL_RGB[cell]) + " " for cell in row)
        lines.append(pixels + "\n")
    return "".join(lines)


def write_ppm(grid: Grid, path: Path) -> Path:
    """Write *grid* as a P3 image to *path* and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_ppm(grid), encoding="ascii")
    return path
