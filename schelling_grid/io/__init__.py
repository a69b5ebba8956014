"""I/O layer: grid files, PPM images, output paths and Parquet schemas."""

from schelling_grid.io.grid_file import (
    cell_to_char,
    char_to_cell,
    format_grid,
    load_grid,
    parse_grid,
)
from schelling_grid.io.paths import resolve_output_path
from schelling_grid.io.ppm import format_ppm, write_ppm

__all__ = [
    "cell_to_char",
    "char_to_cell",
    "format_grid",
    "format_ppm",
    "load_grid",
    "parse_grid",
    "resolve_output_path",
    "write_ppm",
]
