"""Matplotlib-based rendering of grid snapshots."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from schelling_grid.domain.grid import CellState, Grid
from schelling_grid.viz.theme import DEFAULT_THEME, Theme

# Integer codes used in the rendered array; order matches the colormap.
CELL_CODES: dict[CellState, int] = {
    CellState.RED: 0,
    CellState.BLUE: 1,
    CellState.EMPTY: 2,
}


def grid_to_array(grid: Grid) -> np.ndarray:
    """Return an (H, W) int array of :data:`CELL_CODES`."""
    return np.array([[CELL_CODES[cell] for cell in row] for row in grid.rows], dtype=int)


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 3-color colormap (red, blue, empty)."""
    cmap = ListedColormap([theme.red_color, theme.blue_color, theme.empty_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.red_color, edgecolor="gray", label="Red"),
        Patch(facecolor=theme.blue_color, edgecolor="gray", label="Blue"),
        Patch(facecolor=theme.empty_cell_color, edgecolor="gray", label="Empty"),
    ]


def _draw_cell_grid(ax: plt.Axes, cells: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Shared renderer: imshow with optional subtle grid lines on *ax*."""
    cmap, norm = _cell_cmap(theme)
    img = ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if theme.show_grid_lines:
        h, w = cells.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_grid(
    grid: Grid,
    output_path: Path,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> Path:
    """Save a PNG (or any matplotlib-supported format) of *grid*."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    cells = grid_to_array(grid)
    scale = 0.3
    fig, ax = plt.subplots(
        figsize=(max(3.0, grid.width * scale), max(3.0, grid.height * scale) + 0.6)
    )
    try:
        _draw_cell_grid(ax, cells, theme)
        if title:
            ax.set_title(title)
        ax.legend(
            handles=_build_legend_handles(theme),
            loc="upper center",
            bbox_to_anchor=(0.5, -0.02),
            ncol=3,
            frameon=False,
        )
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
