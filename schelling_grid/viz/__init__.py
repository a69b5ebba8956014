"""Visualization layer: themes and matplotlib grid rendering."""

from schelling_grid.viz.render import grid_to_array, render_grid
from schelling_grid.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "grid_to_array",
    "render_grid",
]
