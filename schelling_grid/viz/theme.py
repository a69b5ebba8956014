"""Visualization theme presets for grid renderers.

Themes are frozen dataclasses grouping the styling constants, so palettes can
be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    red_color: str = "#FF0000"
    blue_color: str = "#0000FF"
    empty_cell_color: str = "#FFFFFF"
    grid_line_color: str = "#CCCCCC"
    show_grid_lines: bool = True


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    red_color="#d62728",
    blue_color="#1f77b4",
    empty_cell_color="#F0F0F0",
    grid_line_color="#E0E0E0",
    show_grid_lines=False,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
