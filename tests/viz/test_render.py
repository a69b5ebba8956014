"""Tests for matplotlib grid rendering."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import numpy as np
import pytest

from schelling_grid.io.grid_file import parse_grid
from schelling_grid.viz.render import grid_to_array, render_grid
from schelling_grid.viz.theme import DEFAULT_THEME, PAPER_THEME, get_theme

matplotlib.use("Agg")


def test_grid_to_array_codes() -> None:
    cells = grid_to_array(parse_grid("RB\nEE"))
    assert cells.shape == (2, 2)
    np.testing.assert_array_equal(cells, np.array([[0, 1], [2, 2]]))


@pytest.mark.parametrize("theme", [DEFAULT_THEME, PAPER_THEME])
def test_render_grid_writes_png(tmp_path: Path, theme) -> None:
    output = render_grid(
        parse_grid("RBE\nEBR\nRRB"), tmp_path / "figs" / "final.png", title="final", theme=theme
    )
    assert output.exists()
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_get_theme_case_insensitive() -> None:
    assert get_theme("PAPER") is PAPER_THEME


def test_get_theme_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown theme"):
        get_theme("neon")
