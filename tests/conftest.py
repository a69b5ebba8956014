from __future__ import annotations

from random import Random

import pytest

from schelling_grid.domain.grid import CellState, Grid
from schelling_grid.io.grid_file import parse_grid


class ReversingRandom(Random):
    """Random source whose shuffle reverses the list, for hand-checkable steps."""

    def shuffle(self, x) -> None:  # type: ignore[override]
        x.reverse()


@pytest.fixture
def reversing_rng() -> Random:
    return ReversingRandom()


@pytest.fixture
def make_grid():
    """Build a grid from text rows such as ``"RBE"``."""

    def _make(*rows: str) -> Grid:
        return parse_grid("\n".join(rows))

    return _make


@pytest.fixture
def random_grid():
    """Build a seeded random grid of the given size."""

    def _make(seed: int, height: int, width: int) -> Grid:
        rng = Random(seed)
        states = [CellState.RED, CellState.BLUE, CellState.EMPTY]
        return Grid.from_rows([[rng.choice(states) for _ in range(width)] for _ in range(height)])

    return _make
