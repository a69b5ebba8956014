"""Tests for schelling_grid.domain.grid module."""

from __future__ import annotations

import pytest

from schelling_grid.domain.grid import CellState, Grid, GridFormatError

R, B, E = CellState.RED, CellState.BLUE, CellState.EMPTY


class TestGridConstruction:
    def test_from_rows_copies_input(self) -> None:
        rows = [[R, E], [B, E]]
        grid = Grid.from_rows(rows)
        rows[0][0] = B
        assert grid[(0, 0)] is R

    def test_dimensions(self) -> None:
        grid = Grid.from_rows([[R, E, B], [B, E, R]])
        assert grid.height == 2
        assert grid.width == 3

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(GridFormatError, match="not rectangular"):
            Grid.from_rows([[R, E], [B]])

    @pytest.mark.parametrize("rows", [[], [[]]])
    def test_empty_input_rejected(self, rows: list[list[CellState]]) -> None:
        with pytest.raises(GridFormatError):
            Grid.from_rows(rows)

    def test_empty_factory(self) -> None:
        grid = Grid.empty(2, 3)
        assert grid.counts() == {E: 6}

    def test_empty_factory_rejects_zero_size(self) -> None:
        with pytest.raises(GridFormatError):
            Grid.empty(0, 3)

    def test_grid_format_error_is_value_error(self) -> None:
        assert issubclass(GridFormatError, ValueError)


class TestGridAccess:
    def test_in_bounds(self) -> None:
        grid = Grid.empty(2, 3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(1, 2)
        assert not grid.in_bounds(2, 0)
        assert not grid.in_bounds(0, 3)
        assert not grid.in_bounds(-1, 0)

    def test_coordinates_row_major(self) -> None:
        grid = Grid.empty(2, 2)
        assert list(grid.coordinates()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_setitem_and_copy_independent(self) -> None:
        grid = Grid.empty(1, 2)
        clone = grid.copy()
        grid[(0, 1)] = B
        assert grid[(0, 1)] is B
        assert clone[(0, 1)] is E

    def test_equality_by_rows(self) -> None:
        assert Grid.from_rows([[R, B]]) == Grid.from_rows([[R, B]])
        assert Grid.from_rows([[R, B]]) != Grid.from_rows([[B, R]])

    def test_counts(self) -> None:
        grid = Grid.from_rows([[R, R, E], [B, E, E]])
        counts = grid.counts()
        assert counts[R] == 2
        assert counts[B] == 1
        assert counts[E] == 3


def test_is_occupied() -> None:
    assert R.is_occupied
    assert B.is_occupied
    assert not E.is_occupied
