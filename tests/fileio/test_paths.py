from __future__ import annotations

from pathlib import Path

from schelling_grid.io.paths import resolve_output_path


def test_relative_path_placed_under_out_dir(tmp_path: Path) -> None:
    assert resolve_output_path(Path("a/b.png"), tmp_path) == tmp_path / "a" / "b.png"


def test_absolute_path_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere.ppm"
    assert resolve_output_path(target, Path("out")) == target
