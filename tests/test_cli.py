"""Tests for cli.py: argument parsing, config layering and outputs."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pyarrow.parquet as pq
import pytest

from schelling_grid.cli import _coerce_int, _get_val, main


@pytest.fixture
def grid_file(tmp_path: Path) -> Path:
    path = tmp_path / "map.txt"
    path.write_text("RRR\nRBR\nRRR\n")
    return path


def test_threshold_zero_prints_unchanged_grid(
    grid_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["-f", str(grid_file), "-p", "0", "-s", "3", "--out-dir", str(tmp_path)])
    out = capsys.readouterr().out.splitlines()
    assert out == ["0", "RRR", "RBR", "RRR"]


def test_writes_default_ppm(grid_file: Path, tmp_path: Path) -> None:
    main(["-f", str(grid_file), "-p", "0", "--out-dir", str(tmp_path)])
    ppm = (tmp_path / "out.ppm").read_text().splitlines()
    assert ppm[0] == "P3 3 3 255"
    assert len(ppm) == 4


def test_fixed_count_reports_unhappy_count(tmp_path: Path, capsys) -> None:
    path = tmp_path / "pair.txt"
    path.write_text("RB\n")
    argv = ["--file", str(path), "--threshold", "100", "--simulations", "2", "--seed", "1"]
    main([*argv, "--out-dir", str(tmp_path)])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2"
    assert sorted(out[1]) == ["B", "R"]


def test_max_generations_caps_converge_mode(tmp_path: Path, capsys) -> None:
    path = tmp_path / "pair.txt"
    path.write_text("RB\n")
    main(["-f", str(path), "-p", "100", "--max-generations", "3", "--out-dir", str(tmp_path)])
    assert capsys.readouterr().out.splitlines()[0] == "2"


def test_config_file_layering(grid_file: Path, tmp_path: Path, capsys) -> None:
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps(
            {
                "file": str(grid_file),
                "happiness_threshold": 100,
                "simulation_count": 1,
                "out_dir": str(tmp_path),
                "ppm": "from_config.ppm",
            }
        )
    )
    # CLI threshold overrides the file value.
    main(["--config", str(config), "-p", "0"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["0", "RRR", "RBR", "RRR"]
    assert (tmp_path / "from_config.ppm").exists()


def test_png_and_log_outputs(grid_file: Path, tmp_path: Path) -> None:
    with patch("schelling_grid.cli.render_grid") as mock_render:
        main(
            [
                "-f", str(grid_file), "-p", "70", "-s", "2", "--seed", "0",
                "--out-dir", str(tmp_path), "--png", "final.png", "--log", "gen.parquet",
                "--theme", "paper",
            ]
        )
    mock_render.assert_called_once()
    assert mock_render.call_args.args[1] == tmp_path / "final.png"
    table = pq.read_table(tmp_path / "gen.parquet")
    assert table.column("generation").to_pylist() == [0, 1, 2]


def test_missing_file_argument_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--out-dir", str(tmp_path)])
    assert exc_info.value.code == 2


def test_nonexistent_grid_file_exits(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit):
        main(["-f", str(tmp_path / "nope.txt"), "--out-dir", str(tmp_path)])
    assert "Grid file not found" in capsys.readouterr().err


def test_ragged_grid_file_exits(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("RRR\nRR\n")
    with pytest.raises(SystemExit):
        main(["-f", str(path), "--out-dir", str(tmp_path)])
    assert "Invalid grid file" in capsys.readouterr().err


def test_invalid_threshold_exits(grid_file: Path, tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit):
        main(["-f", str(grid_file), "-p", "150", "--out-dir", str(tmp_path)])
    assert "happiness_threshold" in capsys.readouterr().err


def test_invalid_config_json_exits(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text("{not json")
    with pytest.raises(SystemExit):
        main(["--config", str(config)])


def test_get_val_precedence() -> None:
    assert _get_val(5, "k", {"k": 7}, 9) == 5
    assert _get_val(None, "k", {"k": 7}, 9) == 7
    assert _get_val(None, "k", {}, 9) == 9


def test_coerce_int() -> None:
    assert _coerce_int("12", "k") == 12
    assert _coerce_int(3.0, "k") == 3
    with pytest.raises(ValueError):
        _coerce_int(True, "k")
    with pytest.raises(ValueError):
        _coerce_int(2.5, "k")
    with pytest.raises(ValueError):
        _coerce_int("abc", "k")


def test_undecodable_grid_file_runs(tmp_path: Path, capsys) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"R\xe9B\nBER\n")
    main(["-f", str(path), "-p", "0", "--out-dir", str(tmp_path)])
    out = capsys.readouterr().out.splitlines()
    assert out == ["0", "REB", "BER"]
