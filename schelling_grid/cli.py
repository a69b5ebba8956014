"""CLI entrypoint for running a segregation simulation from a grid file.

This module owns argument parsing, config-file layering and reporting. All
domain logic lives in the extracted modules:

- ``schelling_grid.io``          – grid file loading/printing, PPM output
- ``schelling_grid.config``      – configuration dataclasses and defaults
- ``schelling_grid.simulation``  – generation stepping and run loops
- ``schelling_grid.viz``         – optional PNG rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from schelling_grid.config.constants import (
    DEFAULT_HAPPINESS_THRESHOLD,
    DEFAULT_PPM_FILENAME,
    DEFAULT_SIMULATION_COUNT,
)
from schelling_grid.config.types import SimulationConfig
from schelling_grid.domain.grid import GridFormatError
from schelling_grid.io.grid_file import format_grid, load_grid
from schelling_grid.io.paths import resolve_output_path
from schelling_grid.io.ppm import write_ppm
from schelling_grid.simulation.engine import run_simulation_detailed
from schelling_grid.viz.render import render_grid
from schelling_grid.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Value coercion and layering helpers
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    return None if raw is None else _coerce_int(raw, key)


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_optional_path(raw: object, key: str) -> Path | None:
    return None if raw is None else Path(_coerce_str(raw, key))


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _load_config_file(path: Path) -> dict[str, object]:
    """Read a JSON object of option defaults."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return data


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a Schelling segregation simulation on a grid file"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "-f", "--file", dest="grid_file", type=Path, default=None, help="Input grid file"
    )
    parser.add_argument(
        "-p",
        "--threshold",
        dest="happiness_threshold",
        type=int,
        default=None,
        help=f"Happiness threshold in percent (default {DEFAULT_HAPPINESS_THRESHOLD})",
    )
    parser.add_argument(
        "-s",
        "--simulations",
        dest="simulation_count",
        type=int,
        default=None,
        help="Number of generations; 0 runs until no agent is unhappy (default 0)",
    )
    parser.add_argument(
        "--max-generations",
        type=int,
        default=None,
        help="Upper bound on generations when running until convergence",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--ppm", type=Path, default=None, help="PPM image path")
    parser.add_argument("--png", type=Path, default=None, help="Optional PNG rendering path")
    parser.add_argument("--log", type=Path, default=None, help="Optional Parquet generation log")
    parser.add_argument(
        "--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single simulation run.

    Prints the final unhappy count and grid, writes the PPM image, and
    optionally a PNG rendering and a Parquet generation log. CLI arguments
    override config-file values; config-file values override built-in
    defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = _load_config_file(args.config)
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        except ValueError as exc:
            parser.error(str(exc))

    try:
        grid_file = _coerce_optional_path(
            _get_val(args.grid_file, "file", file_cfg, None), "file"
        )
        config = SimulationConfig(
            happiness_threshold=_coerce_int(
                _get_val(
                    args.happiness_threshold,
                    "happiness_threshold",
                    file_cfg,
                    DEFAULT_HAPPINESS_THRESHOLD,
                ),
                "happiness_threshold",
            ),
            simulation_count=_coerce_int(
                _get_val(
                    args.simulation_count, "simulation_count", file_cfg, DEFAULT_SIMULATION_COUNT
                ),
                "simulation_count",
            ),
            max_generations=_coerce_optional_int(
                _get_val(args.max_generations, "max_generations", file_cfg, None),
                "max_generations",
            ),
            seed=_coerce_optional_int(_get_val(args.seed, "seed", file_cfg, None), "seed"),
        )
        out_dir = Path(_coerce_str(_get_val(args.out_dir, "out_dir", file_cfg, "."), "out_dir"))
        ppm = Path(_coerce_str(_get_val(args.ppm, "ppm", file_cfg, DEFAULT_PPM_FILENAME), "ppm"))
        png = _coerce_optional_path(_get_val(args.png, "png", file_cfg, None), "png")
        log = _coerce_optional_path(_get_val(args.log, "log", file_cfg, None), "log")
        theme = get_theme(_coerce_str(_get_val(args.theme, "theme", file_cfg, "default"), "theme"))
    except ValueError as exc:
        parser.error(str(exc))

    if grid_file is None:
        parser.error("an input grid file is required (-f/--file or 'file' in --config)")

    try:
        grid = load_grid(grid_file)
    except FileNotFoundError:
        parser.error(f"Grid file not found: {grid_file}")
    except GridFormatError as exc:
        parser.error(f"Invalid grid file {grid_file}: {exc}")
    logger.debug("Loaded %dx%d grid from %s", grid.width, grid.height, grid_file)

    log_path = resolve_output_path(log, out_dir) if log is not None else None
    result = run_simulation_detailed(grid, config, log_path=log_path)

    print(result.unhappy_count)
    print(format_grid(result.grid))

    write_ppm(result.grid, resolve_output_path(ppm, out_dir))
    if png is not None:
        render_grid(
            result.grid,
            resolve_output_path(png, out_dir),
            title=f"generation {result.generations}",
            theme=theme,
        )


if __name__ == "__main__":
    main()
