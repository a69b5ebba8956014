"""Output path helpers for simulation artifacts."""

from __future__ import annotations

from pathlib import Path


def resolve_output_path(path: Path, out_dir: Path) -> Path:
    """Place a relative *path* under *out_dir*; absolute paths are kept."""
    path = Path(path)
    return path if path.is_absolute() else Path(out_dir) / path
