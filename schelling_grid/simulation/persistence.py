"""Parquet persistence for the per-generation simulation log."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from schelling_grid.config.types import GenerationRecord
from schelling_grid.io.schemas import GENERATION_LOG_SCHEMA


def records_to_table(records: Sequence[GenerationRecord]) -> pa.Table:
    """Convert generation records into a table matching ``GENERATION_LOG_SCHEMA``."""
    columns: dict[str, list[int | float]] = {field.name: [] for field in GENERATION_LOG_SCHEMA}
    for record in records:
        for key, value in asdict(record).items():
            columns[key].append(value)
    return pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)


def write_generation_log(records: Sequence[GenerationRecord], path: Path) -> Path:
    """Write *records* to a Parquet file at *path*, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(records_to_table(records), path)
    return path
