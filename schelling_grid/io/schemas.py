"""Parquet schema for persisted simulation artifacts.

Every writer and reader of the per-generation log works against this column
contract.
"""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("generation", pa.int64()),
        ("unhappy_count", pa.int64()),
        ("moved", pa.int64()),
        ("red_count", pa.int64()),
        ("blue_count", pa.int64()),
        ("empty_count", pa.int64()),
        ("same_color_fraction", pa.float64()),
    ]
)
