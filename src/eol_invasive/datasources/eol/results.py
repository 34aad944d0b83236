"""Shaping per-name matches into the public result table."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from eol_invasive.schemas import RESULT_COLUMNS


def assemble_results(matches: Sequence[tuple[str, pd.DataFrame]], db: str) -> pd.DataFrame:
    """
    Combine per-name matches into one deduplicated table.

    Args:
        matches: ``(searched_name, rows)`` pairs in search order, where rows
            has ``name``/``object_id`` columns.
        db: Dataset selector recorded on every row.

    Returns:
        DataFrame with columns ``searched_name``, ``name``, ``eol_object_id``,
        ``db``. Exact duplicate rows are dropped, first occurrence kept.
    """
    rows: list[dict[str, Any]] = []
    for searched_name, frame in matches:
        for record in frame.to_dict("records"):
            rows.append(
                {
                    "searched_name": searched_name,
                    "name": record["name"],
                    "eol_object_id": record["object_id"],
                    "db": db,
                }
            )

    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    return df.drop_duplicates().reset_index(drop=True)


def count_matches(results: pd.DataFrame) -> int:
    """Number of rows that found a taxon (``eol_object_id`` is not NaN)."""
    return int(results["eol_object_id"].notna().sum())
