"""Reporting helpers: category count tables and CSV export."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping

import pandas as pd

from .cursor import Cursor


def category_records(cursor: Cursor) -> List[dict]:
    return [{"key": key, "count": len(cursor.select_nodes(key))} for key in cursor.keys()]


def categories_to_dataframe(cursor: Cursor) -> pd.DataFrame:
    """One row per category with the number of live nodes filed under it."""
    return pd.DataFrame(category_records(cursor), columns=["key", "count"])


def summarize_sources(counts: Mapping[str, Mapping[str, int]]) -> pd.DataFrame:
    """Combine per-source category counts into a source × key table.

    Keys missing from a source are counted as zero.
    """
    frame = pd.DataFrame.from_dict({source: dict(row) for source, row in counts.items()}, orient="index")
    frame = frame.fillna(0).astype(int)
    frame.index.name = "source"
    return frame


def export_csv(frame: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=index)
    return path


def counts_by_key(cursor: Cursor) -> Dict[str, int]:
    return {record["key"]: record["count"] for record in category_records(cursor)}
