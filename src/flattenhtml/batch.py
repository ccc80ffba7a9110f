"""Batch processing helpers."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List, Optional

from .manager import ManagerOptions, NodeManager


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_sources(path: Path) -> List[str]:
    """Read a list of file paths and URLs from a text, CSV or JSON file."""
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix in {".txt", ""}:
        return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    if path.suffix == ".csv":
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if not reader.fieldnames or "source" not in reader.fieldnames:
                raise ValueError("CSV must contain a 'source' column")
            return [row["source"] for row in reader if row.get("source")]
    if path.suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, list):
            return [item["source"] if isinstance(item, dict) else str(item) for item in data]
        raise ValueError("JSON batch file must be a list")
    raise ValueError(f"Unsupported batch file format: {path.suffix}")


def load_manager(source: str, *, options: Optional[ManagerOptions] = None) -> NodeManager:
    """Build a :class:`NodeManager` from a URL or a path to an HTML file."""
    if is_url(source):
        return NodeManager.from_url(source, options=options)
    with Path(source).open("rb") as handle:
        return NodeManager.from_reader(handle, options=options)
