from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List


def load_bursts(path: str | Path) -> List[int]:
    """
    Load burst times from a JSON or CSV file.

    JSON may be a list of integers or a list of objects with a ``burst_time``
    key; CSV needs a ``burst_time`` column.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[int]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of burst times")

    return [_burst_from_entry(entry) for entry in raw]


def _load_csv(path: Path) -> List[int]:
    bursts: List[int] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            bursts.append(_burst_from_entry(row))
    return bursts


def _burst_from_entry(entry) -> int:
    value = entry.get("burst_time") if isinstance(entry, dict) else entry
    try:
        # CSV cells arrive as strings; JSON values must already be integers.
        if isinstance(value, str):
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"not an integer: {value!r}")
        return value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid burst entry: {entry!r}") from exc
