from __future__ import annotations

from typing import Sequence

from .models import ProcessRecord


def average_wait(records: Sequence[ProcessRecord]) -> float:
    """
    Arithmetic mean of the accumulated wait across all records.
    """
    if not records:
        return 0.0
    return sum(r.waiting_time for r in records) / len(records)


def summarize_records(records: Sequence[ProcessRecord]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.

    Every process is ready at time 0, so turnaround is wait plus burst.
    """
    if not records:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "max_waiting": 0}

    n = len(records)
    return {
        "avg_waiting": average_wait(records),
        "avg_turnaround": sum(r.waiting_time + max(r.burst_time, 0) for r in records) / n,
        "max_waiting": max(r.waiting_time for r in records),
    }
