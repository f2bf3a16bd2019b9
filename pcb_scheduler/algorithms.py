from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .models import ProcessRecord, ScheduleResult, ScheduledSlice, init_procs

logger = logging.getLogger(__name__)

NO_PROCESS = -1


def run_step(records: List[ProcessRecord], runner_index: int, amount: int) -> None:
    """
    Run the record at ``runner_index`` for up to ``amount`` time units.

    The runner's remaining burst drops by the time actually used, and every
    other unfinished record waits for that same time. Invalid indices,
    non-positive amounts and finished runners are ignored.
    """
    if not records or runner_index < 0 or runner_index >= len(records) or amount <= 0:
        return

    runner = records[runner_index]
    if runner.finished:
        return

    used = min(amount, runner.remaining_burst)

    # Waiters are decided before the runner's burst is reduced.
    for i, rec in enumerate(records):
        if i != runner_index and not rec.finished:
            rec.waiting_time += used

    runner.remaining_burst = max(0, runner.remaining_burst - used)

    logger.debug("%s ran for %d (remaining %d)", runner.label, used, runner.remaining_burst)


def select_next(previous_index: int, records: Sequence[ProcessRecord]) -> int:
    """
    Pick the next record to run in round-robin order.

    Scans circularly from the record after ``previous_index``; if nothing else
    is runnable the previous record runs again. Returns ``NO_PROCESS`` once
    every record is finished. Never mutates ``records``.
    """
    n = len(records)
    if n == 0 or all(rec.finished for rec in records):
        return NO_PROCESS

    # First call, or a previous index we don't recognise.
    if previous_index < 0 or previous_index >= n:
        for i, rec in enumerate(records):
            if not rec.finished:
                return i
        return NO_PROCESS

    i = (previous_index + 1) % n
    while i != previous_index:
        if not records[i].finished:
            return i
        i = (i + 1) % n

    if not records[previous_index].finished:
        return previous_index

    # Unreachable while the any() check above holds.
    for i, rec in enumerate(records):
        if not rec.finished:
            return i
    return NO_PROCESS


def run_fcfs(records: List[ProcessRecord], timeline: Optional[List[ScheduledSlice]] = None) -> int:
    """
    First-Come First-Serve: run each record to completion in index order.

    Returns the total elapsed time.
    """
    elapsed = 0

    for i, rec in enumerate(records):
        if rec.finished:
            continue

        amount = rec.remaining_burst
        run_step(records, i, amount)

        if timeline is not None:
            timeline.append(ScheduledSlice(pid=rec.pid, start_time=elapsed, end_time=elapsed + amount))
        elapsed += amount

    logger.debug("FCFS finished %d processes in %d", len(records), elapsed)
    return elapsed


def run_rr(
    records: List[ProcessRecord],
    quantum: int,
    timeline: Optional[List[ScheduledSlice]] = None,
) -> int:
    """
    Round Robin with a fixed time quantum.

    Each selected record runs for ``min(quantum, remaining_burst)``. Returns
    the total elapsed time, or 0 for an empty batch or a non-positive quantum.
    """
    if not records or quantum <= 0:
        return 0

    elapsed = 0
    current = NO_PROCESS

    while True:
        current = select_next(current, records)
        if current == NO_PROCESS:
            break

        if records[current].finished:
            continue

        amount = min(quantum, records[current].remaining_burst)
        run_step(records, current, amount)

        if timeline is not None:
            timeline.append(
                ScheduledSlice(pid=records[current].pid, start_time=elapsed, end_time=elapsed + amount)
            )
        elapsed += amount

    logger.debug("RR(%d) finished %d processes in %d", quantum, len(records), elapsed)
    return elapsed


def _fcfs_driver(records: List[ProcessRecord], quantum: Optional[int], timeline: List[ScheduledSlice]) -> int:
    return run_fcfs(records, timeline=timeline)


def _rr_driver(records: List[ProcessRecord], quantum: Optional[int], timeline: List[ScheduledSlice]) -> int:
    if quantum is None:
        raise ValueError("Round Robin requires a quantum")
    return run_rr(records, quantum, timeline=timeline)


Driver = Callable[[List[ProcessRecord], Optional[int], List[ScheduledSlice]], int]

ALGORITHMS: Dict[str, Driver] = {
    "fcfs": _fcfs_driver,
    "rr": _rr_driver,
}

ALGORITHM_NAMES = {
    "fcfs": "FCFS",
    "rr": "Round Robin",
}


def run_algorithm(name: str, bursts: Sequence[int], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Build records from ``bursts``, run the named algorithm and bundle the result.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (use fcfs or rr)")

    records = init_procs(bursts)
    timeline: List[ScheduledSlice] = []
    elapsed = ALGORITHMS[name](records, quantum, timeline)

    return ScheduleResult(
        algorithm=ALGORITHM_NAMES[name],
        quantum=quantum if name == "rr" else None,
        records=records,
        timeline=timeline,
        elapsed=elapsed,
    )
