from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class ProcessRecord:
    """
    Process control block for one simulated process.

    ``remaining_burst`` only ever decreases and ``waiting_time`` only ever
    increases while a driver runs.
    """

    pid: int
    burst_time: int
    remaining_burst: int
    waiting_time: int = 0

    @property
    def finished(self) -> bool:
        return self.remaining_burst <= 0

    @property
    def label(self) -> str:
        return f"P{self.pid}"


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    records: List[ProcessRecord] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    elapsed: int = 0


def init_procs(bursts: Optional[Sequence[int]]) -> List[ProcessRecord]:
    """
    Build one record per burst time, in input order.

    Negative bursts are kept as given; they count as already finished.
    """
    if not bursts:
        raise ValueError("At least one burst time is required")

    return [
        ProcessRecord(pid=i, burst_time=burst, remaining_burst=burst)
        for i, burst in enumerate(bursts)
    ]
