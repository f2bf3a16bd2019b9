from pcb_scheduler.algorithms import run_fcfs, run_rr
from pcb_scheduler.metrics import average_wait, summarize_records
from pcb_scheduler.models import init_procs


def test_average_wait_fcfs():
    procs = init_procs([5, 3, 8])
    run_fcfs(procs)
    assert f"{average_wait(procs):.2f}" == "4.33"


def test_average_wait_rr():
    procs = init_procs([5, 3, 8])
    run_rr(procs, 4)
    assert f"{average_wait(procs):.2f}" == "6.33"


def test_average_wait_empty():
    assert average_wait([]) == 0.0


def test_summarize_records():
    procs = init_procs([5, 3, 8])
    run_fcfs(procs)
    summary = summarize_records(procs)
    assert summary["max_waiting"] == 8
    # turnarounds are 5, 8 and 16
    assert abs(summary["avg_turnaround"] - 29 / 3) < 1e-9


def test_summarize_records_empty():
    assert summarize_records([]) == {"avg_waiting": 0.0, "avg_turnaround": 0.0, "max_waiting": 0}
