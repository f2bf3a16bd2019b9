from pathlib import Path

import pytest

from pcb_scheduler.cli import MISSING_ARGUMENTS, build_parser, main


def test_fcfs_output(capsys):
    assert main(["fcfs", "5", "3", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Using FCFS"
    assert lines[1] == ""
    assert lines[2:5] == [
        "Accepted P0: Burst 5",
        "Accepted P1: Burst 3",
        "Accepted P2: Burst 8",
    ]
    assert lines[-1] == "Average wait time: 4.33"


def test_rr_output(capsys):
    assert main(["rr", "4", "5", "3", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Using RR(4)."
    assert "Accepted P2: Burst 8" in lines
    assert lines[-1] == "Average wait time: 6.33"


def test_negative_burst_accepted(capsys):
    assert main(["fcfs", "-2", "4"]) == 0
    out = capsys.readouterr().out
    assert "Accepted P0: Burst -2" in out
    assert "Average wait time: 0.00" in out


@pytest.mark.parametrize("argv", [[], ["fcfs"], ["rr"], ["rr", "4"], ["compare"]])
def test_missing_arguments(argv, capsys):
    assert main(argv) == 1
    assert MISSING_ARGUMENTS in capsys.readouterr().out


def test_rr_zero_quantum_runs_nothing(capsys):
    assert main(["rr", "0", "5", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Using RR(0)."
    assert "Accepted P1: Burst 3" in lines
    assert lines[-1] == "Average wait time: 0.00"


@pytest.mark.parametrize("argv", [["sjf", "5", "3"], ["priority"]])
def test_unknown_algorithm(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out.strip() == MISSING_ARGUMENTS


def test_workload_file(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text("[5, 3, 8]")
    assert main(["fcfs", "--workload", str(p)]) == 0
    assert "Average wait time: 4.33" in capsys.readouterr().out


def test_workload_and_bursts_conflict(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text("[5, 3, 8]")
    assert main(["fcfs", "-w", str(p), "1"]) == 1
    assert "not both" in capsys.readouterr().out


def test_missing_workload_file(tmp_path: Path, capsys):
    assert main(["fcfs", "-w", str(tmp_path / "nope.json")]) == 1
    assert "ERROR:" in capsys.readouterr().out


def test_table_and_gantt(capsys):
    assert main(["rr", "4", "5", "3", "8", "--table", "--gantt"]) == 0
    out = capsys.readouterr().out
    assert "Per-process metrics" in out
    assert "Gantt Chart" in out
    assert "Average wait time: 6.33" in out


def test_compare(capsys):
    assert main(["compare", "-q", "4", "5", "3", "8"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm comparison" in out
    assert "4.33" in out
    assert "6.33" in out


def test_verbose_logs_steps(caplog):
    with caplog.at_level("DEBUG", logger="pcb_scheduler"):
        assert main(["rr", "2", "3", "1", "-v"]) == 0
    assert any("P0 ran for 2" in r.getMessage() for r in caplog.records)


def test_parser_defaults():
    args = build_parser().parse_args(["compare", "1", "2"])
    assert args.quantum == 2
    assert args.bursts == [1, 2]
