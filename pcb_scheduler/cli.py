from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import run_algorithm
from .gantt import build_rich_gantt
from .metrics import average_wait, summarize_records
from .models import ScheduleResult
from .workload_io import load_bursts

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2
MISSING_ARGUMENTS = "ERROR: Missing arguments"
COMMANDS = ("fcfs", "rr", "compare")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Read burst times from a JSON or CSV file instead of the command line.",
    )
    common.add_argument(
        "--gantt",
        action="store_true",
        help="Print a Gantt chart of the schedule.",
    )
    common.add_argument(
        "--table",
        action="store_true",
        help="Print per-process wait and turnaround times.",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling step.",
    )

    parser = argparse.ArgumentParser(
        prog="pcb-scheduler",
        description="CPU scheduling simulator (FCFS, RR) over a batch of CPU bursts.",
    )

    subparsers = parser.add_subparsers(dest="command")

    fcfs_parser = subparsers.add_parser(
        "fcfs",
        parents=[common],
        help="Run processes to completion in the order given.",
    )
    fcfs_parser.add_argument("bursts", nargs="*", type=int, help="CPU burst of each process.")

    rr_parser = subparsers.add_parser(
        "rr",
        parents=[common],
        help="Round Robin with a fixed time quantum.",
    )
    rr_parser.add_argument("quantum", nargs="?", type=int, help="Time quantum.")
    rr_parser.add_argument("bursts", nargs="*", type=int, help="CPU burst of each process.")

    compare_parser = subparsers.add_parser(
        "compare",
        parents=[common],
        help="Run FCFS and RR on the same bursts and compare average metrics.",
    )
    compare_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum used for RR (default: {DEFAULT_QUANTUM}).",
    )
    compare_parser.add_argument("bursts", nargs="*", type=int, help="CPU burst of each process.")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("pcb_scheduler").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _resolve_bursts(args: argparse.Namespace) -> List[int]:
    if args.workload is None:
        return list(args.bursts)
    if args.bursts:
        raise ValueError("Give burst times on the command line or with --workload, not both")
    return load_bursts(Path(args.workload))


def _print_result(result: ScheduleResult, console: Console, show_table: bool, show_gantt: bool) -> None:
    if result.quantum is None:
        console.print("Using FCFS")
    else:
        console.print(f"Using RR({result.quantum}).")
    console.print()

    for rec in result.records:
        console.print(f"Accepted {rec.label}: Burst {rec.burst_time}")

    if show_gantt:
        console.print()
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)

    if show_table:
        console.print()
        proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
        proc_table.add_column("PID", justify="center")
        for h in ("Burst", "Wait", "Turnaround"):
            proc_table.add_column(h, justify="right")
        for rec in result.records:
            proc_table.add_row(
                rec.label,
                str(rec.burst_time),
                str(rec.waiting_time),
                str(rec.waiting_time + max(rec.burst_time, 0)),
            )
        console.print(proc_table)

    console.print(f"Average wait time: {average_wait(result.records):.2f}")


def _print_compare(bursts: List[int], quantum: int, console: Console, show_gantt: bool) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Elapsed", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Max waiting", justify="right")

    results = [
        run_algorithm("fcfs", bursts),
        run_algorithm("rr", bursts, quantum=quantum),
    ]

    for result in results:
        summary = summarize_records(result.records)
        summary_table.add_row(
            result.algorithm,
            "" if result.quantum is None else str(result.quantum),
            str(result.elapsed),
            f"{summary['avg_waiting']:.2f}",
            f"{summary['avg_turnaround']:.2f}",
            str(summary["max_waiting"]),
        )

    console.print(summary_table)

    if show_gantt:
        for result in results:
            panel, time_marks = build_rich_gantt(result.timeline)
            console.print(f"[bold]{result.algorithm}[/bold]")
            console.print(panel)
            if time_marks:
                console.print(time_marks)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # An unrecognised algorithm is reported like a missing one.
    if argv and not argv[0].startswith("-") and argv[0] not in COMMANDS:
        Console().print(MISSING_ARGUMENTS)
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(getattr(args, "verbose", False))
    console = Console()

    if args.command is None:
        console.print(MISSING_ARGUMENTS)
        return 1

    if args.command == "rr" and args.quantum is None:
        console.print(MISSING_ARGUMENTS)
        return 1

    try:
        bursts = _resolve_bursts(args)
        if not bursts:
            console.print(MISSING_ARGUMENTS)
            return 1

        if args.command == "compare":
            _print_compare(bursts, args.quantum, console, args.gantt)
            return 0

        logger.debug("Running %s on %d processes", args.command, len(bursts))
        result = run_algorithm(args.command, bursts, quantum=getattr(args, "quantum", None))
    except (OSError, ValueError) as exc:
        console.print(f"ERROR: {escape(str(exc))}", soft_wrap=True)
        return 1

    _print_result(result, console, args.table, args.gantt)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
