"""
PCB scheduler package.

Simulates First-Come First-Serve and Round Robin scheduling over a batch of
processes described only by their CPU burst, and reports per-process wait
times from the command line.
"""

__all__ = ["algorithms", "cli", "models"]
