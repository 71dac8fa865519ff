"""
Module: cli

Purpose:
    Dispatcher over all registered solvers, so one console script can list
    them and run any of them by name. Arguments after the solver name are
    passed through untouched to that solver's own argument handling.

Key Functions:
    - main(argv): "aoc-toolkit" console script / python -m aoc_toolkit

Usage:
    aoc-toolkit list
    aoc-toolkit run calorie-counting input.txt
    aoc-toolkit run rock-paper-scissors --stdin < input.txt
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from aoc_toolkit import __version__
from aoc_toolkit import calorie_counting, rock_paper_scissors
from aoc_toolkit.common.input import Description

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverEntry:
    """A runnable solver and its metadata."""
    description: Description
    main: Callable[[Optional[Sequence[str]]], int]

    @property
    def name(self) -> str:
        return self.description.name

    @property
    def summary(self) -> str:
        """First line of the description."""
        return self.description.description.splitlines()[0]


SOLVERS: Dict[str, SolverEntry] = {
    entry.name: entry
    for entry in (
        SolverEntry(calorie_counting.DESCRIPTION, calorie_counting.main),
        SolverEntry(rock_paper_scissors.DESCRIPTION, rock_paper_scissors.main),
    )
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc-toolkit",
        description="Solution apps for advent of code 2022.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available solvers")

    run_parser = subparsers.add_parser("run", help="Run a solver")
    run_parser.add_argument("solver", choices=sorted(SOLVERS), help="Solver name")
    run_parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the solver (FILE, --stdin, --help, --version)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        for name in sorted(SOLVERS):
            print(f"{name}\t{SOLVERS[name].summary}")
        return 0

    entry = SOLVERS[args.solver]
    solver_argv: List[str] = [entry.name, *args.args]
    logger.debug("Dispatching to %s with %s", entry.name, solver_argv[1:])
    return entry.main(solver_argv)


if __name__ == "__main__":
    raise SystemExit(main())
