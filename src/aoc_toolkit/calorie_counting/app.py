"""
Module: calorie_counting.app

Purpose:
    Command-line entry point for the calorie counter. Prints the largest
    elf total, then the sum of the top three totals (AOC_TOP_K changes
    how many are added; the runner resolves it).

Key Functions:
    - solve(text, top): Both results for an input text
    - main(argv): Console script entry point
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from aoc_toolkit.common.input import Description
from aoc_toolkit.common.runner import run

from .parser import parse_elves

DESCRIPTION = Description(
    name="calorie-counting",
    bin_name="calorie-counting",
    description="""\
Takes a list of numbers, zero or one per line.
Sums all consecutive numbers not separated by an empty line,
then returns the largest sum and the sum of the largest 3 sums.""",
    version=(0, 1, 0),
)


def solve(text: str, top: int = 3) -> Tuple[int, int]:
    """Return (largest total, sum of the `top` largest totals)."""
    elves = parse_elves(text)
    return elves.max_calories(), elves.max_calorie_sum(top)


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(
        DESCRIPTION,
        lambda text, config: solve(text, top=config.top_k),
        argv,
    )


if __name__ == "__main__":
    raise SystemExit(main())
