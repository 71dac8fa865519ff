"""
Module: rock_paper_scissors.app

Purpose:
    Command-line entry point for the strategy guide scorer. Prints the
    total score reading each row as two hands, then the total reading the
    right column as the outcome to aim for.

Key Functions:
    - solve(text): Both totals for an input text
    - main(argv): Console script entry point
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from aoc_toolkit.common.input import Description
from aoc_toolkit.common.runner import run

from .models import Match, Strategy, total_score
from .parser import parse_rows

DESCRIPTION = Description(
    name="rock-paper-scissors",
    bin_name="rock-paper-scissors",
    description="""\
Takes a newline separated list,
where each row starts with 'A', 'B', or 'C',
then a space, then 'X', 'Y', or 'Z'.
Each row is assigned a score based on the following lookup table.
Returns the sum of scores using the first values,
then the sum of scores using the second values.
-------------
'A X' => 4 | 3
'A Y' => 8 | 4
'A Z' => 3 | 8
'B X' => 1 | 1
'B Y' => 5 | 5
'B Z' => 9 | 9
'C X' => 7 | 2
'C Y' => 2 | 6
'C Z' => 6 | 7""",
    version=(0, 1, 0),
)


def solve(text: str) -> Tuple[int, int]:
    """Return (fixed-choice total, desired-outcome total)."""
    rows = parse_rows(text)
    matches = total_score(Match.from_row(row) for row in rows)
    strategies = total_score(Strategy.from_row(row) for row in rows)
    return matches, strategies


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(DESCRIPTION, lambda text, config: solve(text), argv)


if __name__ == "__main__":
    raise SystemExit(main())
