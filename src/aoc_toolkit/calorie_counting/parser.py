"""
Module: calorie_counting.parser

Purpose:
    Turns the raw calorie list into Elves. One unsigned integer per line;
    a blank line closes the current elf and starts the next one.

Key Functions:
    - parse_elves(text): Parse the whole input
    - parse_calories(line): Parse one non-empty line

Key Classes:
    - CaloriesParseError: Malformed line, carrying the offending text

Used By:
    - calorie_counting.app: solve()

Known Gap:
    Errors name the bad line's content but not its line number.
"""

from __future__ import annotations

import logging
import re
from typing import List

from aoc_toolkit.common.errors import ToolkitError
from aoc_toolkit.common.input import iter_lines

from .models import Elf, Elves, Ration

logger = logging.getLogger(__name__)

# ASCII digits only: int() alone would accept signs, spaces and underscores
_DIGITS = re.compile(r"[0-9]+")


class CaloriesParseError(ToolkitError):
    """Raised when a non-empty line is not an unsigned integer."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            f"expected an integer; only digits and newlines are valid input, found '{line}'"
        )


def parse_calories(line: str) -> int:
    """
    Parse one line as a base-10 unsigned integer.

    Raises:
        ValueError: If the line contains anything but ASCII digits.
    """
    if not _DIGITS.fullmatch(line):
        raise ValueError(f"invalid digit found in {line!r}")
    return int(line)


def parse_elves(text: str) -> Elves:
    """
    Parse blank-line separated groups of calorie values.

    Args:
        text: Raw input.

    Returns:
        Elves in input order. Consecutive blank lines produce empty elves;
        a final group without a trailing blank line is still included.

    Raises:
        CaloriesParseError: On the first malformed line, chained from the
            underlying ValueError.

    Example:
        >>> [elf.total_calories for elf in parse_elves("3\\n4\\n\\n5\\n")]
        [7, 5]
    """
    elves: List[Elf] = []
    rations: List[Ration] = []
    in_group = False

    for line in iter_lines(text):
        if not line:
            elves.append(Elf(tuple(rations)))
            rations = []
            in_group = False
            continue
        try:
            calories = parse_calories(line)
        except ValueError as exc:
            raise CaloriesParseError(line) from exc
        rations.append(Ration(calories))
        in_group = True

    if in_group:
        elves.append(Elf(tuple(rations)))

    logger.debug("Parsed %d elves", len(elves))
    return Elves(tuple(elves))
