"""
Module: rock_paper_scissors.parser

Purpose:
    Parses strategy guide lines of the fixed form `<A|B|C> <X|Y|Z>`.
    Validation runs left to right and stops at the first bad character;
    the error carries the rest of the line from that position.

Key Functions:
    - parse_row(line): One line to a Row
    - parse_rows(text): Every line of the input

Key Classes:
    - RowParseError: Carries the invalid fragment
"""

from __future__ import annotations

import logging
from typing import List

from aoc_toolkit.common.errors import ToolkitError
from aoc_toolkit.common.input import iter_lines

from .models import Left, Right, Row

logger = logging.getLogger(__name__)

_LEFT = {left.value: left for left in Left}
_RIGHT = {right.value: right for right in Right}
_SEPARATOR = " "


class RowParseError(ToolkitError):
    """Raised when a row does not match `<A|B|C> <X|Y|Z>`."""

    def __init__(self, invalid: str) -> None:
        self.invalid = invalid
        super().__init__(f"found invalid input '{invalid}'")


def parse_row(line: str) -> Row:
    """
    Parse a single row.

    Raises:
        RowParseError: With `invalid` set to line[pos:], where pos is the
            first position that failed (0 left token, 1 separator,
            2 right token, 3 trailing characters).

    Example:
        >>> parse_row("A Y")
        Row(left=<Left.A: 'A'>, right=<Right.Y: 'Y'>)
    """
    left = _LEFT.get(line[0:1])
    if left is None:
        raise RowParseError(line[0:])

    if line[1:2] != _SEPARATOR:
        raise RowParseError(line[1:])

    right = _RIGHT.get(line[2:3])
    if right is None:
        raise RowParseError(line[2:])

    if len(line) > 3:
        raise RowParseError(line[3:])

    return Row(left, right)


def parse_rows(text: str) -> List[Row]:
    """Parse every "\\n"-separated line; the first bad row aborts with RowParseError."""
    rows = [parse_row(line) for line in iter_lines(text)]
    logger.debug("Parsed %d rows", len(rows))
    return rows
