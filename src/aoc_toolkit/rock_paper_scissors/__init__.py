"""Day 2: scoring a rock-paper-scissors strategy guide."""

from .app import DESCRIPTION, main, solve
from .models import (
    Hand,
    Left,
    Match,
    Outcome,
    Right,
    Row,
    Strategy,
    confrontation,
    resolve,
    total_score,
)
from .parser import RowParseError, parse_row, parse_rows

__all__ = [
    "DESCRIPTION",
    "main",
    "solve",
    "Hand",
    "Left",
    "Match",
    "Outcome",
    "Right",
    "Row",
    "Strategy",
    "confrontation",
    "resolve",
    "total_score",
    "RowParseError",
    "parse_row",
    "parse_rows",
]
