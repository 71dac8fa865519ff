"""Day 1: sums of blank-line separated calorie groups."""

from .app import DESCRIPTION, main, solve
from .models import Elf, Elves, Ration
from .parser import CaloriesParseError, parse_elves

__all__ = [
    "DESCRIPTION",
    "main",
    "solve",
    "Elf",
    "Elves",
    "Ration",
    "CaloriesParseError",
    "parse_elves",
]
