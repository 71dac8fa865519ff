"""
Module: calorie_counting.models

Purpose:
    Immutable model of the calorie list: each elf carries an ordered
    tuple of rations, and the group of elves reduces to the largest
    total and the sum of the largest few totals.

Key Classes:
    - Ration: One calorie value (one input line)
    - Elf: Rations between two blank lines
    - Elves: All elves in input order

Dependencies:
    - dataclasses (std)
    - aoc_toolkit.common.topk: Top-K reduction

Used By:
    - calorie_counting.parser: Builds Elves from text
    - calorie_counting.app: Prints the reductions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from aoc_toolkit.common.topk import top_k_sum


@dataclass(frozen=True, slots=True)
class Ration:
    """
    A single food item.

    Attributes:
        calories: Non-negative calorie count

    Invariants:
        - calories >= 0
    """
    calories: int

    def __post_init__(self) -> None:
        if self.calories < 0:
            raise ValueError(f"Calories cannot be negative: {self.calories}")


@dataclass(frozen=True, slots=True)
class Elf:
    """
    One group of rations, in input order. May be empty.

    Example:
        >>> Elf((Ration(3), Ration(4))).total_calories
        7
    """
    rations: Tuple[Ration, ...] = ()

    @property
    def total_calories(self) -> int:
        return sum(ration.calories for ration in self.rations)

    def __len__(self) -> int:
        return len(self.rations)


@dataclass(frozen=True, slots=True)
class Elves:
    """
    All groups from one input, in input order.

    Attributes:
        elves: Zero or more Elf groups
    """
    elves: Tuple[Elf, ...] = ()

    def totals(self) -> Iterator[int]:
        """Lazily yield each elf's calorie total."""
        return (elf.total_calories for elf in self.elves)

    def max_calories(self) -> int:
        """Largest single total, or 0 when there are no elves."""
        return top_k_sum(self.totals(), 1)

    def max_calorie_sum(self, top: int) -> int:
        """
        Sum of the `top` largest totals.

        With fewer than `top` elves every total is included.

        Raises:
            ValueError: If top < 1.
        """
        return top_k_sum(self.totals(), top)

    def __len__(self) -> int:
        return len(self.elves)

    def __iter__(self) -> Iterator[Elf]:
        return iter(self.elves)
