"""
Module: common.topk

Purpose:
    Fixed-capacity accumulator keeping the K largest values of a streamed
    reduction. Used to pick the largest group sums without storing or
    sorting the whole input.

Key Functions:
    - top_k_sum(values, k): Sum of the k largest values in one pass

Key Classes:
    - TopK: The accumulator itself

Dependencies:
    - typing (std)

Used By:
    - calorie_counting.models.Elves: max_calories / max_calorie_sum
"""

from __future__ import annotations

from typing import Iterable, List


class TopK:
    """
    Buffer of the k largest values seen so far.

    Slots start at 0 and each push replaces the current minimum slot when
    the incoming value is larger. Finding the minimum is O(k), which is fine
    for the small k the solvers use (1 to 3).

    Inputs must be non-negative. With fewer than k inputs the unused slots
    stay at 0 and add nothing to the total. Negative inputs never displace
    a seed slot, so they are silently ignored.

    Invariants:
        - len(slots) == k after every push
        - total == sum of the k largest values pushed (0-padded)

    Example:
        >>> top = TopK(3)
        >>> top.extend([1000, 2000, 3000, 4000])
        >>> top.total
        9000
    """

    __slots__ = ("k", "_slots")

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1: {k}")
        self.k = k
        self._slots: List[int] = [0] * k

    def push(self, value: int) -> None:
        """Admit value if it beats the smallest slot."""
        index = min(range(self.k), key=self._slots.__getitem__)
        if value > self._slots[index]:
            self._slots[index] = value

    def extend(self, values: Iterable[int]) -> None:
        for value in values:
            self.push(value)

    @property
    def values(self) -> List[int]:
        """Current slots, largest first."""
        return sorted(self._slots, reverse=True)

    @property
    def total(self) -> int:
        return sum(self._slots)

    def __repr__(self) -> str:
        return f"TopK({self.k}, {self.values!r})"


def top_k_sum(values: Iterable[int], k: int) -> int:
    """
    Sum the k largest values of a non-negative sequence.

    Consumes values lazily in a single pass with O(k) memory.

    Args:
        values: Non-negative integers, any iterable.
        k: Number of values to keep (>= 1). k=1 gives the maximum.

    Returns:
        Sum of the k largest values, or of all of them if there are fewer
        than k. An empty input gives 0.

    Raises:
        ValueError: If k < 1.

    Example:
        >>> top_k_sum([1000, 2000, 3000, 4000], 1)
        4000
    """
    top = TopK(k)
    top.extend(values)
    return top.total
