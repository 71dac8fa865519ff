"""
Module: rock_paper_scissors.models

Purpose:
    Closed enumerations for the strategy guide and the two ways of reading
    a row: as a fixed pair of hands (Match) or as the opponent's hand plus
    the outcome to aim for (Strategy).

Key Functions:
    - confrontation(opponent, you): Outcome for `you`
    - resolve(opponent, desired): Hand that gives the desired outcome
    - total_score(items): Sum of scores

Key Classes:
    - Left, Right: Raw row tokens (A/B/C and X/Y/Z)
    - Row: One parsed line
    - Hand, Outcome: Scored three-state enumerations
    - Match, Strategy: The two interpretations of a Row

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - rock_paper_scissors.parser: Produces Row values
    - rock_paper_scissors.app: Scores both interpretations

Scoring:
    Hand: Rock 1, Paper 2, Scissors 3
    Outcome: Loss 0, Draw 3, Win 6
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol


class Scored(Protocol):
    @property
    def score(self) -> int: ...


class Left(str, Enum):
    """First token of a row: the opponent's column."""
    A = "A"
    B = "B"
    C = "C"


class Right(str, Enum):
    """Third token of a row: either your hand or the outcome to aim for."""
    X = "X"
    Y = "Y"
    Z = "Z"


@dataclass(frozen=True, slots=True)
class Row:
    """A parsed `<Left> <Right>` line."""
    left: Left
    right: Right

    def __str__(self) -> str:
        return f"{self.left.value} {self.right.value}"


class Outcome(Enum):
    """Result of a round from your point of view."""
    LOSS = 0
    DRAW = 3
    WIN = 6

    @property
    def score(self) -> int:
        return self.value

    @classmethod
    def from_right(cls, right: Right) -> Outcome:
        return _OUTCOME_BY_RIGHT[right]


class Hand(Enum):
    """
    A shape, valued by its score.

    Shapes are cyclic: each beats the one before it and loses to the one
    after it, with Rock following Scissors.
    """
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value

    @property
    def index(self) -> int:
        """Position in the cycle (0, 1, 2)."""
        return self.value - 1

    @classmethod
    def from_index(cls, index: int) -> Hand:
        return _HANDS[index % 3]

    @classmethod
    def from_left(cls, left: Left) -> Hand:
        return cls.from_index("ABC".index(left.value))

    @classmethod
    def from_right(cls, right: Right) -> Hand:
        return cls.from_index("XYZ".index(right.value))

    def match_with(self, opponent: Hand) -> Outcome:
        """Outcome of playing this hand against `opponent`."""
        return confrontation(opponent, self)

    def results_in(self, outcome: Outcome) -> Hand:
        """Hand to play against this one to get `outcome`."""
        return resolve(self, outcome)


_HANDS = (Hand.ROCK, Hand.PAPER, Hand.SCISSORS)

_OUTCOME_BY_RIGHT = {
    Right.X: Outcome.LOSS,
    Right.Y: Outcome.DRAW,
    Right.Z: Outcome.WIN,
}

# Offset in the cycle from the opponent's hand to yours
_OFFSET_BY_OUTCOME = {
    Outcome.DRAW: 0,
    Outcome.WIN: 1,
    Outcome.LOSS: 2,
}
_OUTCOME_BY_OFFSET = {offset: outcome for outcome, offset in _OFFSET_BY_OUTCOME.items()}


def confrontation(opponent: Hand, you: Hand) -> Outcome:
    """
    Outcome for `you` when playing against `opponent`.

    Defined for all nine pairs: you win when your hand is one step after
    the opponent's in the cycle, draw on the same hand, lose otherwise.
    """
    return _OUTCOME_BY_OFFSET[(you.index - opponent.index) % 3]


def resolve(opponent: Hand, desired: Outcome) -> Hand:
    """
    The hand that gets `desired` against `opponent`.

    Inverse of confrontation: confrontation(a, resolve(a, o)) == o.
    """
    return Hand.from_index(opponent.index + _OFFSET_BY_OUTCOME[desired])


@dataclass(frozen=True, slots=True)
class Match:
    """
    Row read as two hands: left is the opponent's, right is yours.

    Example:
        >>> Match.from_row(Row(Left.A, Right.Y)).score
        8
    """
    you: Hand
    opponent: Hand

    @classmethod
    def from_row(cls, row: Row) -> Match:
        return cls(you=Hand.from_right(row.right), opponent=Hand.from_left(row.left))

    @property
    def outcome(self) -> Outcome:
        return confrontation(self.opponent, self.you)

    @property
    def score(self) -> int:
        return self.outcome.score + self.you.score


@dataclass(frozen=True, slots=True)
class Strategy:
    """
    Row read as the opponent's hand and the outcome you should reach.

    Example:
        >>> Strategy.from_row(Row(Left.A, Right.Y)).score
        4
    """
    choice: Outcome
    opponent: Hand

    @classmethod
    def from_row(cls, row: Row) -> Strategy:
        return cls(choice=Outcome.from_right(row.right), opponent=Hand.from_left(row.left))

    @property
    def you(self) -> Hand:
        return resolve(self.opponent, self.choice)

    @property
    def score(self) -> int:
        return self.choice.score + self.you.score


def total_score(items: Iterable[Scored]) -> int:
    return sum(item.score for item in items)
