"""
Unit Tests for Hands, Outcomes and Scoring
"""

import itertools

import pytest

from aoc_toolkit.rock_paper_scissors.app import solve
from aoc_toolkit.rock_paper_scissors.models import (
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


SCORE_TABLE = {
    "A X": (4, 3),
    "A Y": (8, 4),
    "A Z": (3, 8),
    "B X": (1, 1),
    "B Y": (5, 5),
    "B Z": (9, 9),
    "C X": (7, 2),
    "C Y": (2, 6),
    "C Z": (6, 7),
}


class TestConfrontation:
    """Tests for confrontation() and resolve()."""

    @pytest.mark.parametrize(
        "opponent, you, outcome",
        [
            (Hand.ROCK, Hand.PAPER, Outcome.WIN),
            (Hand.PAPER, Hand.SCISSORS, Outcome.WIN),
            (Hand.SCISSORS, Hand.ROCK, Outcome.WIN),
            (Hand.PAPER, Hand.ROCK, Outcome.LOSS),
            (Hand.SCISSORS, Hand.PAPER, Outcome.LOSS),
            (Hand.ROCK, Hand.SCISSORS, Outcome.LOSS),
            (Hand.ROCK, Hand.ROCK, Outcome.DRAW),
            (Hand.PAPER, Hand.PAPER, Outcome.DRAW),
            (Hand.SCISSORS, Hand.SCISSORS, Outcome.DRAW),
        ],
    )
    def test_confrontation_when_pair_then_cyclic_outcome(self, opponent, you, outcome):
        assert confrontation(opponent, you) is outcome
        assert you.match_with(opponent) is outcome

    @pytest.mark.parametrize("opponent, desired", list(itertools.product(Hand, Outcome)))
    def test_resolve_when_any_pair_then_inverse_of_confrontation(self, opponent, desired):
        assert confrontation(opponent, resolve(opponent, desired)) is desired

    def test_resolve_when_fixed_opponent_then_each_hand_once(self):
        for opponent in Hand:
            assert {resolve(opponent, outcome) for outcome in Outcome} == set(Hand)

    def test_results_in_when_called_then_same_as_resolve(self):
        assert Hand.ROCK.results_in(Outcome.LOSS) is Hand.SCISSORS
        assert Hand.PAPER.results_in(Outcome.WIN) is Hand.SCISSORS


class TestConversions:
    """Tests for token to hand/outcome conversions."""

    def test_from_left_when_tokens_then_rock_paper_scissors(self):
        assert [Hand.from_left(left) for left in Left] == [Hand.ROCK, Hand.PAPER, Hand.SCISSORS]

    def test_from_right_when_tokens_then_rock_paper_scissors(self):
        assert [Hand.from_right(right) for right in Right] == [Hand.ROCK, Hand.PAPER, Hand.SCISSORS]

    def test_outcome_from_right_when_tokens_then_loss_draw_win(self):
        assert [Outcome.from_right(right) for right in Right] == [
            Outcome.LOSS,
            Outcome.DRAW,
            Outcome.WIN,
        ]

    def test_scores_when_read_then_match_table(self):
        assert [hand.score for hand in Hand] == [1, 2, 3]
        assert [outcome.score for outcome in Outcome] == [0, 3, 6]


class TestScoring:
    """Tests for Match and Strategy scores."""

    @pytest.mark.parametrize("line, expected", SCORE_TABLE.items())
    def test_score_when_row_then_matches_lookup_table(self, line, expected):
        row = Row(Left(line[0]), Right(line[2]))
        assert (Match.from_row(row).score, Strategy.from_row(row).score) == expected

    def test_strategy_you_when_draw_then_same_hand(self):
        strategy = Strategy.from_row(Row(Left.B, Right.Y))
        assert strategy.you is Hand.PAPER

    def test_total_score_when_empty_then_zero(self):
        assert total_score([]) == 0

    def test_solve_when_example_then_both_totals(self, strategy_text):
        assert solve(strategy_text) == (15, 12)
