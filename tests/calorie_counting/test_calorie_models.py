"""
Unit Tests for Calorie Models and Solver
"""

import pytest

from aoc_toolkit.calorie_counting.app import solve
from aoc_toolkit.calorie_counting.models import Elf, Elves, Ration
from aoc_toolkit.calorie_counting.parser import parse_elves


EXAMPLE = """\
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


class TestRation:
    """Tests for Ration."""

    def test_init_when_negative_then_raises_error(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Ration(-1)

    def test_init_when_frozen_then_immutable(self):
        ration = Ration(5)
        with pytest.raises(AttributeError):
            ration.calories = 6  # type: ignore


class TestElves:
    """Tests for Elf and Elves reductions."""

    def test_total_when_empty_elf_then_zero(self):
        assert Elf().total_calories == 0

    def test_totals_when_groups_then_summed_in_order(self, calorie_text):
        assert list(parse_elves(calorie_text).totals()) == [7, 5, 21]

    def test_max_calories_when_groups_then_largest_total(self, calorie_text):
        assert parse_elves(calorie_text).max_calories() == 21

    def test_max_calorie_sum_when_only_three_groups_then_all_included(self, calorie_text):
        assert parse_elves(calorie_text).max_calorie_sum(3) == 33

    def test_max_calorie_sum_when_more_than_top_then_smallest_excluded(self):
        assert parse_elves(EXAMPLE).max_calorie_sum(3) == 24000 + 11000 + 10000

    def test_max_calories_when_no_elves_then_zero(self):
        assert Elves().max_calories() == 0

    def test_max_calorie_sum_when_top_invalid_then_raises_error(self, calorie_text):
        with pytest.raises(ValueError):
            parse_elves(calorie_text).max_calorie_sum(0)


class TestSolve:
    """Tests for calorie_counting.app.solve()."""

    def test_solve_when_example_then_both_answers(self):
        assert solve(EXAMPLE) == (24000, 45000)

    def test_solve_when_top_one_then_both_lines_equal(self):
        assert solve(EXAMPLE, top=1) == (24000, 24000)
