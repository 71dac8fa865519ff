"""
Unit Tests for the Strategy Guide Row Parser
"""

import pytest

from aoc_toolkit.rock_paper_scissors.models import Left, Right, Row
from aoc_toolkit.rock_paper_scissors.parser import RowParseError, parse_row, parse_rows


class TestParseRow:
    """Tests for parse_row()."""

    @pytest.mark.parametrize("left", list(Left))
    @pytest.mark.parametrize("right", list(Right))
    def test_parse_when_valid_then_returns_row(self, left, right):
        assert parse_row(f"{left.value} {right.value}") == Row(left, right)

    # ─────────────────────────────────────────────────────────────────────────
    # Positional Error Tests
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "line, invalid",
        [
            ("", ""),            # nothing at all
            ("D Y", "D Y"),      # bad left token
            ("x Y", "x Y"),      # left tokens are upper case
            ("A", ""),           # missing separator and right token
            ("AY", "Y"),         # missing separator
            ("A  Y", " Y"),      # double space
            ("A ", ""),          # missing right token
            ("A W", "W"),        # bad right token
            ("A Y ", " "),       # trailing space
            ("A YZ", "Z"),       # trailing token
            ("X A", "X A"),      # columns swapped
        ],
    )
    def test_parse_when_invalid_then_reports_fragment_from_failure(self, line, invalid):
        with pytest.raises(RowParseError) as excinfo:
            parse_row(line)
        assert excinfo.value.invalid == invalid
        assert str(excinfo.value) == f"found invalid input '{invalid}'"

    def test_parse_when_missing_second_token_then_fragment_starts_after_first_char(self):
        line = "A"
        with pytest.raises(RowParseError) as excinfo:
            parse_row(line)
        assert excinfo.value.invalid == line[1:]


class TestParseRows:
    """Tests for parse_rows()."""

    def test_parse_rows_when_valid_then_in_order(self, strategy_text):
        assert parse_rows(strategy_text) == [
            Row(Left.A, Right.Y),
            Row(Left.B, Right.X),
            Row(Left.C, Right.Z),
        ]

    def test_parse_rows_when_empty_then_no_rows(self):
        assert parse_rows("") == []

    def test_parse_rows_when_one_bad_row_then_raises(self):
        with pytest.raises(RowParseError, match="'Q'"):
            parse_rows("A Y\nB Q\nC Z\n")

    def test_parse_rows_when_blank_line_inside_then_raises(self):
        with pytest.raises(RowParseError):
            parse_rows("A Y\n\nC Z\n")

    def test_parse_rows_when_crlf_line_endings_then_handled(self):
        assert parse_rows("A Y\r\nB X\r\n") == [Row(Left.A, Right.Y), Row(Left.B, Right.X)]

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    def test_parse_rows_when_non_newline_separator_then_raises(self, separator):
        with pytest.raises(RowParseError) as excinfo:
            parse_rows(f"A Y{separator}B X\n")
        assert excinfo.value.invalid == f"{separator}B X"
