"""
Unit tests for number coercion and "x:y" pair parsing.

Run with: pytest hp_payback/test_pairs.py -v
"""

import pytest

from .pairs import Coordinate, format_pairs, pairs_from_list, parse_pairs, to_number


class TestToNumber:
    """Tests for to_number()."""

    def test_parses_numeric_strings(self):
        assert to_number("97300") == 97300.0
        assert to_number(" 0.52 ") == 0.52
        assert to_number("-10") == -10.0
        assert to_number("1e3") == 1000.0

    def test_passes_numbers_through(self):
        assert to_number(7) == 7.0
        assert to_number(2.5) == 2.5

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "inf", "-inf", "nan", True, [1]])
    def test_falls_back_on_garbage(self, raw):
        """Missing, blank, non-numeric and non-finite values take the fallback."""
        assert to_number(raw, 42.0) == 42.0

    def test_default_fallback_is_zero(self):
        assert to_number("bogus") == 0.0


class TestParsePairs:
    """Tests for parse_pairs()."""

    def test_newline_and_comma_separators(self):
        coords = parse_pairs("60:3.77, 55:3.56\n50:3.39")
        assert coords == [Coordinate(50, 3.39), Coordinate(55, 3.56), Coordinate(60, 3.77)]

    def test_sorted_ascending_by_x(self):
        coords = parse_pairs("40:3.12\n-10:1.65\n5:2.0")
        assert [c.x for c in coords] == [-10, 5, 40]

    def test_whitespace_around_entries_and_numbers(self):
        assert parse_pairs("  47 : 3.9 ,\n\n 17:2.4  ") == [Coordinate(17, 2.4), Coordinate(47, 3.9)]

    def test_malformed_entries_dropped(self):
        """Entries without a colon or with a non-numeric side are dropped silently."""
        coords = parse_pairs("60:3.77, bad, 5:, :3, x:1, 40:abc, 40:3.12\n-10:1.65")
        assert coords == [Coordinate(-10, 1.65), Coordinate(40, 3.12), Coordinate(60, 3.77)]

    def test_split_on_first_colon(self):
        """A second colon makes the right-hand side unparsable."""
        assert parse_pairs("1:2:3, 4:5") == [Coordinate(4, 5)]

    def test_non_finite_dropped(self):
        assert parse_pairs("inf:1, 2:nan, 3:4") == [Coordinate(3, 4)]

    @pytest.mark.parametrize("text", [None, "", "\n\n", ",,,", "garbage"])
    def test_empty_or_garbage_gives_empty_list(self, text):
        assert parse_pairs(text) == []

    def test_duplicate_x_kept_in_input_order(self):
        coords = parse_pairs("10:1, 0:5, 10:2")
        assert coords == [Coordinate(0, 5), Coordinate(10, 1), Coordinate(10, 2)]

    def test_reparse_of_formatted_output_is_identical(self):
        """Formatting parsed pairs and parsing again is lossless."""
        text = "60:3.77, 55:3.56\n-10:1.65, -5:1.74, bad:entry, 0.25:1e-3"
        coords = parse_pairs(text)
        assert parse_pairs(format_pairs(coords)) == coords
        assert parse_pairs(format_pairs(coords, sep=", ")) == coords


class TestFormatPairs:
    """Tests for format_pairs()."""

    def test_integral_values_without_decimal(self):
        assert format_pairs([Coordinate(-10, 0.5), Coordinate(60, 0)]) == "-10:0.5\n60:0"

    def test_custom_separator(self):
        assert format_pairs([Coordinate(1, 2), Coordinate(3, 4)], sep=", ") == "1:2, 3:4"

    def test_empty(self):
        assert format_pairs([]) == ""


class TestPairsFromList:
    """Tests for pairs_from_list()."""

    def test_list_of_pairs(self):
        coords = pairs_from_list([[60, 0], [-5, 1.5], (10, "8")])
        assert coords == [Coordinate(-5, 1.5), Coordinate(10, 8), Coordinate(60, 0)]

    def test_malformed_items_dropped(self):
        coords = pairs_from_list([[1, 2], "3:4", [5], [6, 7, 8], None, [9, "x"], [True, 1], [10, 11]])
        assert coords == [Coordinate(1, 2), Coordinate(10, 11)]
