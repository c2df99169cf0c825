"""Tests for value coercion and numeric views."""

import math

import pytest

from colmodel.analysis.typing.values import (
    get_unique_values,
    indices_into,
    is_integer,
    is_missing,
    leading_integer,
    replace_null_tokens,
    summarize_numeric,
    to_number,
)


class TestCoercion:
    """Tests for the strict numeric coercion rules."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, 5.0),
            (2.5, 2.5),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            ("-3", -3.0),
            ("+4", 4.0),
            ("1e3", 1000.0),
            (".5", 0.5),
            ("5.", 5.0),
        ],
    )
    def test_numeric(self, value, expected):
        """Test numbers and decimal strings coerce to floats."""
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1,000", "12abc", "nan", "inf", "", "  ", None, True])
    def test_not_numeric(self, value):
        """Test values outside the decimal grammar are not numeric."""
        assert to_number(value) is None

    def test_float_nan_is_missing(self):
        """Test that a float NaN counts as missing."""
        assert is_missing(math.nan)
        assert to_number(math.nan) is None

    def test_strings_not_coerced_when_disabled(self):
        """Test that only true numbers count when string coercion is off."""
        assert to_number("12", coerce_strings=False) is None
        assert to_number(12, coerce_strings=False) == 12.0

    @pytest.mark.parametrize("value", [2015, "2015", 2015.0, "2015.0", " 7"])
    def test_is_integer(self, value):
        """Test integral values in numeric and string form."""
        assert is_integer(value)

    @pytest.mark.parametrize("value", [2015.5, "2015-01-01", "x", None, False])
    def test_is_not_integer(self, value):
        """Test non-integral and non-numeric values."""
        assert not is_integer(value)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12-10", 12),
            ("2015-01-01", 2015),
            ("2015-01-01T10:00:00Z", 2015),
            (" 7/8/2015", 7),
            (2.5, 2),
            (2015, 2015),
            ("abc", None),
            ("Jan 5 2015", None),
            (None, None),
        ],
    )
    def test_leading_integer(self, value, expected):
        """Test parsing the leading integer of a cell."""
        assert leading_integer(value) == expected


class TestSummarizeNumeric:
    """Tests for min/max and the numeric subsequence."""

    def test_all_numeric(self):
        """Test min, max and numeric values of a purely numeric column."""
        summary = summarize_numeric([1, "2", None, 3.5])

        assert summary.minimum == 1.0
        assert summary.maximum == 3.5
        assert summary.numeric_values == [1.0, 2.0, 3.5]
        assert summary.text_count == 0

    def test_any_text_makes_min_max_nan(self):
        """Test that a single text value makes min and max NaN."""
        summary = summarize_numeric(["-", "100", "250"])

        assert math.isnan(summary.minimum)
        assert math.isnan(summary.maximum)
        assert summary.numeric_values == [100.0, 250.0]
        assert summary.text_count == 1

    def test_blank_strings_are_ignored(self):
        """Test that blank strings count as missing."""
        summary = summarize_numeric(["", "4", "  "])

        assert summary.minimum == 4.0
        assert summary.text_count == 0

    def test_empty(self):
        """Test summarizing no values."""
        summary = summarize_numeric([])

        assert math.isnan(summary.minimum)
        assert summary.numeric_values == []

    def test_labels_when_strings_not_coerced(self):
        """Test that numeric strings are labels when coercion is off."""
        summary = summarize_numeric(["2000", "3000"], coerce_strings=False)

        assert math.isnan(summary.minimum)
        assert summary.numeric_values == []
        assert summary.text_count == 2


class TestNullTokens:
    """Tests for null-token replacement."""

    def test_replaces_only_listed_tokens(self):
        """Test that only exact token matches become None."""
        values, replaced = replace_null_tokens(
            ["-", "100", "na", "250", "NA", "n/a"], ["-", "na", "NA"]
        )

        assert values == [None, "100", None, "250", None, "n/a"]
        assert replaced == 3

    def test_numbers_are_never_tokens(self):
        """Test that numeric cells are never replaced."""
        values, replaced = replace_null_tokens([0, "0"], ["0"])

        assert values == [0, None]
        assert replaced == 1


class TestUniqueValues:
    """Tests for unique values and indices into them."""

    def test_first_occurrence_order(self):
        """Test unique values keep first-occurrence order."""
        assert get_unique_values(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_indices_point_back_to_values(self):
        """Test each index resolves to its row's value."""
        values = ["b", "a", None, "b", "c"]
        unique = get_unique_values(values)
        indices = indices_into(values, unique)

        assert indices == [0, 1, 2, 0, 3]
        assert [unique[i] for i in indices] == values
