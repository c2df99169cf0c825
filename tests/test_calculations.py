"""Tests for row-wise column calculations."""

import math

import pytest

from colmodel import Column, divide_values, sum_values


class TestSumValues:
    """Tests for sum_values."""

    def test_varargs(self):
        """Test summing columns passed as separate arguments."""
        a = Column("a", [1, 2, 3])
        b = Column("b", ["10", "20", "30"])

        assert sum_values(a, b) == [11.0, 22.0, 33.0]

    def test_sequence(self):
        """Test summing columns passed as one list."""
        columns = [Column("a", [1, 2]), Column("b", [3, 4]), Column("c", [5, 6])]

        assert sum_values(columns) == [9.0, 12.0]

    def test_missing_values_give_nan(self):
        """Test that a missing cell makes its row sum NaN."""
        result = sum_values(Column("a", [1, None]), Column("b", [2, 3]))

        assert result[0] == 3.0
        assert math.isnan(result[1])

    def test_non_column_argument_raises(self):
        """Test that a list mixed with columns is rejected, not dropped."""
        a = Column("a", [1, 2])
        b = Column("b", [3, 4])

        with pytest.raises(TypeError, match="list"):
            sum_values(a, [b])

    def test_non_column_in_sequence_raises(self):
        """Test that a sequence must hold only columns."""
        with pytest.raises(TypeError):
            sum_values([Column("a", [1]), [1]])

    def test_length_mismatch(self):
        """Test that row counts must match."""
        with pytest.raises(ValueError, match="different row counts"):
            sum_values(Column("a", [1, 2]), Column("b", [1]))

    def test_no_columns(self):
        """Test that at least one column is needed."""
        with pytest.raises(ValueError):
            sum_values()


class TestDivideValues:
    """Tests for divide_values."""

    def test_divide(self):
        """Test row-wise division."""
        result = divide_values(Column("a", [10, 9]), Column("b", [4, 3]))

        assert result == [2.5, 3.0]

    def test_zero_denominator(self):
        """Test inf and NaN for zero denominators."""
        result = divide_values(Column("a", [1, 0]), Column("b", [0, 0]))

        assert result[0] == math.inf
        assert math.isnan(result[1])

    def test_nan_replace(self):
        """Test the replacement value for zero denominators."""
        result = divide_values(Column("a", [1, 0, 6]), Column("b", [0, 0, 2]), nan_replace=0)

        assert result == [0.0, 0.0, 3.0]

    def test_length_mismatch(self):
        """Test that row counts must match."""
        with pytest.raises(ValueError):
            divide_values(Column("a", [1]), Column("b", [1, 2]))

    def test_quotient_times_denominator_restores_numerator(self):
        """Test that quotient times denominator gives the numerator where it is nonzero."""
        numerator = Column("a", [7, -3.5, 0, 12, 5])
        denominator = Column("b", [2, 0.25, 9, 0, -4])

        quotients = divide_values(numerator, denominator)

        for top, bottom, quotient in zip(
            numerator.values, denominator.values, quotients, strict=True
        ):
            if bottom != 0:
                assert quotient * bottom == pytest.approx(top)

    def test_sum_then_divide(self):
        """Test chaining a sum into a division."""
        total = Column("total", sum_values(Column("a", [1.1, 2.2]), Column("b", [2.2, 3.3])))

        assert divide_values(total, Column("n", [3, 5.5])) == pytest.approx([1.1, 1.0])
