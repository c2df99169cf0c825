"""Tests for reading raw CSV columns."""

from colmodel import Column, VarType
from colmodel.sources.csv import read_csv_columns


class TestReadCsvColumns:
    """Tests for read_csv_columns."""

    def test_reads_columns_in_header_order(self, tmp_path):
        """Test reading columns keyed by header, in order."""
        path = tmp_path / "sales.csv"
        path.write_text("Postcode,Revenue\n2000,100\n3000,-\n")

        result = read_csv_columns(path)

        assert result.success
        columns = result.unwrap()
        assert list(columns) == ["Postcode", "Revenue"]
        assert columns["Postcode"] == ["2000", "3000"]
        assert columns["Revenue"] == ["100", "-"]

    def test_empty_cells_are_none(self, tmp_path):
        """Test that empty cells become None."""
        path = tmp_path / "gaps.csv"
        path.write_text("a,b\n1,\n,2\n")

        columns = read_csv_columns(path).unwrap()

        assert columns["a"] == ["1", None]
        assert columns["b"] == [None, "2"]

    def test_values_feed_columns(self, tmp_path):
        """Test typing columns read from a CSV file."""
        path = tmp_path / "events.csv"
        path.write_text("Start date,Count\n2015-01-01,5\n2015-01-02,7\n")

        columns = read_csv_columns(str(path)).unwrap()
        start = Column("Start date", columns["Start date"])
        count = Column("Count", columns["Count"])

        assert start.type == VarType.TIME
        assert count.type == VarType.SCALAR
        assert count.maximum_value == 7

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a failed result."""
        result = read_csv_columns(tmp_path / "missing.csv")

        assert not result.success
        assert "not found" in result.error

    def test_directory(self, tmp_path):
        """Test that a directory is a failed result."""
        result = read_csv_columns(tmp_path)

        assert not result.success
        assert "not a file" in result.error
