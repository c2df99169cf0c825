"""Tests for the inspect CLI command."""

import json

import pytest
from typer.testing import CliRunner

from colmodel.cli.main import app

runner = CliRunner()


@pytest.fixture
def csv_file(tmp_path):
    """Write a small CSV with a date, a category and a number column."""
    path = tmp_path / "sales.csv"
    path.write_text(
        "Start date (AEST),Postcode,Revenue\n"
        "2015-01-01,2000,100\n"
        "2015-01-02,3000,250\n"
    )
    return path


class TestInspectCommand:
    """Tests for `colmodel inspect`."""

    def test_table_output(self, csv_file):
        """Test the rich table output."""
        result = runner.invoke(app, ["inspect", str(csv_file)])

        assert result.exit_code == 0
        assert "sales.csv" in result.stdout
        assert "Postcode" in result.stdout
        assert "TIME" in result.stdout
        assert "ENUM" in result.stdout

    def test_json_output(self, csv_file):
        """Test the JSON output."""
        result = runner.invoke(app, ["inspect", str(csv_file), "--json"])

        assert result.exit_code == 0
        summaries = {s["name"]: s for s in json.loads(result.stdout)}
        assert summaries["Start date (AEST)"]["type"] == "TIME"
        assert summaries["Start date (AEST)"]["clock_multiplier"] == 1440
        assert summaries["Postcode"]["type"] == "ENUM"
        assert summaries["Postcode"]["unique_count"] == 2
        assert summaries["Revenue"]["type"] == "SCALAR"
        assert summaries["Revenue"]["maximum_value"] == 250

    def test_exclude_type(self, csv_file):
        """Test excluding a type from name guessing."""
        result = runner.invoke(app, ["inspect", str(csv_file), "--json", "-x", "TIME"])

        assert result.exit_code == 0
        summaries = {s["name"]: s for s in json.loads(result.stdout)}
        assert summaries["Start date (AEST)"]["type"] == "ENUM"

    def test_no_suitable_type_exits(self, csv_file):
        """Test exit code 1 when no type is allowed."""
        result = runner.invoke(app, ["inspect", str(csv_file), "--exclude-type", "SCALAR"])

        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a usage error."""
        result = runner.invoke(app, ["inspect", str(tmp_path / "missing.csv")])

        assert result.exit_code == 2
