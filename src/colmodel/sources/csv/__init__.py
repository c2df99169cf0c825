"""CSV source."""

from colmodel.sources.csv.loader import read_csv_columns

__all__ = ["read_csv_columns"]
