"""CSV file loader - raw column values for typing.

CSV files are untyped sources - all data is text. Columns are read as
VARCHAR so that typing decisions are made by Column, not by the reader.
"""

from pathlib import Path

import duckdb

from colmodel.core.logging import get_logger
from colmodel.core.models.base import CellValue, Result

logger = get_logger(__name__)


def read_csv_columns(path: Path | str) -> Result[dict[str, list[CellValue]]]:
    """Read a CSV file into raw column values, keyed by header name.

    Empty cells become None; every other cell stays a string.

    Args:
        path: Path to the CSV file

    Returns:
        Result containing column name -> values, in header order
    """
    path = Path(path)
    if not path.exists():
        return Result.fail(f"CSV file not found: {path}")
    if not path.is_file():
        return Result.fail(f"Path is not a file: {path}")

    escaped = str(path).replace("'", "''")
    conn = duckdb.connect(":memory:")
    try:
        relation = conn.execute(
            f"SELECT * FROM read_csv('{escaped}', all_varchar = true, header = true)"
        )
        names = [description[0] for description in relation.description]
        rows = relation.fetchall()
    except duckdb.Error as e:
        return Result.fail(f"Failed to read CSV: {e}")
    finally:
        conn.close()

    columns: dict[str, list[CellValue]] = {name: [] for name in names}
    for row in rows:
        for name, value in zip(names, row, strict=True):
            columns[name].append(value)

    logger.debug("csv_read", path=str(path), columns=len(names), rows=len(rows))
    return Result.ok(columns)
