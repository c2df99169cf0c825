"""Inspect command - type every column of a CSV file."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table as RichTable

from colmodel.analysis.typing.hints import NoSuitableTypeError
from colmodel.cli.common import CsvPathArg, JsonFlag, VerboseOption, console, setup_logging
from colmodel.column import Column, ColumnOptions
from colmodel.core.models.base import VarType
from colmodel.sources.csv.loader import read_csv_columns

ExcludeTypeOption = Annotated[
    list[VarType] | None,
    typer.Option(
        "--exclude-type",
        "-x",
        help="Type never guessed from column names (repeatable)",
        case_sensitive=False,
    ),
]

NullTokenOption = Annotated[
    list[str] | None,
    typer.Option(
        "--null-token",
        help="Token treated as null in numeric columns (repeatable, replaces the defaults)",
    ),
]


def _format_number(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:g}"


def inspect(
    csv_path: CsvPathArg,
    exclude_type: ExcludeTypeOption = None,
    null_token: NullTokenOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Guess the type of every column in a CSV file.

    Shows each column's type, numeric range, category count and, for time
    columns, the playback clock.

    Examples:

        colmodel inspect data.csv

        colmodel inspect data.csv --exclude-type ENUM --json
    """
    setup_logging(verbose)

    result = read_csv_columns(csv_path)
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)

    options = ColumnOptions(excluded_types=exclude_type or [], null_tokens=null_token)
    try:
        columns = [Column(name, values, options) for name, values in result.unwrap().items()]
    except NoSuitableTypeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    summaries = [column.summary() for column in columns]

    if json_output:
        typer.echo(json.dumps([s.model_dump(mode="json") for s in summaries], indent=2))
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Column")
    table.add_column("Type")
    table.add_column("Subtype")
    table.add_column("Rows", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Categories", justify="right")
    table.add_column("Clock")

    for summary in summaries:
        clock = ""
        if summary.start_time and summary.stop_time:
            clock = (
                f"{summary.start_time:%Y-%m-%d %H:%M:%S} → "
                f"{summary.stop_time:%Y-%m-%d %H:%M:%S} (x{summary.clock_multiplier})"
            )
        table.add_row(
            summary.name,
            summary.type.value,
            summary.subtype.value if summary.subtype else "",
            str(summary.row_count),
            _format_number(summary.minimum_value),
            _format_number(summary.maximum_value),
            str(summary.unique_count) if summary.unique_count is not None else "",
            clock,
        )

    console.print(f"\n[bold]{csv_path.name}[/bold]\n")
    console.print(table)
