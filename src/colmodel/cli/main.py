"""Main CLI application entry point."""

from __future__ import annotations

import typer

from colmodel.cli.commands import inspect

app = typer.Typer(
    name="colmodel",
    help="colmodel - type raw tabular columns and build time intervals.",
    no_args_is_help=True,
)

# Register commands
app.command()(inspect.inspect)


@app.callback()
def callback() -> None:
    """colmodel - type raw tabular columns and build time intervals."""


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
