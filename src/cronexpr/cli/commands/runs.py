"""Run date commands (next, previous)."""

from typing import Annotated

import typer

from cronexpr.cli.commands._helpers import (
    ConfigOption,
    VerboseOption,
    load_cli_config,
    parse_or_exit,
    parse_timestamp,
)
from cronexpr.cli.console import console, create_table, error
from cronexpr.types import Direction

ExpressionArgument = Annotated[
    str,
    typer.Argument(help="Cron expression (quote it)"),
]

FromOption = Annotated[
    str | None,
    typer.Option(
        "--from",
        "-f",
        help="ISO 8601 reference timestamp (default: now, UTC)",
    ),
]

CountOption = Annotated[
    int | None,
    typer.Option(
        "--count",
        "-n",
        min=1,
        help="Number of run dates (default: from config)",
    ),
]


def register(app: typer.Typer) -> None:
    """Register the next and previous commands."""

    @app.command("next")
    def next_command(
        expression: ExpressionArgument,
        start: FromOption = None,
        count: CountOption = None,
        config: ConfigOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Show the next run dates of an expression.

        Examples:
            cronexpr next "0 9 * * MON-FRI" -n 3
            cronexpr next "*/5 * * * *" --from 2024-01-01T00:00:00
        """
        _show_runs(expression, start, count, config, verbose, Direction.FORWARD)

    @app.command("previous")
    def previous_command(
        expression: ExpressionArgument,
        start: FromOption = None,
        count: CountOption = None,
        config: ConfigOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Show the previous run dates of an expression."""
        _show_runs(expression, start, count, config, verbose, Direction.BACKWARD)


def _show_runs(
    expression: str,
    start: str | None,
    count: int | None,
    config_path,
    verbose: bool,
    direction: Direction,
) -> None:
    from cronexpr.scheduler import search_many

    config = load_cli_config(config_path, verbose)
    schedule = parse_or_exit(expression)
    reference = parse_timestamp(start)

    results = search_many(
        schedule,
        reference,
        direction,
        count or config.search.default_count,
        horizon_years=config.search.horizon_years,
    )

    title = "Next runs" if direction is Direction.FORWARD else "Previous runs"
    table = create_table(title, [("#", "dim"), ("Run date", "green")])
    failure = None
    for index, result in enumerate(results, start=1):
        if not result.ok:
            failure = result.error
            break
        table.add_row(str(index), result.unwrap().isoformat(sep=" "))

    if table.row_count:
        console.print(table)
    if failure is not None:
        error(str(failure))
        raise typer.Exit(1)
