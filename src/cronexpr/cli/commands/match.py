"""Timestamp matching command."""

from typing import Annotated

import typer

from cronexpr.cli.commands._helpers import (
    ConfigOption,
    VerboseOption,
    load_cli_config,
    parse_or_exit,
    parse_timestamp,
)
from cronexpr.cli.console import success, warning


def register(app: typer.Typer) -> None:
    """Register the match command."""

    @app.command()
    def match(
        expression: Annotated[
            str,
            typer.Argument(help="Cron expression (quote it)"),
        ],
        at: Annotated[
            str | None,
            typer.Option(
                "--at",
                "-a",
                help="ISO 8601 timestamp to check (default: now, UTC)",
            ),
        ] = None,
        config: ConfigOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Check whether a timestamp matches an expression.

        Exits with status 0 on a match and 1 otherwise.
        """
        from cronexpr.matcher import matches

        load_cli_config(config, verbose)
        schedule = parse_or_exit(expression)
        timestamp = parse_timestamp(at)

        if matches(schedule, timestamp):
            success(f"{timestamp.isoformat()} matches")
            return

        warning(f"{timestamp.isoformat()} does not match")
        raise typer.Exit(1)
