"""Expression validation command."""

from typing import Annotated

import typer

from cronexpr.cli.commands._helpers import (
    ConfigOption,
    VerboseOption,
    load_cli_config,
    parse_or_exit,
)
from cronexpr.cli.console import console, create_table, success


def register(app: typer.Typer) -> None:
    """Register the check command."""

    @app.command()
    def check(
        expression: Annotated[
            str,
            typer.Argument(help="Cron expression (quote it)"),
        ],
        config: ConfigOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Validate an expression and show its fields.

        Examples:
            cronexpr check "*/15 9-17 * * MON-FRI"
        """
        from cronexpr.composer import compose, compose_field

        load_cli_config(config, verbose)
        schedule = parse_or_exit(expression)

        table = create_table(
            "Schedule",
            [("Field", "cyan"), ("Value", "green")],
        )
        for kind, spec in schedule.items():
            table.add_row(kind.value, compose_field(spec))

        console.print(table)
        success(f"Valid: {compose(schedule)}")
