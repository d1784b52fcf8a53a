"""Main CLI application."""

import typer

from cronexpr.cli.commands import check, config, match, runs

app = typer.Typer(
    name="cronexpr",
    help="cronexpr - Parse cron expressions and find their run dates",
    no_args_is_help=True,
)

for command in (check, match, runs, config):
    command.register(app)


if __name__ == "__main__":
    app()
