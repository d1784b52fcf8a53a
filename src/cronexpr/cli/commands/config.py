"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from cronexpr.cli.console import console, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate, paths"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: $CRONEXPR_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from rich.syntax import Syntax
        from rich.table import Table

        from cronexpr.config import ConfigError, load_config
        from cronexpr.config.paths import get_all_paths, get_config_path

        expanded_path = path.expanduser() if path else get_config_path()

        if action == "show":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            content = expanded_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(syntax)

        elif action == "validate":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            try:
                config_obj = load_config(expanded_path)
            except ConfigError as e:
                error(f"Configuration validation failed: {e}")
                raise typer.Exit(1) from None

            table = Table(title="Configuration Summary")
            table.add_column("Setting", style="cyan")
            table.add_column("Value", style="green")
            table.add_row("Search horizon", f"{config_obj.search.horizon_years} year(s)")
            table.add_row("Default count", str(config_obj.search.default_count))
            table.add_row("Log level", config_obj.logging.level)
            console.print(table)
            success("Configuration is valid")

        elif action == "paths":
            for name, value in get_all_paths().items():
                console.print(f"[cyan]{name}[/cyan]: {value}")

        else:
            error(f"Unknown action: {action}")
            console.print("Valid actions: show, validate, paths")
            raise typer.Exit(1)
