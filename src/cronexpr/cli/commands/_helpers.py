"""Shared helpers for CLI commands."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from cronexpr.cli.console import error

if TYPE_CHECKING:
    from cronexpr.config import CronConfig
    from cronexpr.types import Schedule

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
]


def load_cli_config(path: Path | None, verbose: bool = False) -> CronConfig:
    """Load configuration and set up logging, exiting on errors."""
    from cronexpr.config import ConfigError, load_config
    from cronexpr.logging import configure_logging

    try:
        config = load_config(path)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    configure_logging("DEBUG" if verbose else config.logging.level, use_rich=True)
    return config


def parse_or_exit(expression: str) -> Schedule:
    """Parse an expression, printing the error and exiting on failure."""
    from cronexpr.parser import parse
    from cronexpr.types import ParseError

    try:
        return parse(expression)
    except ParseError as e:
        error(f"Invalid expression: {e}")
        raise typer.Exit(1) from None


def parse_timestamp(value: str | None) -> datetime:
    """Parse an ISO 8601 timestamp option (default: now, UTC)."""
    from cronexpr.shortcuts import utc_now

    if value is None:
        return utc_now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        error(f"Invalid timestamp: {value!r} (expected ISO 8601)")
        raise typer.Exit(1) from None
