"""CLI command modules."""

from cronexpr.cli.commands import check, config, match, runs

__all__ = [
    "check",
    "config",
    "match",
    "runs",
]
