"""CLI module."""

from cronexpr.cli.app import app

__all__ = ["app"]
