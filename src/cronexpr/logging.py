"""Centralized logging configuration for cronexpr.

The library itself only creates module loggers; applications (and the CLI)
call configure_logging() once at startup.

Logging Levels:
- DEBUG: Rejected expressions, exhausted search horizons, config loading
- INFO: CLI operations
- WARNING: Recoverable issues
- ERROR: Failures that affect operation
"""

import logging
import os

ENV_VAR = "CRONEXPR_LOG_LEVEL"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    Converts full module paths to short component names:
    - cronexpr.scheduler -> scheduler
    - cronexpr.config.loader -> config
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "cronexpr":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> str:
    """Resolve a log level name from the argument or CRONEXPR_LOG_LEVEL.

    Unknown names fall back to INFO.
    """
    if level is None:
        level = os.environ.get(ENV_VAR, "INFO")
    level = level.upper()
    if level not in LEVELS:
        level = "INFO"
    return level


def configure_logging(
    level: str | None = None,
    use_rich: bool = False,
) -> None:
    """Configure logging for cronexpr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses CRONEXPR_LOG_LEVEL env var or INFO.
        use_rich: Use Rich handler for colorful output.
    """
    log_level = getattr(logging, resolve_level(level))

    console_handler: logging.Handler
    if use_rich:
        from rich.logging import RichHandler

        console_handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,
    )
