"""Helpers that work directly from expression strings.

Each helper parses the expression on every call and, when no date is given,
evaluates it relative to the current UTC time (as a naive datetime).
"""

from datetime import UTC, datetime

from cronexpr.matcher import matches
from cronexpr.parser import parse
from cronexpr.scheduler import (
    DEFAULT_HORIZON_YEARS,
    RunSequence,
    next_run,
    next_runs,
    previous_run,
    previous_runs,
)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime."""
    return datetime.now(UTC).replace(tzinfo=None)


def get_next_run_date(
    expression: str,
    date: datetime | None = None,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> datetime:
    """Find the next run date of an expression.

    Examples:
        >>> get_next_run_date("* * * * *", datetime(2016, 12, 17))
        datetime.datetime(2016, 12, 17, 0, 0)
    """
    return next_run(
        parse(expression), date or utc_now(), horizon_years=horizon_years
    )


def get_previous_run_date(
    expression: str,
    date: datetime | None = None,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> datetime:
    """Find the previous run date of an expression."""
    return previous_run(
        parse(expression), date or utc_now(), horizon_years=horizon_years
    )


def get_next_run_dates(
    expression: str,
    count: int,
    date: datetime | None = None,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> RunSequence:
    """Find the next ``count`` run dates of an expression."""
    return next_runs(
        parse(expression), date or utc_now(), count, horizon_years=horizon_years
    )


def get_previous_run_dates(
    expression: str,
    count: int,
    date: datetime | None = None,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> RunSequence:
    """Find the previous ``count`` run dates of an expression."""
    return previous_runs(
        parse(expression), date or utc_now(), count, horizon_years=horizon_years
    )


def matches_date(expression: str, date: datetime | None = None) -> bool:
    """Check whether a date (default: now) matches an expression.

    Examples:
        >>> matches_date("*/2 * * * *", datetime(2016, 12, 17, 0, 2))
        True
        >>> matches_date("*/7 * * * *", datetime(2016, 12, 17, 0, 6))
        False
    """
    return matches(parse(expression), date or utc_now())
