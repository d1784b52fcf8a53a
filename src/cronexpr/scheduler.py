"""Find run dates for a Schedule.

The search resolves fields coarse to fine (year, month, day, hour, minute,
second). When a field does not match, it jumps straight to the nearest
matching value and resets every finer field to its first (forward) or last
(backward) value; when nothing in the field is left, it carries into the next
coarser unit. Every step moves the candidate strictly in the search
direction, and the search gives up once the candidate leaves the horizon.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Iterator
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

from cronexpr.matcher import day_matches
from cronexpr.types import (
    Direction,
    FieldKind,
    NotFoundError,
    Schedule,
    SearchError,
    SearchResult,
)

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_YEARS = 5

_ONE_SECOND = timedelta(seconds=1)


def search(
    schedule: Schedule,
    start: datetime,
    direction: Direction = Direction.FORWARD,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> datetime:
    """Find the nearest run date at or after/before ``start``.

    Args:
        schedule: Parsed schedule.
        start: Reference timestamp. A matching ``start`` is returned as-is
            (sub-second precision is rounded toward the search direction).
        direction: Search forward or backward in time.
        horizon_years: Maximum number of years to scan past ``start``.

    Returns:
        The matching timestamp, with the same tzinfo as ``start``.

    Raises:
        NotFoundError: If nothing matches within the horizon.
        ValueError: If ``horizon_years`` is not positive.
    """
    if horizon_years < 1:
        raise ValueError(f"horizon_years must be at least 1, got {horizon_years}")

    if direction is Direction.FORWARD:
        # Leave room for carrying one unit past the last year
        last_year = min(start.year + horizon_years, MAXYEAR - 1)
        found = _search_forward(schedule, start, last_year)
    else:
        first_year = max(start.year - horizon_years, MINYEAR + 1)
        found = _search_backward(schedule, start, first_year)

    if found is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "search_horizon_exhausted",
                extra={
                    "cron.expression": str(schedule),
                    "search.direction": direction.value,
                    "search.start": start.isoformat(),
                    "search.horizon_years": horizon_years,
                },
            )
        raise NotFoundError(direction, start, horizon_years)
    return found


def next_run(
    schedule: Schedule,
    start: datetime,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> datetime:
    """Find the first run date at or after ``start``."""
    return search(schedule, start, Direction.FORWARD, horizon_years=horizon_years)


def previous_run(
    schedule: Schedule,
    start: datetime,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> datetime:
    """Find the last run date at or before ``start``."""
    return search(schedule, start, Direction.BACKWARD, horizon_years=horizon_years)


class RunSequence:
    """Lazy sequence of up to ``count`` consecutive run dates.

    Iterating yields SearchResult values. A failed search is yielded as the
    final item, so a short sequence always ends with the reason it stopped.
    Each iteration restarts from ``start``.
    """

    def __init__(
        self,
        schedule: Schedule,
        start: datetime,
        direction: Direction,
        count: int,
        *,
        horizon_years: int = DEFAULT_HORIZON_YEARS,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self.schedule = schedule
        self.start = start
        self.direction = direction
        self.count = count
        self.horizon_years = horizon_years

    @property
    def step(self) -> timedelta:
        """How far past each hit the next search starts."""
        if self.schedule.extended:
            return timedelta(seconds=1)
        return timedelta(minutes=1)

    def __iter__(self) -> Iterator[SearchResult]:
        reference = self.start
        for _ in range(self.count):
            try:
                found = search(
                    self.schedule,
                    reference,
                    self.direction,
                    horizon_years=self.horizon_years,
                )
            except SearchError as e:
                yield SearchResult.failed(e)
                return
            yield SearchResult.found(found)
            if self.direction is Direction.FORWARD:
                reference = found + self.step
            else:
                reference = found - self.step

    def __repr__(self) -> str:
        return (
            f"RunSequence({str(self.schedule)!r}, start={self.start.isoformat()}, "
            f"direction={self.direction.value}, count={self.count})"
        )


def search_many(
    schedule: Schedule,
    start: datetime,
    direction: Direction,
    count: int,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> RunSequence:
    """Find up to ``count`` consecutive run dates from ``start``."""
    return RunSequence(
        schedule, start, direction, count, horizon_years=horizon_years
    )


def next_runs(
    schedule: Schedule,
    start: datetime,
    count: int,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> RunSequence:
    """Find the next ``count`` run dates, starting at ``start`` inclusive."""
    return search_many(
        schedule, start, Direction.FORWARD, count, horizon_years=horizon_years
    )


def previous_runs(
    schedule: Schedule,
    start: datetime,
    count: int,
    *,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> RunSequence:
    """Find the previous ``count`` run dates, starting at ``start`` inclusive."""
    return search_many(
        schedule, start, Direction.BACKWARD, count, horizon_years=horizon_years
    )


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _next_day(schedule: Schedule, candidate: datetime) -> int | None:
    """First day >= candidate's day in its month that passes the day check."""
    last = _days_in_month(candidate.year, candidate.month)
    if schedule.day_of_week.is_wildcard:
        found = schedule.day_of_month.next_matching(
            FieldKind.DAY_OF_MONTH, candidate.day
        )
        return found if found is not None and found <= last else None

    for day in range(candidate.day, last + 1):
        if day_matches(schedule, date(candidate.year, candidate.month, day)):
            return day
    return None


def _previous_day(schedule: Schedule, candidate: datetime) -> int | None:
    """Last day <= candidate's day in its month that passes the day check."""
    if schedule.day_of_week.is_wildcard:
        return schedule.day_of_month.previous_matching(
            FieldKind.DAY_OF_MONTH, candidate.day
        )

    for day in range(candidate.day, 0, -1):
        if day_matches(schedule, date(candidate.year, candidate.month, day)):
            return day
    return None


def _search_forward(
    schedule: Schedule, start: datetime, last_year: int
) -> datetime | None:
    if start.year > last_year:
        return None

    candidate = start
    if candidate.microsecond:
        candidate = candidate.replace(microsecond=0) + _ONE_SECOND

    while candidate.year <= last_year:
        year = candidate.year
        if not schedule.year.contains(FieldKind.YEAR, year):
            found = schedule.year.next_matching(FieldKind.YEAR, year)
            if found is None or found > last_year:
                return None
            candidate = candidate.replace(
                year=found, month=1, day=1, hour=0, minute=0, second=0
            )
            continue

        found = schedule.month.next_matching(FieldKind.MONTH, candidate.month)
        if found is None:
            candidate = candidate.replace(
                year=year + 1, month=1, day=1, hour=0, minute=0, second=0
            )
            continue
        if found != candidate.month:
            candidate = candidate.replace(
                month=found, day=1, hour=0, minute=0, second=0
            )
            continue

        found = _next_day(schedule, candidate)
        if found is None:
            last = _days_in_month(year, candidate.month)
            candidate = candidate.replace(
                day=last, hour=0, minute=0, second=0
            ) + timedelta(days=1)
            continue
        if found != candidate.day:
            candidate = candidate.replace(day=found, hour=0, minute=0, second=0)
            continue

        found = schedule.hour.next_matching(FieldKind.HOUR, candidate.hour)
        if found is None:
            candidate = candidate.replace(
                hour=0, minute=0, second=0
            ) + timedelta(days=1)
            continue
        if found != candidate.hour:
            candidate = candidate.replace(hour=found, minute=0, second=0)
            continue

        found = schedule.minute.next_matching(FieldKind.MINUTE, candidate.minute)
        if found is None:
            candidate = candidate.replace(minute=0, second=0) + timedelta(hours=1)
            continue
        if found != candidate.minute:
            candidate = candidate.replace(minute=found, second=0)
            continue

        found = schedule.second.next_matching(FieldKind.SECOND, candidate.second)
        if found is None:
            candidate = candidate.replace(second=0) + timedelta(minutes=1)
            continue
        return candidate.replace(second=found)

    return None


def _search_backward(
    schedule: Schedule, start: datetime, first_year: int
) -> datetime | None:
    if start.year < first_year:
        return None

    candidate = start.replace(microsecond=0)

    while candidate.year >= first_year:
        year = candidate.year
        if not schedule.year.contains(FieldKind.YEAR, year):
            found = schedule.year.previous_matching(FieldKind.YEAR, year)
            if found is None or found < first_year:
                return None
            candidate = candidate.replace(
                year=found, month=12, day=31, hour=23, minute=59, second=59
            )
            continue

        found = schedule.month.previous_matching(FieldKind.MONTH, candidate.month)
        if found is None:
            candidate = candidate.replace(
                year=year - 1, month=12, day=31, hour=23, minute=59, second=59
            )
            continue
        if found != candidate.month:
            candidate = candidate.replace(
                month=found,
                day=_days_in_month(year, found),
                hour=23,
                minute=59,
                second=59,
            )
            continue

        found = _previous_day(schedule, candidate)
        if found is None:
            candidate = (
                candidate.replace(day=1, hour=0, minute=0, second=0) - _ONE_SECOND
            )
            continue
        if found != candidate.day:
            candidate = candidate.replace(day=found, hour=23, minute=59, second=59)
            continue

        found = schedule.hour.previous_matching(FieldKind.HOUR, candidate.hour)
        if found is None:
            candidate = (
                candidate.replace(hour=0, minute=0, second=0) - _ONE_SECOND
            )
            continue
        if found != candidate.hour:
            candidate = candidate.replace(hour=found, minute=59, second=59)
            continue

        found = schedule.minute.previous_matching(FieldKind.MINUTE, candidate.minute)
        if found is None:
            candidate = candidate.replace(minute=0, second=0) - _ONE_SECOND
            continue
        if found != candidate.minute:
            candidate = candidate.replace(minute=found, second=59)
            continue

        found = schedule.second.previous_matching(FieldKind.SECOND, candidate.second)
        if found is None:
            candidate = candidate.replace(second=0) - _ONE_SECOND
            continue
        return candidate.replace(second=found)

    return None
