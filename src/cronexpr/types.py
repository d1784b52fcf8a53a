"""Core cron types.

Public types:
- FieldKind: The seven schedule fields and their bounds
- Schedule: A parsed, validated cron expression
- Direction: Search direction for the scheduler
- SearchResult: Success/failure value yielded by run sequences

Errors:
- CronError: Base class for all cron errors
- ParseError: Raised for malformed expressions
- SearchError / NotFoundError: Raised when a search finds nothing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronexpr.fields import FieldSpec


class FieldKind(StrEnum):
    """Schedule fields, ordered from finest to coarsest."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"
    YEAR = "year"

    @property
    def min_value(self) -> int:
        return _BOUNDS[self][0]

    @property
    def max_value(self) -> int:
        return _BOUNDS[self][1]

    def in_bounds(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def normalize_value(self, value: int) -> int:
        """Map a value to its canonical form (day-of-week 7 is Sunday, 0)."""
        if self is FieldKind.DAY_OF_WEEK and value == 7:
            return 0
        return value


_BOUNDS: dict[FieldKind, tuple[int, int]] = {
    FieldKind.SECOND: (0, 59),
    FieldKind.MINUTE: (0, 59),
    FieldKind.HOUR: (0, 23),
    FieldKind.DAY_OF_MONTH: (1, 31),
    FieldKind.MONTH: (1, 12),
    FieldKind.DAY_OF_WEEK: (0, 7),
    FieldKind.YEAR: (1970, 2099),
}


class Direction(StrEnum):
    """Which way the scheduler searches from the reference instant."""

    FORWARD = "forward"
    BACKWARD = "backward"


class CronError(Exception):
    """Base class for cron expression errors."""

    pass


class ParseError(CronError):
    """An expression could not be parsed.

    Carries the offending field (None for whole-expression problems such as
    a wrong field count) and the raw token that caused the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        field: FieldKind | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.token = token


class SearchError(CronError):
    """A scheduler search failed."""

    pass


class NotFoundError(SearchError):
    """No matching timestamp exists within the search horizon."""

    def __init__(
        self,
        direction: Direction,
        start: datetime,
        horizon_years: int,
    ) -> None:
        super().__init__(
            f"No {direction.value} match within {horizon_years} year(s) "
            f"of {start.isoformat()}"
        )
        self.direction = direction
        self.start = start
        self.horizon_years = horizon_years


@dataclass(frozen=True)
class Schedule:
    """A validated cron schedule.

    Built by the parser; never mutated afterwards, so a single instance can be
    shared freely between threads.
    """

    second: FieldSpec
    minute: FieldSpec
    hour: FieldSpec
    day_of_month: FieldSpec
    month: FieldSpec
    day_of_week: FieldSpec
    year: FieldSpec
    # Source text carried an explicit seconds field
    extended: bool = field(default=False, compare=False)

    def spec(self, kind: FieldKind) -> FieldSpec:
        """Get the field model for a field kind."""
        return getattr(self, kind.value)

    def items(self) -> list[tuple[FieldKind, FieldSpec]]:
        """All (kind, model) pairs, finest field first."""
        return [(kind, self.spec(kind)) for kind in FieldKind]

    def __str__(self) -> str:
        from cronexpr.composer import compose

        return compose(self)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search in a run sequence.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: datetime | None = None
    error: SearchError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("SearchResult needs exactly one of value or error")

    @classmethod
    def found(cls, value: datetime) -> SearchResult:
        return cls(value=value)

    @classmethod
    def failed(cls, error: SearchError) -> SearchResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> datetime:
        """Return the found timestamp, raising the carried error otherwise."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
