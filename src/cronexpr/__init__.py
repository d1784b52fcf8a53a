"""Cron expression parsing, matching and scheduling.

Public API:
- parse / compose: Convert between expression text and Schedule
- matches: Check a timestamp against a Schedule
- search, next_run, previous_run: Find the nearest run date
- search_many, next_runs, previous_runs: Find consecutive run dates

Shortcuts working directly from expression strings live in
cronexpr.shortcuts.
"""

from cronexpr.composer import compose
from cronexpr.fields import FieldSpec, Range, Single, Step, ValueList, Wildcard
from cronexpr.matcher import day_matches, matches
from cronexpr.parser import parse
from cronexpr.scheduler import (
    DEFAULT_HORIZON_YEARS,
    RunSequence,
    next_run,
    next_runs,
    previous_run,
    previous_runs,
    search,
    search_many,
)
from cronexpr.shortcuts import (
    get_next_run_date,
    get_next_run_dates,
    get_previous_run_date,
    get_previous_run_dates,
    matches_date,
)
from cronexpr.types import (
    CronError,
    Direction,
    FieldKind,
    NotFoundError,
    ParseError,
    Schedule,
    SearchError,
    SearchResult,
)

__all__ = [
    "DEFAULT_HORIZON_YEARS",
    "CronError",
    "Direction",
    "FieldKind",
    "FieldSpec",
    "NotFoundError",
    "ParseError",
    "Range",
    "RunSequence",
    "Schedule",
    "SearchError",
    "SearchResult",
    "Single",
    "Step",
    "ValueList",
    "Wildcard",
    "compose",
    "day_matches",
    "get_next_run_date",
    "get_next_run_dates",
    "get_previous_run_date",
    "get_previous_run_dates",
    "matches",
    "matches_date",
    "next_run",
    "next_runs",
    "parse",
    "previous_run",
    "previous_runs",
    "search",
    "search_many",
]
