"""Check timestamps against a Schedule."""

from datetime import date, datetime

from cronexpr.types import FieldKind, Schedule


def weekday(day: date) -> int:
    """Cron day of week for a date (Sunday is 0)."""
    return day.isoweekday() % 7


def day_matches(schedule: Schedule, day: date) -> bool:
    """Check the joint day-of-month/day-of-week constraint for a date.

    When both fields are restricted a day matching either one counts, as in
    standard cron. Otherwise the restricted field (if any) decides.
    """
    dom = schedule.day_of_month
    dow = schedule.day_of_week

    if dom.is_wildcard and dow.is_wildcard:
        return True
    dom_ok = dom.contains(FieldKind.DAY_OF_MONTH, day.day)
    dow_ok = dow.contains(FieldKind.DAY_OF_WEEK, weekday(day))
    if dom.is_wildcard:
        return dow_ok
    if dow.is_wildcard:
        return dom_ok
    return dom_ok or dow_ok


def matches(schedule: Schedule, timestamp: datetime) -> bool:
    """Check whether a timestamp satisfies a Schedule.

    Sub-second precision is ignored.
    """
    return (
        schedule.second.contains(FieldKind.SECOND, timestamp.second)
        and schedule.minute.contains(FieldKind.MINUTE, timestamp.minute)
        and schedule.hour.contains(FieldKind.HOUR, timestamp.hour)
        and schedule.month.contains(FieldKind.MONTH, timestamp.month)
        and schedule.year.contains(FieldKind.YEAR, timestamp.year)
        and day_matches(schedule, timestamp)
    )
