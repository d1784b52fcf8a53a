"""Tests for matching timestamps against schedules."""

from datetime import UTC, date, datetime

import pytest

from cronexpr.matcher import day_matches, matches, weekday
from cronexpr.parser import parse


class TestWeekday:
    def test_sunday_is_zero(self):
        assert weekday(date(2024, 10, 13)) == 0

    def test_saturday_is_six(self):
        assert weekday(date(2016, 12, 17)) == 6

    def test_monday_is_one(self):
        assert weekday(date(2024, 1, 1)) == 1


class TestMatches:
    def test_every_minute_matches_any_minute(self, every_minute):
        assert matches(every_minute, datetime(2016, 12, 17, 0, 0))
        assert matches(every_minute, datetime(1999, 1, 1, 23, 59))
        assert matches(every_minute, datetime(2150, 7, 4, 12, 30))

    def test_step(self):
        assert matches(parse("*/2 * * * *"), datetime(2016, 12, 17, 0, 2)) is True
        assert matches(parse("*/7 * * * *"), datetime(2016, 12, 17, 0, 6)) is False

    def test_hour_and_minute(self):
        schedule = parse("30 14 * * *")

        assert matches(schedule, datetime(2024, 1, 1, 14, 30)) is True
        assert matches(schedule, datetime(2024, 1, 1, 14, 31)) is False
        assert matches(schedule, datetime(2024, 1, 1, 15, 30)) is False

    def test_month(self):
        schedule = parse("0 0 * JUN *")

        assert matches(schedule, datetime(2024, 6, 15)) is True
        assert matches(schedule, datetime(2024, 7, 15)) is False

    def test_standard_expression_requires_second_zero(self, every_minute):
        assert matches(every_minute, datetime(2024, 1, 1, 0, 0, 30)) is False

    def test_seconds_field(self):
        schedule = parse("30 * * * * *")

        assert matches(schedule, datetime(2024, 1, 1, 0, 0, 30)) is True
        assert matches(schedule, datetime(2024, 1, 1, 0, 0, 0)) is False

    def test_microseconds_are_ignored(self, every_minute):
        assert matches(every_minute, datetime(2024, 1, 1, 0, 0, 0, 500)) is True

    def test_year_field(self):
        schedule = parse("0 0 0 1 1 * 2030")

        assert matches(schedule, datetime(2030, 1, 1)) is True
        assert matches(schedule, datetime(2031, 1, 1)) is False

    def test_timezone_aware_timestamp(self):
        schedule = parse("0 12 * * *")

        assert matches(schedule, datetime(2024, 1, 1, 12, 0, tzinfo=UTC)) is True


class TestDayRules:
    """Day-of-month and day-of-week are OR'd when both are restricted."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (datetime(2024, 9, 13), True),  # Friday the 13th
            (datetime(2024, 9, 6), True),  # Friday
            (datetime(2024, 10, 13), True),  # Sunday the 13th
            (datetime(2024, 9, 12), False),  # Thursday the 12th
        ],
    )
    def test_both_restricted_is_disjunction(self, day: datetime, expected: bool):
        assert matches(parse("0 0 13 * 5"), day) is expected

    def test_only_day_of_month_restricted(self):
        schedule = parse("0 0 13 * *")

        assert matches(schedule, datetime(2024, 10, 13)) is True
        assert matches(schedule, datetime(2024, 9, 6)) is False

    def test_only_day_of_week_restricted(self):
        schedule = parse("0 0 * * 5")

        assert matches(schedule, datetime(2024, 9, 13)) is True
        assert matches(schedule, datetime(2024, 10, 13)) is False

    @pytest.mark.parametrize("expression", ["0 0 * * 0", "0 0 * * 7", "0 0 * * SUN"])
    def test_sunday_spellings(self, expression: str):
        assert matches(parse(expression), datetime(2024, 10, 13)) is True
        assert matches(parse(expression), datetime(2024, 10, 14)) is False

    def test_weekend_range_through_seven(self):
        schedule = parse("0 0 * * 6-7")

        assert matches(schedule, datetime(2024, 10, 12)) is True  # Saturday
        assert matches(schedule, datetime(2024, 10, 13)) is True  # Sunday
        assert matches(schedule, datetime(2024, 10, 14)) is False  # Monday

    def test_day_matches_unrestricted(self, every_minute):
        assert day_matches(every_minute, date(2024, 2, 29)) is True
