"""Cron expression parser.

Accepted layouts (whitespace separated):

    minute hour day-of-month month day-of-week
    second minute hour day-of-month month day-of-week
    second minute hour day-of-month month day-of-week year

Per-field item syntax: ``*``, ``*/n``, ``a``, ``a-b``, ``a-b/n``, ``a/n`` and
comma separated lists of those. Months and weekdays also accept their
three-letter English names (``JAN``, ``MON``...).
"""

import logging
import re

from cronexpr.fields import FieldSpec, Range, Single, Step, ValueList, Wildcard
from cronexpr.types import FieldKind, ParseError, Schedule

logger = logging.getLogger(__name__)

STANDARD_FIELDS = (
    FieldKind.MINUTE,
    FieldKind.HOUR,
    FieldKind.DAY_OF_MONTH,
    FieldKind.MONTH,
    FieldKind.DAY_OF_WEEK,
)
EXTENDED_FIELDS = (FieldKind.SECOND, *STANDARD_FIELDS)
FULL_FIELDS = (*EXTENDED_FIELDS, FieldKind.YEAR)

LAYOUTS: dict[int, tuple[FieldKind, ...]] = {
    5: STANDARD_FIELDS,
    6: EXTENDED_FIELDS,
    7: FULL_FIELDS,
}

MONTH_ALIASES = {
    name: number
    for number, name in enumerate(
        ["JAN", "FEB", "MAR", "APR", "MAY", "JUN",
         "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"],
        start=1,
    )
}
WEEKDAY_ALIASES = {
    name: number
    for number, name in enumerate(["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"])
}

_ALIASES: dict[FieldKind, dict[str, int]] = {
    FieldKind.MONTH: MONTH_ALIASES,
    FieldKind.DAY_OF_WEEK: WEEKDAY_ALIASES,
}

_NUMBER_PATTERN = re.compile(r"[0-9]+")


def parse(expression: str) -> Schedule:
    """Parse a cron expression into a Schedule.

    Args:
        expression: Cron expression with 5, 6 or 7 fields.

    Returns:
        The validated Schedule.

    Raises:
        ParseError: If the expression is malformed or a value is out of bounds.
    """
    if not isinstance(expression, str):
        raise ParseError(f"Expected a string expression, got {type(expression).__name__}")

    parts = expression.split()
    layout = LAYOUTS.get(len(parts))
    if layout is None:
        logger.debug(
            "cron_field_count_invalid",
            extra={"cron.expression": expression, "cron.field_count": len(parts)},
        )
        raise ParseError(
            f"Expected 5, 6 or 7 fields in cron expression, got {len(parts)}: "
            f"{expression!r}",
            token=expression,
        )

    specs: dict[FieldKind, FieldSpec] = {
        FieldKind.SECOND: Single(0),
        FieldKind.YEAR: Wildcard(),
    }
    try:
        for kind, text in zip(layout, parts, strict=True):
            specs[kind] = parse_field(kind, text)
    except ParseError as e:
        logger.debug(
            "cron_parse_failed",
            extra={
                "cron.expression": expression,
                "cron.field": e.field,
                "cron.token": e.token,
            },
        )
        raise

    return Schedule(
        second=specs[FieldKind.SECOND],
        minute=specs[FieldKind.MINUTE],
        hour=specs[FieldKind.HOUR],
        day_of_month=specs[FieldKind.DAY_OF_MONTH],
        month=specs[FieldKind.MONTH],
        day_of_week=specs[FieldKind.DAY_OF_WEEK],
        year=specs[FieldKind.YEAR],
        extended=FieldKind.SECOND in layout,
    )


def parse_field(kind: FieldKind, text: str) -> FieldSpec:
    """Parse one field's text (possibly a comma separated list)."""
    items = [_parse_item(kind, item) for item in text.split(",")]
    if len(items) == 1:
        return items[0]
    return ValueList(tuple(items))


def _parse_item(kind: FieldKind, item: str) -> FieldSpec:
    if not item:
        raise ParseError(f"Empty item in {kind.value} field", field=kind, token=item)

    base_text, slash, step_text = item.partition("/")
    if slash:
        step = _parse_step(kind, item, step_text)
        if base_text == "*":
            return Step(Wildcard(), step)
        if "-" in base_text:
            return Step(_parse_range(kind, item, base_text), step)
        # a/n runs from a to the end of the field
        start = _parse_value(kind, item, base_text)
        return Step(_build_range(kind, item, start, kind.max_value), step)

    if item == "*":
        return Wildcard()
    if "-" in item:
        return _parse_range(kind, item, item)

    value = _parse_value(kind, item, item)
    if kind is FieldKind.DAY_OF_WEEK:
        value = kind.normalize_value(value)
    return Single(value)


def _parse_range(kind: FieldKind, item: str, text: str) -> Range:
    start_text, _, end_text = text.partition("-")
    start = _parse_value(kind, item, start_text)
    end = _parse_value(kind, item, end_text)
    return _build_range(kind, item, start, end)


def _build_range(kind: FieldKind, item: str, start: int, end: int) -> Range:
    if start > end:
        raise ParseError(
            f"Invalid range in {kind.value} field: {start} > {end}",
            field=kind,
            token=item,
        )
    return Range(start, end)


def _parse_step(kind: FieldKind, item: str, text: str) -> int:
    step = _parse_number(kind, item, text, "step")
    if step < 1:
        raise ParseError(
            f"Step must be at least 1 in {kind.value} field, got {step}",
            field=kind,
            token=item,
        )
    return step


def _parse_value(kind: FieldKind, item: str, text: str) -> int:
    aliases = _ALIASES.get(kind, {})
    if text.upper() in aliases:
        return aliases[text.upper()]

    value = _parse_number(kind, item, text, "value")
    if not kind.in_bounds(value):
        raise ParseError(
            f"Value {value} out of bounds for {kind.value} field "
            f"({kind.min_value}-{kind.max_value})",
            field=kind,
            token=item,
        )
    return value


def _parse_number(kind: FieldKind, item: str, text: str, what: str) -> int:
    if not _NUMBER_PATTERN.fullmatch(text):
        raise ParseError(
            f"Invalid {what} in {kind.value} field: {text!r}",
            field=kind,
            token=item,
        )
    # int() refuses digit strings past sys.get_int_max_str_digits()
    try:
        return int(text)
    except ValueError as e:
        raise ParseError(
            f"Invalid {what} in {kind.value} field: too many digits",
            field=kind,
            token=item,
        ) from e
