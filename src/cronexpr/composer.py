"""Write Schedules back out as cron expressions."""

from cronexpr.fields import FieldSpec, Range, Single, Step, ValueList, Wildcard
from cronexpr.parser import EXTENDED_FIELDS, FULL_FIELDS, STANDARD_FIELDS
from cronexpr.types import Schedule


def compose(schedule: Schedule) -> str:
    """Compose a cron expression from a Schedule.

    Seconds are written when the schedule was parsed from an extended
    expression; the year is written whenever it is restricted (which also
    forces the seconds field, since a year needs the seven-field layout).
    """
    if not schedule.year.is_wildcard:
        layout = FULL_FIELDS
    elif schedule.extended:
        layout = EXTENDED_FIELDS
    else:
        layout = STANDARD_FIELDS
    return " ".join(compose_field(schedule.spec(kind)) for kind in layout)


def compose_field(spec: FieldSpec) -> str:
    """Compose a single field value."""
    match spec:
        case Wildcard():
            return "*"
        case Single():
            return str(spec.value)
        case Range():
            return f"{spec.start}-{spec.end}"
        case Step():
            return f"{compose_field(spec.base)}/{spec.step}"
        case ValueList():
            return ",".join(compose_field(item) for item in spec.items)
        case _:
            raise TypeError(f"Unknown field spec: {spec!r}")
