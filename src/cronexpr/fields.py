"""Field interval model.

Each cron field holds one of these values:
- Wildcard: every value
- Single: one value
- Range: an inclusive range of values
- Step: every n-th value of a wildcard or range
- ValueList: the union of several of the above

All values answer three questions about a field value: does it match, what is
the smallest matching value at or after it, and what is the largest matching
value at or before it. Values are validated by the parser, so none of the
methods here raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cronexpr.types import FieldKind

# Canonical day-of-week range once 7 has been folded onto 0
_MAX_WEEKDAY = 6


class FieldSpec(ABC):
    """Base class for field interval values."""

    @property
    def is_wildcard(self) -> bool:
        return False

    def contains(self, field: FieldKind, value: int) -> bool:
        """Check whether value satisfies this field."""
        value = field.normalize_value(value)
        if field is FieldKind.DAY_OF_WEEK and value == 0:
            return self._contains(field, 0) or self._contains(field, 7)
        return self._contains(field, value)

    def next_matching(self, field: FieldKind, value: int) -> int | None:
        """Smallest satisfying value >= value, or None if there is none."""
        if field is not FieldKind.DAY_OF_WEEK:
            return self._next(field, value)

        value = field.normalize_value(value)
        if value == 0 and self._contains(field, 7):
            return 0
        found = self._next(field, value)
        if found is None or found > _MAX_WEEKDAY:
            return None
        return found

    def previous_matching(self, field: FieldKind, value: int) -> int | None:
        """Largest satisfying value <= value, or None if there is none."""
        if field is not FieldKind.DAY_OF_WEEK:
            return self._previous(field, value)

        value = field.normalize_value(value)
        found = self._previous(field, value)
        if found is not None:
            return found
        return 0 if self._contains(field, 7) else None

    @abstractmethod
    def _contains(self, field: FieldKind, value: int) -> bool: ...

    @abstractmethod
    def _next(self, field: FieldKind, value: int) -> int | None: ...

    @abstractmethod
    def _previous(self, field: FieldKind, value: int) -> int | None: ...

    @abstractmethod
    def values(self) -> list[int]:
        """Literal values written in this field, without step expansion.

        Wildcards contribute nothing; a Step reports the ends of its range.
        """


@dataclass(frozen=True)
class Wildcard(FieldSpec):
    """Matches every value (``*``)."""

    @property
    def is_wildcard(self) -> bool:
        return True

    def bounds(self, field: FieldKind) -> tuple[int, int]:
        return field.min_value, field.max_value

    def _contains(self, field: FieldKind, value: int) -> bool:
        return True

    def _next(self, field: FieldKind, value: int) -> int | None:
        if value > field.max_value:
            return None
        return max(value, field.min_value)

    def _previous(self, field: FieldKind, value: int) -> int | None:
        if value < field.min_value:
            return None
        return min(value, field.max_value)

    def values(self) -> list[int]:
        return []


@dataclass(frozen=True)
class Single(FieldSpec):
    """Matches exactly one value."""

    value: int

    def _contains(self, field: FieldKind, value: int) -> bool:
        return value == self.value

    def _next(self, field: FieldKind, value: int) -> int | None:
        return self.value if value <= self.value else None

    def _previous(self, field: FieldKind, value: int) -> int | None:
        return self.value if value >= self.value else None

    def values(self) -> list[int]:
        return [self.value]


@dataclass(frozen=True)
class Range(FieldSpec):
    """Matches start..end inclusive."""

    start: int
    end: int

    def bounds(self, field: FieldKind) -> tuple[int, int]:
        return self.start, self.end

    def _contains(self, field: FieldKind, value: int) -> bool:
        return self.start <= value <= self.end

    def _next(self, field: FieldKind, value: int) -> int | None:
        candidate = max(value, self.start)
        return candidate if candidate <= self.end else None

    def _previous(self, field: FieldKind, value: int) -> int | None:
        candidate = min(value, self.end)
        return candidate if candidate >= self.start else None

    def values(self) -> list[int]:
        return [self.start, self.end]


@dataclass(frozen=True)
class Step(FieldSpec):
    """Matches every ``step``-th value of a wildcard or range."""

    base: Wildcard | Range
    step: int

    def _contains(self, field: FieldKind, value: int) -> bool:
        low, high = self.base.bounds(field)
        return low <= value <= high and (value - low) % self.step == 0

    def _next(self, field: FieldKind, value: int) -> int | None:
        low, high = self.base.bounds(field)
        if value > high:
            return None
        offset = max(value, low) - low
        # Round up to the next multiple of step
        candidate = low + -(-offset // self.step) * self.step
        return candidate if candidate <= high else None

    def _previous(self, field: FieldKind, value: int) -> int | None:
        low, high = self.base.bounds(field)
        if value < low:
            return None
        offset = min(value, high) - low
        return low + (offset // self.step) * self.step

    def values(self) -> list[int]:
        return self.base.values()


@dataclass(frozen=True)
class ValueList(FieldSpec):
    """Union of several specs (``a,b-c,*/n``)."""

    items: tuple[FieldSpec, ...]

    def _contains(self, field: FieldKind, value: int) -> bool:
        return any(item._contains(field, value) for item in self.items)

    def _next(self, field: FieldKind, value: int) -> int | None:
        found = [
            result
            for item in self.items
            if (result := item._next(field, value)) is not None
        ]
        return min(found) if found else None

    def _previous(self, field: FieldKind, value: int) -> int | None:
        found = [
            result
            for item in self.items
            if (result := item._previous(field, value)) is not None
        ]
        return max(found) if found else None

    def values(self) -> list[int]:
        return [value for item in self.items for value in item.values()]
