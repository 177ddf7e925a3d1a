"""Field kinds, patterns and parsed fields.

Each of the five cron fields is described by a :class:`FieldSemantics`
policy: its legal domain, the names it accepts in place of numbers, and the
words used when describing it. Parsed fields hold an ordered list of
patterns in the order they appeared in the expression.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from cronspeak.scheduling.errors import ErrorKind, FieldValueError, InvalidRangeError


# =============================================================================
# Field Types
# =============================================================================


class CronFieldType(Enum):
    """The five cron fields, in expression order."""

    MINUTE = auto()
    HOUR = auto()
    DAY_OF_MONTH = auto()
    MONTH = auto()
    DAY_OF_WEEK = auto()


FIELD_ORDER: tuple[CronFieldType, ...] = tuple(CronFieldType)


@dataclass(frozen=True)
class FieldSemantics:
    """Domain and vocabulary for one field type.

    Attributes:
        field_type: The field this policy describes.
        label: Upper-case name used in error messages.
        min_value: Smallest legal value.
        max_value: Largest legal value.
        noun: Unit name, e.g. ``minute``.
        at_phrase: Prefix for an exact value, e.g. ``at minute``.
        at_word: Prefix for "every" phrases, e.g. ``at``.
        every_phrase: Line for a plain ``*``; empty means say nothing.
        names: Accepted names, the first one standing for ``min_value``.
    """

    field_type: CronFieldType
    label: str
    min_value: int
    max_value: int
    noun: str
    at_phrase: str
    at_word: str
    every_phrase: str
    names: tuple[str, ...] = ()

    @property
    def has_names(self) -> bool:
        return bool(self.names)

    def from_num(self, value: int) -> int:
        """Check that a number lies in this field's domain.

        Raises:
            FieldValueError: If the value is out of range.
        """
        if self.min_value <= value <= self.max_value:
            return value
        raise FieldValueError(
            f"Invalid {self.label} value {value}",
            ErrorKind.OUT_OF_DOMAIN,
            value=value,
        )

    def alpha_to_num(self, name: str) -> int:
        """Resolve a name (any case) to its number.

        Raises:
            FieldValueError: If the field has no such name.
        """
        upper = name.upper()
        if upper in self.names:
            return self.min_value + self.names.index(upper)
        raise FieldValueError(
            f"Invalid {self.label} value {name}",
            ErrorKind.INVALID_NAMED_VALUE,
            value=name,
        )

    def display(self, value: int) -> str:
        """Render a value as it appears in range bounds."""
        if self.names:
            return self.names[value - self.min_value]
        return str(value)

    def display_padded(self, value: int) -> str:
        """Render a value as it appears after an exact-value prefix."""
        if self.names:
            return self.names[value - self.min_value]
        return f"{value:02d}"


MONTH_NAMES = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)
WEEKDAY_NAMES = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")


MINUTE = FieldSemantics(
    CronFieldType.MINUTE, "MINUTE", 0, 59,
    noun="minute",
    at_phrase="at minute",
    at_word="at",
    every_phrase="at every minute",
)
HOUR = FieldSemantics(
    CronFieldType.HOUR, "HOUR", 0, 23,
    noun="hour",
    at_phrase="past hour",
    at_word="past",
    every_phrase="past every hour",
)
# Upper bound of 23 matches the deployed service, not the calendar.
DAY_OF_MONTH = FieldSemantics(
    CronFieldType.DAY_OF_MONTH, "DAY-OF-MONTH", 1, 23,
    noun="day-of-month",
    at_phrase="on day-of-month",
    at_word="on",
    every_phrase="",
)
MONTH = FieldSemantics(
    CronFieldType.MONTH, "MONTH", 1, 12,
    noun="month",
    at_phrase="in",
    at_word="in",
    every_phrase="",
    names=MONTH_NAMES,
)
DAY_OF_WEEK = FieldSemantics(
    CronFieldType.DAY_OF_WEEK, "DAY-OF-WEEK", 0, 6,
    noun="day-of-week",
    at_phrase="on",
    at_word="on",
    every_phrase="",
    names=WEEKDAY_NAMES,
)

FIELD_SEMANTICS: dict[CronFieldType, FieldSemantics] = {
    s.field_type: s for s in (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)
}


# =============================================================================
# Patterns
# =============================================================================


@dataclass(frozen=True)
class At:
    """Fires exactly at ``value``."""

    value: int


@dataclass(frozen=True)
class Every:
    """Fires every ``step`` units from the field's origin."""

    step: int = 1


@dataclass(frozen=True)
class Range:
    """Fires every ``step`` units from ``start`` to ``end`` inclusive."""

    start: int
    end: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidRangeError(self.start, self.end)


Pattern = Union[At, Every, Range]


# =============================================================================
# Cron Field
# =============================================================================


@dataclass
class CronField:
    """The patterns parsed for one field, in expression order."""

    semantics: FieldSemantics
    patterns: list[Pattern] = field(default_factory=list)

    @classmethod
    def of(cls, field_type: CronFieldType) -> "CronField":
        return cls(FIELD_SEMANTICS[field_type])

    @property
    def field_type(self) -> CronFieldType:
        return self.semantics.field_type

    def add(self, pattern: Pattern) -> None:
        self.patterns.append(pattern)

    @property
    def is_defined(self) -> bool:
        """True if any pattern restricts the field beyond a plain ``*``."""
        return any(p != Every(1) for p in self.patterns)

    def single_at(self) -> At | None:
        """Return the only pattern if it is an exact value."""
        if len(self.patterns) == 1 and isinstance(self.patterns[0], At):
            return self.patterns[0]
        return None

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"CronField({self.field_type.name}, {self.patterns!r})"
