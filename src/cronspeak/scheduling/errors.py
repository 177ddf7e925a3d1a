"""Exceptions raised while translating cron expressions.

Every failure carries an :class:`ErrorKind` tag plus the offending value so
callers can branch on the kind without matching message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Tags for cron translation failures."""

    # Lexical errors
    UNKNOWN_CHARACTER = "unknown_character"
    ILLEGAL_TOKEN = "illegal_token"
    UNEXPECTED_END = "unexpected_end"

    # Value errors
    NUMBER_PARSE = "number_parse"
    INVALID_NAMED_VALUE = "invalid_named_value"
    OUT_OF_DOMAIN = "out_of_domain"
    INVALID_RANGE = "invalid_range"

    # Structural errors
    ILLEGAL_CHAR_AFTER_ASTERISK = "illegal_char_after_asterisk"
    INVALID_CHAR_AFTER_NUMBER = "invalid_char_after_number"
    INVALID_CHAR_AFTER_RANGE_END = "invalid_char_after_range_end"
    INCOMPLETE_EXPRESSION = "incomplete_expression"
    BAD_FIELD_BOUNDARY = "bad_field_boundary"
    TOO_MANY_FIELDS = "too_many_fields"


class CronParseError(ValueError):
    """Raised when a cron expression cannot be translated.

    Attributes:
        kind: What went wrong.
        value: The offending character or value, if any.
        expression: The expression being translated.
        position: Character offset of the failure, or -1 when unknown.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        value: Any = None,
        expression: str = "",
        position: int = -1,
    ) -> None:
        self.kind = kind
        self.value = value
        self.expression = expression
        self.position = position
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class CronSyntaxError(CronParseError):
    """The expression does not reduce to a legal token stream."""


class FieldValueError(CronParseError):
    """A literal could not be read or is outside its field's domain."""


class InvalidRangeError(CronParseError):
    """A range whose end is not strictly greater than its start."""

    def __init__(self, start: int, end: int, expression: str = "") -> None:
        super().__init__(
            f"Range start ({start}) cannot be bigger than or equal to end ({end})",
            ErrorKind.INVALID_RANGE,
            value=(start, end),
            expression=expression,
        )
        self.start = start
        self.end = end


class CronStructureError(CronParseError):
    """Tokens are legal but do not form five well-shaped fields."""
