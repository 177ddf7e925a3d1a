"""Field-by-field parser for cron expressions.

The expression is lexed in full first, so any lexical error is reported
before field parsing begins. The token list is then consumed one pattern at
a time: a comma keeps the current field open, a delimiter or the end of
input closes it and moves on to the next field.
"""

from __future__ import annotations

from dataclasses import dataclass

from cronspeak.scheduling.errors import (
    CronParseError,
    CronStructureError,
    ErrorKind,
    FieldValueError,
    InvalidRangeError,
)
from cronspeak.scheduling.fields import (
    FIELD_ORDER,
    At,
    CronField,
    CronFieldType,
    Every,
    Range,
)
from cronspeak.scheduling.presets import first_line, resolve_alias
from cronspeak.scheduling.tokens import Token, TokenKind, tokenize

# Largest value a number run may hold (unsigned 64-bit)
MAX_NUMBER = 2**64 - 1
_MAX_DIGITS = len(str(MAX_NUMBER))

_PATTERN_END = frozenset({TokenKind.EOF, TokenKind.DELIM, TokenKind.COMMA})


# =============================================================================
# Schedule
# =============================================================================


@dataclass
class CronSchedule:
    """The five parsed fields of one expression."""

    expression: str
    minute: CronField
    hour: CronField
    day_of_month: CronField
    month: CronField
    day_of_week: CronField

    @property
    def fields(self) -> tuple[CronField, ...]:
        return (
            self.minute,
            self.hour,
            self.day_of_month,
            self.month,
            self.day_of_week,
        )

    def get_field(self, field_type: CronFieldType) -> CronField:
        return self.fields[FIELD_ORDER.index(field_type)]

    @property
    def is_complete(self) -> bool:
        return all(self.fields)


# =============================================================================
# Value Lexing
# =============================================================================


def _run_end(tokens: list[Token], pos: int, kind: TokenKind) -> int:
    end = pos
    while tokens[end].kind is kind:
        end += 1
    return end


def get_num(tokens: list[Token], pos: int) -> tuple[int, int]:
    """Read a run of digits starting at ``pos``.

    Returns:
        The position after the run and the number read.

    Raises:
        FieldValueError: If there are no digits or the number is too large.
    """
    end = _run_end(tokens, pos, TokenKind.NUM)
    digits = "".join(t.char for t in tokens[pos:end])
    # Leading zeros are insignificant; the length check keeps int() bounded
    significant = digits.lstrip("0") or "0"
    if not digits or len(significant) > _MAX_DIGITS or int(significant) > MAX_NUMBER:
        raise FieldValueError(
            "Error parsing a number",
            ErrorKind.NUMBER_PARSE,
            value=digits,
        )
    return end, int(significant)


def get_val(field: CronField, tokens: list[Token], pos: int) -> tuple[int, int]:
    """Read a number, or failing that a name known to the field.

    Returns:
        The position after the value and its number.
    """
    if tokens[pos].kind is TokenKind.NUM:
        return get_num(tokens, pos)
    end = _run_end(tokens, pos, TokenKind.ALPHA)
    name = "".join(t.char for t in tokens[pos:end]).upper()
    return end, field.semantics.alpha_to_num(name)


# =============================================================================
# Pattern Parsing
# =============================================================================


def parse_pattern(field: CronField, tokens: list[Token], pos: int) -> int:
    """Parse one pattern into ``field``.

    Args:
        field: Field receiving the pattern.
        tokens: Complete token list of the expression.
        pos: Index of the pattern's first token.

    Returns:
        Index of the first token after the pattern.

    Raises:
        CronParseError: If the pattern is malformed or out of domain.
    """
    semantics = field.semantics

    if tokens[pos].kind is TokenKind.ASTERISK:
        following = tokens[pos + 1].kind
        if following in _PATTERN_END:
            field.add(Every(1))
            return pos + 1
        if following is TokenKind.SLASH:
            end, step = get_num(tokens, pos + 2)
            field.add(Every(step))
            return end
        raise CronStructureError(
            "Illegal char after *",
            ErrorKind.ILLEGAL_CHAR_AFTER_ASTERISK,
            value=tokens[pos + 1].char,
        )

    pos, start = get_val(field, tokens, pos)
    following = tokens[pos].kind

    if following in _PATTERN_END:
        field.add(At(semantics.from_num(start)))
        return pos

    if following is not TokenKind.DASH:
        raise CronStructureError(
            "Invalid char after number",
            ErrorKind.INVALID_CHAR_AFTER_NUMBER,
            value=tokens[pos].char,
        )

    pos, end = get_val(field, tokens, pos + 1)
    if end <= start:
        raise InvalidRangeError(start, end)

    following = tokens[pos].kind
    if following in _PATTERN_END:
        field.add(Range(semantics.from_num(start), semantics.from_num(end)))
        return pos
    if following is TokenKind.SLASH:
        pos, step = get_num(tokens, pos + 1)
        field.add(Range(semantics.from_num(start), semantics.from_num(end), step))
        return pos

    raise CronStructureError(
        "Invalid char after range end number",
        ErrorKind.INVALID_CHAR_AFTER_RANGE_END,
        value=tokens[pos].char,
    )


# =============================================================================
# Cron Parser
# =============================================================================


class CronParser:
    """Parser for five-field cron expressions and their shorthands.

    Example:
        >>> schedule = CronParser("*/15 9-17 * * MON-FRI").parse()
        >>> schedule.minute.patterns
        [Every(step=15)]
    """

    def __init__(self, expression: str) -> None:
        self._original = expression
        self._expression = resolve_alias(first_line(expression))

    @property
    def expression(self) -> str:
        """The expression after shorthand expansion."""
        return self._expression

    def parse(self) -> CronSchedule:
        """Parse the expression into five fields.

        Raises:
            CronParseError: If the expression is invalid.
        """
        try:
            return self._parse()
        except CronParseError as e:
            if not e.expression:
                e.expression = self._original
            raise

    def _parse(self) -> CronSchedule:
        tokens = tokenize(self._expression)
        fields = [CronField.of(field_type) for field_type in FIELD_ORDER]
        current = 0
        pos = 0

        while True:
            kind = tokens[pos].kind
            if kind is TokenKind.DELIM:
                while tokens[pos].kind is TokenKind.DELIM:
                    pos += 1
                if tokens[pos].kind is TokenKind.EOF:
                    break
            elif kind is TokenKind.COMMA:
                pos += 1
            elif kind is TokenKind.EOF:
                break
            else:
                raise CronStructureError(
                    "Pattern doesn't start/end on correct token",
                    ErrorKind.BAD_FIELD_BOUNDARY,
                    value=tokens[pos].char,
                )

            if current == len(fields):
                raise CronStructureError(
                    f"Bad CRON: more than {len(fields)} fields",
                    ErrorKind.TOO_MANY_FIELDS,
                )

            pos = parse_pattern(fields[current], tokens, pos)
            if tokens[pos].kind in (TokenKind.DELIM, TokenKind.EOF):
                current += 1

        if current != len(fields):
            raise CronStructureError(
                "Incomplete CRON",
                ErrorKind.INCOMPLETE_EXPRESSION,
                value=current,
            )

        return CronSchedule(self._original, *fields)


def parse(expression: str) -> CronSchedule:
    """Parse a cron expression or shorthand into a :class:`CronSchedule`.

    ``@reboot`` has no fields and is rejected here; use
    :func:`cronspeak.describe` to translate it.

    Raises:
        CronParseError: If the expression is invalid.
    """
    return CronParser(expression).parse()
