"""Cron expression parsing and description.

Syntax Reference:
    Field         Values          Special Characters
    ─────────────────────────────────────────────────
    Minute        0-59            * / , -
    Hour          0-23            * / , -
    Day of Month  1-23            * / , -
    Month         1-12 or JAN-DEC * / , -
    Day of Week   0-6 or SUN-SAT  * / , -

Shorthands: @yearly, @annually, @monthly, @weekly, @daily, @hourly, @reboot.

Usage:
    >>> from cronspeak.scheduling import parse, render
    >>> render(parse("*/15 * * * *"))
    ['Run', 'at every 15th minute', 'past every hour']
"""

from cronspeak.scheduling.errors import (
    ErrorKind,
    CronParseError,
    CronSyntaxError,
    FieldValueError,
    InvalidRangeError,
    CronStructureError,
)
from cronspeak.scheduling.tokens import (
    Token,
    TokenKind,
    iter_tokens,
    tokenize,
)
from cronspeak.scheduling.fields import (
    CronFieldType,
    FieldSemantics,
    FIELD_SEMANTICS,
    CronField,
    Pattern,
    At,
    Every,
    Range,
)
from cronspeak.scheduling.parser import (
    CronParser,
    CronSchedule,
    parse,
)
from cronspeak.scheduling.render import (
    render,
    render_text,
)

__all__ = [
    # Errors
    "ErrorKind",
    "CronParseError",
    "CronSyntaxError",
    "FieldValueError",
    "InvalidRangeError",
    "CronStructureError",
    # Tokens
    "Token",
    "TokenKind",
    "iter_tokens",
    "tokenize",
    # Fields
    "CronFieldType",
    "FieldSemantics",
    "FIELD_SEMANTICS",
    "CronField",
    "Pattern",
    "At",
    "Every",
    "Range",
    # Parser
    "CronParser",
    "CronSchedule",
    "parse",
    # Renderer
    "render",
    "render_text",
]
