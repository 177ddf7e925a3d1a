"""Shorthand cron expressions.

Usage:
    >>> from cronspeak.scheduling.presets import resolve_alias
    >>> resolve_alias("@weekly")
    '0 0 * * 0'
"""

from __future__ import annotations

# =============================================================================
# Standard Shorthands
# =============================================================================

YEARLY = "0 0 1 1 *"
ANNUALLY = YEARLY
MONTHLY = "0 0 1 * *"
WEEKLY = "0 0 * * 0"
DAILY = "0 0 * * *"
HOURLY = "0 * * * *"

ALIASES: dict[str, str] = {
    "@yearly": YEARLY,
    "@annually": ANNUALLY,
    "@monthly": MONTHLY,
    "@weekly": WEEKLY,
    "@daily": DAILY,
    "@hourly": HOURLY,
}

# @reboot has no five-field equivalent and is answered directly
REBOOT = "@reboot"
REBOOT_DESCRIPTION = "Run after reboot"

_PADDING = " \t\r\n\0"


def first_line(request: str) -> str:
    """Return the first line of a request with padding stripped.

    Only a newline ends a line; other line-break characters stay in the text.
    """
    return request.split("\n", 1)[0].strip(_PADDING)


def is_reboot(expression: str) -> bool:
    return first_line(expression) == REBOOT


def resolve_alias(expression: str) -> str:
    """Expand a shorthand, or return the expression unchanged.

    Shorthands are matched exactly against the first line of the input.
    """
    return ALIASES.get(first_line(expression), expression)


def list_aliases() -> list[str]:
    """List the shorthand names, ``@reboot`` included."""
    return sorted([*ALIASES, REBOOT])
