"""Main API functions for cronspeak."""

from __future__ import annotations

from typing import TextIO

from cronspeak.scheduling.errors import CronParseError
from cronspeak.scheduling.parser import CronSchedule, CronParser
from cronspeak.scheduling.presets import REBOOT_DESCRIPTION, is_reboot
from cronspeak.scheduling.render import render, render_text


def parse(expression: str) -> CronSchedule:
    """Parse a cron expression or shorthand.

    Args:
        expression: Five-field expression, or a shorthand such as ``@daily``.

    Returns:
        The parsed schedule.

    Raises:
        CronParseError: If the expression is invalid.
    """
    return CronParser(expression).parse()


def describe_lines(expression: str) -> list[str]:
    """Describe an expression as a list of lines.

    Example:
        >>> describe_lines("@yearly")
        ['Run', 'at 00:00', 'on JAN 01']
    """
    if is_reboot(expression):
        return [REBOOT_DESCRIPTION]
    return render(parse(expression))


def describe(expression: str) -> str:
    """Describe when a cron expression fires.

    Args:
        expression: Five-field expression, or a shorthand such as ``@daily``.

    Returns:
        Newline-terminated description starting with ``Run``, or
        ``Run after reboot`` for ``@reboot``.

    Raises:
        CronParseError: If the expression is invalid.

    Example:
        >>> import cronspeak
        >>> print(cronspeak.describe("5 4 * * *"), end="")
        Run
        at 04:05
    """
    if is_reboot(expression):
        return REBOOT_DESCRIPTION
    return render_text(parse(expression))


def write_description(expression: str, out: TextIO) -> None:
    """Write the description of ``expression`` to ``out``.

    Nothing is written if the expression is invalid.

    Raises:
        CronParseError: If the expression is invalid.
    """
    out.write(describe(expression))


def validate_expression(expression: str) -> list[str]:
    """Validate a cron expression.

    Returns:
        List of validation errors (empty if valid).
    """
    errors = []

    if is_reboot(expression):
        return errors

    try:
        parse(expression)
    except CronParseError as e:
        errors.append(str(e))

    return errors


def is_valid_expression(expression: str) -> bool:
    """Check if a cron expression is valid."""
    return not validate_expression(expression)
