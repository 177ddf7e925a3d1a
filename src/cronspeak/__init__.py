"""cronspeak - Describe cron schedules in plain English."""

from cronspeak.api import (
    describe,
    describe_lines,
    is_valid_expression,
    parse,
    validate_expression,
    write_description,
)
from cronspeak.scheduling import (
    CronParseError,
    CronSchedule,
    ErrorKind,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "describe",
    "describe_lines",
    "write_description",
    "parse",
    "render",
    "validate_expression",
    "is_valid_expression",
    "CronParseError",
    "CronSchedule",
    "ErrorKind",
]
