"""Turn parsed cron fields into sentences.

Day-of-month and month are combined with day-of-week following the POSIX
crontab rule: when both sides are restricted the job runs when *either*
matches, so the description joins them with ``and`` rather than nesting one
inside the other.

See https://pubs.opengroup.org/onlinepubs/9699919799/utilities/crontab.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cronspeak.scheduling.fields import At, CronField, Every, Pattern, Range

if TYPE_CHECKING:
    from cronspeak.scheduling.parser import CronSchedule

RUN = "Run"
AND = "and"


def ordinal_suffix(step: int) -> str:
    """Suffix for a step, keyed on ``step % 20``.

    Steps congruent to 1 never reach here; they use the field's fixed
    phrase or drop the step entirely.
    """
    remainder = step % 20
    if remainder == 2:
        return "nd"
    if remainder == 3:
        return "rd"
    return "th"


def render_pattern(field: CronField, pattern: Pattern) -> str | None:
    """Describe one pattern, or return None if there is nothing to say."""
    s = field.semantics

    if isinstance(pattern, At):
        return f"{s.at_phrase} {s.display_padded(pattern.value)}"

    if isinstance(pattern, Every):
        if pattern.step % 20 == 1:
            return s.every_phrase or None
        return f"{s.at_word} every {pattern.step}{ordinal_suffix(pattern.step)} {s.noun}"

    if isinstance(pattern, Range):
        bounds = f"from {s.display(pattern.start)} to {s.display(pattern.end)}"
        if pattern.step % 20 == 1:
            return f"{s.at_word} every {s.noun} {bounds}"
        return (
            f"{s.at_word} every {pattern.step}{ordinal_suffix(pattern.step)} "
            f"{s.noun} {bounds}"
        )

    raise TypeError(f"Unknown pattern: {pattern!r}")


def render_field(field: CronField) -> list[str]:
    """Describe every pattern of a field, in expression order."""
    lines = []
    for pattern in field.patterns:
        line = render_pattern(field, pattern)
        if line is not None:
            lines.append(line)
    return lines


def render(schedule: "CronSchedule") -> list[str]:
    """Describe a parsed schedule line by line.

    Raises:
        RuntimeError: If the schedule has an empty field, which a successful
            parse never produces.
    """
    if not schedule.is_complete:
        raise RuntimeError(f"Cannot render incomplete schedule {schedule.expression!r}")

    minute, hour = schedule.minute, schedule.hour
    dom, month, dow = schedule.day_of_month, schedule.month, schedule.day_of_week
    lines = [RUN]

    at_minute, at_hour = minute.single_at(), hour.single_at()
    if at_minute is not None and at_hour is not None:
        lines.append(
            f"at {hour.semantics.display_padded(at_hour.value)}"
            f":{minute.semantics.display_padded(at_minute.value)}"
        )
    else:
        lines += render_field(minute)
        lines += render_field(hour)

    dom_month_done = False
    at_day, at_month = dom.single_at(), month.single_at()
    if at_day is not None and at_month is not None:
        lines.append(
            f"on {month.semantics.display_padded(at_month.value)}"
            f" {dom.semantics.display_padded(at_day.value)}"
        )
        dom_month_done = True

    dom_month_defined = dom.is_defined or month.is_defined
    dow_defined = dow.is_defined

    if dom_month_defined:
        if not dom_month_done:
            lines += render_field(dom)
            lines += render_field(month)
        if dow_defined:
            lines.append(AND)
            lines += render_field(dow)
    elif dow_defined:
        if not dom_month_done:
            lines += render_field(dom)
        lines += render_field(dow)
    elif not dom_month_done:
        lines += render_field(month)

    return lines


def render_text(schedule: "CronSchedule") -> str:
    """Describe a parsed schedule as newline-terminated text."""
    return "\n".join(render(schedule)) + "\n"
