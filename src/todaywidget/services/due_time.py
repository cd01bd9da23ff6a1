"""Due-time visibility resolution.

Decides whether a task's due time is worth showing on its row and, if so,
formats it as a short 12-hour clock label.

Order of checks:

1. The due date must be an ISO-8601 timestamp with fractional seconds and an
   explicit offset (``2024-08-09T18:00:00.000Z``). Anything else yields the
   visible ``"F"`` label with ``parse_failed=True``.
2. Due instants strictly after ``now`` are hidden; upcoming tasks are
   flagged elsewhere.
3. Due times at exactly 00:00:00 in the display timezone are hidden, since
   they carry a date only.
4. Everything else is shown as e.g. ``"6:00 PM"``.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, tzinfo

from todaywidget.models.task import DueTime, Hidden, Shown

logger = logging.getLogger(__name__)

PARSE_FAILURE_LABEL = "F"

_TIMESTAMP_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d+(?:Z|[+-]\d{2}:\d{2})$"
)


def parse_due_date(value: str | None) -> datetime | None:
    """Parse an ISO-8601 due date, returning None when it is malformed."""
    if not isinstance(value, str) or not _TIMESTAMP_RE.match(value):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        # Shape matched but a field is out of range (e.g. month 13)
        return None


def format_clock_label(moment: datetime) -> str:
    """Format a datetime as a 12-hour clock label: ``6:00 PM``."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def resolve_due_time(
    due_date: str | None, now: datetime, tz: tzinfo | None = None
) -> DueTime:
    """Resolve the due-time label for a task row.

    Args:
        due_date: Raw due-date string from the task record; None counts
            as unparseable
        now: Current instant. A naive value is taken as UTC.
        tz: Display timezone for the clock label. None means the system
            local timezone.

    Returns:
        ``Shown`` with the label to display, or ``Hidden``
    """
    due = parse_due_date(due_date)
    if due is None:
        logger.debug("unparseable due date: %r", due_date)
        return Shown(label=PARSE_FAILURE_LABEL, parse_failed=True)

    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    try:
        if due > now:
            return Hidden()
        local_due = due.astimezone(tz) if tz is not None else due.astimezone()
    except (OverflowError, ValueError):
        # Instant falls outside the representable range once shifted
        logger.debug("due date out of range: %r", due_date)
        return Shown(label=PARSE_FAILURE_LABEL, parse_failed=True)

    if local_due.hour == 0 and local_due.minute == 0 and local_due.second == 0:
        return Hidden()

    return Shown(label=format_clock_label(local_due))
