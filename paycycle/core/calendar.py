"""Calendar arithmetic for payment timetables.

Month addition clamps to the last valid day of the target month, so an
anchor on the 31st lands on 28/29 February rather than spilling into March.
All offsets are calendar days; there is no business-day adjustment.
"""

from __future__ import annotations

import calendar as _cal
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from paycycle.core.result import Err, Ok

# Fixed English abbreviations: period labels must not depend on the locale.
_MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_iso_date(raw: object) -> Ok[date] | Err[str]:
    """Parse a calendar date from a date, datetime or ISO-8601 string."""
    if isinstance(raw, datetime):
        return Ok(raw.date())
    if isinstance(raw, date):
        return Ok(raw)
    if not isinstance(raw, str):
        return Err(f"expected date or ISO date string, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        return Err("date is empty")
    try:
        return Ok(date.fromisoformat(text))
    except ValueError as e:
        return Err(f"not a valid calendar date: {raw!r} ({e})")


def days_in_month(year: int, month: int) -> int:
    return _cal.monthrange(year, month)[1]


def is_month_end(d: date) -> bool:
    """True when d is the last day of its month."""
    return d.day == days_in_month(d.year, d.month)


def end_of_month(d: date) -> date:
    return d + relativedelta(day=31)


def add_calendar_months(d: date, months: int, *, roll_end_of_month: bool = False) -> date:
    """Add whole calendar months to d.

    The day of month is kept where the target month has it and clamped to
    the target month's last day otherwise. With roll_end_of_month the
    result is always the last day of the target month.
    """
    if roll_end_of_month:
        return d + relativedelta(months=months, day=31)
    return d + relativedelta(months=months)


def add_days(d: date, days: int) -> date:
    """Shift d by a signed number of calendar days."""
    return d + timedelta(days=days)


def period_label(d: date) -> str:
    """Short month and four-digit year, e.g. "Jan 2024"."""
    return f"{_MONTH_ABBR[d.month - 1]} {d.year:04d}"
