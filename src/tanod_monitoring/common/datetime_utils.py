from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError

END_OF_DAY = time(23, 59, 59, 999000)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_optional_datetime(date_s: Optional[str], time_s: Optional[str]) -> Optional[datetime]:
    """Combine the report form's date and time fields.

    Both empty means "use submission time" and returns None. A date without a
    time is taken as midnight; a time without a date is rejected.
    """

    date_s = (date_s or "").strip()
    time_s = (time_s or "").strip()
    if not date_s and not time_s:
        return None
    if not date_s:
        raise ValidationError("A date is required when a time is given")

    day = parse_iso_date(date_s)
    if not time_s:
        return datetime.combine(day, time.min)
    try:
        at = datetime.strptime(time_s, TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time: {time_s!r} (expected HH:MM)")
    return datetime.combine(day, at)


def day_window(start: date, end: date) -> tuple[datetime, datetime]:
    """Inclusive local-time bounds: start 00:00:00.000 through end 23:59:59.999."""
    if start > end:
        raise ValidationError("Start date must not be after end date")
    return datetime.combine(start, time.min), datetime.combine(end, END_OF_DAY)


def to_store_precision(value: datetime) -> datetime:
    """Drop sub-millisecond digits; DATETIME(3) columns would round them instead."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def now_local() -> datetime:
    """Current local time at store precision.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return to_store_precision(datetime.now())
