"""Timestamp helpers shared by the progress services.

Stored timestamps are UTC. Calendar days are taken in an explicit zone
(settings.progress_timezone) so streaks do not depend on the server's locale.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Any

from app.core.config import get_settings


def as_utc(ts: datetime) -> datetime:
    """Attach UTC to naive timestamps (some drivers drop tzinfo) and convert aware ones."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def resolve_tz(tz: tzinfo | None = None) -> tzinfo:
    return tz if tz is not None else get_settings().day_boundary_tz


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_date(ts: datetime, tz: tzinfo) -> date:
    """Calendar day of a stored timestamp under the day-boundary zone."""
    return as_utc(ts).astimezone(tz).date()


def parse_log_date(value: Any) -> datetime | None:
    """Parse a client-supplied log date into an aware UTC datetime truncated to seconds.

    Accepts datetime/date objects, "YYYY-MM-DD" (midnight UTC) and ISO-8601
    strings (a trailing "Z" is fine; naive values are read as UTC).
    Returns None for anything unparseable, including bare numbers.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    return as_utc(parsed).replace(microsecond=0)
