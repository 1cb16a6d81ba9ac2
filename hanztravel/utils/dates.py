import dateparser
from datetime import date, datetime, timedelta
from typing import Optional, Union
import pytz
import re

_WEEKDAYS = {
    'monday': 0, 'tuesday': 1, 'wednesday': 2, 'thursday': 3,
    'friday': 4, 'saturday': 5, 'sunday': 6
}
_WEEKDAY_RE = re.compile(r'\b(next|this)?\s*(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b', re.IGNORECASE)


def get_current_datetime(tz: str = "UTC") -> datetime:
    return datetime.now(pytz.timezone(tz))


def _next_weekday(text: str, base_date: datetime) -> Optional[datetime]:
    """Resolve 'friday', 'next friday', 'this friday' against base_date."""
    m = _WEEKDAY_RE.search(text)
    if not m:
        return None
    qualifier = (m.group(1) or "").lower()
    days_until = (_WEEKDAYS[m.group(2).lower()] - base_date.weekday()) % 7
    # "this friday" on a friday means today; bare or "next" means a week out
    if days_until == 0 and qualifier != "this":
        days_until = 7
    return base_date + timedelta(days=days_until)


def to_iso_date(text: str, tz: str = "UTC", base_date: Optional[datetime] = None) -> str:
    """Convert free text to an ISO date, '' when it cannot be parsed."""
    if not text or not text.strip():
        return ""
    base = base_date or get_current_datetime(tz)
    text_lower = text.lower().strip()

    dt = _next_weekday(text_lower, base)
    if dt:
        return dt.date().isoformat()

    if text_lower == 'today':
        return base.date().isoformat()
    if text_lower == 'tomorrow':
        return (base + timedelta(days=1)).date().isoformat()

    parsed = dateparser.parse(text, settings={"RELATIVE_BASE": base.replace(tzinfo=None)})
    if parsed:
        return parsed.date().isoformat()
    return ""


def normalise_departure_date(value: Union[str, date, None], tz: str = "UTC",
                             base_date: Optional[datetime] = None) -> Optional[str]:
    """
    Departure dates are free-form: ISO when parseable, otherwise the trimmed
    text as entered. Empty input clears the date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raw = str(value).strip()
    if not raw:
        return None
    return to_iso_date(raw, tz=tz, base_date=base_date) or raw


def format_duration_hours(hours: float) -> str:
    """
    Compact human string for a duration in hours, e.g. 6.58 -> "6h 35min".
    """
    if hours is None or hours < 0:
        return ""
    total_minutes = int(round(hours * 60))
    h, m = divmod(total_minutes, 60)
    if h and m:
        return f"{h}h {m}min"
    if h:
        return f"{h}h"
    return f"{m}min"
