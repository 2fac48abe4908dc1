"""Date, time and duration formatting for rendered lists.

Clock times use the 12-hour form without a leading zero and drop the minutes
on the hour (``9am``, ``2:15pm``). Dates are ``d MMMM yyyy`` with month names
from the requested locale. Timestamps are shown in Europe/London.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from babel.dates import format_date
from dateutil import parser as date_parser
from dateutil import tz

from hearing_lists.rendering.locales import BABEL_LOCALES, label, resolve_locale

logger = logging.getLogger(__name__)

LONDON = tz.gettz('Europe/London')

CLOCK_PATTERN = re.compile(r'^(\d{1,2})[:.](\d{2})$')
DOTTED_TIME_PATTERN = re.compile(r'^(\d{1,2})\.(\d{2})')
DD_MM_YYYY = re.compile(r'^(\d{2})/(\d{2})/(\d{4})$')


@dataclass(frozen=True)
class Duration:
    hours: int = 0
    minutes: int = 0


def format_twelve_hour(hour: int, minute: int) -> str:
    period = 'pm' if hour >= 12 else 'am'
    hour12 = hour % 12 or 12
    minute_str = f":{minute:02d}" if minute > 0 else ''
    return f"{hour12}{minute_str}{period}"


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """ISO date-time in London time; naive values are taken as London local."""
    if not value:
        return None
    try:
        dt = date_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        logger.debug("Unparseable timestamp %r", value)
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=LONDON)
    return dt.astimezone(LONDON)


def format_time(value: Optional[str]) -> str:
    """Render a 24-hour ``HH:MM`` or ISO timestamp as ``h[:mm]am|pm``."""
    if not value:
        return ''
    m = CLOCK_PATTERN.match(value.strip())
    if m:
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour < 24 and minute < 60:
            return format_twelve_hour(hour, minute)
        return ''
    dt = parse_timestamp(value)
    return format_twelve_hour(dt.hour, dt.minute) if dt else ''


def normalize_time(value: str) -> str:
    """Accept ``2.30pm`` as well as ``2:30pm`` and always emit ``:``."""
    if not value:
        return value
    return DOTTED_TIME_PATTERN.sub(r'\1:\2', value.strip())


def format_display_date(value: date, locale: str) -> str:
    return format_date(value, format='d MMMM yyyy', locale=BABEL_LOCALES[resolve_locale(locale)])


def parse_dd_mm_yyyy(value: str) -> Optional[date]:
    m = DD_MM_YYYY.match((value or '').strip())
    if not m:
        return None
    day, month, year = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_dd_mm_yyyy_date(value: str, locale: str) -> str:
    parsed = parse_dd_mm_yyyy(value)
    return format_display_date(parsed, locale) if parsed else value


def format_last_updated(iso_datetime: str, locale: str) -> Tuple[str, str]:
    dt = parse_timestamp(iso_datetime)
    if dt is None:
        return '', ''
    return format_display_date(dt.date(), locale), format_twelve_hour(dt.hour, dt.minute)


def format_publication_datetime(iso_datetime: str, locale: str) -> str:
    day, time = format_last_updated(iso_datetime, locale)
    if not day:
        return ''
    return f"{day} {label('at', locale)} {time}"


def calculate_duration(start: Optional[str], end: Optional[str]) -> Duration:
    """Whole minutes between two timestamps split into hours and minutes.

    A missing or unparseable bound, or an end before the start, yields a zero
    duration.
    """
    start_dt, end_dt = parse_timestamp(start), parse_timestamp(end)
    if start_dt is None or end_dt is None or end_dt < start_dt:
        return Duration()
    total = round((end_dt - start_dt).total_seconds() / 60)
    return Duration(hours=total // 60, minutes=total % 60)


def format_duration(duration: Duration, locale: str) -> str:
    parts = []
    if duration.hours:
        parts.append(f"{duration.hours} {label('hour' if duration.hours == 1 else 'hours', locale)}")
    if duration.minutes:
        parts.append(f"{duration.minutes} {label('min' if duration.minutes == 1 else 'mins', locale)}")
    return ' '.join(parts)


__all__ = [
    'LONDON', 'Duration', 'format_twelve_hour', 'parse_timestamp', 'format_time', 'normalize_time',
    'format_display_date', 'parse_dd_mm_yyyy', 'format_dd_mm_yyyy_date', 'format_last_updated',
    'format_publication_datetime', 'calculate_duration', 'format_duration',
]
