"""
Date and time-of-day helpers

Event times travel as "HH:MM" or "HH:MM:SS" strings and are stored as
"HH:MM:SS"; dates are stored as "YYYY-MM-DD".
"""

import datetime as dt
import re
from typing import Tuple

from daily_record.core.errors import ValidationError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_DATE_PREFIX_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:[T ].*)?$")


def parse_time(value) -> Tuple[int, int, int]:
    """Parse "HH:MM" / "HH:MM:SS" into (hour, minute, second)"""
    if isinstance(value, dt.time):
        return value.hour, value.minute, value.second
    if isinstance(value, dt.timedelta):
        # sqlite/mysql drivers sometimes hand TIME columns back as timedelta
        total = int(value.total_seconds())
        return total // 3600, (total % 3600) // 60, total % 60

    m = _TIME_RE.match(str(value).strip()) if value is not None else None
    if not m:
        raise ValidationError(f"Invalid time: {value!r}")
    hour = int(m.group(1))
    minute = int(m.group(2))
    second = int(m.group(3) or 0)
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        raise ValidationError(f"Invalid time: {value!r}")
    return hour, minute, second


def normalize_time(value) -> str:
    """Return the canonical "HH:MM:SS" form of a time value"""
    hour, minute, second = parse_time(value)
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def minutes_of_day(value) -> int:
    hour, minute, _ = parse_time(value)
    return hour * 60 + minute


def parse_date(value) -> dt.date:
    """Parse "YYYY-MM-DD", or a timestamp starting with it, into a date"""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value

    m = _DATE_PREFIX_RE.match(str(value).strip()) if value is not None else None
    if not m:
        raise ValidationError(f"Invalid date: {value!r}")
    try:
        return dt.datetime.strptime(m.group(1), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def normalize_date(value) -> str:
    """Return the canonical "YYYY-MM-DD" form of a date value"""
    return parse_date(value).isoformat()


def validate_date_range(start_date, end_date) -> Tuple[str, str]:
    """Normalize an inclusive date range, rejecting start > end"""
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start > end:
        raise ValidationError(
            f"Start date {start.isoformat()} is later than end date {end.isoformat()}"
        )
    return start.isoformat(), end.isoformat()


def duration_minutes(start_time, end_time) -> int:
    """Minutes between two times of day, wrapping over midnight when end < start"""
    total = minutes_of_day(end_time) - minutes_of_day(start_time)
    if total < 0:
        total += MINUTES_PER_DAY
    return total


def format_duration(start_time, end_time) -> str:
    """Human readable duration, e.g. "1小时30分钟" """
    total = duration_minutes(start_time, end_time)
    hours, minutes = divmod(total, 60)
    if hours > 0:
        return f"{hours}小时{minutes}分钟" if minutes > 0 else f"{hours}小时"
    return f"{minutes}分钟"
