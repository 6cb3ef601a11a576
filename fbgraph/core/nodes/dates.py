"""Date casting for Graph fields."""
import re
from datetime import datetime, timezone
from typing import Any

from dateutil.parser import isoparse

# Fields Graph returns as timestamps or ISO-8601 strings
DATE_FIELDS = frozenset([
    'created_time',
    'updated_time',
    'start_time',
    'end_time',
    'backdated_time',
    'issued_at',
    'expires_at',
    'publish_time',
    'joined',
])

ISO8601_RE = re.compile(
    r'^([+-]?\d{4}(?!\d{2}\b))'
    r'((-?)((0[1-9]|1[0-2])(\3([12]\d|0[1-9]|3[01]))?'
    r'|W([0-4]\d|5[0-2])(-?[1-7])?|(00[1-9]|0[1-9]\d'
    r'|[12]\d{2}|3([0-5]\d|6[1-6])))([T\s]((([01]\d|2[0-3])'
    r'((:?)[0-5]\d)?|24:?00)([.,]\d+(?!:))?)?(\17[0-5]\d'
    r'([.,]\d+)?)?([zZ]|([+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?)?$'
)

_ORDINAL_RE = re.compile(r'^([+-]?\d{4})-?(\d{3})(?:([T\s])(.+))?$')


def should_cast_as_datetime(key: Any) -> bool:
    return str(key) in DATE_FIELDS


def is_iso8601_date_string(value: Any) -> bool:
    """Detects dates, week dates, ordinal dates and date-times."""
    return isinstance(value, str) and ISO8601_RE.match(value) is not None


def is_timestamp(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and value.isdigit()


def cast_to_datetime(value: Any) -> datetime:
    """
    Cast a Unix timestamp or an ISO-8601 string to an aware datetime.

    Values without an offset are taken as UTC.
    """
    if is_timestamp(value):
        return datetime.fromtimestamp(int(float(value)), tz=timezone.utc)

    ordinal = _ORDINAL_RE.match(value)
    if ordinal:
        year, day_of_year, _, time_part = ordinal.groups()
        day = datetime.strptime(f"{year}-{day_of_year}", '%Y-%j')
        value = day.date().isoformat() + (f"T{time_part}" if time_part else '')

    parsed = isoparse(value.replace(' ', 'T', 1) if ' ' in value else value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_datetime(value: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS+HH:MM``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec='seconds')
