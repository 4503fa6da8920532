"""
Date handling for the wire format.

The server emits either fractional seconds with a UTC offset
(2026-03-01T21:00:00.000+04:00) or second precision with a literal Z
(2026-03-01T17:00:00Z). Both are tried in that order before falling back
to a generic ISO 8601 parse.
"""

from datetime import datetime, timezone

DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%SZ",
)


def parse_datetime(value):
    if not isinstance(value, str):
        raise ValueError(f"Cannot decode date: {value!r}")

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Cannot decode date: {value}") from None


def format_datetime(value):
    if value is None:
        return None
    # Milliseconds on the wire unless that would drop precision
    timespec = "microseconds" if value.microsecond % 1000 else "milliseconds"
    return value.isoformat(timespec=timespec)


def parse_optional_datetime(value):
    return parse_datetime(value) if value is not None else None
