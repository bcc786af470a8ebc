"""Timestamp handling for Atom date constructs."""

from datetime import datetime

from dateutil import parser as date_parser


def coerce_timestamp(value: datetime | str) -> datetime:
    """Normalize a caller supplied timestamp into an aware datetime.

    Args:
        value: Timezone-aware datetime, or an RFC 3339 / ISO 8601 string
            carrying an explicit offset

    Returns:
        Timezone-aware datetime with the original offset preserved

    Raises:
        ValueError: If the value has no timezone or cannot be parsed
        TypeError: If the value is neither a datetime nor a string
    """
    if isinstance(value, str):
        try:
            parsed = date_parser.isoparse(value)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid RFC 3339 timestamp {value!r}: {e}") from e
    elif isinstance(value, datetime):
        parsed = value
    else:
        raise TypeError(
            f"Timestamp must be a datetime or string, got {type(value).__name__}"
        )

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValueError(f"Timestamp must be timezone-aware: {value!r}")

    return parsed


def format_rfc3339(value: datetime) -> str:
    """Render a timestamp as RFC 3339, keeping its offset.

    Fractional seconds are omitted when zero, written as milliseconds when
    they are whole milliseconds and as microseconds otherwise. The offset is
    always ``±HH:MM`` (UTC is ``+00:00``, never ``Z``); offsets carrying
    seconds are rounded to the nearest minute. No zone conversion happens.
    """
    offset_seconds = round(value.utcoffset().total_seconds())
    sign = "-" if offset_seconds < 0 else "+"
    hours, minutes = divmod((abs(offset_seconds) + 30) // 60, 60)

    microsecond = value.microsecond
    if microsecond == 0:
        fraction = ""
    elif microsecond % 1000 == 0:
        fraction = ".%03d" % (microsecond // 1000)
    else:
        fraction = ".%06d" % microsecond

    local = value.replace(tzinfo=None, microsecond=0).isoformat()
    return f"{local}{fraction}{sign}{hours:02d}:{minutes:02d}"
