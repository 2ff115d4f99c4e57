"""
Timestamp helpers for TCX time fields.

TCX times are fixed-offset ISO-8601 strings such as
``2025-12-07T08:48:35.000+01:00`` or ``2025-12-07T07:48:35Z``. Parsing never
raises: an unparseable value is one bad field among many, so callers get
``None`` (or the ``0`` sentinel for epoch milliseconds) and carry on.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Optional


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

# RFC 3339 date-time; fromisoformat alone also takes week dates, basic format
# and offsets without minutes
RFC3339_PATTERN = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ](?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a fixed-offset timestamp into an aware datetime
    
    Args:
        text: RFC 3339 timestamp carrying ``Z`` or an explicit ``+HH:MM`` offset
        
    Returns:
        Aware datetime, or None when the text is malformed or has no offset
    """
    if not text:
        return None
    
    value = text.strip()
    match = RFC3339_PATTERN.fullmatch(value)
    if match is None:
        return None

    # datetime resolves microseconds; finer digits are dropped
    fraction = match.group("fraction")
    offset = match.group("offset")
    value = f"{match.group('date')}T{match.group('time')}"
    if fraction:
        value += "." + fraction[:6].ljust(6, "0")
    value += "+00:00" if offset in ("Z", "z") else offset
    
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    
    # Naive values are not fixed-offset timestamps
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        return None
    return parsed


def to_epoch_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, floored like a wall-clock millisecond counter"""
    return (moment - EPOCH) // ONE_MILLISECOND


def timestamp_ms(text: Optional[str]) -> int:
    """Epoch milliseconds for a timestamp string, 0 when it cannot be parsed"""
    moment = parse_timestamp(text)
    if moment is None:
        return 0
    return to_epoch_ms(moment)


def elapsed_seconds(start: datetime, end: datetime) -> float:
    """
    Seconds from start to end at millisecond precision
    
    Sub-millisecond remainders are truncated toward zero, so a negative span
    (end before start) mirrors its positive counterpart.
    """
    delta = end - start
    if delta >= timedelta(0):
        millis = delta // ONE_MILLISECOND
    else:
        millis = -((-delta) // ONE_MILLISECOND)
    return millis / 1000.0
