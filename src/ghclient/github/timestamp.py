"""Timestamp field type.

GitHub is inconsistent about how it represents times: most payloads use
RFC3339 strings, but some (rate limits, a few webhook payloads) use Unix
epoch seconds. `Timestamp` accepts either and always encodes back out as
RFC3339 in UTC.
"""

import re
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def _pad_fraction(text: str) -> str:
    # Python 3.10's fromisoformat only takes exactly 3 or 6 fractional digits
    return FRACTION_RE.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text, count=1
    )


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC3339 string or Unix timestamp into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    try:
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value, tz=timezone.utc)
        elif isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                dt = datetime.fromtimestamp(int(text), tz=timezone.utc)
            else:
                # GitHub uses ISO format with Z suffix
                dt = datetime.fromisoformat(_pad_fraction(text.replace("Z", "+00:00")))
        else:
            raise ValueError(f"Invalid timestamp: {value!r}")
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as RFC3339 in UTC, e.g. 2013-01-29T03:04:05Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _validate(value: Any) -> Any:
    # None passes through so `Timestamp | None` fields still accept null
    if value is None:
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError("Empty timestamp")
    return parsed


Timestamp = Annotated[
    datetime,
    BeforeValidator(_validate),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]
