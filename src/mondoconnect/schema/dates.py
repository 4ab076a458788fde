"""Date fields: datetime in memory, ISO-8601 string on the wire."""

import re
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

# Date, or date and time with optional fraction and offset, e.g. 2024-01-01T00:00:00.000Z
ISO_DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|z|[+-]\d{2}(?::?\d{2})?)?)?$"
)


def to_iso_string(value: datetime) -> str:
    """Format as UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require_date_input(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    # numeric strings would otherwise be read as Unix timestamps
    if isinstance(value, str) and ISO_DATETIME_PATTERN.match(value):
        return value
    raise ValueError("Expected a datetime or an ISO-8601 string")


def _ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


IsoDatetime = Annotated[
    datetime,
    BeforeValidator(_require_date_input),
    AfterValidator(_ensure_utc),
    PlainSerializer(to_iso_string, return_type=str, when_used="json"),
]
