# 📄 File: app/modules/subscriptions/domain/billing_period.py
# 🧭 Purpose (Layman Explanation):
# Understands the "billing month" people type in (either 03-2024 or 2024-03), turns it into
# the first day of that month, and writes it back out the one standard way (2024-03).
# 🧪 Purpose (Technical Summary):
# Month codec: parses MM-YYYY / YYYY-MM into a UTC-midnight first-of-month datetime and
# formats calendar months canonically as YYYY-MM.
# 🔗 Dependencies:
# re, datetime
# 🔄 Connected Modules / Calls From:
# application.mappers (request parsing, response rendering), query handlers (monthly summary),
# domain.models.subscription (invariant checks)

import re
from datetime import date, datetime, timezone
from typing import Optional, Union

CANONICAL_FORMAT = "%Y-%m"

# Tried in order; each pattern returns (year, month) group names.
MONTH_PATTERNS = (
    re.compile(r"^(?P<month>\d{2})-(?P<year>\d{4})$"),  # MM-YYYY
    re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})$"),  # YYYY-MM
)


class InvalidMonthError(ValueError):
    """Raised when a billing month cannot be parsed."""


def first_of_month(year: int, month: int) -> datetime:
    """Return midnight UTC on the first day of the given month."""
    return datetime(year, month, 1, tzinfo=timezone.utc)


def parse_month(value: str) -> datetime:
    """
    Parse a billing month.

    Accepts exactly ``MM-YYYY`` or ``YYYY-MM`` after trimming surrounding
    whitespace. The month segment must be two digits in 01-12.

    Args:
        value: Raw month text

    Returns:
        datetime: First day of the month at 00:00 UTC

    Raises:
        InvalidMonthError: If the value is empty or matches neither layout
    """
    value = (value or "").strip()
    if not value:
        raise InvalidMonthError("month is required")

    for pattern in MONTH_PATTERNS:
        match = pattern.match(value)
        if not match:
            continue
        month = int(match.group("month"))
        year = int(match.group("year"))
        if 1 <= month <= 12 and year >= 1:
            return first_of_month(year, month)

    raise InvalidMonthError("invalid month format")


def format_month(value: Optional[Union[datetime, date]]) -> str:
    """
    Render a calendar month as ``YYYY-MM``.

    An unset value renders as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(CANONICAL_FORMAT)
    return f"{value.year:04d}-{value.month:02d}"


def to_calendar_month(value: Union[datetime, date]) -> datetime:
    """Normalize a stored date or datetime to the first of its month at 00:00 UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return first_of_month(value.year, value.month)
    return first_of_month(value.year, value.month)
