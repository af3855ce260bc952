# src/dategallery/clock/__init__.py
"""
dategallery.clock
~~~~~~~~~~~~~~~~~

Date parsing and calendar-day normalization.  A DayClock decides which
calendar day an instant belongs to, either in UTC or in a "local" zone.

Basic usage::

    from datetime import timedelta, timezone
    from dategallery.clock import DayClock

    samoa = DayClock(tz=timezone(timedelta(hours=-11)))
    samoa.is_same_day("2000-01-01T00:00Z", "1999-12-31T11:00Z")   # → True

    DayClock(is_utc=True).is_same_day("2000-01-01T00:00Z", "1999-12-31T11:00Z")
    # → False

Public API
----------
DayClock        Parses date-likes and maps instants to calendar days.
is_same_day     Pure day-equality query.
DateLike        datetime | date | ISO 8601 string.
"""

from __future__ import annotations

from dategallery.clock.clock import (
    DateLike,
    DayClock,
    is_same_day,
    parse_datetime,
    to_microseconds,
)

__all__ = [
    "DateLike",
    "DayClock",
    "is_same_day",
    "parse_datetime",
    "to_microseconds",
]
