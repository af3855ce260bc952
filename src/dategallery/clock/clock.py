from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Union

from dategallery._exceptions import InvalidDateError

DateLike = Union[datetime, date, str]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


def parse_datetime(value: object, method: str, param: str) -> datetime:
    """
    Turn a date-like value into a datetime without touching its offset.

    Plain dates become naive midnights, ISO 8601 strings go through
    ``datetime.fromisoformat`` (a trailing ``Z`` is accepted).  Anything else,
    including ``None``, bools and numbers, is rejected.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidDateError(method, param) from None
    raise InvalidDateError(method, param)


def to_microseconds(moment: datetime) -> int:
    """Microseconds since the Unix epoch of an aware datetime."""
    return (moment - _EPOCH) // _MICROSECOND


class DayClock:
    """
    Maps instants onto calendar days.

    With ``is_utc`` every day runs from UTC midnight to UTC midnight.  Without
    it days follow ``tz``, or the system local zone when ``tz`` is None.
    Naive inputs are read as wall clock time in that same zone.
    """

    def __init__(self, is_utc: bool = False, tz: tzinfo | None = None) -> None:
        self._is_utc = bool(is_utc)
        self._tz: tzinfo | None = timezone.utc if is_utc else tz

    @property
    def is_utc(self) -> bool:
        return self._is_utc

    @property
    def tz(self) -> tzinfo | None:
        return self._tz

    # ── conversion ───────────────────────────────────────────────────────

    def localize(self, naive: datetime) -> datetime:
        if self._tz is None:
            # astimezone() on a naive value assumes system local time
            return naive.astimezone()
        return naive.replace(tzinfo=self._tz)

    def to_zone(self, moment: datetime) -> datetime:
        return moment.astimezone(self._tz)

    def to_datetime(self, value: object, method: str, param: str) -> datetime:
        moment = parse_datetime(value, method, param)
        try:
            if moment.utcoffset() is None:
                moment = self.localize(moment)
            # values at the edge of the datetime range may not fit the zone
            self.to_zone(moment)
        except (OverflowError, ValueError):
            raise InvalidDateError(method, param) from None
        return moment

    # ── calendar days ────────────────────────────────────────────────────

    def day_of(self, moment: datetime) -> date:
        return self.to_zone(moment).date()

    def to_day(self, value: object, method: str, param: str) -> date:
        moment = self.to_datetime(value, method, param)
        try:
            return self.day_of(moment)
        except (OverflowError, ValueError):
            raise InvalidDateError(method, param) from None

    def midnight(self, day: date) -> datetime:
        return self.localize(datetime.combine(day, time()))

    def is_same_day(self, a: object, b: object, method: str = "is_same_day") -> bool:
        day_a = self.to_day(a, method, "a")
        day_b = self.to_day(b, method, "b")
        return day_a == day_b

    def __repr__(self) -> str:
        return f"DayClock(is_utc={self._is_utc}, tz={self._tz!r})"


def is_same_day(
    a: DateLike,
    b: DateLike,
    *,
    is_utc: bool = False,
    tz: tzinfo | None = None,
) -> bool:
    """Whether two instants fall on the same calendar day."""
    return DayClock(is_utc=is_utc, tz=tz).is_same_day(a, b)
