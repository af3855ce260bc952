from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Literal, Union

from dategallery._exceptions import ConfigError, SelectionLimitReachedError

LimitBehavior = Literal["circular", "ignore", "error"]
SelectionLimit = Union[int, Literal[False]]

LIMIT_BEHAVIORS: tuple[str, ...] = ("circular", "ignore", "error")

_ONE_DAY = timedelta(days=1)


def validate_limit(limit: object, behavior: object) -> None:
    if limit is not False and (
        isinstance(limit, bool) or not isinstance(limit, int) or limit < 1
    ):
        raise ConfigError(
            f"max_selection_limit must be False or a positive integer; got {limit!r}"
        )
    if behavior not in LIMIT_BEHAVIORS:
        raise ConfigError(
            f"max_selection_limit_behavior must be one of {LIMIT_BEHAVIORS}; "
            f"got {behavior!r}"
        )


@dataclass(frozen=True, slots=True)
class SelectionChange:
    """Net effect of a selection operation, both in selection order."""

    selected: tuple[date, ...] = ()
    deselected: tuple[date, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.selected or self.deselected)


class Selection:
    """
    Insertion-ordered set of selected calendar days.

    When ``limit`` is reached a new day is handled by ``behavior``:
    'circular' evicts the oldest selected day, 'ignore' drops the new day,
    'error' raises SelectionLimitReachedError.
    """

    def __init__(
        self,
        limit: SelectionLimit = False,
        behavior: LimitBehavior = "circular",
    ) -> None:
        self._days: list[date] = []
        self._limit: SelectionLimit = False
        self._behavior: LimitBehavior = "circular"
        self.configure(limit, behavior)

    # ── configuration ────────────────────────────────────────────────────

    def configure(
        self, limit: SelectionLimit, behavior: LimitBehavior
    ) -> tuple[date, ...]:
        """Apply new limits; returns the oldest days dropped to fit them."""
        validate_limit(limit, behavior)
        self._limit = limit
        self._behavior = behavior

        if limit is False or len(self._days) <= limit:
            return ()
        excess = len(self._days) - limit
        dropped = tuple(self._days[:excess])
        del self._days[:excess]
        return dropped

    @property
    def limit(self) -> SelectionLimit:
        return self._limit

    @property
    def behavior(self) -> LimitBehavior:
        return self._behavior

    @property
    def is_full(self) -> bool:
        return self._limit is not False and len(self._days) >= self._limit

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def days(self) -> tuple[date, ...]:
        return tuple(self._days)

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[date]:
        return iter(self._days)

    # ── mutation ─────────────────────────────────────────────────────────

    def select(self, day: date, method: str) -> SelectionChange:
        if day in self._days:
            return SelectionChange()

        if self.is_full:
            if self._behavior == "ignore":
                return SelectionChange()
            if self._behavior == "error":
                raise SelectionLimitReachedError(method)
            evicted = self._days.pop(0)
            self._days.append(day)
            return SelectionChange((day,), (evicted,))

        self._days.append(day)
        return SelectionChange((day,))

    def deselect(self, day: date) -> bool:
        try:
            self._days.remove(day)
        except ValueError:
            return False
        return True

    def select_range(
        self, a: date, b: date, method: str
    ) -> tuple[SelectionChange, SelectionLimitReachedError | None]:
        """
        Select every day from ``a`` through ``b`` (in either order).

        Returns the net change against the selection from before the call,
        so a day that was added and evicted again within the range shows up
        in neither list.  Under 'error' the days that fit stay selected and
        the limit error is returned next to the change instead of raised, so
        the caller can publish the partial change first.
        """
        start, end = (a, b) if a <= b else (b, a)
        before = list(self._days)
        error: SelectionLimitReachedError | None = None

        day = start
        while day <= end:
            if self.is_full and self._behavior == "ignore":
                break
            try:
                self.select(day, method)
            except SelectionLimitReachedError as exc:
                error = exc
                break
            day += _ONE_DAY

        return self._diff(before), error

    def clear(self) -> tuple[date, ...]:
        days = tuple(self._days)
        self._days.clear()
        return days

    def _diff(self, before: list[date]) -> SelectionChange:
        was = set(before)
        now = set(self._days)
        return SelectionChange(
            tuple(d for d in self._days if d not in was),
            tuple(d for d in before if d not in now),
        )

    def __repr__(self) -> str:
        return (
            f"Selection(days={len(self._days)}, "
            f"limit={self._limit}, "
            f"behavior={self._behavior!r})"
        )
