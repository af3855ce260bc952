from __future__ import annotations

import weakref
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Callable, Collection, Literal, Optional

import numpy as np

from dategallery._exceptions import (
    FirstDayOfWeekError,
    ModeError,
    NumberOfDaysError,
    NumberOfFramesError,
)
from dategallery.clock import DayClock, to_microseconds

if TYPE_CHECKING:
    from dategallery.events import Event, EventStore
    from dategallery.gallery.gallery import DateGallery

Mode = Literal[
    "day",
    "days",
    "week",
    "month",
    "month-pad-to-week",
    "month-six-weeks",
    "year",
]

MODES: tuple[str, ...] = (
    "day",
    "days",
    "week",
    "month",
    "month-pad-to-week",
    "month-six-weeks",
    "year",
)

_ONE_DAY = timedelta(days=1)
_SIX_WEEKS = 42


# ── value types ───────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Day:
    """
    One calendar day inside a frame.

    ``owner`` is a weak handle to the gallery that built the day; it backs
    the ``select`` / ``deselect`` / ``toggle`` shortcuts and is ignored by
    equality.
    """

    date: date
    start: datetime
    is_padding: bool
    is_selected: bool
    is_today: bool
    can_be_selected: bool
    events: tuple[Event, ...] = ()
    owner: Optional[weakref.ReferenceType[DateGallery]] = field(
        default=None, compare=False, repr=False
    )

    @property
    def has_events(self) -> bool:
        return len(self.events) > 0

    @property
    def has_events_with_overlap(self) -> bool:
        return any(e.is_overlapping for e in self.events)

    # ── shortcuts to the owning gallery ──────────────────────────────────

    @property
    def gallery(self) -> DateGallery:
        gallery = self.owner() if self.owner is not None else None
        if gallery is None:
            raise ReferenceError("no DateGallery owns this day")
        return gallery

    def select(self) -> None:
        self.gallery.select_date(self.date)

    def deselect(self) -> None:
        self.gallery.deselect_date(self.date)

    def toggle(self) -> None:
        self.gallery.toggle_date_selection(self.date)


@dataclass(frozen=True, slots=True)
class Frame:
    """A contiguous window of days, e.g. one month grid."""

    anchor_date: date
    days: tuple[Day, ...]
    events: tuple[Event, ...] = ()

    @property
    def first_day(self) -> date:
        return self.days[0].date

    @property
    def last_day(self) -> date:
        return self.days[-1].date


CanSelect = Callable[[Day], bool]


# ── validation ────────────────────────────────────────────────────────────────

def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_frame_config(
    mode: object,
    number_of_frames: object,
    number_of_days: object,
    first_day_of_week: object,
) -> None:
    if mode not in MODES:
        raise ModeError(mode)
    if not _is_int(number_of_frames) or number_of_frames <= 0:
        raise NumberOfFramesError(number_of_frames)
    if not _is_int(number_of_days) or number_of_days <= 0:
        raise NumberOfDaysError(number_of_days)
    if not _is_int(first_day_of_week) or not 0 <= first_day_of_week <= 6:
        raise FirstDayOfWeekError(first_day_of_week)


# ── calendar arithmetic ───────────────────────────────────────────────────────

def day_of_week(day: date) -> int:
    """0 = sunday .. 6 = saturday."""
    return (day.weekday() + 1) % 7


def start_of_week(day: date, first_day_of_week: int) -> date:
    """Most recent ``first_day_of_week`` on or before ``day``."""
    return day - timedelta(days=(day_of_week(day) - first_day_of_week) % 7)


def _first_of_month(day: date, months: int = 0) -> date:
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def align_anchor(mode: str, day: date, first_day_of_week: int) -> date:
    """Drag ``day`` back to the first day of the period it belongs to."""
    if mode == "week":
        return start_of_week(day, first_day_of_week)
    if mode.startswith("month"):
        return day.replace(day=1)
    if mode == "year":
        return date(day.year, 1, 1)
    return day


def shift_anchor(mode: str, anchor: date, steps: int, number_of_days: int = 1) -> date:
    """Move an aligned anchor ``steps`` frames forward (or back when negative)."""
    if mode == "day":
        return anchor + timedelta(days=steps)
    if mode == "days":
        return anchor + timedelta(days=steps * number_of_days)
    if mode == "week":
        return anchor + timedelta(days=7 * steps)
    if mode == "year":
        return date(anchor.year + steps, 1, 1)
    return _first_of_month(anchor, steps)


def frame_layout(
    mode: str,
    anchor: date,
    first_day_of_week: int,
    number_of_days: int = 1,
) -> list[tuple[date, bool]]:
    """The ``(day, is_padding)`` pairs of the frame anchored at ``anchor``."""
    if mode == "day":
        return [(anchor, False)]

    if mode == "days":
        return [(anchor + timedelta(days=i), False) for i in range(number_of_days)]

    if mode == "week":
        first = start_of_week(anchor, first_day_of_week)
        return [(first + timedelta(days=i), False) for i in range(7)]

    if mode == "year":
        first = date(anchor.year, 1, 1)
        length = (date(anchor.year + 1, 1, 1) - first).days
        return [(first + timedelta(days=i), False) for i in range(length)]

    month_start = _first_of_month(anchor)
    next_month = _first_of_month(anchor, 1)

    if mode == "month":
        first, end = month_start, next_month
    elif mode == "month-pad-to-week":
        first = start_of_week(month_start, first_day_of_week)
        trailing = (first_day_of_week - day_of_week(next_month)) % 7
        end = next_month + timedelta(days=trailing)
    else:  # month-six-weeks
        first = start_of_week(month_start, first_day_of_week)
        end = first + timedelta(days=_SIX_WEEKS)

    layout = []
    day = first
    while day < end:
        layout.append((day, day.month != month_start.month))
        day += _ONE_DAY
    return layout


# ── generation ────────────────────────────────────────────────────────────────

def build_frames(
    *,
    mode: str,
    number_of_frames: int,
    number_of_days: int,
    anchor: date,
    first_day_of_week: int,
    clock: DayClock,
    selected: Collection[date],
    store: EventStore,
    today: date,
    can_select: Optional[CanSelect] = None,
    owner: Optional[weakref.ReferenceType[DateGallery]] = None,
) -> tuple[Frame, ...]:
    """
    Materialize ``number_of_frames`` consecutive frames starting at ``anchor``.

    Pure: the result depends only on the arguments, and every call returns
    new Frame/Day objects.  ``owner`` is handed to every Day as is.
    """
    layouts = []
    for i in range(number_of_frames):
        frame_anchor = shift_anchor(mode, anchor, i, number_of_days)
        layouts.append(
            (frame_anchor, frame_layout(mode, frame_anchor, first_day_of_week, number_of_days))
        )

    midnights: dict[date, datetime] = {}

    def midnight(day: date) -> datetime:
        if day not in midnights:
            midnights[day] = clock.midnight(day)
        return midnights[day]

    all_days = [day for _, layout in layouts for day, _ in layout]
    day_events = store.project(
        np.array([to_microseconds(midnight(d)) for d in all_days], dtype=np.int64),
        np.array([to_microseconds(midnight(d + _ONE_DAY)) for d in all_days], dtype=np.int64),
    )
    frame_events = store.project(
        np.array(
            [to_microseconds(midnight(layout[0][0])) for _, layout in layouts],
            dtype=np.int64,
        ),
        np.array(
            [to_microseconds(midnight(layout[-1][0] + _ONE_DAY)) for _, layout in layouts],
            dtype=np.int64,
        ),
    )

    selected_set = set(selected)
    frames = []
    k = 0
    for (frame_anchor, layout), events in zip(layouts, frame_events):
        days = []
        for day, is_padding in layout:
            entry = Day(
                date=day,
                start=midnight(day),
                is_padding=is_padding,
                is_selected=day in selected_set,
                is_today=day == today,
                can_be_selected=True,
                events=day_events[k],
                owner=owner,
            )
            if can_select is not None:
                entry = replace(entry, can_be_selected=bool(can_select(entry)))
            days.append(entry)
            k += 1
        frames.append(Frame(anchor_date=frame_anchor, days=tuple(days), events=events))

    return tuple(frames)
