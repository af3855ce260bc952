from __future__ import annotations

import weakref
from datetime import datetime
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

import numpy as np

from dategallery.clock import DayClock, to_microseconds

if TYPE_CHECKING:
    from dategallery.gallery.gallery import DateGallery

T = TypeVar("T")


class Event(Generic[T]):
    """
    An inclusive time range carrying caller-owned ``data``.

    Events are only created by ``DateGallery.add_event`` and hold a weak
    handle back to that gallery.  The range, the payload and the derived
    fields are read-only here; change them through the gallery (or the
    ``move`` / ``change_data`` shortcuts) so subscribers are informed.
    """

    def __init__(
        self,
        gallery: DateGallery[T],
        data: T,
        start_date: datetime,
        end_date: datetime,
    ) -> None:
        self._gallery_ref = weakref.ref(gallery)
        self._data = data
        self._start_date = start_date
        self._end_date = end_date
        self._overlapping_events: tuple[Event[T], ...] = ()
        self._spans_multiple_days = False

    @property
    def gallery(self) -> DateGallery[T]:
        gallery = self._gallery_ref()
        if gallery is None:
            raise ReferenceError("the DateGallery owning this event no longer exists")
        return gallery

    @property
    def data(self) -> T:
        return self._data

    @property
    def start_date(self) -> datetime:
        return self._start_date

    @property
    def end_date(self) -> datetime:
        return self._end_date

    @property
    def overlapping_events(self) -> tuple[Event[T], ...]:
        """Other events whose range intersects this one, by start date."""
        return self._overlapping_events

    @property
    def is_overlapping(self) -> bool:
        return len(self._overlapping_events) > 0

    @property
    def spans_multiple_days(self) -> bool:
        return self._spans_multiple_days

    # ── shortcuts to the owning gallery ──────────────────────────────────

    def remove(self) -> Event[T]:
        return self.gallery.remove_event(self)

    def move(self, start_date: object, end_date: object) -> None:
        self.gallery.move_event(self, start_date, end_date)

    def change_data(self, data: T) -> None:
        self.gallery.change_event_data(self, data)

    def __repr__(self) -> str:
        return (
            f"Event(data={self._data!r}, "
            f"start_date={self._start_date.isoformat()}, "
            f"end_date={self._end_date.isoformat()}, "
            f"overlapping={len(self._overlapping_events)})"
        )


class EventStore(Generic[T]):
    """
    Ordered event collection with NumPy-backed overlap and day projection.

    Events are kept sorted by start date; among equal starts the most
    recently added event comes first.  Call ``refresh`` after every
    structural change.  Both computations are O(n²) in the number of events,
    which is fine for calendar-sized collections.
    """

    def __init__(self) -> None:
        self._events: list[Event[T]] = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event[T]]:
        return iter(self._events)

    def __contains__(self, event: object) -> bool:
        return any(e is event for e in self._events)

    @property
    def events(self) -> tuple[Event[T], ...]:
        return tuple(self._events)

    # ── structure ────────────────────────────────────────────────────────

    def add(self, event: Event[T]) -> None:
        # Front insert: the stable sort in refresh() then puts the newest
        # event first among equal start dates.
        self._events.insert(0, event)

    def discard(self, event: Event[T]) -> bool:
        for i, e in enumerate(self._events):
            if e is event:
                del self._events[i]
                event._overlapping_events = ()
                return True
        return False

    # ── derived state ────────────────────────────────────────────────────

    def _bounds(self) -> tuple[np.ndarray, np.ndarray]:
        n = len(self._events)
        starts = np.fromiter(
            (to_microseconds(e.start_date) for e in self._events), dtype=np.int64, count=n
        )
        ends = np.fromiter(
            (to_microseconds(e.end_date) for e in self._events), dtype=np.int64, count=n
        )
        return starts, ends

    def refresh(self, clock: DayClock) -> None:
        """Re-sort, then recompute overlap links and ``spans_multiple_days``."""
        self._events.sort(key=lambda e: e.start_date)
        if not self._events:
            return

        starts, ends = self._bounds()
        # Inclusive intersection; symmetric by construction.
        overlap = (starts[:, None] <= ends[None, :]) & (starts[None, :] <= ends[:, None])
        np.fill_diagonal(overlap, False)

        for i, event in enumerate(self._events):
            event._overlapping_events = tuple(
                self._events[j] for j in np.flatnonzero(overlap[i])
            )
            event._spans_multiple_days = (
                clock.day_of(event.start_date) != clock.day_of(event.end_date)
            )

    def project(
        self, lows: np.ndarray, highs: np.ndarray
    ) -> list[tuple[Event[T], ...]]:
        """
        Events touching each window ``[lows[k], highs[k])`` (microseconds).

        An event touches a window when it starts before the window ends and
        ends at or after the window starts.
        """
        if not self._events:
            return [() for _ in range(len(lows))]

        starts, ends = self._bounds()
        touches = (starts[None, :] < highs[:, None]) & (ends[None, :] >= lows[:, None])
        return [tuple(self._events[j] for j in np.flatnonzero(row)) for row in touches]

    def __repr__(self) -> str:
        n_overlapping = sum(1 for e in self._events if e.is_overlapping)
        return f"EventStore(events={len(self._events)}, overlapping={n_overlapping})"
