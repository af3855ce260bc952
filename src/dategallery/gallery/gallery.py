from __future__ import annotations

import logging
import weakref
from dataclasses import replace
from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from dategallery._exceptions import ConfigError, EventNotFoundError, InvalidRangeError
from dategallery.clock import DateLike, DayClock
from dategallery.events import Event, EventStore
from dategallery.frames import Frame, Mode, align_anchor, build_frames, shift_anchor
from dategallery.history import (
    ConfigChanged,
    DateDeselected,
    DateDeselectedMultiple,
    DateSelected,
    DateSelectedMultiple,
    EventAdded,
    EventDataChanged,
    EventMoved,
    EventRemoved,
    FrameChanged,
    History,
    HistoryRecord,
    Initialized,
    Observer,
    Subscriber,
    UnsubscribeFunction,
)
from dategallery.selection import LimitBehavior, Selection, SelectionLimit

from .config import (
    INITIALIZE_ONLY,
    GalleryConfig,
    coerce_config,
    coerce_event,
    validate_config,
)
from .snapshot import GallerySnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

GallerySubscriber = Subscriber[GallerySnapshot[T], HistoryRecord]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DateGallery(Generic[T]):
    """
    Stateful calendar engine: frames of days, a day selection and events.

    Every accepted mutation runs to completion synchronously: inputs are
    validated, state is changed, frames are rebuilt from scratch, a record
    is appended to the history and every subscriber is called with
    ``(snapshot, record)``.  Invalid input raises before anything changes;
    ``select_range`` under the 'error' limit behavior is the one call that
    can both commit and raise.  No-ops (selecting a selected day, moving an
    event onto its own range, ...) produce no record.

    Subscribers must not structurally mutate the same gallery from inside
    their callback: the notification pass in progress would keep handing
    out the older snapshot.
    """

    def __init__(
        self,
        config: Union[GalleryConfig[T], Mapping[str, Any], None] = None,
        subscriber: Optional[GallerySubscriber[T]] = None,
    ) -> None:
        self._observer: Observer[GallerySnapshot[T], HistoryRecord] = Observer()
        self._ref = weakref.ref(self)
        if subscriber is not None:
            self.subscribe(subscriber)
        self._initialize(config, "constructor")

    # ── lifecycle ────────────────────────────────────────────────────────

    def initialize(
        self, config: Union[GalleryConfig[T], Mapping[str, Any], None] = None
    ) -> None:
        """Reset selection, events, history and frames as if newly constructed."""
        self._initialize(config, "initialize")

    def _initialize(
        self,
        config: Union[GalleryConfig[T], Mapping[str, Any], None],
        method: str,
    ) -> None:
        config = coerce_config(config)
        validate_config(config)

        history: History[HistoryRecord] = History(config.keep_history_for)
        clock = DayClock(is_utc=config.is_utc, tz=config.timezone)
        now_fn = config.clock or _utc_now
        now = clock.to_datetime(now_fn(), method, "clock")

        if config.initial_date is None:
            day = clock.day_of(now)
        else:
            day = clock.to_day(config.initial_date, method, "initial_date")

        selection = Selection(config.max_selection_limit, config.max_selection_limit_behavior)
        for value in config.selected_dates:
            selection.select(clock.to_day(value, method, "selected_dates"), method)

        store: EventStore[T] = EventStore()
        for item in config.events:
            event_config = coerce_event(item)
            start, end = self._parse_range(
                clock,
                event_config.start_date,
                event_config.end_date,
                method,
                "events.start_date",
                "events.end_date",
            )
            store.add(Event(self, event_config.data, start, end))
        store.refresh(clock)

        self._config: GalleryConfig[T] = config
        self._clock = clock
        self._now = now_fn
        self._anchor: date = align_anchor(config.mode, day, config.first_day_of_week)
        self._selection = selection
        self._store = store
        self._history = history

        self._rebuild(now)
        self._commit(Initialized(time=now))

    # ── observer ─────────────────────────────────────────────────────────

    def subscribe(self, subscriber: GallerySubscriber[T]) -> UnsubscribeFunction:
        return self._observer.subscribe(subscriber)

    def unsubscribe(self, subscriber: GallerySubscriber[T]) -> None:
        self._observer.unsubscribe(subscriber)

    def unsubscribe_all(self) -> None:
        self._observer.clear()

    # ── read-only state ──────────────────────────────────────────────────

    @property
    def config(self) -> GalleryConfig[T]:
        return self._config

    @property
    def snapshot(self) -> GallerySnapshot[T]:
        return self._snapshot

    @property
    def mode(self) -> Mode:
        return self._config.mode

    @property
    def number_of_frames(self) -> int:
        return self._config.number_of_frames

    @property
    def number_of_days(self) -> int:
        return self._config.number_of_days

    @property
    def first_day_of_week(self) -> int:
        return self._config.first_day_of_week

    @property
    def is_utc(self) -> bool:
        return self._config.is_utc

    @property
    def max_selection_limit(self) -> SelectionLimit:
        return self._selection.limit

    @property
    def max_selection_limit_behavior(self) -> LimitBehavior:
        return self._selection.behavior

    @property
    def keep_history_for(self) -> int:
        return self._history.keep_for

    @property
    def anchor_date(self) -> date:
        return self._anchor

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def first_frame(self) -> Frame:
        return self._frames[0]

    @property
    def events(self) -> tuple[Event[T], ...]:
        return self._store.events

    @property
    def first_frame_events(self) -> tuple[Event[T], ...]:
        return self._frames[0].events

    @property
    def events_per_frame(self) -> tuple[tuple[Event[T], ...], ...]:
        return tuple(frame.events for frame in self._frames)

    @property
    def selected_dates(self) -> tuple[date, ...]:
        return self._selection.days

    @property
    def history(self) -> tuple[HistoryRecord, ...]:
        return self._history.records

    def is_same_day(self, a: DateLike, b: DateLike) -> bool:
        return self._clock.is_same_day(a, b)

    # ── frames ───────────────────────────────────────────────────────────

    def next(self) -> None:
        now = self._current_time("next")
        self._change_anchor(
            shift_anchor(self.mode, self._anchor, 1, self.number_of_days), now
        )

    def previous(self) -> None:
        now = self._current_time("previous")
        self._change_anchor(
            shift_anchor(self.mode, self._anchor, -1, self.number_of_days), now
        )

    def today(self) -> None:
        """Move the frames onto the clock's day; a no-op when already there."""
        now = self._current_time("today")
        anchor = align_anchor(self.mode, self._clock.day_of(now), self.first_day_of_week)
        if anchor == self._anchor:
            return
        self._change_anchor(anchor, now)

    def _change_anchor(self, anchor: date, now: datetime) -> None:
        self._anchor = anchor
        self._rebuild(now)
        self._commit(FrameChanged(time=now, anchor_date=anchor, frames=self._frames))

    def change_config(self, **changes: Any) -> None:
        """
        Merge ``changes`` into the current config and rebuild.

        Passing ``initial_date`` re-anchors the frames (None means today);
        otherwise the current anchor is realigned to the new mode.  Lowering
        ``max_selection_limit`` below the selection size drops the oldest
        selected days.
        """
        method = "change_config"
        blocked = sorted(INITIALIZE_ONLY & changes.keys())
        if blocked:
            raise ConfigError(f"{method} > {blocked} can only be set through initialize()")

        config = replace(self._config, **changes)
        validate_config(config)
        clock = DayClock(is_utc=config.is_utc, tz=config.timezone)
        now = clock.to_datetime(self._now(), method, "clock")

        if "initial_date" not in changes:
            day = self._anchor
        elif changes["initial_date"] is None:
            day = clock.day_of(now)
        else:
            day = clock.to_day(changes["initial_date"], method, "initial_date")

        dropped = self._selection.configure(
            config.max_selection_limit, config.max_selection_limit_behavior
        )
        self._config = config
        self._clock = clock
        self._anchor = align_anchor(config.mode, day, config.first_day_of_week)
        self._store.refresh(clock)

        self._rebuild(now)
        self._commit(
            ConfigChanged(
                time=now,
                changes=MappingProxyType(dict(changes)),
                deselected_dates=dropped,
            )
        )

    # ── selection ────────────────────────────────────────────────────────

    def select_date(self, value: DateLike) -> None:
        self._select("select_date", self._clock.to_day(value, "select_date", "date"))

    def deselect_date(self, value: DateLike) -> None:
        self._deselect("deselect_date", self._clock.to_day(value, "deselect_date", "date"))

    def toggle_date_selection(self, value: DateLike) -> None:
        method = "toggle_date_selection"
        day = self._clock.to_day(value, method, "date")
        if day in self._selection:
            self._deselect(method, day)
        else:
            self._select(method, day)

    def _select(self, method: str, day: date) -> None:
        now = self._current_time(method)
        change = self._selection.select(day, method)
        if not change:
            return

        self._rebuild(now)
        self._commit(
            DateSelected(
                time=now,
                date=day,
                deselected_date=change.deselected[0] if change.deselected else None,
            )
        )

    def _deselect(self, method: str, day: date) -> None:
        now = self._current_time(method)
        if not self._selection.deselect(day):
            return

        self._rebuild(now)
        self._commit(DateDeselected(time=now, date=day))

    def select_range(self, a: DateLike, b: DateLike) -> None:
        """
        Select every day from ``a`` through ``b``, in either order.

        Under the 'error' limit behavior the days that fit are committed and
        published before SelectionLimitReachedError is raised.
        """
        method = "select_range"
        day_a = self._clock.to_day(a, method, "a")
        day_b = self._clock.to_day(b, method, "b")
        now = self._current_time(method)

        change, error = self._selection.select_range(day_a, day_b, method)
        if change:
            self._rebuild(now)
            self._commit(
                DateSelectedMultiple(
                    time=now,
                    dates=change.selected,
                    deselected_dates=change.deselected,
                )
            )
        if error is not None:
            raise error

    def deselect_all(self) -> None:
        now = self._current_time("deselect_all")
        if not self._selection:
            return

        dates = self._selection.clear()
        self._rebuild(now)
        self._commit(DateDeselectedMultiple(time=now, dates=dates))

    # ── events ───────────────────────────────────────────────────────────

    def add_event(self, data: T, start_date: DateLike, end_date: DateLike) -> Event[T]:
        method = "add_event"
        start, end = self._parse_range(
            self._clock, start_date, end_date, method, "start_date", "end_date"
        )
        now = self._current_time(method)

        event = Event(self, data, start, end)
        self._store.add(event)
        self._store.refresh(self._clock)

        self._rebuild(now)
        self._commit(EventAdded(time=now, event=event))
        return event

    def remove_event(self, event: Event[T]) -> Event[T]:
        """Remove ``event``; unknown or already removed events are ignored."""
        now = self._current_time("remove_event")
        if not self._store.discard(event):
            return event

        self._store.refresh(self._clock)
        self._rebuild(now)
        self._commit(EventRemoved(time=now, event=event))
        return event

    def move_event(self, event: Event[T], start_date: DateLike, end_date: DateLike) -> None:
        method = "move_event"
        start, end = self._parse_range(
            self._clock, start_date, end_date, method, "start_date", "end_date"
        )
        if event not in self._store:
            raise EventNotFoundError(method)
        if start == event.start_date and end == event.end_date:
            return
        now = self._current_time(method)

        event._start_date = start
        event._end_date = end
        self._store.refresh(self._clock)

        self._rebuild(now)
        self._commit(EventMoved(time=now, event=event))

    def change_event_data(self, event: Event[T], data: T) -> None:
        """Replace the payload; always recorded, even for an identical value."""
        method = "change_event_data"
        if event not in self._store:
            raise EventNotFoundError(method)
        now = self._current_time(method)

        event._data = data

        self._rebuild(now)
        self._commit(EventDataChanged(time=now, event=event))

    # ── internals ────────────────────────────────────────────────────────

    @staticmethod
    def _parse_range(
        clock: DayClock,
        start_date: object,
        end_date: object,
        method: str,
        start_param: str,
        end_param: str,
    ) -> tuple[datetime, datetime]:
        start = clock.to_datetime(start_date, method, start_param)
        end = clock.to_datetime(end_date, method, end_param)
        if start > end:
            raise InvalidRangeError(method)
        return start, end

    def _current_time(self, method: str) -> datetime:
        return self._clock.to_datetime(self._now(), method, "clock")

    def _rebuild(self, now: datetime) -> None:
        self._frames: tuple[Frame, ...] = build_frames(
            mode=self._config.mode,
            number_of_frames=self._config.number_of_frames,
            number_of_days=self._config.number_of_days,
            anchor=self._anchor,
            first_day_of_week=self._config.first_day_of_week,
            clock=self._clock,
            selected=self._selection.days,
            store=self._store,
            today=self._clock.day_of(now),
            can_select=self._config.can_select,
            owner=self._ref,
        )

    def _commit(self, record: HistoryRecord) -> None:
        self._history.push(record)
        self._snapshot: GallerySnapshot[T] = GallerySnapshot(
            frames=self._frames,
            events=self._store.events,
            selected_dates=self._selection.days,
            anchor_date=self._anchor,
            mode=self._config.mode,
            number_of_frames=self._config.number_of_frames,
            number_of_days=self._config.number_of_days,
            first_day_of_week=self._config.first_day_of_week,
            is_utc=self._config.is_utc,
            max_selection_limit=self._selection.limit,
            max_selection_limit_behavior=self._selection.behavior,
            history=self._history.records,
        )
        logger.debug("%s at %s", record.kind, record.time.isoformat())
        self._observer.inform(self._snapshot, record)

    def __repr__(self) -> str:
        return (
            f"DateGallery(mode={self.mode!r}, "
            f"anchor_date={self._anchor.isoformat()}, "
            f"frames={len(self._frames)}, "
            f"selected={len(self._selection)}, "
            f"events={len(self._store)}, "
            f"subscribers={len(self._observer)})"
        )
