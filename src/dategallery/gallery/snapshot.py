from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

from dategallery.events import Event
from dategallery.frames import Frame, Mode
from dategallery.history import HistoryRecord
from dategallery.selection import LimitBehavior, SelectionLimit

T = TypeVar("T")


@dataclass(frozen=True)
class GallerySnapshot(Generic[T]):
    """Settled, read-only view of a DateGallery handed to subscribers."""

    frames: tuple[Frame, ...]
    events: tuple[Event[T], ...]
    selected_dates: tuple[date, ...]
    anchor_date: date
    mode: Mode
    number_of_frames: int
    number_of_days: int
    first_day_of_week: int
    is_utc: bool
    max_selection_limit: SelectionLimit
    max_selection_limit_behavior: LimitBehavior
    history: tuple[HistoryRecord, ...]

    @property
    def first_frame(self) -> Frame:
        return self.frames[0]

    @property
    def first_frame_events(self) -> tuple[Event[T], ...]:
        return self.frames[0].events

    @property
    def events_per_frame(self) -> tuple[tuple[Event[T], ...], ...]:
        return tuple(frame.events for frame in self.frames)
