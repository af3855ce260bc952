from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Literal, Mapping, Optional, Union

if TYPE_CHECKING:
    from dategallery.events import Event
    from dategallery.frames import Frame

RecordKind = Literal[
    "INITIALIZED",
    "FRAME_CHANGED",
    "CONFIG_CHANGED",
    "DATE_SELECTED",
    "DATE_SELECTED_MULTIPLE",
    "DATE_DESELECTED",
    "DATE_DESELECTED_MULTIPLE",
    "EVENT_ADDED",
    "EVENT_REMOVED",
    "EVENT_MOVED",
    "EVENT_DATA_CHANGED",
]


@dataclass(frozen=True, kw_only=True)
class Record:
    """Base of every history record: a ``kind`` tag and the clock's ``time``."""

    kind: str = field(default="", init=False)
    time: datetime


@dataclass(frozen=True, kw_only=True)
class Initialized(Record):
    kind: Literal["INITIALIZED"] = field(default="INITIALIZED", init=False)


@dataclass(frozen=True, kw_only=True)
class FrameChanged(Record):
    kind: Literal["FRAME_CHANGED"] = field(default="FRAME_CHANGED", init=False)
    anchor_date: date
    frames: tuple[Frame, ...]


@dataclass(frozen=True, kw_only=True)
class ConfigChanged(Record):
    kind: Literal["CONFIG_CHANGED"] = field(default="CONFIG_CHANGED", init=False)
    changes: Mapping[str, Any]
    # Oldest days dropped because a lower max_selection_limit was set.
    deselected_dates: tuple[date, ...] = ()


@dataclass(frozen=True, kw_only=True)
class DateSelected(Record):
    kind: Literal["DATE_SELECTED"] = field(default="DATE_SELECTED", init=False)
    date: date
    # Day evicted by the 'circular' limit behavior, if any.
    deselected_date: Optional[date] = None


@dataclass(frozen=True, kw_only=True)
class DateSelectedMultiple(Record):
    kind: Literal["DATE_SELECTED_MULTIPLE"] = field(
        default="DATE_SELECTED_MULTIPLE", init=False
    )
    dates: tuple[date, ...]
    deselected_dates: tuple[date, ...] = ()


@dataclass(frozen=True, kw_only=True)
class DateDeselected(Record):
    kind: Literal["DATE_DESELECTED"] = field(default="DATE_DESELECTED", init=False)
    date: date


@dataclass(frozen=True, kw_only=True)
class DateDeselectedMultiple(Record):
    kind: Literal["DATE_DESELECTED_MULTIPLE"] = field(
        default="DATE_DESELECTED_MULTIPLE", init=False
    )
    dates: tuple[date, ...]


@dataclass(frozen=True, kw_only=True)
class EventAdded(Record):
    kind: Literal["EVENT_ADDED"] = field(default="EVENT_ADDED", init=False)
    event: Event


@dataclass(frozen=True, kw_only=True)
class EventRemoved(Record):
    kind: Literal["EVENT_REMOVED"] = field(default="EVENT_REMOVED", init=False)
    event: Event


@dataclass(frozen=True, kw_only=True)
class EventMoved(Record):
    kind: Literal["EVENT_MOVED"] = field(default="EVENT_MOVED", init=False)
    event: Event


@dataclass(frozen=True, kw_only=True)
class EventDataChanged(Record):
    kind: Literal["EVENT_DATA_CHANGED"] = field(default="EVENT_DATA_CHANGED", init=False)
    event: Event


HistoryRecord = Union[
    Initialized,
    FrameChanged,
    ConfigChanged,
    DateSelected,
    DateSelectedMultiple,
    DateDeselected,
    DateDeselectedMultiple,
    EventAdded,
    EventRemoved,
    EventMoved,
    EventDataChanged,
]
