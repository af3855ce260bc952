# src/dategallery/__init__.py
"""
dategallery
~~~~~~~~~~~

A headless calendar engine: date frames for day/week/month/year views, an
ordered day selection with limits, time-ranged events with overlap
detection, and a typed change history pushed to subscribers.

Basic usage::

    from dategallery import DateGallery

    gallery = DateGallery({"mode": "week", "initial_date": "1990-09-26"})
    gallery.select_date("1990-09-24")
    gallery.selected_dates                 # → (date(1990, 9, 24),)

    lunch = gallery.add_event("lunch", "1990-09-24T12:00", "1990-09-24T13:00")
    gallery.first_frame.days[1].events     # → (lunch,)

Public API
----------
DateGallery, GalleryConfig, EventConfig, GallerySnapshot, create_subscriber
Event, Day, Frame, MODES
DayClock, is_same_day
History records (Initialized, DateSelected, ...)
DateGalleryError and its subclasses.
"""

from __future__ import annotations

from dategallery._exceptions import (
    ConfigError,
    DateGalleryError,
    EventNotFoundError,
    FirstDayOfWeekError,
    InvalidDateError,
    InvalidRangeError,
    ModeError,
    NumberOfDaysError,
    NumberOfFramesError,
    SelectionLimitReachedError,
)
from dategallery.clock import DayClock, is_same_day
from dategallery.events import Event
from dategallery.frames import MODES, Day, Frame
from dategallery.gallery import (
    DateGallery,
    EventConfig,
    GalleryConfig,
    GallerySnapshot,
    create_subscriber,
)
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
    HistoryRecord,
    Initialized,
)

__all__ = [
    "MODES",
    "ConfigChanged",
    "ConfigError",
    "DateDeselected",
    "DateDeselectedMultiple",
    "DateGallery",
    "DateGalleryError",
    "DateSelected",
    "DateSelectedMultiple",
    "Day",
    "DayClock",
    "Event",
    "EventAdded",
    "EventConfig",
    "EventDataChanged",
    "EventMoved",
    "EventNotFoundError",
    "EventRemoved",
    "FirstDayOfWeekError",
    "Frame",
    "FrameChanged",
    "GalleryConfig",
    "GallerySnapshot",
    "HistoryRecord",
    "Initialized",
    "InvalidDateError",
    "InvalidRangeError",
    "ModeError",
    "NumberOfDaysError",
    "NumberOfFramesError",
    "SelectionLimitReachedError",
    "create_subscriber",
    "is_same_day",
]
