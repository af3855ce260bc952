# src/dategallery/gallery/__init__.py
"""
dategallery.gallery
~~~~~~~~~~~~~~~~~~~

The DateGallery engine.  It owns a selection, an event store and a history,
and rebuilds its frames from scratch after every accepted mutation before
informing subscribers with ``(snapshot, record)``.

Basic usage::

    from dategallery.gallery import DateGallery, GalleryConfig

    gallery = DateGallery(
        GalleryConfig(mode="month-six-weeks", max_selection_limit=1),
        lambda snapshot, record: print(record.kind),
    )
    gallery.select_date("2024-05-01")          # DATE_SELECTED
    gallery.next()                              # FRAME_CHANGED

Public API
----------
DateGallery        The engine.
GalleryConfig      Construction / initialize() config.
EventConfig        An event in GalleryConfig.events.
GallerySnapshot    Read-only view handed to subscribers.
create_subscriber  Per-record-kind dispatching subscriber.
"""

from __future__ import annotations

from dategallery.gallery.config import EventConfig, GalleryConfig
from dategallery.gallery.gallery import DateGallery
from dategallery.gallery.snapshot import GallerySnapshot
from dategallery.gallery.subscriber import create_subscriber

__all__ = [
    "DateGallery",
    "EventConfig",
    "GalleryConfig",
    "GallerySnapshot",
    "create_subscriber",
]
