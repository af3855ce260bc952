# src/dategallery/events/__init__.py
"""
dategallery.events
~~~~~~~~~~~~~~~~~~

Time-ranged events and the store that keeps them sorted and linked.  Two
events overlap when their inclusive ranges intersect; the store computes
all links at once with NumPy broadcasting and projects events onto day or
frame windows the same way.

Events are never constructed directly, use ``DateGallery.add_event``::

    event = gallery.add_event("Lunch", "2024-05-01T12:00", "2024-05-01T13:00")
    event.is_overlapping        # → False
    event.move("2024-05-01T12:30", "2024-05-01T13:30")

Public API
----------
Event        An event owned by a DateGallery.
EventStore   Sorted event collection with overlap/projection math.
"""

from __future__ import annotations

from dategallery.events.events import Event, EventStore

__all__ = [
    "Event",
    "EventStore",
]
