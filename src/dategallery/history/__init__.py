# src/dategallery/history/__init__.py
"""
dategallery.history
~~~~~~~~~~~~~~~~~~~

Typed change records, the bounded history that keeps them and the observer
that hands them to subscribers.

Every accepted mutation of a DateGallery produces exactly one record, a
frozen dataclass tagged by ``kind``::

    DateSelected(kind="DATE_SELECTED", time=..., date=..., deselected_date=None)

Public API
----------
Record          Base record (``kind``, ``time``).
HistoryRecord   Union of every concrete record type.
History         Ring buffer of records (``keep_for=0`` keeps nothing).
Observer        Ordered subscriber list.
Subscriber      Callable protocol ``(snapshot, record) -> None``.
"""

from __future__ import annotations

from dategallery.history.history import (
    History,
    Observer,
    Subscriber,
    UnsubscribeFunction,
)
from dategallery.history.records import (
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
    Record,
    RecordKind,
)

__all__ = [
    "ConfigChanged",
    "DateDeselected",
    "DateDeselectedMultiple",
    "DateSelected",
    "DateSelectedMultiple",
    "EventAdded",
    "EventDataChanged",
    "EventMoved",
    "EventRemoved",
    "FrameChanged",
    "History",
    "HistoryRecord",
    "Initialized",
    "Observer",
    "Record",
    "RecordKind",
    "Subscriber",
    "UnsubscribeFunction",
]
