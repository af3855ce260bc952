from __future__ import annotations

import logging
from typing import Any, Callable

from dategallery.history import HistoryRecord

from .snapshot import GallerySnapshot

logger = logging.getLogger(__name__)

Handler = Callable[[Any, GallerySnapshot], None]

HANDLER_NAMES: dict[str, str] = {
    "INITIALIZED": "on_initialized",
    "FRAME_CHANGED": "on_frame_changed",
    "CONFIG_CHANGED": "on_config_changed",
    "DATE_SELECTED": "on_date_selected",
    "DATE_SELECTED_MULTIPLE": "on_date_selected_multiple",
    "DATE_DESELECTED": "on_date_deselected",
    "DATE_DESELECTED_MULTIPLE": "on_date_deselected_multiple",
    "EVENT_ADDED": "on_event_added",
    "EVENT_REMOVED": "on_event_removed",
    "EVENT_MOVED": "on_event_moved",
    "EVENT_DATA_CHANGED": "on_event_data_changed",
}


def create_subscriber(
    *, debug: bool = False, **handlers: Handler
) -> Callable[[GallerySnapshot, HistoryRecord], None]:
    """
    Build a subscriber that routes each record to a per-kind handler.

    Handlers are called as ``handler(record, snapshot)``, e.g.::

        gallery.subscribe(create_subscriber(
            on_date_selected=lambda record, snapshot: print(record.date),
        ))

    Records without a handler are skipped, or logged as warnings when
    ``debug`` is set.
    """
    known = set(HANDLER_NAMES.values())
    unknown = sorted(set(handlers) - known)
    if unknown:
        raise TypeError(f"create_subscriber() got unknown handlers: {unknown}")

    by_kind = {
        kind: handlers[name] for kind, name in HANDLER_NAMES.items() if name in handlers
    }

    def subscriber(snapshot: GallerySnapshot, record: HistoryRecord) -> None:
        handler = by_kind.get(record.kind)
        if handler is not None:
            handler(record, snapshot)
        elif debug:
            logger.warning(
                "create_subscriber: no handler %r for %s",
                HANDLER_NAMES.get(record.kind),
                record.kind,
            )

    return subscriber
