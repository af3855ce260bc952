# src/dategallery/selection/__init__.py
"""
dategallery.selection
~~~~~~~~~~~~~~~~~~~~~

Insertion-ordered selection of calendar days with an optional limit and
three overflow behaviors ('circular', 'ignore', 'error').

Basic usage::

    from datetime import date
    from dategallery.selection import Selection

    sel = Selection(limit=2, behavior="circular")
    sel.select(date(2024, 5, 1), "select")
    sel.select(date(2024, 5, 2), "select")
    sel.select(date(2024, 5, 3), "select")   # evicts 2024-05-01
    sel.days                                 # → (May 2, May 3)

Public API
----------
Selection         The selection state machine.
SelectionChange   Net selected/deselected days of one operation.
LIMIT_BEHAVIORS   The accepted overflow behaviors.
"""

from __future__ import annotations

from dategallery.selection.selection import (
    LIMIT_BEHAVIORS,
    LimitBehavior,
    Selection,
    SelectionChange,
    SelectionLimit,
    validate_limit,
)

__all__ = [
    "LIMIT_BEHAVIORS",
    "LimitBehavior",
    "Selection",
    "SelectionChange",
    "SelectionLimit",
    "validate_limit",
]
