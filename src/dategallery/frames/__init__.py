# src/dategallery/frames/__init__.py
"""
dategallery.frames
~~~~~~~~~~~~~~~~~~

Calendar framing.  A frame is a contiguous window of days for one display
mode; ``build_frames`` produces a fresh tuple of them from an anchor date,
the selection and the event store.

Modes
-----
day                 The anchor day.
days                ``number_of_days`` days starting at the anchor.
week                Seven days starting at ``first_day_of_week``.
month               The calendar month, no padding.
month-pad-to-week   The month padded with adjacent days to whole weeks.
month-six-weeks     The month padded to a 42-day (6 x 7) grid.
year                The calendar year.

``first_day_of_week`` counts from 0 = sunday to 6 = saturday.
"""

from __future__ import annotations

from dategallery.frames.frames import (
    MODES,
    CanSelect,
    Day,
    Frame,
    Mode,
    align_anchor,
    build_frames,
    day_of_week,
    frame_layout,
    shift_anchor,
    start_of_week,
    validate_frame_config,
)

__all__ = [
    "MODES",
    "CanSelect",
    "Day",
    "Frame",
    "Mode",
    "align_anchor",
    "build_frames",
    "day_of_week",
    "frame_layout",
    "shift_anchor",
    "start_of_week",
    "validate_frame_config",
]
