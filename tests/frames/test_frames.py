"""
tests/frames/test_frames.py

Covers:
  - Config validation (mode, number_of_frames, number_of_days, first_day_of_week)
  - Weekday arithmetic and anchor alignment
  - Anchor shifting per mode, across month and year boundaries
  - Frame layout for every mode, including six-week and pad-to-week padding
  - build_frames: selection, today, can_select and determinism
"""

from datetime import date, timedelta, timezone

import pytest

from dategallery import (
    FirstDayOfWeekError,
    ModeError,
    NumberOfDaysError,
    NumberOfFramesError,
)
from dategallery.clock import DayClock
from dategallery.events import EventStore
from dategallery.frames import (
    MODES,
    align_anchor,
    build_frames,
    day_of_week,
    frame_layout,
    shift_anchor,
    start_of_week,
    validate_frame_config,
)

SAMOA = timezone(timedelta(hours=-11))


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def clock():
    return DayClock(tz=SAMOA)


@pytest.fixture
def build(clock):
    """build_frames with sensible defaults and an empty event store."""

    def _build(**overrides):
        kwargs = dict(
            mode="month-six-weeks",
            number_of_frames=1,
            number_of_days=1,
            anchor=date(1990, 9, 1),
            first_day_of_week=0,
            clock=clock,
            selected=(),
            store=EventStore(),
            today=date(1990, 9, 26),
        )
        kwargs.update(overrides)
        return build_frames(**kwargs)

    return _build


def days_of(layout):
    return [d for d, _ in layout]


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize("mode", MODES)
    def test_every_mode_is_accepted(self, mode):
        validate_frame_config(mode, 1, 1, 0)

    @pytest.mark.parametrize("mode", ["decade", "", None, "Month"])
    def test_unknown_mode_raises(self, mode):
        with pytest.raises(ModeError):
            validate_frame_config(mode, 1, 1, 0)

    @pytest.mark.parametrize("value", [0, -1, 1.5, True])
    def test_bad_number_of_frames_raises(self, value):
        with pytest.raises(NumberOfFramesError):
            validate_frame_config("day", value, 1, 0)

    @pytest.mark.parametrize("value", [0, -3])
    def test_bad_number_of_days_raises(self, value):
        with pytest.raises(NumberOfDaysError):
            validate_frame_config("days", 1, value, 0)

    @pytest.mark.parametrize("value", [-1, 7, 2.0, None])
    def test_bad_first_day_of_week_raises(self, value):
        with pytest.raises(FirstDayOfWeekError):
            validate_frame_config("week", 1, 1, value)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_frame_config("nope", 1, 1, 0)


# ── Calendar arithmetic ───────────────────────────────────────────────────────

class TestCalendarArithmetic:

    def test_day_of_week_counts_from_sunday(self):
        assert day_of_week(date(1990, 9, 23)) == 0   # sunday
        assert day_of_week(date(1990, 9, 26)) == 3   # wednesday
        assert day_of_week(date(1990, 9, 29)) == 6   # saturday

    def test_start_of_week_sunday(self):
        assert start_of_week(date(1990, 9, 26), 0) == date(1990, 9, 23)

    def test_start_of_week_monday(self):
        assert start_of_week(date(1990, 9, 26), 1) == date(1990, 9, 24)

    def test_start_of_week_on_first_day_itself(self):
        assert start_of_week(date(1990, 9, 23), 0) == date(1990, 9, 23)

    def test_align_week(self):
        assert align_anchor("week", date(1990, 9, 26), 0) == date(1990, 9, 23)

    @pytest.mark.parametrize("mode", ["month", "month-pad-to-week", "month-six-weeks"])
    def test_align_month_modes_to_first(self, mode):
        assert align_anchor(mode, date(1990, 9, 26), 0) == date(1990, 9, 1)

    def test_align_year(self):
        assert align_anchor("year", date(1990, 9, 26), 0) == date(1990, 1, 1)

    @pytest.mark.parametrize("mode", ["day", "days"])
    def test_align_day_modes_unchanged(self, mode):
        assert align_anchor(mode, date(1990, 9, 26), 0) == date(1990, 9, 26)


class TestShiftAnchor:

    def test_day(self):
        assert shift_anchor("day", date(1990, 9, 30), 1) == date(1990, 10, 1)

    def test_days_moves_by_window(self):
        assert shift_anchor("days", date(1990, 9, 26), 1, 3) == date(1990, 9, 29)
        assert shift_anchor("days", date(1990, 9, 26), -2, 3) == date(1990, 9, 20)

    def test_week(self):
        assert shift_anchor("week", date(1990, 9, 23), -1) == date(1990, 9, 16)

    def test_month_across_year(self):
        assert shift_anchor("month", date(2024, 12, 1), 1) == date(2025, 1, 1)
        assert shift_anchor("month-six-weeks", date(2025, 1, 1), -1) == date(2024, 12, 1)

    def test_month_many_steps(self):
        assert shift_anchor("month", date(2024, 3, 1), 14) == date(2025, 5, 1)

    def test_year(self):
        assert shift_anchor("year", date(1990, 1, 1), 2) == date(1992, 1, 1)


# ── Layout per mode ───────────────────────────────────────────────────────────

class TestLayout:

    def test_day(self):
        assert frame_layout("day", date(1990, 9, 26), 0) == [(date(1990, 9, 26), False)]

    def test_days(self):
        layout = frame_layout("days", date(1990, 9, 26), 0, 3)
        assert days_of(layout) == [date(1990, 9, 26), date(1990, 9, 27), date(1990, 9, 28)]
        assert not any(p for _, p in layout)

    def test_week_sunday(self):
        layout = frame_layout("week", date(1990, 9, 23), 0)
        assert days_of(layout)[0] == date(1990, 9, 23)
        assert days_of(layout)[-1] == date(1990, 9, 29)
        assert len(layout) == 7

    def test_week_monday(self):
        layout = frame_layout("week", date(1990, 9, 26), 1)
        assert days_of(layout)[0] == date(1990, 9, 24)
        assert days_of(layout)[-1] == date(1990, 9, 30)

    def test_month_has_no_padding(self):
        layout = frame_layout("month", date(1990, 9, 1), 0)
        assert len(layout) == 30
        assert days_of(layout)[0] == date(1990, 9, 1)
        assert not any(p for _, p in layout)

    def test_month_february_leap_year(self):
        assert len(frame_layout("month", date(2000, 2, 1), 0)) == 29

    def test_six_weeks_is_42_days(self):
        layout = frame_layout("month-six-weeks", date(1990, 9, 1), 0)
        assert len(layout) == 42
        assert days_of(layout)[0] == date(1990, 8, 26)
        assert days_of(layout)[-1] == date(1990, 10, 6)

    def test_six_weeks_padding_flags(self):
        layout = frame_layout("month-six-weeks", date(1990, 9, 1), 0)
        padding = [d for d, p in layout if p]
        assert len(padding) == 12
        assert all(d.month != 9 for d in padding)
        assert all(d.month == 9 for d, p in layout if not p)

    def test_six_weeks_month_starting_on_first_day_of_week(self):
        # February 2015 starts on a sunday and has 28 days: two trailing weeks.
        layout = frame_layout("month-six-weeks", date(2015, 2, 1), 0)
        assert days_of(layout)[0] == date(2015, 2, 1)
        assert sum(1 for _, p in layout if p) == 14

    def test_six_weeks_monday_start(self):
        layout = frame_layout("month-six-weeks", date(1990, 9, 1), 1)
        assert days_of(layout)[0] == date(1990, 8, 27)
        assert len(layout) == 42

    def test_pad_to_week_monday(self):
        layout = frame_layout("month-pad-to-week", date(1990, 9, 1), 1)
        assert days_of(layout)[0] == date(1990, 8, 27)
        assert days_of(layout)[-1] == date(1990, 9, 30)
        assert len(layout) == 35

    def test_pad_to_week_sunday(self):
        layout = frame_layout("month-pad-to-week", date(1990, 9, 1), 0)
        assert days_of(layout)[0] == date(1990, 8, 26)
        assert days_of(layout)[-1] == date(1990, 10, 6)
        assert len(layout) % 7 == 0

    def test_year(self):
        assert len(frame_layout("year", date(1990, 1, 1), 0)) == 365
        assert len(frame_layout("year", date(2000, 1, 1), 0)) == 366


# ── build_frames ──────────────────────────────────────────────────────────────

class TestBuildFrames:

    def test_frame_count_and_anchors(self, build):
        frames = build(number_of_frames=3)
        assert [f.anchor_date for f in frames] == [
            date(1990, 9, 1),
            date(1990, 10, 1),
            date(1990, 11, 1),
        ]

    def test_day_start_is_local_midnight(self, build, clock):
        frame = build(mode="day", anchor=date(1990, 9, 26))[0]
        assert frame.days[0].start == clock.midnight(date(1990, 9, 26))
        assert frame.first_day == frame.last_day == date(1990, 9, 26)

    def test_selected_days_including_padding(self, build):
        frame = build(selected=(date(1990, 9, 2), date(1990, 8, 27)))[0]
        selected = [d.date for d in frame.days if d.is_selected]
        assert selected == [date(1990, 8, 27), date(1990, 9, 2)]
        assert next(d for d in frame.days if d.date == date(1990, 8, 27)).is_padding

    def test_today_is_flagged_once(self, build):
        frame = build()[0]
        today = [d.date for d in frame.days if d.is_today]
        assert today == [date(1990, 9, 26)]

    def test_no_events_in_empty_store(self, build):
        frame = build()[0]
        assert frame.events == ()
        assert not any(d.has_events for d in frame.days)

    def test_can_select_predicate(self, build):
        frame = build(can_select=lambda day: not day.is_padding)[0]
        assert all(d.can_be_selected != d.is_padding for d in frame.days)

    def test_can_be_selected_defaults_to_true(self, build):
        assert all(d.can_be_selected for d in build()[0].days)

    def test_deterministic(self, build):
        assert build(number_of_frames=2) == build(number_of_frames=2)

    def test_new_objects_every_call(self, build):
        first, second = build(), build()
        assert first[0] is not second[0]
        assert first[0].days[0] is not second[0].days[0]
