"""
tests/history/test_history.py

Covers:
  - History ring capacity, eviction order and the keep_for=0 case
  - Record kinds and payload defaults
  - Observer ordering, unsubscribe and pass isolation
"""

from datetime import date, datetime, timezone

import pytest

from dategallery import ConfigError
from dategallery.history import (
    DateSelected,
    DateSelectedMultiple,
    History,
    Initialized,
    Observer,
)

T0 = datetime(2000, 1, 1, tzinfo=timezone.utc)


# ── History ───────────────────────────────────────────────────────────────────

class TestHistory:

    def test_zero_keeps_nothing(self):
        history = History(0)
        history.push(Initialized(time=T0))
        assert len(history) == 0
        assert history.records == ()

    def test_keeps_at_most_n(self):
        history = History(3)
        for i in range(10):
            history.push(i)
            assert len(history) <= 3
        assert history.records == (7, 8, 9)

    def test_keep_for_property(self):
        assert History(4).keep_for == 4
        assert History().keep_for == 0

    def test_clear(self):
        history = History(2)
        history.push(1)
        history.clear()
        assert list(history) == []

    @pytest.mark.parametrize("keep_for", [-1, 1.5, True, None])
    def test_bad_keep_for_raises(self, keep_for):
        with pytest.raises(ConfigError):
            History(keep_for)


# ── Records ───────────────────────────────────────────────────────────────────

class TestRecords:

    def test_kind_tags(self):
        assert Initialized(time=T0).kind == "INITIALIZED"
        assert DateSelected(time=T0, date=date(2000, 1, 1)).kind == "DATE_SELECTED"

    def test_kind_is_not_an_init_argument(self):
        with pytest.raises(TypeError):
            Initialized(time=T0, kind="FRAME_CHANGED")

    def test_defaults(self):
        record = DateSelected(time=T0, date=date(2000, 1, 1))
        assert record.deselected_date is None
        assert DateSelectedMultiple(time=T0, dates=()).deselected_dates == ()

    def test_records_are_frozen(self):
        record = Initialized(time=T0)
        with pytest.raises(AttributeError):
            record.time = T0

    def test_equality(self):
        assert DateSelected(time=T0, date=date(2000, 1, 1)) == DateSelected(
            time=T0, date=date(2000, 1, 1)
        )


# ── Observer ──────────────────────────────────────────────────────────────────

class TestObserver:

    def test_inform_in_subscription_order(self):
        observer = Observer()
        calls = []
        observer.subscribe(lambda s, r: calls.append(("a", s, r)))
        observer.subscribe(lambda s, r: calls.append(("b", s, r)))
        observer.inform("snap", "rec")
        assert calls == [("a", "snap", "rec"), ("b", "snap", "rec")]

    def test_unsubscribe_function(self):
        observer = Observer()
        calls = []
        unsubscribe = observer.subscribe(lambda s, r: calls.append(r))
        unsubscribe()
        observer.inform(None, 1)
        assert calls == []
        assert len(observer) == 0

    def test_unsubscribe_bound_method(self):
        class Listener:
            def __init__(self):
                self.calls = 0

            def on_change(self, snapshot, record):
                self.calls += 1

        observer = Observer()
        listener = Listener()
        observer.subscribe(listener.on_change)
        observer.unsubscribe(listener.on_change)
        observer.inform(None, None)
        assert listener.calls == 0

    def test_clear(self):
        observer = Observer()
        observer.subscribe(lambda s, r: None)
        observer.subscribe(lambda s, r: None)
        observer.clear()
        assert len(observer) == 0

    def test_subscribe_during_pass_waits_for_next_pass(self):
        observer = Observer()
        calls = []

        def late(s, r):
            calls.append(("late", r))

        def first(s, r):
            calls.append(("first", r))
            observer.subscribe(late)

        observer.subscribe(first)
        observer.inform(None, 1)
        assert calls == [("first", 1)]

    def test_unsubscribe_during_pass_still_called_this_pass(self):
        observer = Observer()
        calls = []

        def second(s, r):
            calls.append(("second", r))

        def first(s, r):
            calls.append(("first", r))
            observer.unsubscribe(second)

        observer.subscribe(first)
        observer.subscribe(second)
        observer.inform(None, 1)
        observer.inform(None, 2)
        assert calls == [("first", 1), ("second", 1), ("first", 2)]
