from datetime import datetime, timedelta, timezone

import pytest

from dategallery import DateGallery, GalleryConfig

# Fixed UTC-11 offset (Pacific/Pago_Pago without the tz database).
SAMOA = timezone(timedelta(hours=-11))

NOW = datetime(1990, 9, 26, 12, 0, tzinfo=SAMOA)


class Recorder:
    """Subscriber that remembers every (snapshot, record) pair."""

    def __init__(self):
        self.calls = []

    def __call__(self, snapshot, record):
        self.calls.append((snapshot, record))

    @property
    def records(self):
        return [record for _, record in self.calls]

    @property
    def last(self):
        return self.calls[-1]

    def __len__(self):
        return len(self.calls)


@pytest.fixture
def samoa():
    return SAMOA


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_gallery(recorder):
    """Gallery factory pinned to UTC-11 and a fixed clock, history on."""

    def factory(**overrides):
        fields = {
            "timezone": SAMOA,
            "clock": lambda: NOW,
            "keep_history_for": 100,
        }
        fields.update(overrides)
        return DateGallery(GalleryConfig(**fields), recorder)

    return factory
