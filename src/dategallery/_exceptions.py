from __future__ import annotations


class DateGalleryError(Exception):
    """Base error."""


class InvalidDateError(DateGalleryError, ValueError):
    """A date argument is missing, of the wrong type or unparseable."""

    def __init__(self, method: str, param: str) -> None:
        self.method = method
        self.param = param
        super().__init__(f'{method} > "{param}" is or contains an invalid date')


class InvalidRangeError(DateGalleryError, ValueError):
    """An event's start_date lies after its end_date."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"{method} > invalid range, an event's start_date lies after its end_date"
        )


class ConfigError(DateGalleryError, ValueError):
    """Invalid gallery configuration."""


class ModeError(ConfigError):
    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f'unknown mode: "{mode}" provided')


class NumberOfFramesError(ConfigError):
    def __init__(self, number_of_frames: object) -> None:
        super().__init__(
            f"number_of_frames must be a positive integer; got {number_of_frames!r}"
        )


class NumberOfDaysError(ConfigError):
    def __init__(self, number_of_days: object) -> None:
        super().__init__(
            f"number_of_days must be a positive integer; got {number_of_days!r}"
        )


class FirstDayOfWeekError(ConfigError):
    def __init__(self, first_day_of_week: object) -> None:
        super().__init__(
            f"first_day_of_week must be 0 (sunday) through 6 (saturday); "
            f"got {first_day_of_week!r}"
        )


class SelectionLimitReachedError(DateGalleryError):
    """Raised under the 'error' behavior when max_selection_limit is hit."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"{method} > selection limit reached")


class EventNotFoundError(DateGalleryError, LookupError):
    """The event is not (or no longer) owned by this gallery."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f'{method} > "Event" not found in events')
