from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, tzinfo
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar, Union

from dategallery._exceptions import ConfigError
from dategallery.clock import DateLike
from dategallery.frames import CanSelect, Mode, validate_frame_config
from dategallery.selection import LimitBehavior, SelectionLimit, validate_limit

T = TypeVar("T")

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class EventConfig(Generic[T]):
    data: T
    start_date: DateLike
    end_date: DateLike


@dataclass(frozen=True)
class GalleryConfig(Generic[T]):
    """
    Every knob of a DateGallery; all fields are optional.

    ``timezone`` is the "local" zone used when ``is_utc`` is False (None
    means the system local zone).  ``clock`` supplies "now" for today
    detection, ``initial_date`` and record timestamps.
    """

    mode: Mode = "day"
    number_of_frames: int = 1
    number_of_days: int = 1
    initial_date: Optional[DateLike] = None
    first_day_of_week: int = 0
    is_utc: bool = False
    timezone: Optional[tzinfo] = None
    selected_dates: Sequence[DateLike] = ()
    max_selection_limit: SelectionLimit = False
    max_selection_limit_behavior: LimitBehavior = "circular"
    events: Sequence[Union[EventConfig[T], Mapping[str, Any]]] = ()
    keep_history_for: int = 0
    can_select: Optional[CanSelect] = None
    clock: Optional[Clock] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GalleryConfig[T]:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {unknown}")
        return cls(**mapping)


# Only initialize() may touch these: they reset state rather than adjust it.
INITIALIZE_ONLY = frozenset({"selected_dates", "events", "keep_history_for", "clock"})


def coerce_config(config: Union[GalleryConfig[T], Mapping[str, Any], None]) -> GalleryConfig[T]:
    if config is None:
        return GalleryConfig()
    if isinstance(config, GalleryConfig):
        return config
    if isinstance(config, Mapping):
        return GalleryConfig.from_mapping(config)
    raise ConfigError(
        f"config must be a GalleryConfig or a mapping; got {type(config).__name__}"
    )


def coerce_event(item: Union[EventConfig[T], Mapping[str, Any]]) -> EventConfig[T]:
    if isinstance(item, EventConfig):
        return item
    if isinstance(item, Mapping):
        return EventConfig(
            data=item.get("data"),
            start_date=item.get("start_date"),
            end_date=item.get("end_date"),
        )
    raise ConfigError(
        f"events must hold EventConfig objects or mappings; got {type(item).__name__}"
    )


def validate_config(config: GalleryConfig[T]) -> None:
    """Raise on the first invalid field; dates are checked where they are parsed."""
    validate_frame_config(
        config.mode,
        config.number_of_frames,
        config.number_of_days,
        config.first_day_of_week,
    )
    validate_limit(config.max_selection_limit, config.max_selection_limit_behavior)
    if config.timezone is not None and not isinstance(config.timezone, tzinfo):
        raise ConfigError(f"timezone must be a tzinfo; got {config.timezone!r}")
    if config.can_select is not None and not callable(config.can_select):
        raise ConfigError("can_select must be callable")
    if config.clock is not None and not callable(config.clock):
        raise ConfigError("clock must be callable")
