from __future__ import annotations

from collections import deque
from typing import Callable, Generic, Iterator, Protocol, TypeVar

from dategallery._exceptions import ConfigError

S = TypeVar("S")
R = TypeVar("R")
S_contra = TypeVar("S_contra", contravariant=True)
R_contra = TypeVar("R_contra", contravariant=True)


class Subscriber(Protocol[S_contra, R_contra]):
    def __call__(self, snapshot: S_contra, record: R_contra) -> None: ...


UnsubscribeFunction = Callable[[], None]


class History(Generic[R]):
    """Bounded record log; the oldest record drops out first."""

    def __init__(self, keep_for: int = 0) -> None:
        if isinstance(keep_for, bool) or not isinstance(keep_for, int) or keep_for < 0:
            raise ConfigError(
                f"keep_history_for must be a non-negative integer; got {keep_for!r}"
            )
        self._records: deque[R] = deque(maxlen=keep_for)

    @property
    def keep_for(self) -> int:
        return self._records.maxlen or 0

    @property
    def records(self) -> tuple[R, ...]:
        return tuple(self._records)

    def push(self, record: R) -> None:
        # maxlen=0 discards immediately, maxlen=n evicts from the left.
        self._records.append(record)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"History(keep_for={self.keep_for}, records={len(self._records)})"


class Observer(Generic[S, R]):
    """
    Ordered subscriber list.

    ``inform`` iterates over a copy, so subscribing or unsubscribing from
    inside a callback only takes effect on the next pass.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber[S, R]] = []

    def subscribe(self, subscriber: Subscriber[S, R]) -> UnsubscribeFunction:
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            self.unsubscribe(subscriber)

        return unsubscribe

    def unsubscribe(self, subscriber: Subscriber[S, R]) -> None:
        # Equality, not identity: bound methods are recreated on every access.
        self._subscribers = [s for s in self._subscribers if s != subscriber]

    def clear(self) -> None:
        self._subscribers = []

    def inform(self, snapshot: S, record: R) -> None:
        for subscriber in tuple(self._subscribers):
            subscriber(snapshot, record)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"Observer(subscribers={len(self._subscribers)})"
