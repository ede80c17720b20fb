"""In-memory toast store with synchronous observer fan-out."""

from __future__ import annotations

import logging
from typing import Callable

from toaster.notifications.models import ToastAction, ToastState
from toaster.notifications.reducer import DEFAULT_LIMIT, reduce

logger = logging.getLogger(__name__)

Observer = Callable[[ToastState], None]


class ToastStore:
    """Holds the current ToastState and notifies observers on every dispatch.

    Observers are called in registration order with the new state before
    ``dispatch`` returns. An observer that raises is logged and skipped; the
    remaining observers still receive the state. If an observer dispatches,
    the rest of the current fan-out is dropped in favour of the nested one, so
    every observer ends on the latest state.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT, initial: ToastState | None = None) -> None:
        self._limit = limit
        self._state = initial or ToastState()
        self._observers: list[Observer] = []
        self._version = 0

    @property
    def state(self) -> ToastState:
        return self._state

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def dispatch(self, action: ToastAction) -> ToastState:
        self._state = reduce(self._state, action, self._limit)
        self._version += 1
        version, state = self._version, self._state
        # Snapshot so (un)subscribing from inside an observer affects only later dispatches.
        for observer in list(self._observers):
            if self._version != version:
                # An observer dispatched; that fan-out already delivered a newer state.
                break
            try:
                observer(state)
            except Exception:
                logger.exception("Toast observer %r failed", observer)
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and return a callable that unregisters it."""
        if observer not in self._observers:
            self._observers.append(observer)

        def unsubscribe() -> None:
            self.unsubscribe(observer)

        return unsubscribe

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
