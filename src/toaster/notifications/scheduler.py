"""Deferred removal of dismissed toasts.

Each toast id maps to at most one armed asyncio timer. An id in the registry
means a REMOVE for it is pending and has neither fired nor been cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from toaster.notifications.models import RemoveToast, ToastAction

logger = logging.getLogger(__name__)


class EvictionScheduler:
    """Turns dismissals into removals after a fixed delay."""

    def __init__(
        self,
        dispatch: Callable[[ToastAction], Any],
        delay_seconds: float = 1.0,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._dispatch = dispatch
        self._delay = delay_seconds
        self._loop = loop
        self._timers: dict[str, asyncio.TimerHandle] = {}

    @property
    def delay_seconds(self) -> float:
        return self._delay

    @property
    def pending(self) -> list[str]:
        return list(self._timers)

    def is_pending(self, toast_id: str) -> bool:
        return toast_id in self._timers

    def schedule_removal(self, toast_id: str) -> bool:
        """Arm a removal timer for ``toast_id``.

        Returns False without arming anything if a timer is already pending
        for this id.

        Raises:
            RuntimeError: If no loop was supplied and none is running.
        """
        if toast_id in self._timers:
            return False
        loop = self._loop or asyncio.get_running_loop()
        self._timers[toast_id] = loop.call_later(self._delay, self._fire, toast_id)
        logger.debug("Armed removal timer for toast %s (%.3fs)", toast_id, self._delay)
        return True

    def cancel(self, toast_id: str) -> bool:
        handle = self._timers.pop(toast_id, None)
        if handle is None:
            return False
        handle.cancel()
        logger.debug("Cancelled removal timer for toast %s", toast_id)
        return True

    def cancel_all(self) -> int:
        ids = list(self._timers)
        for toast_id in ids:
            self.cancel(toast_id)
        return len(ids)

    def _fire(self, toast_id: str) -> None:
        self._timers.pop(toast_id, None)
        logger.debug("Removal timer fired for toast %s", toast_id)
        self._dispatch(RemoveToast(toast_id=toast_id))
