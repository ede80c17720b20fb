"""Public toast API: enqueue, update, dismiss and subscribe."""

from __future__ import annotations

import asyncio
import logging
import random
import string
import uuid
from typing import Any, Callable

from toaster.core.config import ToastConfig
from toaster.notifications.models import (
    AddToast,
    DismissToast,
    RemoveToast,
    Toast,
    ToastState,
    UpdateToast,
)
from toaster.notifications.scheduler import EvictionScheduler
from toaster.notifications.store import Observer, ToastStore

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def generate_toast_id() -> str:
    """Return a fresh toast id.

    Uses uuid4 (OS randomness). Platforms without a randomness source get a
    base-36 string from the ``random`` module instead; ids only need to be
    unique, not unguessable.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return _pseudo_random_id()


def _pseudo_random_id() -> str:
    value = random.getrandbits(64)
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits)) or "0"


class ToastHandle:
    """Returned by ``ToastService.enqueue``; acts on a single toast."""

    def __init__(self, service: ToastService, toast_id: str) -> None:
        self._service = service
        self.id = toast_id

    def dismiss(self) -> None:
        self._service.dismiss(self.id)

    def update(self, **changes: Any) -> None:
        self._service.update(self.id, **changes)

    def on_open_change(self, open: bool) -> None:
        """Hook for renderers: a toast closed by the user is dismissed."""
        if not open:
            self.dismiss()

    def __repr__(self) -> str:
        return f"ToastHandle(id={self.id!r})"


class ToastService:
    """Owns one ToastStore and its EvictionScheduler.

    Every instance is independent; nothing is shared at module level.
    """

    def __init__(
        self,
        config: ToastConfig | None = None,
        id_factory: Callable[[], str] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._config = config or ToastConfig()
        self._id_factory = id_factory or generate_toast_id
        self._store = ToastStore(limit=self._config.limit)
        self._scheduler = EvictionScheduler(
            self._store.dispatch,
            delay_seconds=self._config.remove_delay_seconds,
            loop=loop,
        )

    @property
    def config(self) -> ToastConfig:
        return self._config

    @property
    def store(self) -> ToastStore:
        return self._store

    @property
    def scheduler(self) -> EvictionScheduler:
        return self._scheduler

    @property
    def state(self) -> ToastState:
        return self._store.state

    @property
    def toasts(self) -> tuple[Toast, ...]:
        return self._store.state.toasts

    def get(self, toast_id: str) -> Toast | None:
        return self._store.state.get(toast_id)

    def enqueue(self, **payload: Any) -> ToastHandle:
        """Add a new open toast at the front and return a handle to it.

        ``id`` and ``open`` in the payload are ignored. If the store is at
        capacity the oldest toast is dropped silently.

        Extra payload keys are carried untouched, but the typed display fields
        (``variant``, ``duration``, ``title``, ``description``) are validated.

        Raises:
            pydantic.ValidationError: If a typed field has an unsupported
                value, e.g. a variant other than ``default``/``destructive``.
                Nothing is dispatched in that case.
        """
        toast_id = self._id_factory()
        toast = Toast(**{**payload, "id": toast_id, "open": True})
        self._store.dispatch(AddToast(toast=toast))
        logger.debug("Enqueued toast %s (%d shown)", toast_id, len(self.toasts))
        return ToastHandle(self, toast_id)

    def update(self, toast_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a toast; unknown ids are ignored.

        Raises:
            pydantic.ValidationError: If the merged toast is invalid. The
                state is left unchanged and observers are not called.
        """
        changes.pop("id", None)
        self._store.dispatch(UpdateToast(toast_id=toast_id, changes=changes))

    def dismiss(self, toast_id: str | None = None) -> None:
        """Close one toast, or all toasts when ``toast_id`` is None.

        Each closed toast gets its own removal timer; repeated dismissals of
        the same id never arm a second one.
        """
        state = self._store.dispatch(DismissToast(toast_id=toast_id))
        if toast_id is None:
            targets = state.ids
        elif state.get(toast_id) is not None:
            targets = [toast_id]
        else:
            targets = []
        for target in targets:
            self._scheduler.schedule_removal(target)
        logger.debug("Dismissed %s", toast_id or "all toasts")

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self._store.subscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._store.unsubscribe(observer)

    def close(self) -> None:
        """Tear down: cancel pending timers and remove every toast."""
        cancelled = self._scheduler.cancel_all()
        self._store.dispatch(RemoveToast())
        logger.debug("Toast service closed (%d timers cancelled)", cancelled)
