"""Pure state transitions for the toast store.

``reduce`` never mutates its input and never touches timers. When an action
matches nothing the original state object is returned as-is, so callers can
use identity to detect a no-op.
"""

from __future__ import annotations

from toaster.notifications.models import (
    AddToast,
    DismissToast,
    RemoveToast,
    Toast,
    ToastAction,
    ToastState,
    UpdateToast,
)

DEFAULT_LIMIT = 5


def reduce(state: ToastState, action: ToastAction, limit: int = DEFAULT_LIMIT) -> ToastState:
    """Return the state that results from applying ``action`` to ``state``.

    Raises:
        TypeError: If ``action`` is not one of the four toast actions.
        pydantic.ValidationError: If an update leaves the toast with invalid
            field values; the state is left as it was.
    """
    if isinstance(action, AddToast):
        return _add(state, action.toast, limit)
    if isinstance(action, UpdateToast):
        return _update(state, action.toast_id, action.changes)
    if isinstance(action, DismissToast):
        return _dismiss(state, action.toast_id)
    if isinstance(action, RemoveToast):
        return _remove(state, action.toast_id)
    raise TypeError(f"Unknown toast action: {action!r}")


def _add(state: ToastState, toast: Toast, limit: int) -> ToastState:
    # Newest first; anything past the limit is the oldest and falls off.
    return ToastState(toasts=(toast, *state.toasts)[:limit])


def _update(state: ToastState, toast_id: str, changes: dict) -> ToastState:
    current = state.get(toast_id)
    if current is None:
        return state
    # Revalidate the merged record; dict(model) yields fields and extras.
    merged = Toast.model_validate({**dict(current), **changes})
    return ToastState(
        toasts=tuple(merged if t.id == toast_id else t for t in state.toasts)
    )


def _dismiss(state: ToastState, toast_id: str | None) -> ToastState:
    targets = [
        t for t in state.toasts
        if t.open and (toast_id is None or t.id == toast_id)
    ]
    if not targets:
        return state
    closing = {t.id for t in targets}
    return ToastState(
        toasts=tuple(
            t.model_copy(update={"open": False}) if t.id in closing else t
            for t in state.toasts
        )
    )


def _remove(state: ToastState, toast_id: str | None) -> ToastState:
    if toast_id is None:
        return ToastState() if state.toasts else state
    if state.get(toast_id) is None:
        return state
    return ToastState(toasts=tuple(t for t in state.toasts if t.id != toast_id))
