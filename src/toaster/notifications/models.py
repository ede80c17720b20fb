"""Toast data models and the actions understood by the reducer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from toaster.core.types import ToastVariant


class Toast(BaseModel):
    """A transient, user-facing message.

    Display fields are carried but never interpreted by the store. Extra
    keyword fields are accepted and kept as part of the payload.
    """

    model_config = {"extra": "allow", "frozen": True}

    id: str
    open: bool = True
    title: str | None = None
    description: str | None = None
    action: Any = None
    variant: ToastVariant = ToastVariant.DEFAULT
    duration: int | None = None


class ToastState(BaseModel):
    """Ordered toasts, newest first."""

    model_config = {"frozen": True}

    toasts: tuple[Toast, ...] = ()

    def get(self, toast_id: str) -> Toast | None:
        for toast in self.toasts:
            if toast.id == toast_id:
                return toast
        return None

    @property
    def ids(self) -> list[str]:
        return [t.id for t in self.toasts]


class AddToast(BaseModel):
    model_config = {"frozen": True}

    toast: Toast


class UpdateToast(BaseModel):
    model_config = {"frozen": True}

    toast_id: str
    changes: dict[str, Any] = Field(default_factory=dict)


class DismissToast(BaseModel):
    """Close one toast, or every toast when ``toast_id`` is None."""

    model_config = {"frozen": True}

    toast_id: str | None = None


class RemoveToast(BaseModel):
    """Delete one toast, or clear the state when ``toast_id`` is None."""

    model_config = {"frozen": True}

    toast_id: str | None = None


ToastAction = AddToast | UpdateToast | DismissToast | RemoveToast
