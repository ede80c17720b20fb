"""Toaster: an in-process store for transient user-facing notifications."""

from toaster.notifications import Toast, ToastHandle, ToastService, ToastState

__all__ = ["Toast", "ToastHandle", "ToastService", "ToastState"]
