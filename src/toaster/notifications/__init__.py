"""Ephemeral toast notifications.

Provides the pure reducer, the observable store, timed removal of dismissed
toasts and the ToastService facade that ties them together.
"""

from toaster.notifications.models import Toast, ToastState
from toaster.notifications.service import ToastHandle, ToastService, generate_toast_id

__all__ = ["Toast", "ToastHandle", "ToastService", "ToastState", "generate_toast_id"]
