"""Core type definitions shared across all toaster modules."""

from __future__ import annotations

from enum import StrEnum


class ToastVariant(StrEnum):
    """Visual variants a rendering layer knows how to draw."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
