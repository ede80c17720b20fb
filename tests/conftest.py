"""Shared test fixtures."""

from __future__ import annotations

import itertools

import pytest

from toaster.core.config import ToastConfig


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: t1, t2, t3, ..."""
    counter = itertools.count(1)
    return lambda: f"t{next(counter)}"


@pytest.fixture
def fast_config() -> ToastConfig:
    return ToastConfig(remove_delay_ms=10)
