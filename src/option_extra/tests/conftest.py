"""Shared fixtures for option_extra tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from option_extra.config import clear_settings_cache


class CallCounter:
    """Wraps a callable and records how many times it was invoked."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        self.calls = 0

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return self.fn(*args)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from OPTION_EXTRA_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("OPTION_EXTRA_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def counter() -> Callable[[Callable[..., Any]], CallCounter]:
    return CallCounter
