"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest


class CountingProducer:
    """Zero-argument producer that records how often it was called."""

    def __init__(self, value: Any):
        self.value = value
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.value

    @property
    def evaluated(self) -> bool:
        return self.calls > 0


@pytest.fixture
def producer() -> Callable[[Any], CountingProducer]:
    """Factory for counting producers."""
    return CountingProducer
