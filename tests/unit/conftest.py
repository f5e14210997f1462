"""Shared fixtures for unit tests."""

import pytest

NS_PER_MS = 1_000_000


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start_ns: int = 0):
        self.now = start_ns

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms * NS_PER_MS


@pytest.fixture
def clock():
    return FakeClock(start_ns=5_000 * NS_PER_MS)
