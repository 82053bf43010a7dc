"""Shared fixtures: in-memory slot and a controllable clock."""

import pytest

from app.repositories.analytics import AnalyticsStoreRepository
from app.repositories.common import MemoryKeyValueStore
from app.services.analytics import EventRecorder, TrackingService


class FakeClock:
    """Millisecond clock that advances by `step` on every read."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def slot():
    return MemoryKeyValueStore()


@pytest.fixture
def repo(slot):
    return AnalyticsStoreRepository(slot)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recorder(repo, clock):
    return EventRecorder(repo, clock=clock)


@pytest.fixture
def tracking(repo, recorder):
    return TrackingService(repo, recorder=recorder)
