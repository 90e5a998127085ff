"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date
from typing import List

from src.models.event import PeriodEntry
from src.services.period_storage import PeriodRepository
from src.services.tracker import PeriodTracker
from src.utils.storage import InMemoryKeyValueStore

TODAY = date(2024, 3, 10)

@pytest.fixture
def today() -> date:
    """Fixed current date used by tracker fixtures."""
    return TODAY

@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Create an empty in-memory key-value store."""
    return InMemoryKeyValueStore()

@pytest.fixture
def repository(store) -> PeriodRepository:
    """Create a repository over the in-memory store."""
    return PeriodRepository(store)

@pytest.fixture
def tracker(repository, today) -> PeriodTracker:
    """Create an empty tracker with a fixed current date."""
    return PeriodTracker(repository, today=lambda: today)

@pytest.fixture
def regular_periods() -> List[PeriodEntry]:
    """Three periods 28 days apart, oldest first."""
    return [
        PeriodEntry.from_date(date(2024, 1, 1)),
        PeriodEntry.from_date(date(2024, 1, 29)),
        PeriodEntry.from_date(date(2024, 2, 26))
    ]

@pytest.fixture
def regular_tracker(repository, regular_periods, today) -> PeriodTracker:
    """Create a tracker whose store already holds the regular periods."""
    repository.save(regular_periods)
    return PeriodTracker(repository, today=lambda: today)

class FailingStore(InMemoryKeyValueStore):
    """Store that reads normally but whose writes always fail."""

    def set_item(self, key, value):
        raise OSError("disk full")

@pytest.fixture
def failing_store(regular_periods) -> FailingStore:
    """Create a store holding the regular periods that rejects every write."""
    store = InMemoryKeyValueStore()
    PeriodRepository(store).save(regular_periods)
    return FailingStore({"periodTracker": store.get_item("periodTracker")})

@pytest.fixture
def failing_tracker(failing_store, today) -> PeriodTracker:
    """Create a tracker over the failing store."""
    return PeriodTracker(PeriodRepository(failing_store), today=lambda: today)
