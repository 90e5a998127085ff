"""Tests for period persistence."""
import json
from datetime import date
import pytest

from src.models.event import PeriodEntry
from src.services.period_storage import PeriodRepository
from src.utils.storage import InMemoryKeyValueStore

def test_save_then_load_round_trip(repository, regular_periods):
    """Test saved periods load back with the same dates and timestamps."""
    assert repository.save(regular_periods) is True

    loaded = repository.load()
    assert {(p.date, p.timestamp) for p in loaded} == {(p.date, p.timestamp) for p in regular_periods}

def test_load_absent_key(repository):
    """Test nothing stored means an empty list."""
    assert repository.load() == []

@pytest.mark.parametrize("raw", [
    "{not json",
    json.dumps({"date": "2024-01-01"}),
    json.dumps([{"date": "someday", "timestamp": 1}]),
    json.dumps([{"date": "2024-01-01"}]),
    json.dumps(["2024-01-01"]),
])
def test_load_corrupt_value_starts_empty(raw):
    """Test unreadable stored values are treated as no prior data."""
    store = InMemoryKeyValueStore({"periodTracker": raw})
    assert PeriodRepository(store).load() == []

def test_load_drops_repeated_dates():
    """Test stored duplicates keep only their first entry."""
    entry = PeriodEntry.from_date(date(2024, 1, 1))
    raw = json.dumps([entry.model_dump(mode="json"), entry.model_dump(mode="json")])
    store = InMemoryKeyValueStore({"periodTracker": raw})

    assert PeriodRepository(store).load() == [entry]

def test_load_keeps_stored_timestamp():
    """Test timestamps are read as stored rather than recomputed."""
    raw = json.dumps([{"date": "2024-01-01", "timestamp": 1704067200000}])
    store = InMemoryKeyValueStore({"periodTracker": raw})

    loaded = PeriodRepository(store).load()
    assert loaded[0].timestamp == 1704067200000

def test_save_uses_configured_key(store, regular_periods):
    """Test a custom key leaves the default key untouched."""
    PeriodRepository(store, key="other").save(regular_periods)

    assert store.get_item("periodTracker") is None
    assert len(json.loads(store.get_item("other"))) == 3

def test_save_reports_failure(failing_store, regular_periods):
    """Test a failing write returns False instead of raising."""
    repository = PeriodRepository(failing_store)
    assert repository.save(regular_periods) is False
