"""
Storage service for the recorded period list.

The whole list is serialized as JSON under a single key of a key-value store.
"""
import json
from typing import List

from pydantic import ValidationError as PydanticValidationError

from src.models.event import PeriodEntry
from src.services.constants import STORAGE_KEY
from src.utils.logging import logger, log_exception
from src.utils.storage import KeyValueStore

class PeriodRepository:
    """Loads and saves period entries through a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[PeriodEntry]:
        """
        Load stored periods.

        Returns:
            Stored entries in stored order. An absent, unparsable or invalid
            value yields an empty list. Repeated dates keep their first entry.
        """
        raw = self.store.get_item(self.key)
        if raw is None:
            return []

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored periods are not valid JSON, starting empty", extra={
                "key": self.key,
                "error": str(e)
            })
            return []

        if not isinstance(items, list):
            logger.warning("Stored periods are not a list, starting empty", extra={"key": self.key})
            return []

        try:
            entries = [PeriodEntry.model_validate(item) for item in items]
        except PydanticValidationError as e:
            logger.warning("Stored periods failed validation, starting empty", extra={
                "key": self.key,
                "errors": e.error_count()
            })
            return []

        unique = []
        seen = set()
        for entry in entries:
            if entry.date in seen:
                logger.warning("Dropping repeated stored date", extra={"date": entry.date.isoformat()})
                continue
            seen.add(entry.date)
            unique.append(entry)
        return unique

    def save(self, periods: List[PeriodEntry]) -> bool:
        """
        Persist the given periods, replacing what was stored.

        Returns:
            True if the write succeeded, False if the store raised an OSError
        """
        payload = json.dumps([p.model_dump(mode="json") for p in periods])
        try:
            self.store.set_item(self.key, payload)
        except OSError:
            log_exception(logger, "Failed to save periods", extra={
                "key": self.key,
                "total_periods": len(periods)
            })
            return False
        return True
