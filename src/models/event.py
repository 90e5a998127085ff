"""
Event model definition for recorded period start dates.
"""
from datetime import date as Date
from pydantic import BaseModel, ConfigDict

from src.utils.dates import local_midnight_timestamp

class PeriodEntry(BaseModel):
    """
    Represents a single recorded period start date.

    The timestamp is the epoch time in milliseconds of local midnight on
    ``date`` and is always derived from it.
    """
    model_config = ConfigDict(frozen=True)

    date: Date
    timestamp: int

    @classmethod
    def from_date(cls, value: Date) -> "PeriodEntry":
        """Create an entry with its timestamp derived from the date."""
        return cls(date=value, timestamp=local_midnight_timestamp(value))
