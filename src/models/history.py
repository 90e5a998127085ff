"""
Models for derived cycle data shown to the user.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

class HistoryEntry(BaseModel):
    """
    One row of the period history, newest first.

    ``cycle_length`` is the number of days since the next older record and is
    None for the oldest record, which is flagged with ``is_first``.
    """
    date: date
    cycle_length: Optional[int] = None
    is_first: bool = False

class CycleSummary(BaseModel):
    """Snapshot of every derived value for one point in time."""
    current_day: Optional[int] = Field(None, ge=1)
    average_cycle_length: Optional[int] = None
    next_period: Optional[date] = None
    days_until: Optional[int] = None
    history: List[HistoryEntry] = Field(default_factory=list)
