"""
Service module for the period history listing.

Typical usage:
    for entry in build_period_history(periods):
        print(entry.date, entry.cycle_length)
"""
from typing import Iterable, List

from src.models.event import PeriodEntry
from src.models.history import HistoryEntry
from src.services.statistics import sort_periods
from src.services.utils import days_between_timestamps

def build_period_history(periods: Iterable[PeriodEntry]) -> List[HistoryEntry]:
    """
    Build the history listing, newest first.

    Each entry carries the number of days since the next older period. The
    oldest period has no cycle length and is marked as the first entry.

    Args:
        periods: Period entries in any order

    Returns:
        List of HistoryEntry objects sorted newest first
    """
    ordered = sort_periods(periods, reverse=True)
    history = []
    for index, period in enumerate(ordered):
        if index < len(ordered) - 1:
            older = ordered[index + 1]
            history.append(HistoryEntry(
                date=period.date,
                cycle_length=days_between_timestamps(older.timestamp, period.timestamp)
            ))
        else:
            history.append(HistoryEntry(date=period.date, is_first=True))
    return history
