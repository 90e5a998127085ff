"""
Service module for cycle day calculation and period prediction.

Typical usage:
    periods = repository.load()
    day = calculate_cycle_day(periods)
    next_date = predict_next_period(periods)
"""
from typing import Iterable, Optional
from datetime import date, timedelta

from src.models.event import PeriodEntry
from src.services.statistics import calculate_average_cycle_length, sort_periods

def get_latest_period(periods: Iterable[PeriodEntry]) -> Optional[PeriodEntry]:
    """Return the most recent period entry, or None if there are none."""
    ordered = sort_periods(periods, reverse=True)
    return ordered[0] if ordered else None

def calculate_cycle_day(periods: Iterable[PeriodEntry], target_date: Optional[date] = None) -> Optional[int]:
    """
    Calculate the current day in the cycle.

    The day of the most recent period is day 1.

    Args:
        periods: Period entries in any order
        target_date: Date to calculate for, defaults to today

    Returns:
        Cycle day (1-based), or None when nothing is recorded or the latest
        period lies after target_date
    """
    if target_date is None:
        target_date = date.today()

    latest = get_latest_period(periods)
    if latest is None:
        return None

    cycle_day = (target_date - latest.date).days + 1
    return cycle_day if cycle_day > 0 else None

def predict_next_period(periods: Iterable[PeriodEntry]) -> Optional[date]:
    """
    Predict the next period start date.

    Args:
        periods: Period entries in any order

    Returns:
        Latest period date plus the average cycle length, or None when no
        average can be calculated

    Example:
        >>> predict_next_period(periods)  # last 2024-02-26, average 28
        datetime.date(2024, 3, 25)
    """
    periods = list(periods)
    latest = get_latest_period(periods)
    if latest is None:
        return None

    average = calculate_average_cycle_length(periods)
    if average is None:
        return None

    return latest.date + timedelta(days=average)

def calculate_days_until(predicted: Optional[date], target_date: Optional[date] = None) -> Optional[int]:
    """
    Days from target_date until the predicted date.

    Negative values mean the predicted date has passed.
    """
    if predicted is None:
        return None
    if target_date is None:
        target_date = date.today()
    return (predicted - target_date).days
