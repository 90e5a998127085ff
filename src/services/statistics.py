"""
Statistics calculation service for recorded period dates.

This module computes cycle lengths between consecutive period start dates
and the average length of plausible cycles.
"""
from typing import Iterable, List, Optional
from aws_lambda_powertools import Logger

from src.models.event import PeriodEntry
from src.services.constants import MIN_PLAUSIBLE_CYCLE_DAYS, MAX_PLAUSIBLE_CYCLE_DAYS
from src.services.utils import days_between_timestamps, round_half_up

logger = Logger()

def sort_periods(periods: Iterable[PeriodEntry], reverse: bool = False) -> List[PeriodEntry]:
    """
    Return a new list of periods sorted by timestamp.

    Args:
        periods: Period entries in any order
        reverse: Whether to sort newest first

    Returns:
        Sorted copy; the input is never reordered
    """
    return sorted(periods, key=lambda p: p.timestamp, reverse=reverse)

def is_plausible_cycle(days: int) -> bool:
    """Check whether a cycle length is within the exclusive plausible range."""
    return MIN_PLAUSIBLE_CYCLE_DAYS < days < MAX_PLAUSIBLE_CYCLE_DAYS

def calculate_cycle_lengths(periods: Iterable[PeriodEntry]) -> List[int]:
    """
    Calculate day gaps between consecutive period start dates.

    Args:
        periods: Period entries in any order

    Returns:
        Gaps in days, oldest first, without any filtering
    """
    ordered = sort_periods(periods)
    return [
        days_between_timestamps(previous.timestamp, current.timestamp)
        for previous, current in zip(ordered, ordered[1:])
    ]

def calculate_average_cycle_length(periods: Iterable[PeriodEntry]) -> Optional[int]:
    """
    Calculate the average cycle length over plausible cycles only.

    Gaps of 15 days or less, and of 50 days or more, come from repeated
    entries or missed logging and are left out of the average.

    Args:
        periods: Period entries in any order

    Returns:
        Average length in whole days, or None when fewer than two periods are
        recorded or no gap is plausible

    Example:
        >>> periods = [PeriodEntry.from_date(date(2024, 1, 1)),
        ...            PeriodEntry.from_date(date(2024, 1, 29))]
        >>> calculate_average_cycle_length(periods)
        28
    """
    lengths = calculate_cycle_lengths(periods)
    if not lengths:
        return None

    plausible = [days for days in lengths if is_plausible_cycle(days)]
    if len(plausible) < len(lengths):
        logger.info(
            "Ignoring implausible cycle lengths",
            extra={"ignored": [days for days in lengths if not is_plausible_cycle(days)]}
        )
    if not plausible:
        return None

    return round_half_up(sum(plausible) / len(plausible))
