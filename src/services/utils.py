"""
Shared arithmetic helpers for the period tracking services.
"""
import math

from src.services.constants import MS_PER_DAY

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 rounding towards positive infinity.

    The built-in ``round`` uses banker's rounding, which would turn an
    average of 28.5 days into 28.
    """
    return int(math.floor(value + 0.5))

def days_between_timestamps(earlier: int, later: int) -> int:
    """Whole days between two epoch millisecond values, rounded."""
    return round_half_up((later - earlier) / MS_PER_DAY)
