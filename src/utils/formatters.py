"""
Display formatting functions for the tracker view.
"""
from typing import Any, Optional
from datetime import date

from src.models.history import HistoryEntry

PLACEHOLDER = "-"

EMPTY_HISTORY_MESSAGE = "No periods recorded yet. Add your first period date above!"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

def format_value(value: Any) -> str:
    """Format a derived value, showing a placeholder when it is missing."""
    return PLACEHOLDER if value is None else str(value)

def format_date(value: Optional[date]) -> str:
    """
    Format a date in long US form.

    Example:
        >>> format_date(date(2024, 2, 26))
        'February 26, 2024'
    """
    if value is None:
        return PLACEHOLDER
    # strftime %B is locale dependent
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"

def format_days_until(days: Optional[int]) -> str:
    """Format days until the next period, reporting past dates as overdue."""
    if days is None:
        return PLACEHOLDER
    if days < 0:
        return f"{abs(days)} days overdue"
    if days == 0:
        return "Today"
    return f"{days} days"

def format_cycle_info(entry: HistoryEntry) -> str:
    """Format the cycle label of a history row."""
    if entry.is_first or entry.cycle_length is None:
        return "First entry"
    return f"Cycle: {entry.cycle_length} days"
