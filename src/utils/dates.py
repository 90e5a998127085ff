"""
Calendar date helpers shared by models and services.
"""
from datetime import date, datetime, time

def local_midnight_timestamp(value: date) -> int:
    """
    Epoch milliseconds of local midnight on the given date.

    Raises:
        ValueError, OverflowError, OSError: If the platform cannot represent
            the date as a timestamp (e.g. year 1 east of UTC)

    Example:
        >>> ts = local_midnight_timestamp(date(2024, 1, 1))
        >>> datetime.fromtimestamp(ts / 1000).date()
        datetime.date(2024, 1, 1)
    """
    return int(datetime.combine(value, time.min).timestamp() * 1000)

def has_local_timestamp(value: date) -> bool:
    """Check whether local midnight on the date has an epoch timestamp."""
    try:
        local_midnight_timestamp(value)
    except (ValueError, OverflowError, OSError):
        return False
    return True
