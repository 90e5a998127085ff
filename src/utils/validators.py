"""
Date validation utilities for user input.
"""
import re
from typing import Optional, Union
from datetime import date, datetime

from src.services.exceptions import InvalidDateError, MissingDateError
from src.utils.dates import has_local_timestamp

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def validate_date(date_str: str) -> Optional[date]:
    """
    Validate and parse date string.

    Args:
        date_str: Date string in zero-padded YYYY-MM-DD format

    Returns:
        Date object if valid, None otherwise
    """
    if not isinstance(date_str, str):
        return None
    date_str = date_str.strip()
    if not ISO_DATE_PATTERN.match(date_str):
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None

def parse_period_date(value: Union[str, date, None]) -> date:
    """
    Convert raw user input into a calendar date.

    Raises:
        MissingDateError: If the value is None or blank
        InvalidDateError: If the value is not a YYYY-MM-DD date, or is too
            early to have an epoch timestamp
    """
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        if value is None or not str(value).strip():
            raise MissingDateError()
        parsed = validate_date(str(value))
        if parsed is None:
            raise InvalidDateError(str(value))

    if not has_local_timestamp(parsed):
        raise InvalidDateError(parsed.isoformat())
    return parsed
