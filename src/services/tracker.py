"""
Period tracker service.

The tracker owns the list of recorded period start dates, validates changes
to it, persists it after every change, and answers the derived queries used
by the presentation layer.

Typical usage:
    tracker = PeriodTracker(PeriodRepository(create_store()))
    tracker.add_period("2024-02-26")
    next_date = tracker.predict_next_period()
"""
import uuid
from typing import Callable, List, Optional, Tuple, Union
from datetime import date, datetime

from aws_lambda_powertools import Logger

from src.models.event import PeriodEntry
from src.models.history import CycleSummary, HistoryEntry
from src.services.cycle import calculate_cycle_day, calculate_days_until, predict_next_period
from src.services.exceptions import DuplicateDateError, FutureDateError, StorageError
from src.services.history import build_period_history
from src.services.period_storage import PeriodRepository
from src.services.statistics import calculate_average_cycle_length, sort_periods
from src.utils.validators import parse_period_date

logger = Logger()

def _date_key(value: Union[str, date]) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()

class PeriodTracker:
    """
    Tracks recorded period start dates.

    Stored order carries no meaning. Every query sorts explicitly, ascending
    for cycle lengths and descending for recency.

    Args:
        repository: Repository used to load on construction and save after
            every change
        today: Callable returning the current date, defaults to date.today
    """

    def __init__(self, repository: PeriodRepository, today: Optional[Callable[[], date]] = None):
        self.repository = repository
        self._today = today or date.today
        self._periods: List[PeriodEntry] = repository.load()
        self._pending_deletion: Optional[Tuple[str, str]] = None
        logger.info("Period tracker loaded", extra={"total_periods": len(self._periods)})

    @property
    def periods(self) -> List[PeriodEntry]:
        """Recorded periods, newest first."""
        return sort_periods(self._periods, reverse=True)

    def today(self) -> date:
        return self._today()

    def has_period(self, value: date) -> bool:
        return any(p.date == value for p in self._periods)

    def add_period(self, value: Union[str, date, None]) -> PeriodEntry:
        """
        Record a new period start date.

        Args:
            value: ISO date string or date

        Returns:
            The stored entry

        Raises:
            MissingDateError: If no date is given
            InvalidDateError: If the string is not a YYYY-MM-DD date
            FutureDateError: If the date is later than today
            DuplicateDateError: If the date is already recorded
            StorageError: If the change could not be saved; nothing is added
        """
        period_date = parse_period_date(value)

        if period_date > self.today():
            logger.warning("Rejected future period date", extra={"date": period_date.isoformat()})
            raise FutureDateError()

        if self.has_period(period_date):
            logger.warning("Rejected duplicate period date", extra={"date": period_date.isoformat()})
            raise DuplicateDateError()

        entry = PeriodEntry.from_date(period_date)
        self._commit(self._periods + [entry])

        logger.info("Period added", extra={
            "date": period_date.isoformat(),
            "total_periods": len(self._periods)
        })
        return entry

    def delete_period(self, value: Union[str, date], confirm: Callable[[str], bool]) -> bool:
        """
        Delete a recorded period after confirmation.

        Args:
            value: Date of the period to delete
            confirm: Called with the ISO date string; deletion proceeds
                only if it returns True

        Returns:
            True if a period was removed

        Raises:
            StorageError: If the removal could not be saved; nothing is removed
        """
        key = _date_key(value)
        if not confirm(key):
            logger.info("Period deletion declined", extra={"date": key})
            return False
        return self._remove(key)

    def request_delete(self, value: Union[str, date]) -> str:
        """
        Start a two-step deletion.

        Only one deletion can be pending; a new request replaces the
        previous one, whose token then confirms nothing.

        Returns:
            Single-use token to pass to confirm_delete or cancel_delete
        """
        token = uuid.uuid4().hex
        self._pending_deletion = (token, _date_key(value))
        return token

    def confirm_delete(self, token: str) -> bool:
        """
        Complete a deletion started with request_delete.

        Returns:
            True if a period was removed; False for unknown or used tokens or
            when no period matches
        """
        if self._pending_deletion is None or self._pending_deletion[0] != token:
            logger.warning("Unknown deletion token")
            return False
        _, key = self._pending_deletion
        self._pending_deletion = None
        return self._remove(key)

    def cancel_delete(self, token: str) -> None:
        """Discard a pending deletion."""
        if self._pending_deletion is not None and self._pending_deletion[0] == token:
            self._pending_deletion = None

    def _remove(self, key: str) -> bool:
        # Exact match on the ISO date string
        remaining = [p for p in self._periods if p.date.isoformat() != key]
        if len(remaining) == len(self._periods):
            return False

        self._commit(remaining)
        logger.info("Period deleted", extra={
            "date": key,
            "total_periods": len(self._periods)
        })
        return True

    def _commit(self, periods: List[PeriodEntry]) -> None:
        previous = self._periods
        self._periods = sort_periods(periods, reverse=True)
        if not self.repository.save(self._periods):
            self._periods = previous
            raise StorageError()

    def average_cycle_length(self) -> Optional[int]:
        """Average plausible cycle length in days, or None."""
        return calculate_average_cycle_length(self._periods)

    def current_cycle_day(self, target_date: Optional[date] = None) -> Optional[int]:
        """Day of the current cycle, 1 on the day of the latest period, or None."""
        return calculate_cycle_day(self._periods, target_date or self.today())

    def predict_next_period(self) -> Optional[date]:
        """Predicted start date of the next period, or None."""
        return predict_next_period(self._periods)

    def days_until_next_period(self, target_date: Optional[date] = None) -> Optional[int]:
        """Days until the predicted period, negative when overdue, or None."""
        return calculate_days_until(self.predict_next_period(), target_date or self.today())

    def history(self) -> List[HistoryEntry]:
        """History rows, newest first."""
        return build_period_history(self._periods)

    def summary(self, target_date: Optional[date] = None) -> CycleSummary:
        """
        Calculate every derived value at once.

        Args:
            target_date: Date to calculate for, defaults to today

        Returns:
            CycleSummary for target_date
        """
        target_date = target_date or self.today()
        next_period = self.predict_next_period()
        return CycleSummary(
            current_day=calculate_cycle_day(self._periods, target_date),
            average_cycle_length=self.average_cycle_length(),
            next_period=next_period,
            days_until=calculate_days_until(next_period, target_date),
            history=self.history()
        )
