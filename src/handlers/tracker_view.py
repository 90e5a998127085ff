"""
Presentation handler for the period tracker.

The view turns user actions into tracker calls and tracker state into
display strings. Notifications and confirmations are supplied by the host
as callables, so no particular UI toolkit is assumed.

Example:
    view = TrackerView(tracker, notify=print, confirm=lambda prompt: True)
    if view.submit_date("2024-02-26"):
        clear_input()
    fields = view.render()
"""
from typing import Any, Callable, Dict, Optional
from datetime import date

from aws_lambda_powertools import Logger

from src.services.constants import DELETE_CONFIRMATION_PROMPT
from src.services.exceptions import StorageError, ValidationError
from src.services.tracker import PeriodTracker
from src.utils.formatters import (
    EMPTY_HISTORY_MESSAGE,
    format_cycle_info,
    format_date,
    format_days_until,
    format_value
)

logger = Logger()

class TrackerView:
    """
    Binds a PeriodTracker to a user interface.

    Args:
        tracker: Tracker instance owned by the host application
        notify: Shows a blocking message to the user
        confirm: Asks a yes/no question and returns the answer
    """

    def __init__(
        self,
        tracker: PeriodTracker,
        notify: Callable[[str], None],
        confirm: Callable[[str], bool]
    ):
        self.tracker = tracker
        self.notify = notify
        self.confirm = confirm

    def max_input_date(self) -> str:
        """Latest date the input control should accept."""
        return self.tracker.today().isoformat()

    def submit_date(self, value: Optional[str]) -> bool:
        """
        Handle the add action.

        Returns:
            True if the date was recorded and the input can be cleared
        """
        try:
            self.tracker.add_period(value)
        except ValidationError as e:
            logger.info("Date rejected", extra={"reason": str(e)})
            self.notify(str(e))
            return False
        except StorageError as e:
            self.notify(str(e))
            return False
        return True

    def delete(self, value: str) -> bool:
        """Handle a delete action, asking the user to confirm first."""
        try:
            return self.tracker.delete_period(
                value,
                confirm=lambda _: self.confirm(DELETE_CONFIRMATION_PROMPT)
            )
        except StorageError as e:
            self.notify(str(e))
            return False

    def render(self, target_date: Optional[date] = None) -> Dict[str, Any]:
        """
        Build every display field.

        Returns:
            Dictionary with formatted current_day, cycle_length, next_period,
            days_until, the history rows and the message for an empty history
        """
        summary = self.tracker.summary(target_date)
        history = [
            {
                "date_key": entry.date.isoformat(),
                "date": format_date(entry.date),
                "label": format_cycle_info(entry)
            }
            for entry in summary.history
        ]
        return {
            "current_day": format_value(summary.current_day),
            "cycle_length": format_value(summary.average_cycle_length),
            "next_period": format_date(summary.next_period),
            "days_until": format_days_until(summary.days_until),
            "history": history,
            "empty_message": None if history else EMPTY_HISTORY_MESSAGE
        }
