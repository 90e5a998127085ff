"""Tests for cycle day calculation and period prediction."""
from datetime import date

from src.models.event import PeriodEntry
from src.services.cycle import (
    calculate_cycle_day,
    calculate_days_until,
    get_latest_period,
    predict_next_period
)

def test_cycle_day_is_one_on_period_day():
    """Test the day of the only recorded period is cycle day 1."""
    periods = [PeriodEntry.from_date(date(2024, 3, 10))]
    assert calculate_cycle_day(periods, date(2024, 3, 10)) == 1

def test_cycle_day_counts_from_latest_period(regular_periods):
    """Test cycle day counts from the newest period, across a leap day."""
    assert calculate_cycle_day(regular_periods, date(2024, 3, 10)) == 14

def test_cycle_day_none_without_periods():
    """Test no periods means no cycle day."""
    assert calculate_cycle_day([], date(2024, 3, 10)) is None

def test_cycle_day_none_when_latest_period_is_after_target():
    """Test a period after the target date gives no cycle day instead of zero or less."""
    periods = [PeriodEntry.from_date(date(2024, 3, 11))]
    assert calculate_cycle_day(periods, date(2024, 3, 10)) is None

def test_latest_period_found_in_unsorted_input(regular_periods):
    """Test the latest period does not depend on list order."""
    shuffled = [regular_periods[2], regular_periods[0], regular_periods[1]]
    assert get_latest_period(shuffled).date == date(2024, 2, 26)
    assert get_latest_period([]) is None

def test_predict_next_period(regular_periods):
    """Test last period 2024-02-26 with 28 day cycles predicts 2024-03-25."""
    assert predict_next_period(regular_periods) == date(2024, 3, 25)

def test_predict_next_period_needs_an_average():
    """Test prediction is unavailable without a plausible cycle."""
    assert predict_next_period([]) is None
    assert predict_next_period([PeriodEntry.from_date(date(2024, 1, 1))]) is None
    periods = [PeriodEntry.from_date(date(2024, 1, 1)), PeriodEntry.from_date(date(2024, 1, 5))]
    assert predict_next_period(periods) is None

def test_days_until():
    """Test days until is positive before, zero on and negative after the date."""
    predicted = date(2024, 3, 25)

    assert calculate_days_until(predicted, date(2024, 3, 10)) == 15
    assert calculate_days_until(predicted, date(2024, 3, 25)) == 0
    assert calculate_days_until(predicted, date(2024, 3, 28)) == -3
    assert calculate_days_until(None, date(2024, 3, 10)) is None
