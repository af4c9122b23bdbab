"""Tests for vozfin.dates pure functions."""

from datetime import date

from vozfin.dates import day_in_current_month, shift_days


class TestShiftDays:
    """Tests for shift_days."""

    def test_zero_offset_is_today(self) -> None:
        """Should return the reference date unchanged."""
        assert shift_days(date(2025, 3, 10), 0) == date(2025, 3, 10)

    def test_yesterday(self) -> None:
        """Should go back one day."""
        assert shift_days(date(2025, 3, 10), -1) == date(2025, 3, 9)

    def test_crosses_month_boundary(self) -> None:
        """Should cross into the previous month."""
        assert shift_days(date(2025, 3, 1), -2) == date(2025, 2, 27)

    def test_crosses_year_boundary(self) -> None:
        """Should cross into the previous year."""
        assert shift_days(date(2025, 1, 1), -1) == date(2024, 12, 31)


class TestDayInCurrentMonth:
    """Tests for day_in_current_month."""

    def test_valid_day(self) -> None:
        """Should keep month and year of the reference date."""
        assert day_in_current_month(date(2025, 4, 20), 5) == date(2025, 4, 5)

    def test_day_31_in_thirty_day_month_is_clamped(self) -> None:
        """Should clamp to the last day instead of rolling into next month."""
        assert day_in_current_month(date(2025, 4, 20), 31) == date(2025, 4, 30)

    def test_february_non_leap_year(self) -> None:
        """Should clamp to the 28th in a non-leap February."""
        assert day_in_current_month(date(2025, 2, 10), 30) == date(2025, 2, 28)

    def test_february_leap_year(self) -> None:
        """Should clamp to the 29th in a leap February."""
        assert day_in_current_month(date(2024, 2, 10), 30) == date(2024, 2, 29)

    def test_day_zero_is_clamped_to_first(self) -> None:
        """Should clamp day 0 to the first of the month."""
        assert day_in_current_month(date(2025, 4, 20), 0) == date(2025, 4, 1)
