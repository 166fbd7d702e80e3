"""Tests for year arithmetic on calendar dates."""

from datetime import date

import pytest

from warranty_kernel.domain.calendar import LeapDayPolicy, add_years, is_leap_day


class TestAddYears:
    """Tests for add_years."""

    def test_preserves_month_and_day(self):
        assert add_years(date(2013, 5, 8), 1) == date(2014, 5, 8)

    def test_multiple_years(self):
        assert add_years(date(2013, 12, 31), 3) == date(2016, 12, 31)

    def test_negative_years(self):
        assert add_years(date(2013, 5, 8), -1) == date(2012, 5, 8)

    def test_into_leap_year(self):
        assert add_years(date(2011, 2, 28), 1) == date(2012, 2, 28)

    def test_leap_day_to_leap_year(self):
        assert add_years(date(2012, 2, 29), 4) == date(2016, 2, 29)

    def test_leap_day_clamps_by_default(self):
        assert add_years(date(2012, 2, 29), 1) == date(2013, 2, 28)

    def test_leap_day_roll_forward(self):
        result = add_years(date(2012, 2, 29), 1, LeapDayPolicy.ROLL_FORWARD)
        assert result == date(2013, 3, 1)

    def test_policy_accepts_string(self):
        assert add_years(date(2012, 2, 29), 1, "roll_forward") == date(2013, 3, 1)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            add_years(date(2012, 2, 29), 1, "nearest")

    def test_out_of_range_year(self):
        with pytest.raises(ValueError):
            add_years(date(9999, 5, 8), 1)


class TestIsLeapDay:
    def test_leap_day(self):
        assert is_leap_day(date(2012, 2, 29))

    def test_other_days(self):
        assert not is_leap_day(date(2012, 2, 28))
        assert not is_leap_day(date(2012, 3, 1))
