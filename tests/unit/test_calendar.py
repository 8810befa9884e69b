#!/usr/bin/env python3
"""
Tests for the Gregorian calendar rules.
"""

import pytest
from chronospec.calendars.gregorian import Gregorian, is_leap_year


class TestGregorian:
    """Leap years, month lengths, ISO weeks and unit bounds"""

    def test_leap_years(self):
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert is_leap_year(0)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)

    def test_days_in_month(self, calendar):
        assert calendar.days_in_month(2023, 2) == 28
        assert calendar.days_in_month(2024, 2) == 29
        assert calendar.days_in_month(2023, 4) == 30
        assert calendar.days_in_month(2023, 12) == 31
        assert calendar.days_in_month(None, 2) == 29
        assert calendar.days_in_month(2023, None) == 31

    def test_days_in_year(self, calendar):
        assert calendar.days_in_year(2023) == 365
        assert calendar.days_in_year(2024) == 366

    def test_iso_weeks(self, calendar):
        for year in (2015, 2020, 2026):
            assert calendar.weeks_in_year(year) == 53, year
        for year in (2019, 2021, 2023):
            assert calendar.weeks_in_year(year) == 52, year

    def test_bounds(self, calendar):
        assert calendar.bounds("month", {}) == (1, 12)
        assert calendar.bounds("day", {"year": 2023, "month": 2}) == (1, 28)
        assert calendar.bounds("day_of_month", {}) == (1, 31)
        assert calendar.bounds("day", {"week": 10}) == (1, 7)
        assert calendar.bounds("day_of_week", {}) == (1, 7)
        assert calendar.bounds("hour", {}) == (0, 23)
        assert calendar.bounds("second", {}) == (0, 59)
        assert calendar.bounds("year", {}) is None
        assert calendar.bounds("selection", {}) is None

    def test_repr(self):
        assert repr(Gregorian()) == "Gregorian()"
