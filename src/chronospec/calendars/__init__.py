"""
Calendars and the validation oracle
"""

from .base import Calendar
from .gregorian import Gregorian, is_leap_year
from .validation import DEFAULT_CALENDAR, validate

__all__ = ["Calendar", "Gregorian", "is_leap_year", "DEFAULT_CALENDAR", "validate"]
