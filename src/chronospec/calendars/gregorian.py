"""Proleptic Gregorian calendar with ISO weeks and astronomical year numbering."""

from typing import Optional

from .base import Calendar

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _dec31_weekday(year: int) -> int:
    # 0 = Sunday .. 6 = Saturday, valid for any astronomical year
    return (year + year // 4 - year // 100 + year // 400) % 7


class Gregorian(Calendar):
    """Gregorian calendar - 12 months, leap Februaries, 52 or 53 ISO weeks."""

    name = "gregorian"

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def months_in_year(self, year: Optional[int]) -> int:
        return 12

    def days_in_month(self, year: Optional[int], month: Optional[int]) -> int:
        if month is None or not 1 <= month <= 12:
            return 31
        if month == 2 and (year is None or is_leap_year(year)):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def days_in_year(self, year: Optional[int]) -> int:
        if year is None or is_leap_year(year):
            return 366
        return 365

    def weeks_in_year(self, year: Optional[int]) -> int:
        if year is None:
            return 53
        # A long ISO year ends on a Thursday, or starts on one
        if _dec31_weekday(year) == 4 or _dec31_weekday(year - 1) == 3:
            return 53
        return 52

    def days_in_week(self) -> int:
        return 7
