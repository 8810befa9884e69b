"""Calendar interface consulted by the validation oracle."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Tuple

Bounds = Tuple[int, int]


def _known(context: Mapping[str, Any], unit: str) -> Optional[int]:
    value = context.get(unit)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


class Calendar(ABC):
    """
    Abstract base class for calendars.

    Arguments named ``year`` or ``month`` may be None when the value is not
    known; implementations then answer with the largest possible count.
    """

    name: str = "calendar"

    @abstractmethod
    def months_in_year(self, year: Optional[int]) -> int:
        """Number of months in ``year``."""
        pass

    @abstractmethod
    def days_in_month(self, year: Optional[int], month: Optional[int]) -> int:
        """Number of days in ``month`` of ``year``."""
        pass

    @abstractmethod
    def weeks_in_year(self, year: Optional[int]) -> int:
        """Number of weeks in ``year``."""
        pass

    @abstractmethod
    def days_in_week(self) -> int:
        pass

    def days_in_year(self, year: Optional[int]) -> int:
        return sum(self.days_in_month(year, m) for m in range(1, self.months_in_year(year) + 1))

    def bounds(self, unit: str, context: Mapping[str, Any]) -> Optional[Bounds]:
        """
        Inclusive (first, last) legal values of ``unit`` given the coarser
        units in ``context``. None when the unit is unbounded (years) or not
        a calendar unit.
        """
        year = _known(context, "year")
        if unit == "month":
            return 1, self.months_in_year(year)
        if unit == "week":
            return 1, self.weeks_in_year(year)
        if unit in ("day", "day_of_month"):
            if "month" in context or unit == "day_of_month":
                return 1, self.days_in_month(year, _known(context, "month"))
            if "week" in context:
                return 1, self.days_in_week()
            return 1, self.days_in_year(year)
        if unit == "day_of_year":
            return 1, self.days_in_year(year)
        if unit == "day_of_week":
            return 1, self.days_in_week()
        if unit == "hour":
            return 0, 23
        if unit in ("minute", "second"):
            return 0, 59
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
