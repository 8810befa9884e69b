"""
Validation Oracle

validate() resolves open ranges and checks integer legality for an ordered
list of ``(unit, value)`` pairs, each unit judged against the pairs before
it. It is pure: the input is never modified and the output keeps the input
order.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .base import Bounds, Calendar
from .gregorian import Gregorian
from ..shared.errors import ValidationError
from ..shared.tokens import Range

logger = logging.getLogger("chronospec.calendars.validation")

DEFAULT_CALENDAR = Gregorian()


def _from_end(value: int, last: int) -> int:
    """``-n`` counts back from the last legal value: -1 is ``last``"""
    return value if value >= 0 else last + 1 + value


def _resolve_open(unit: str, value: Range, bounds: Optional[Bounds]) -> Range:
    if bounds is None:
        raise ValidationError(
            f"Cannot resolve open range {value} for unit {unit!r}: the unit has no calendar bounds",
            unit=unit, value=value,
        )
    low, high = bounds
    first, last = _from_end(value.first, high), _from_end(value.last, high)
    if first <= last and (first < low or last > high):
        raise ValidationError(
            f"Range {value} for unit {unit!r} resolves to {first}..{last}, outside {low}..{high}",
            unit=unit, value=value,
        )
    return Range(first, last)


def _check_integer(unit: str, value: int, bounds: Optional[Bounds]) -> int:
    if bounds is not None:
        low, high = bounds
        if not low <= value <= high:
            raise ValidationError(
                f"Invalid {unit} {value}: expected a value in {low}..{high}",
                unit=unit, value=value,
            )
    return value


def validate(units: Sequence[Tuple[str, Any]], calendar: Optional[Calendar] = None) -> List[Tuple[str, Any]]:
    """
    Resolve ``units`` against ``calendar`` (Gregorian when None).

    - open ranges become closed ranges within the unit's bounds
    - integers outside the unit's bounds raise ValidationError
    - every other value is returned unchanged
    """
    calendar = calendar if calendar is not None else DEFAULT_CALENDAR
    context: Dict[str, Any] = {}
    resolved: List[Tuple[str, Any]] = []
    for unit, value in units:
        bounds = calendar.bounds(unit, context)
        if isinstance(value, Range) and value.is_open:
            value = _resolve_open(unit, value, bounds)
            logger.debug("Resolved %s range to %s in context %s", unit, value, context)
        elif isinstance(value, int) and not isinstance(value, bool):
            value = _check_integer(unit, value, bounds)
        resolved.append((unit, value))
        context[unit] = value
    return resolved
