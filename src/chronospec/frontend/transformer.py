"""
Token Transformer

Converts the Lark parse tree of grammar.lark into token tree nodes
(chronospec.shared.tokens). Rule callbacks receive their children inline.

Conventions inside the transformer:
- a unit element callback returns one ``(unit, value)`` pair
- a callback that produces several pairs returns a list of pairs
- node callbacks flatten both into the node's ``units`` tuple
"""

from typing import Any, List, Sequence, Tuple, Union

from lark import Transformer, v_args
from lark.lexer import Token as LarkToken

from ..shared.errors import ChronospecError
from ..shared.tokens import (
    AllOf, Date, DateTime, Direction, Duration, Group, Interval, Mask, OneOf,
    Range, Recurrence, Selection, TimeOfDay, TimeShift,
)
from ..utils.config import WILDCARD

UnitPair = Tuple[str, Any]


def _flatten_units(parts: Sequence[Union[UnitPair, List[UnitPair], TimeShift]]) -> Tuple[UnitPair, ...]:
    """Flatten pairs and lists of pairs; a TimeShift becomes a trailing unit"""
    units: List[UnitPair] = []
    for part in parts:
        if isinstance(part, list):
            units.extend(part)
        elif isinstance(part, TimeShift):
            units.append(("time_shift", part))
        else:
            units.append(part)
    return tuple(units)


def _collapse(items: Sequence[Union[int, Range]]) -> Tuple[Union[int, Range], ...]:
    """
    Collapse runs of consecutive non-negative integers into ranges:
    ``{1,2,5}`` becomes ``(1..2, 5)``. Order is preserved.
    """
    members: List[Union[int, Range]] = []
    run: List[int] = []

    def close_run():
        if len(run) > 1:
            members.append(Range(run[0], run[-1]))
        elif run:
            members.append(run[0])
        run.clear()

    for item in items:
        if isinstance(item, int) and item >= 0 and run and item == run[-1] + 1:
            run.append(item)
            continue
        close_run()
        if isinstance(item, int) and item >= 0:
            run.append(item)
        else:
            members.append(item)
    close_run()
    return tuple(members)


def _to_bc(value: Any) -> Any:
    """Astronomical year numbering: year n BC is year 1 - n"""
    if isinstance(value, int):
        return 1 - value
    if isinstance(value, Range) and not value.is_open:
        return Range(1 - value.last, 1 - value.first)
    if isinstance(value, AllOf):
        return AllOf(tuple(_to_bc(m) for m in value.members))
    if isinstance(value, OneOf):
        return OneOf(tuple(_to_bc(m) for m in value.members))
    raise ChronospecError(f"The BC marker cannot be applied to {value}")


def _digits(token: LarkToken) -> Union[int, Mask]:
    """Fixed-width digit group: an int, or a Mask when any digit is X"""
    text = str(token)
    if WILDCARD not in text:
        return int(text)
    return Mask(tuple(WILDCARD if ch == WILDCARD else int(ch) for ch in text))


def _value(item: Any) -> Any:
    """Unit value from an inlined SIGNED_INT/UINT/ALL_UNKNOWN token or a set"""
    if isinstance(item, LarkToken):
        if item.type == "ALL_UNKNOWN":
            return Mask.unknown()
        return int(item)
    return item


@v_args(inline=True)
class TokenTransformer(Transformer):
    """
    Parse tree to token tree.

    Every method name matches a rule (or alias) of grammar.lark.
    """

    def start(self, token):
        return token

    # ------------------------------------------------------------------
    # Sets and intervals
    # ------------------------------------------------------------------

    def set_all(self, *members):
        return AllOf(tuple(members))

    def set_one(self, *members):
        return OneOf(tuple(members))

    def interval(self, *children):
        recurrence = None
        if isinstance(children[0], Recurrence):
            recurrence, children = children[0], children[1:]
        start, end = children
        return Interval(start=start, end=end, recurrence=recurrence)

    def recurrence(self, count=None):
        return Recurrence(int(count) if count is not None else None)

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def datetime(self, *parts):
        return DateTime(_flatten_units(parts))

    def date(self, *parts):
        return Date(_flatten_units(parts))

    def time_of_day(self, *parts):
        return TimeOfDay(_flatten_units(parts))

    def explicit_date(self, *elements):
        return list(elements)

    def explicit_time(self, *elements):
        return list(elements)

    def year(self, value, bc=None):
        value = _value(value)
        if bc is not None:
            value = _to_bc(value)
        return ("year", value)

    def bc(self):
        return True

    def month(self, value):
        return ("month", _value(value))

    def week(self, value):
        return ("week", _value(value))

    def day(self, value):
        return ("day", _value(value))

    def day_of_week(self, value):
        return ("day_of_week", _value(value))

    def hour(self, value):
        return ("hour", _value(value))

    def minute(self, value):
        return ("minute", _value(value))

    def second(self, value):
        return ("second", _value(value))

    # Implicit forms

    def calendar_date(self, year, month, day):
        return [("year", _digits(year)), ("month", _digits(month)), ("day", _digits(day))]

    def ordinal_date(self, year, day):
        return [("year", _digits(year)), ("day", _digits(day))]

    def week_date(self, year, week, day_of_week=None):
        units = [("year", _digits(year)), ("week", _digits(week))]
        if day_of_week is not None:
            units.append(("day_of_week", _digits(day_of_week)))
        return units

    def year_month(self, year, month):
        return [("year", _digits(year)), ("month", _digits(month))]

    def year_only(self, year):
        return [("year", _digits(year))]

    def time_hms(self, hour, minute, second):
        return [("hour", _digits(hour)), ("minute", _digits(minute)), ("second", _digits(second))]

    def time_hm(self, hour, minute):
        return [("hour", _digits(hour)), ("minute", _digits(minute))]

    def time_h(self, hour):
        return [("hour", _digits(hour))]

    # UTC shifts

    def time_shift(self, shift):
        return shift

    def zulu_shift(self, offset=None):
        if offset is None:
            return TimeShift((("hour", 0),))
        return TimeShift(tuple(offset))

    def shift_offset(self, *children):
        sign = 1
        if isinstance(children[0], int):
            sign, children = children[0], children[1:]
        units = [("hour", sign * int(children[0]))]
        if len(children) > 1:
            units.append(("minute", sign * int(children[1])))
        return units

    def offset_shift(self, sign, hours, minutes=None):
        units = [("hour", sign * int(hours))]
        if minutes is not None:
            units.append(("minute", sign * int(minutes)))
        return TimeShift(tuple(units))

    def plus(self):
        return 1

    def minus(self):
        return -1

    # ------------------------------------------------------------------
    # Masks, sets and ranges
    # ------------------------------------------------------------------

    def mask(self, *parts):
        digits: List[Any] = []
        for part in parts:
            if isinstance(part, LarkToken):
                digits.extend(WILDCARD if ch == WILDCARD else int(ch) for ch in str(part))
            else:
                digits.append(part)
        return Mask(tuple(digits))

    def int_set_all(self, *items):
        return AllOf(_collapse([_value(item) for item in items]))

    def int_set_one(self, *items):
        return OneOf(_collapse([_value(item) for item in items]))

    def int_range(self, first, last):
        first, last = int(first), int(last)
        if first < 0 or last < 0:
            return Range.contextual(first, last)
        return Range(first, last)

    # ------------------------------------------------------------------
    # Durations and groups
    # ------------------------------------------------------------------

    def duration(self, *children):
        direction = Direction.POSITIVE
        if children and isinstance(children[0], Direction):
            direction, children = children[0], children[1:]
        return Duration(_flatten_units(children), direction)

    def negative(self):
        return Direction.NEGATIVE

    def duration_time(self, *elements):
        return list(elements)

    def dur_year(self, n):
        return ("year", int(n))

    def dur_month(self, n):
        return ("month", int(n))

    def dur_week(self, n):
        return ("week", int(n))

    def dur_day(self, n):
        return ("day", int(n))

    def dur_hour(self, n):
        return ("hour", int(n))

    def dur_minute(self, n):
        return ("minute", int(n))

    def dur_second(self, n):
        return ("second", int(n))

    def group(self, count, *elements):
        return ("group", Group(count=_value(count), units=_flatten_units(elements)))

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------

    def selection(self, *elements):
        return ("selection", Selection(_flatten_units(elements)))

    def selection_day(self, value):
        return ("day_of_month", _value(value))

    def selection_interval(self, interval):
        return ("interval", interval)

    def selection_time(self, *elements):
        return list(elements)

    def instance(self, n):
        return ("instance", int(n))
