"""
Odometer Readings and State

The value held by each calendar unit while the odometer runs, and the
immutable state that pairs the units with a calendar.

Readings:
- Anchored(value)         fixed, never cycles
- Pending(candidates)     literals and/or ranges, not yet started
- Active(current, cursor) mid-cycle; ``cursor`` resumes the cycle
- Exhausted()             nothing to cycle

The cursor is plain data (the full candidate sequence plus what is left of
it), so states can be stored, compared and resumed independently.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

from ..calendars.base import Calendar
from ..calendars.validation import DEFAULT_CALENDAR
from ..shared.errors import ChronospecImplementationError
from ..shared.tokens import Range
from ..shared.token_visitor import TokenVisitor


@dataclass(frozen=True)
class Rollover:
    """Step signal: the cycle wrapped around and restarted at ``value``"""
    value: Any


@dataclass(frozen=True)
class Cursor:
    """Position in a candidate cycle: the full ``source`` and the ``remaining`` suffix"""
    source: Tuple[Any, ...]
    remaining: Tuple[Any, ...]

    @classmethod
    def start(cls, candidates: Sequence[Any]) -> 'Cursor':
        source = tuple(candidates)
        return cls(source, source)


@dataclass(frozen=True)
class Anchored:
    value: Any


@dataclass(frozen=True)
class Pending:
    candidates: Tuple[Any, ...]


@dataclass(frozen=True)
class Active:
    current: Any
    cursor: Cursor


@dataclass(frozen=True)
class Exhausted:
    pass


Reading = Union[Anchored, Pending, Active, Exhausted]
READING_TYPES = (Anchored, Pending, Active, Exhausted)


def current_value(reading: Reading) -> Optional[Any]:
    """The value a unit presents to finer units as context"""
    if isinstance(reading, Anchored):
        return reading.value
    if isinstance(reading, Active):
        return reading.current
    if isinstance(reading, Pending):
        head = reading.candidates[0]
        return head.first if isinstance(head, Range) else head
    if isinstance(reading, Exhausted):
        return None
    raise ChronospecImplementationError(f"Unknown reading {reading!r}")


class ReadingBuilder(TokenVisitor[Reading]):
    """
    Initial reading for a unit value: integer sets and ranges cycle,
    everything else stays anchored.
    """

    def visit_integer(self, value: int) -> Reading:
        return Anchored(value)

    def visit_range(self, node) -> Reading:
        return Pending((node,))

    def visit_all_of(self, node) -> Reading:
        if not node.members:
            return Exhausted()
        return Pending(tuple(node.members))

    def visit_one_of(self, node) -> Reading:
        return Anchored(node)

    def visit_mask(self, node) -> Reading:
        span = node.trailing_range()
        if span is None:
            return Anchored(node)
        return Pending((span,))

    def visit_recurrence(self, node) -> Reading:
        return Anchored(node)

    def visit_time_shift(self, node) -> Reading:
        return Anchored(node)

    def visit_selection(self, node) -> Reading:
        return Anchored(node)

    def visit_group(self, node) -> Reading:
        return Anchored(node)

    def visit_date(self, node) -> Reading:
        return Anchored(node)

    def visit_time_of_day(self, node) -> Reading:
        return Anchored(node)

    def visit_datetime(self, node) -> Reading:
        return Anchored(node)

    def visit_duration(self, node) -> Reading:
        return Anchored(node)

    def visit_interval(self, node) -> Reading:
        return Anchored(node)


_builder = ReadingBuilder()


def to_reading(value: Any) -> Reading:
    """Reading for a unit value; readings pass through, lists become Pending"""
    if isinstance(value, READING_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return Pending(tuple(value)) if value else Exhausted()
    return _builder.visit_value(value)


@dataclass(frozen=True)
class OdometerState:
    """
    Ordered ``(unit, Reading)`` pairs, coarsest first, plus the calendar
    used to resolve open ranges. Never mutated: advancing derives a new
    state.
    """
    units: Tuple[Tuple[str, Reading], ...]
    calendar: Calendar = field(default=DEFAULT_CALENDAR, compare=False)

    @classmethod
    def from_units(cls, units: Sequence[Tuple[str, Any]], calendar: Optional[Calendar] = None) -> 'OdometerState':
        calendar = calendar if calendar is not None else DEFAULT_CALENDAR
        return cls(tuple((unit, to_reading(value)) for unit, value in units), calendar)

    def replace_units(self, units: Sequence[Tuple[str, Reading]]) -> 'OdometerState':
        return OdometerState(tuple(units), self.calendar)

    def reading(self, unit: str) -> Optional[Reading]:
        for name, reading in self.units:
            if name == unit:
                return reading
        return None

    def context(self) -> Tuple[Tuple[str, Any], ...]:
        """Current value of every unit that has one"""
        return tuple(
            (unit, current_value(reading))
            for unit, reading in self.units
            if not isinstance(reading, Exhausted)
        )

    def __iter__(self) -> Iterator[Tuple[str, Reading]]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)


def build_state(tokens: Any, calendar: Optional[Calendar] = None) -> OdometerState:
    """State for a token node carrying ``units`` or for a list of unit pairs"""
    units = getattr(tokens, "units", tokens)
    return OdometerState.from_units(units, calendar)
