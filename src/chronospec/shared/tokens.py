"""
Token Tree Definitions

Immutable nodes produced by the parser, one class per grammar production.
The tree is the contract between the parser and the expansion and odometer
engines, so every shape the parser can produce is listed here.

Most nodes carry ``units``: an ordered tuple of ``(unit_name, value)``
pairs, coarsest unit first, for example::

    tokenize("2018Y3ML1K1IN")
    # Date(units=(("year", 2018),
    #             ("month", 3),
    #             ("selection", Selection(units=(("day_of_week", 1),
    #                                            ("instance", 1))))))

Visitor Pattern Support:
- All nodes have accept() methods for polymorphic dispatch
- Plain ``int`` values are dispatched by TokenVisitor.visit_value()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple, TypeVar, Union, TYPE_CHECKING

from typing_extensions import TypeAlias

from ..utils.config import DEFAULT_STEP, OPEN_STEP, WILDCARD
from .errors import ChronospecImplementationError

if TYPE_CHECKING:
    from .token_visitor import TokenVisitor

T = TypeVar('T')


class Direction(Enum):
    """Direction of a duration"""
    POSITIVE = "positive"
    NEGATIVE = "negative"


class UnitsMixin:
    """Lookup helpers shared by nodes that carry a ``units`` tuple"""

    units: Tuple[Tuple[str, Any], ...]

    def get(self, unit: str, default: Any = None) -> Any:
        """Value of the first pair named ``unit``"""
        for name, value in self.units:
            if name == unit:
                return value
        return default

    @property
    def unit_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.units)


@dataclass(frozen=True)
class Range:
    """
    Inclusive integer range ``first..last`` stepping by ``step``.

    A step of OPEN_STEP marks an open (contextual) range: its bounds are
    relative to the calendar, a negative endpoint ``-n`` meaning the n-th
    value from the end, and it must be resolved by the validation oracle
    before it can be enumerated.
    """
    first: int
    last: int
    step: int = DEFAULT_STEP

    def __post_init__(self):
        if self.step == 0:
            raise ValueError("Range step must not be zero")
        if self.step < 0 and self.step != OPEN_STEP:
            raise ValueError(f"Range step must be positive or OPEN_STEP, got {self.step}")

    @classmethod
    def contextual(cls, first: int, last: int) -> Range:
        return cls(first, last, OPEN_STEP)

    @property
    def is_open(self) -> bool:
        return self.step == OPEN_STEP

    @property
    def is_exhausted(self) -> bool:
        """True once a closed range has no members left"""
        return not self.is_open and self.first > self.last

    def advanced(self) -> Range:
        """The same range without its first member"""
        return Range(self.first + self.step, self.last, self.step)

    def _require_closed(self) -> None:
        if self.is_open:
            raise ChronospecImplementationError(
                f"Open range {self} must be resolved before it is enumerated"
            )

    def __iter__(self) -> Iterator[int]:
        self._require_closed()
        return iter(range(self.first, self.last + 1, self.step))

    def __len__(self) -> int:
        self._require_closed()
        return len(range(self.first, self.last + 1, self.step))

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_range(self)

    def __str__(self) -> str:
        if self.is_open:
            return f"{self.first}..{self.last}//open"
        if self.step != DEFAULT_STEP:
            return f"{self.first}..{self.last}//{self.step}"
        return f"{self.first}..{self.last}"


@dataclass(frozen=True)
class AllOf:
    """``{...}`` set: every member is valid, a dimension to expand"""
    members: Tuple[Any, ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_all_of(self)


@dataclass(frozen=True)
class OneOf:
    """``[...]`` set: exactly one member applies, never expanded"""
    members: Tuple[Any, ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_one_of(self)


@dataclass(frozen=True)
class Mask:
    """
    Digit positions of a partially known value.

    Each position is an int 0-9, the wildcard ``"X"``, or an AllOf/OneOf of
    candidate digits. ``all_unknown`` is the ``X*`` form (any number of
    unknown digits) and has no positions.
    """
    digits: Tuple[Union[int, str, AllOf, OneOf], ...] = ()
    all_unknown: bool = False

    @classmethod
    def unknown(cls) -> Mask:
        return cls((), all_unknown=True)

    def trailing_range(self) -> Optional[Range]:
        """
        The range covered by a mask whose wildcards all trail its fixed
        digits (``201X`` is ``2010..2019``); None for any other mask.
        """
        if self.all_unknown or not self.digits:
            return None
        fixed = []
        for digit in self.digits:
            if not isinstance(digit, int):
                break
            fixed.append(digit)
        wildcards = self.digits[len(fixed):]
        if not wildcards or any(not (isinstance(d, str) and d == WILDCARD) for d in wildcards):
            return None
        scale = 10 ** len(wildcards)
        base = int("".join(str(d) for d in fixed)) if fixed else 0
        return Range(base * scale, base * scale + scale - 1)

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_mask(self)


@dataclass(frozen=True)
class Recurrence:
    """``Rn/`` repeat count; ``count`` is None for ``R/`` (repeat forever)"""
    count: Optional[int] = None

    @property
    def infinite(self) -> bool:
        return self.count is None

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_recurrence(self)


@dataclass(frozen=True)
class TimeShift(UnitsMixin):
    """UTC offset; ``units`` holds signed ``hour`` and optional ``minute``"""
    units: Tuple[Tuple[str, int], ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_time_shift(self)


@dataclass(frozen=True)
class Selection(UnitsMixin):
    """
    ``L ... N`` selection: the n-th instance of a weekday, date or time
    within the enclosing period. Without an ``instance`` unit it selects
    every match.
    """
    units: Tuple[Tuple[str, Any], ...]

    @property
    def every(self) -> bool:
        return self.get("instance") is None

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_selection(self)


@dataclass(frozen=True)
class Group(UnitsMixin):
    """``nG...U`` group: the n-th run of the given duration"""
    count: Union[int, AllOf, OneOf]
    units: Tuple[Tuple[str, int], ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_group(self)


@dataclass(frozen=True)
class Date(UnitsMixin):
    """Calendar date, explicit (``2018Y3M``) or implicit (``2018-03``)"""
    units: Tuple[Tuple[str, Any], ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_date(self)


@dataclass(frozen=True)
class TimeOfDay(UnitsMixin):
    """Time of day introduced by ``T``"""
    units: Tuple[Tuple[str, Any], ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_time_of_day(self)


@dataclass(frozen=True)
class DateTime(UnitsMixin):
    """Date units followed by time units (and an optional time shift)"""
    units: Tuple[Tuple[str, Any], ...]

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_datetime(self)


@dataclass(frozen=True)
class Duration(UnitsMixin):
    """``P...`` duration; a leading ``-`` makes the direction negative"""
    units: Tuple[Tuple[str, int], ...]
    direction: Direction = Direction.POSITIVE

    @property
    def negative(self) -> bool:
        return self.direction is Direction.NEGATIVE

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_duration(self)


@dataclass(frozen=True)
class Interval:
    """
    ``start/end`` interval. Exactly one of these shapes:
    endpoint/endpoint, endpoint/duration, duration/endpoint.
    """
    start: Union[Date, TimeOfDay, DateTime, Duration]
    end: Union[Date, TimeOfDay, DateTime, Duration]
    recurrence: Optional[Recurrence] = None

    def accept(self, visitor: 'TokenVisitor[T]') -> T:
        return visitor.visit_interval(self)


# Precise types for better type safety
Endpoint: TypeAlias = Union[Date, TimeOfDay, DateTime]
Token: TypeAlias = Union[Date, TimeOfDay, DateTime, Duration, Interval, AllOf, OneOf]
UnitValue: TypeAlias = Union[int, Range, AllOf, OneOf, Mask, Selection, Group, TimeShift, Interval]
Units: TypeAlias = Tuple[Tuple[str, UnitValue], ...]

TOKEN_TYPES = (Date, TimeOfDay, DateTime, Duration, Interval, AllOf, OneOf)
ENDPOINT_TYPES = (Date, TimeOfDay, DateTime)
