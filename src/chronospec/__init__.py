"""
chronospec: extended ISO 8601 date/time specifications.

    >>> from chronospec import from_iso8601, occurrences, collect
    >>> [collect(s) for s in occurrences(from_iso8601("2020Y2M{28..-1}D"))]
    [[('year', 2020), ('month', 2), ('day', 28)], [('year', 2020), ('month', 2), ('day', 29)]]
"""

from .algebra import OdometerState, advance, build_state, collect, expand, occurrences
from .calendars import Calendar, Gregorian, validate
from .driver import SpecDriver, from_iso8601
from .frontend import tokenize
from .shared.errors import ChronospecError, ParseError, ValidationError
from .shared.serialization import dumps

__all__ = [
    "tokenize",
    "expand",
    "advance",
    "collect",
    "validate",
    "build_state",
    "occurrences",
    "from_iso8601",
    "dumps",
    "OdometerState",
    "SpecDriver",
    "Calendar",
    "Gregorian",
    "ChronospecError",
    "ParseError",
    "ValidationError",
]
