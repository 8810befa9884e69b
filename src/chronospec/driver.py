"""
Specification Driver

Wires the phases together: parse the text, build the odometer state for the
endpoint it describes, then step the odometer and collect plain results.
"""

import logging
from itertools import islice
from typing import Any, List, Optional, Union

from .algebra.collector import PlainState, collect
from .algebra.odometer import advance, is_cyclable, occurrences
from .algebra.readings import OdometerState, build_state
from .calendars.base import Calendar
from .calendars.validation import DEFAULT_CALENDAR
from .frontend.parser import Parser, get_parser
from .shared.errors import ChronospecError
from .shared.tokens import ENDPOINT_TYPES, Interval, Token
from .utils.config import DEFAULT_OCCURRENCE_COUNT, MAX_OCCURRENCE_COUNT

logger = logging.getLogger("chronospec.driver")


def endpoint_of(tokens: Token) -> Any:
    """
    The date, time or datetime a token tree anchors on: the node itself, or
    the endpoint side of an interval (its start when both are endpoints).
    """
    if isinstance(tokens, ENDPOINT_TYPES):
        return tokens
    if isinstance(tokens, Interval):
        if isinstance(tokens.start, ENDPOINT_TYPES):
            return tokens.start
        return tokens.end
    raise ChronospecError(
        f"Cannot enumerate occurrences of a {type(tokens).__name__}; "
        "expected a date, time, datetime or interval"
    )


class SpecDriver:
    """
    Parse, build and enumerate specifications against one calendar.

    - parse():       text to token tree (ParseError on bad input)
    - build():       text or token tree to a fresh OdometerState
    - first():       the first occurrence, collected
    - occurrences(): up to ``limit`` collected occurrences
    """

    def __init__(self, calendar: Optional[Calendar] = None, parser: Optional[Parser] = None):
        self.calendar = calendar if calendar is not None else DEFAULT_CALENDAR
        self.parser = parser if parser is not None else get_parser()

    def parse(self, text: str) -> Token:
        return self.parser.parse(text)

    def build(self, spec: Union[str, Token]) -> OdometerState:
        tokens = self.parse(spec) if isinstance(spec, str) else spec
        state = build_state(endpoint_of(tokens), self.calendar)
        logger.debug("Built state with units %s", [unit for unit, _ in state.units])
        return state

    def first(self, spec: Union[str, Token]) -> Optional[PlainState]:
        state = self.build(spec)
        if not is_cyclable(state):
            return collect(state)
        first = advance(state)
        return None if first is None else collect(first)

    def occurrences(self, spec: Union[str, Token], limit: int = DEFAULT_OCCURRENCE_COUNT) -> List[PlainState]:
        if not 0 <= limit <= MAX_OCCURRENCE_COUNT:
            raise ChronospecError(f"Occurrence limit must be in 0..{MAX_OCCURRENCE_COUNT}, got {limit}")
        state = self.build(spec)
        return [collect(s) for s in islice(occurrences(state), limit)]


def from_iso8601(text: str, calendar: Optional[Calendar] = None) -> OdometerState:
    """OdometerState for an extended ISO 8601 date, time, datetime or interval"""
    return SpecDriver(calendar).build(text)
