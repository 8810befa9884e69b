"""
Odometer Engine

Computes the next occurrence of an OdometerState. Units are ordered
coarsest first; the finest cyclable unit advances on every call and a
coarser unit advances only when every finer cyclable unit rolled over on
the same call (carry propagation).

Two accumulators are threaded through every recursive call, always in
this order:
- ``calendar``: handed to the validation oracle, never changed
- ``context``:  ``(unit, value)`` pairs of the coarser units already
                fixed for this call, grown by one pair per level
"""

import logging
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, Tuple

from .readings import (
    Active, Anchored, Cursor, Exhausted, OdometerState, Pending, Reading,
    Rollover, current_value,
)
from ..calendars.base import Calendar
from ..calendars.validation import validate
from ..shared.errors import ChronospecImplementationError
from ..shared.tokens import Range

logger = logging.getLogger("chronospec.algebra.odometer")

Context = Tuple[Tuple[str, Any], ...]
UnitReadings = Tuple[Tuple[str, Reading], ...]


class Carry(Enum):
    """What the finer units did on this call"""
    ADVANCED = "advanced"
    ROLLED_OVER = "rolled_over"
    NO_CYCLES = "no_cycles"


def resolve(value: Range, unit: str, calendar: Calendar, context: Context) -> Range:
    """Close an open range for ``unit`` against the coarser ``context``"""
    resolved = validate(list(context) + [(unit, value)], calendar)
    return resolved[-1][1]


def _take(remaining: Tuple[Any, ...], unit: str, calendar: Calendar,
          context: Context) -> Optional[Tuple[Any, Tuple[Any, ...]]]:
    """First candidate in ``remaining`` and what is left after it, or None"""
    while remaining:
        head, rest = remaining[0], remaining[1:]
        if isinstance(head, Range):
            if head.is_open:
                head = resolve(head, unit, calendar, context)
            if head.is_exhausted:
                remaining = rest
                continue
            return head.first, (head.advanced(),) + rest
        return head, rest
    return None


def step(cursor: Cursor, unit: str, calendar: Calendar,
         context: Context) -> Optional[Tuple[Any, Cursor]]:
    """
    Step one unit's candidate cycle.

    Returns ``(value, cursor)`` for the next candidate, or
    ``(Rollover(first), cursor)`` when the remaining candidates are used up
    and the cycle restarts from its source. Open ranges are resolved at the
    moment they are reached, so a restart sees the current ``context``;
    one resolving to a single member (``-1..-1``) still yields it.
    None means the source itself has no candidates in this context.
    """
    taken = _take(cursor.remaining, unit, calendar, context)
    if taken is not None:
        value, remaining = taken
        return value, Cursor(cursor.source, remaining)

    taken = _take(cursor.source, unit, calendar, context)
    if taken is None:
        return None
    value, remaining = taken
    return Rollover(value), Cursor(cursor.source, remaining)


def _begin(unit: str, candidates: Sequence[Any], calendar: Calendar,
           context: Context) -> Optional[Active]:
    cursor = Cursor.start(candidates)
    taken = _take(cursor.remaining, unit, calendar, context)
    if taken is None:
        return None
    value, remaining = taken
    return Active(value, Cursor(cursor.source, remaining))


def _extend(context: Context, unit: str, reading: Reading) -> Context:
    if isinstance(reading, Exhausted):
        return context
    return context + ((unit, current_value(reading)),)


def _start(units: UnitReadings, calendar: Calendar, context: Context) -> Optional[UnitReadings]:
    """
    Start every Pending unit, coarse to fine. A unit with no candidates in
    its context makes the nearest coarser Pending unit step, the same carry
    ``_propagate`` runs. None when no combination has a value for every
    unit.
    """
    if not units:
        return ()

    (unit, reading), finer = units[0], units[1:]
    if not isinstance(reading, Pending):
        started = _start(finer, calendar, _extend(context, unit, reading))
        return None if started is None else ((unit, reading),) + started

    active = _begin(unit, reading.candidates, calendar, context)
    while active is not None:
        started = _start(finer, calendar, context + ((unit, active.current),))
        if started is not None:
            logger.debug("Started %s at %r", unit, active.current)
            return ((unit, active),) + started
        logger.debug("No finer candidates for %s %r in context %s", unit, active.current, context)
        outcome = step(active.cursor, unit, calendar, context)
        if outcome is None or isinstance(outcome[0], Rollover):
            return None
        active = Active(*outcome)
    return None


def _restart(units: UnitReadings, calendar: Calendar, context: Context) -> Optional[UnitReadings]:
    """
    Restart every Active unit from the head of its source against a new
    coarser context. None when some unit has no candidates in that context.
    """
    restarted = []
    for unit, reading in units:
        if isinstance(reading, Active):
            reading = _begin(unit, reading.cursor.source, calendar, context)
            if reading is None:
                logger.debug("No %s candidates in context %s", unit, context)
                return None
        restarted.append((unit, reading))
        context = _extend(context, unit, reading)
    return tuple(restarted)


def _propagate(units: UnitReadings, calendar: Calendar, context: Context) -> Tuple[Carry, UnitReadings]:
    """
    Advance ``units`` (coarsest first) given the fixed coarser ``context``.
    Finer units are advanced first; this unit steps only if they rolled
    over or have nothing to cycle.
    """
    if not units:
        return Carry.NO_CYCLES, ()

    (unit, reading), finer = units[0], units[1:]
    carry, finer = _propagate(finer, calendar, _extend(context, unit, reading))

    if isinstance(reading, (Anchored, Exhausted)):
        return carry, ((unit, reading),) + finer
    if not isinstance(reading, Active):
        raise ChronospecImplementationError(f"Cannot advance {unit} reading {reading!r}")
    if carry is Carry.ADVANCED:
        return carry, ((unit, reading),) + finer

    while True:
        outcome = step(reading.cursor, unit, calendar, context)
        if outcome is None:
            return Carry.ROLLED_OVER, ((unit, reading),) + finer
        value, cursor = outcome
        if isinstance(value, Rollover):
            logger.debug("%s rolled over to %r", unit, value.value)
            return Carry.ROLLED_OVER, ((unit, Active(value.value, cursor)),) + finer

        reading = Active(value, cursor)
        restarted = _restart(finer, calendar, context + ((unit, value),))
        if restarted is not None:
            if carry is Carry.ROLLED_OVER:
                logger.debug("Carried into %s, now %r", unit, value)
            return Carry.ADVANCED, ((unit, reading),) + restarted


def advance(state: OdometerState) -> Optional[OdometerState]:
    """
    Next occurrence of ``state``, or None when there is none.

    The first call on a freshly built state starts its Pending units and
    returns the first occurrence, stepping a coarser unit past contexts in
    which a finer one has no candidates. Later calls step the odometer. The result
    is None when every cyclable unit rolled over on the same call or when
    nothing in the state cycles. Oracle errors propagate unchanged.
    """
    units = state.units
    if any(isinstance(reading, Pending) for _, reading in units):
        started = _start(units, state.calendar, ())
        if started is None:
            logger.debug("No occurrence: some unit has no candidates in any context")
            return None
        return state.replace_units(started)

    carry, units = _propagate(units, state.calendar, ())
    if carry is not Carry.ADVANCED:
        logger.debug("No further occurrence (%s)", carry.value)
        return None
    return state.replace_units(units)


def is_cyclable(state: OdometerState) -> bool:
    return any(isinstance(reading, (Pending, Active)) for _, reading in state.units)


def occurrences(state: OdometerState) -> Iterator[OdometerState]:
    """
    Successive occurrences of ``state``. A state with nothing to cycle
    denotes exactly one occurrence: itself.
    """
    if not is_cyclable(state):
        yield state
        return
    current = advance(state)
    while current is not None:
        yield current
        current = advance(current)
