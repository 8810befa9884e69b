"""
Algebra over token trees: expansion of ranges and sets, and the odometer
that steps a specification through its occurrences.
"""

from .collector import collect
from .expansion import expand
from .odometer import Carry, advance, is_cyclable, occurrences, resolve, step
from .readings import (
    Active, Anchored, Cursor, Exhausted, OdometerState, Pending, Reading,
    ReadingBuilder, Rollover, build_state, current_value, to_reading,
)

__all__ = [
    'collect',
    'expand',
    'Carry',
    'advance',
    'is_cyclable',
    'occurrences',
    'resolve',
    'step',
    'Active',
    'Anchored',
    'Cursor',
    'Exhausted',
    'OdometerState',
    'Pending',
    'Reading',
    'ReadingBuilder',
    'Rollover',
    'build_state',
    'current_value',
    'to_reading',
]
