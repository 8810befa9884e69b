"""
Shared components: token tree, visitor and errors.
"""

from .errors import ChronospecError, ChronospecImplementationError, ParseError, ValidationError
from .tokens import (
    AllOf, Date, DateTime, Direction, Duration, Group, Interval, Mask, OneOf,
    Range, Recurrence, Selection, TimeOfDay, TimeShift,
    Endpoint, Token, UnitValue, Units,
)
from .token_visitor import TokenVisitor
