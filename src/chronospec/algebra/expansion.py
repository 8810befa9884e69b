"""
Expansion Engine

expand() turns a unit list holding integer ranges and ``{...}`` sets into
the rows of concrete values it denotes. The list is folded from its tail
toward its head; the accumulator is either still flat (no range seen yet)
or a list of rows.

- plain element, flat tail:  prepended once
- plain element, rows:       prepended to every row
- range element, flat tail:  one row per member
- range element, rows:       Cartesian product, range-major

``OneOf`` members are alternatives, not a dimension, so ``[...]`` values
and open ranges stay in place as plain elements.
"""

from typing import Any, List, Optional, Sequence, Tuple

from ..shared.errors import ChronospecError
from ..shared.tokens import AllOf, Range

UnitPair = Tuple[str, Any]
Row = List[UnitPair]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _members(value: Any) -> Optional[Tuple[int, ...]]:
    """Concrete members of a range element, None for a plain element"""
    if isinstance(value, Range):
        return None if value.is_open else tuple(value)
    if isinstance(value, AllOf) and value.members:
        members: List[int] = []
        for member in value.members:
            if _is_int(member):
                members.append(member)
            elif isinstance(member, Range) and not member.is_open:
                members.extend(member)
            else:
                return None
        return tuple(members)
    return None


def _units(tokens: Any) -> Sequence[UnitPair]:
    units = getattr(tokens, "units", tokens)
    if not isinstance(units, (list, tuple)):
        raise ChronospecError(f"Cannot expand {type(tokens).__name__}: it has no units")
    return units


def expand(tokens: Any) -> List[Row]:
    """
    Rows denoted by ``tokens`` (a unit list or a node with ``units``).

    A list without range elements gives exactly one row equal to the input;
    an empty list gives no rows.
    """
    units = _units(tokens)
    if not units:
        return []

    flat: Row = []
    rows: Optional[List[Row]] = None
    for unit, value in reversed(units):
        members = _members(value)
        if members is None:
            if rows is None:
                flat.insert(0, (unit, value))
            else:
                rows = [[(unit, value)] + row for row in rows]
        elif rows is None:
            rows = [[(unit, member)] + flat for member in members]
        else:
            rows = [[(unit, member)] + row for member in members for row in rows]

    return [flat] if rows is None else rows
