"""
Test utilities for the chronospec test suite.

Helpers for the parse-then-build-then-advance pattern used by the odometer
and driver tests.
"""

import sys
from itertools import islice
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from chronospec.algebra.collector import collect
from chronospec.algebra.odometer import advance, occurrences
from chronospec.algebra.readings import OdometerState


def advance_n(state: OdometerState, n: int) -> Optional[OdometerState]:
    """Call advance() ``n`` times; stops early (returning None) on exhaustion."""
    for _ in range(n):
        if state is None:
            return None
        state = advance(state)
    return state


def collect_all(state: OdometerState, limit: int = 100) -> List[List[Tuple[str, Any]]]:
    """Collected occurrences of ``state``, at most ``limit`` of them."""
    return [collect(s) for s in islice(occurrences(state), limit)]


def values_of(rows: Sequence[Sequence[Tuple[str, Any]]], *units: str) -> List[Tuple[Any, ...]]:
    """Project each collected row onto ``units``: [(v1, v2), ...]."""
    projected = []
    for row in rows:
        lookup = dict(row)
        projected.append(tuple(lookup[unit] for unit in units))
    return projected
