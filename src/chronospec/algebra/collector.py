"""Collector: reduce an OdometerState to plain ``(unit, value)`` pairs."""

from typing import Any, List, Optional, Sequence, Tuple, Union

from .readings import Active, Anchored, Exhausted, OdometerState, Pending, Rollover

PlainState = List[Tuple[str, Any]]


def _plain(value: Any) -> Any:
    if isinstance(value, Anchored):
        return value.value
    if isinstance(value, Active):
        return value.current
    if isinstance(value, Pending):
        return list(value.candidates)
    if isinstance(value, Exhausted):
        return []
    if isinstance(value, Rollover):
        return value.value
    return value


def collect(state: Union[OdometerState, Sequence[Tuple[str, Any]], None]) -> Optional[PlainState]:
    """
    Plain values of ``state``: the current value of cycling units, the
    candidates of units not yet started and the value of anchored ones.
    None (no further occurrence) collects to None.
    """
    if state is None:
        return None
    units = state.units if isinstance(state, OdometerState) else state
    return [(unit, _plain(value)) for unit, value in units]
