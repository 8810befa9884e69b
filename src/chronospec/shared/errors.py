"""
Error Reporting

Exception hierarchy for the parser, the validation oracle and internal
invariants, plus a small caret-style formatter for parse errors.
"""

import os
from typing import Any, List, Optional

from ..utils.config import ERROR_CONTEXT_PREFIX, ERROR_POINTER_CHAR


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("CHRONOSPEC_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


def _format_parse_error(message: str, text: str, column: int, color: bool = False) -> str:
    """
    Render a parse error with the offending input and a caret.

    Example output (plain, no color)::

        error: Could not parse '2018Y3MQ'. Error detected at 'Q'
          |
          | 2018Y3MQ
          |        ^
    """
    out: List[str] = []
    out.append(
        _style("error", _BOLD, _RED, color=color)
        + _style(f": {message}", _BOLD, color=color)
    )
    gutter = _style(ERROR_CONTEXT_PREFIX + "|", _BOLD, _BLUE, color=color)
    out.append(gutter)
    out.append(f"{gutter} {text}")
    pointer = " " * max(column, 0) + ERROR_POINTER_CHAR
    out.append(f"{gutter} {_style(pointer, _BOLD, _RED, color=color)}")
    return "\n".join(out)


# ============================================================================
# Exception Classes
# ============================================================================

class ChronospecError(Exception):
    """Base exception for all chronospec errors"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ParseError(ChronospecError):
    """
    The text is not a valid specification.

    No partial token tree accompanies a parse error. ``remainder`` is the
    unparsed suffix of ``text`` starting where the grammar gave up; it is
    empty when the input ended too early.
    """
    def __init__(self, message: str, text: str = "", remainder: str = ""):
        super().__init__(message)
        self.text = text
        self.remainder = remainder

    @property
    def column(self) -> int:
        """Zero-based position of the first unparsed character."""
        return len(self.text) - len(self.remainder)

    def format(self, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_parse_error(self.message, self.text, self.column, color=use_color)


class ValidationError(ChronospecError):
    """
    A calendar rejected a value or could not resolve an open range.

    Raised by the validation oracle and propagated unmodified through the
    odometer.
    """
    def __init__(self, message: str, unit: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.unit = unit
        self.value = value


class ChronospecImplementationError(Exception):
    """
    Error in the Python implementation, not in the user's specification.

    Use this for broken internal invariants:
    - Unknown token or reading types reaching an engine
    - Enumerating a range that was never resolved

    Never use this for errors in the user's input - use ParseError or
    ValidationError instead.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
