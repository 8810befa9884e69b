"""
Pytest configuration and shared fixtures for all chronospec tests.

The parser compiles its grammar once; session fixtures share that instance
and the default calendar across every test.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from chronospec.calendars.gregorian import Gregorian
from chronospec.driver import SpecDriver
from chronospec.frontend.parser import get_parser


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """
    Session-scoped parser shared across ALL tests.

    The parser is stateless between calls, so sharing it is safe and
    avoids recompiling grammar.lark per test.
    """
    return get_parser()


@pytest.fixture(scope="session")
def session_calendar():
    """Session-scoped Gregorian calendar."""
    return Gregorian()


# =============================================================================
# Class-scoped fixtures (shared within a test class)
# =============================================================================

@pytest.fixture(scope="class")
def parser(session_parser):
    """Class-scoped parser - returns the session parser."""
    return session_parser


@pytest.fixture(scope="class")
def calendar(session_calendar):
    """Class-scoped calendar - returns the session calendar."""
    return session_calendar


@pytest.fixture(scope="class")
def driver(session_parser, session_calendar):
    """Driver over the shared parser and calendar."""
    return SpecDriver(calendar=session_calendar, parser=session_parser)
