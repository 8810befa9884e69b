#!/usr/bin/env python3
"""
Tests for the grammar parser: explicit and implicit dates and times, BC
years, masks, sets, durations, intervals and time shifts.
"""

import pytest
from chronospec.frontend.parser import tokenize
from chronospec.shared.errors import ParseError
from chronospec.shared.tokens import (
    AllOf, Date, DateTime, Direction, Duration, Group, Interval, Mask, OneOf,
    Range, Recurrence, Selection, TimeOfDay, TimeShift,
)


class TestExplicitDates:
    """Dates where every value carries its unit designator"""

    def test_explicit_units(self, parser):
        cases = [
            ("2018Y", (("year", 2018),)),
            ("2018Y3M", (("year", 2018), ("month", 3))),
            ("2018Y3M25D", (("year", 2018), ("month", 3), ("day", 25))),
            ("2018Y12W", (("year", 2018), ("week", 12))),
            ("2018Y12W3K", (("year", 2018), ("week", 12), ("day_of_week", 3))),
            ("3M25D", (("month", 3), ("day", 25))),
        ]
        for text, units in cases:
            assert parser.parse(text) == Date(units), f"Unexpected tree for {text}"

    def test_bc_years(self, parser):
        """Year n BC is astronomical year 1 - n"""
        assert parser.parse("100BY") == Date((("year", -99),))
        assert parser.parse("1BY") == Date((("year", 0),))
        assert parser.parse("2018Y") == Date((("year", 2018),))

    def test_integer_sets(self, parser):
        tokens = parser.parse("2018Y{1,3,5}M")
        assert tokens.get("month") == AllOf((1, 3, 5))
        tokens = parser.parse("2018Y[1,3]M")
        assert tokens.get("month") == OneOf((1, 3))

    def test_consecutive_members_collapse_to_ranges(self, parser):
        tokens = parser.parse("{2018,2019,2020,2021,2022}Y")
        assert tokens.get("year") == AllOf((Range(2018, 2022),))
        tokens = parser.parse("2018Y{1,2,3,7}M")
        assert tokens.get("month") == AllOf((Range(1, 3), 7))

    def test_ranges(self, parser):
        assert parser.parse("2018Y{1..6}M").get("month") == AllOf((Range(1, 6),))
        assert parser.parse("2020Y2M{28..-1}D").get("day") == AllOf((Range.contextual(28, -1),))
        assert parser.parse("2020Y2M{-3..-1}D").get("day") == AllOf((Range.contextual(-3, -1),))

    def test_masked_years(self, parser):
        assert parser.parse("201XY").get("year") == Mask((2, 0, 1, "X"))
        assert parser.parse("X*Y").get("year") == Mask.unknown()
        tokens = parser.parse("XXX{0,2,4,6,8}Y")
        assert tokens.get("year") == Mask(("X", "X", "X", AllOf((0, 2, 4, 6, 8))))

    def test_group(self, parser):
        tokens = parser.parse("2018Y5G10DU")
        assert tokens == Date((
            ("year", 2018),
            ("group", Group(count=5, units=(("day", 10),))),
        ))


class TestImplicitForms:
    """Fixed-width digit groups"""

    def test_implicit_dates(self, parser):
        cases = [
            ("2018-03-01", (("year", 2018), ("month", 3), ("day", 1))),
            ("20180301", (("year", 2018), ("month", 3), ("day", 1))),
            ("2018-03", (("year", 2018), ("month", 3))),
            ("2018-060", (("year", 2018), ("day", 60))),
            ("2018060", (("year", 2018), ("day", 60))),
            ("2018-W09-3", (("year", 2018), ("week", 9), ("day_of_week", 3))),
            ("2018-W09", (("year", 2018), ("week", 9))),
            ("2018W093", (("year", 2018), ("week", 9), ("day_of_week", 3))),
            ("2018", (("year", 2018),)),
        ]
        for text, units in cases:
            assert parser.parse(text) == Date(units), f"Unexpected tree for {text}"

    def test_implicit_masks(self, parser):
        assert parser.parse("201X-XX-XX") == Date((
            ("year", Mask((2, 0, 1, "X"))),
            ("month", Mask(("X", "X"))),
            ("day", Mask(("X", "X"))),
        ))

    def test_implicit_times(self, parser):
        cases = [
            ("T10:30:00", (("hour", 10), ("minute", 30), ("second", 0))),
            ("T103000", (("hour", 10), ("minute", 30), ("second", 0))),
            ("T10:30", (("hour", 10), ("minute", 30))),
            ("T10", (("hour", 10),)),
        ]
        for text, units in cases:
            assert parser.parse(text) == TimeOfDay(units), f"Unexpected tree for {text}"

    def test_implicit_datetime(self, parser):
        assert parser.parse("2018-03-01T10:30:00") == DateTime((
            ("year", 2018), ("month", 3), ("day", 1),
            ("hour", 10), ("minute", 30), ("second", 0),
        ))


class TestTimeShifts:
    """UTC offsets after times and implicit dates"""

    def test_zulu(self, parser):
        tokens = parser.parse("T10:30:00Z")
        assert tokens.get("time_shift") == TimeShift((("hour", 0),))
        assert parser.parse("2018-03-01Z").get("time_shift") == TimeShift((("hour", 0),))

    def test_numeric_offsets(self, parser):
        assert parser.parse("T10:30+05:30").get("time_shift") == TimeShift((("hour", 5), ("minute", 30)))
        assert parser.parse("T10:30-08").get("time_shift") == TimeShift((("hour", -8),))

    def test_explicit_shift(self, parser):
        tokens = parser.parse("2018Y3MT10HZ-5H")
        assert tokens == DateTime((
            ("year", 2018), ("month", 3), ("hour", 10),
            ("time_shift", TimeShift((("hour", -5),))),
        ))


class TestDurationsAndIntervals:
    """Durations, intervals and recurrences"""

    def test_durations(self, parser):
        assert parser.parse("P1Y2M3DT4H5M6S") == Duration((
            ("year", 1), ("month", 2), ("day", 3),
            ("hour", 4), ("minute", 5), ("second", 6),
        ))
        assert parser.parse("PT1H") == Duration((("hour", 1),))
        assert parser.parse("P2W") == Duration((("week", 2),))

    def test_negative_duration(self, parser):
        tokens = parser.parse("-P20D")
        assert tokens == Duration((("day", 20),), Direction.NEGATIVE)
        assert tokens.negative

    def test_interval_shapes(self, parser):
        start = Date((("year", 2018), ("month", 3), ("day", 1)))
        assert parser.parse("2018-03-01/P1D") == Interval(start, Duration((("day", 1),)))
        assert parser.parse("P1D/2018-03-01") == Interval(Duration((("day", 1),)), start)
        assert parser.parse("2018-03-01/2018-03-05") == Interval(
            start, Date((("year", 2018), ("month", 3), ("day", 5)))
        )

    def test_recurrence(self, parser):
        tokens = parser.parse("R5/2018-03-01/P1D")
        assert tokens.recurrence == Recurrence(5)
        tokens = parser.parse("R/2018Y/P1Y")
        assert tokens.recurrence == Recurrence(None)
        assert tokens.recurrence.infinite

    def test_duration_pair_rejected(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse("P1D/P2D")
        assert exc_info.value.remainder == "/P2D"


class TestTopLevelSets:
    """Sets of whole dates"""

    def test_all_of_dates(self, parser):
        assert parser.parse("{2018Y,2019Y}") == AllOf((
            Date((("year", 2018),)), Date((("year", 2019),)),
        ))

    def test_one_of_dates(self, parser):
        assert parser.parse("[2018-03-01,2018-03-02]") == OneOf((
            Date((("year", 2018), ("month", 3), ("day", 1))),
            Date((("year", 2018), ("month", 3), ("day", 2))),
        ))


class TestTokenizeEntryPoint:
    """Module-level tokenize() shares one parser"""

    def test_tokenize(self):
        assert tokenize("2018Y") == Date((("year", 2018),))

    def test_selection_node_type(self):
        tokens = tokenize("2018YL1KN")
        assert isinstance(tokens.get("selection"), Selection)
