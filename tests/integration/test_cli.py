#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

import pytest
from chronospec.__main__ import main


class TestCli:
    """`chronospec SPEC` invocations"""

    def test_occurrences(self, capsys):
        assert main(["2020Y2M{28..-1}D"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "[('year', 2020), ('month', 2), ('day', 28)]",
            "[('year', 2020), ('month', 2), ('day', 29)]",
        ]

    def test_count(self, capsys):
        assert main(["2018Y{1..12}M", "--count", "2", "--sexp"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["((year 2018) (month 1))", "((year 2018) (month 2))"]

    def test_tokens(self, capsys):
        assert main(["2018Y3M", "--tokens", "--sexp"]) == 0
        assert capsys.readouterr().out.strip() == "(date (year 2018) (month 3))"

    def test_expand(self, capsys):
        assert main(["{2018,2019}Y3M", "--expand", "--sexp"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["((year 2018) (month 3))", "((year 2019) (month 3))"]

    def test_parse_error(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert main(["P1D/P2D"]) == 1
        err = capsys.readouterr().err
        assert "Error detected at '/P2D'" in err
        assert "^" in err

    def test_duration_has_no_occurrences(self, capsys):
        assert main(["P1D"]) == 1
        assert "chronospec: error:" in capsys.readouterr().err

    def test_file(self, capsys, tmp_path):
        spec_file = tmp_path / "specs.txt"
        spec_file.write_text("# two specs\n2018Y3M\n\n2019Y4M\n", encoding="utf-8")
        assert main(["--file", str(spec_file)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "[('year', 2018), ('month', 3)]",
            "[('year', 2019), ('month', 4)]",
        ]

    def test_missing_file(self, capsys, tmp_path):
        assert main(["--file", str(tmp_path / "missing.txt")]) == 1
        assert "file not found" in capsys.readouterr().err

    def test_no_spec(self, capsys):
        assert main([]) == 2
