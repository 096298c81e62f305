"""Tests for reproduction step splitting and Python version extraction."""

from __future__ import annotations

import pytest

from bugintake.domain.steps import parse_steps, split_python_version


class TestParseSteps:
    def test_numbered_lines(self) -> None:
        assert parse_steps("1. open app\n2. click X\n3. crash") == ["open app", "click X", "crash"]

    def test_paren_markers(self) -> None:
        assert parse_steps("1) one\n2) two") == ["one", "two"]

    def test_continuation_appended_to_prior_step(self) -> None:
        assert parse_steps("1. open app\nwait a bit\n2. crash") == [
            "open app\nwait a bit",
            "crash",
        ]

    def test_leading_unnumbered_line_is_own_step(self) -> None:
        assert parse_steps("first do this\n1. then this") == ["first do this", "then this"]

    def test_blank_lines_skipped(self) -> None:
        assert parse_steps("1. a\n\n\n2. b\n") == ["a", "b"]

    def test_numbering_is_not_renumbered(self) -> None:
        assert parse_steps("3. c\n1. a") == ["c", "a"]

    def test_empty_marker_takes_continuation(self) -> None:
        assert parse_steps("1.\nrun it\n2. done") == ["run it", "done"]

    def test_decimal_is_not_a_marker(self) -> None:
        assert parse_steps("1. allocate\n1.5 GB used") == ["allocate\n1.5 GB used"]

    @pytest.mark.parametrize("body", ["", "   \n  "])
    def test_empty(self, body: str) -> None:
        assert parse_steps(body) == []


class TestSplitPythonVersion:
    def test_no_python_line(self) -> None:
        assert split_python_version("v2.3.0") == ("v2.3.0", None)

    @pytest.mark.parametrize(
        "line",
        ["Python version: 3.12", "python: 3.12", "- Python: 3.12", "* PYTHON VERSION : 3.12"],
    )
    def test_variants(self, line: str) -> None:
        assert split_python_version(f"v2\n{line}") == ("v2", "3.12")

    def test_only_first_extracted(self) -> None:
        text, python = split_python_version("Python: 3.11\nPython: 3.12")
        assert python == "3.11"
        assert text == "Python: 3.12"

    def test_empty_value(self) -> None:
        assert split_python_version("Python version:\nv1") == ("v1", None)
