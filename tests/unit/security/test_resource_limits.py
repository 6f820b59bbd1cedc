#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the depth, input length and scan step limits."""

import logging

import pytest

from ubb2html import UbbParser
from ubb2html.constants import DEFAULT_MAX_DEPTH


@pytest.mark.unit
@pytest.mark.security
class TestDepthLimit:
    """Tests for max_depth."""

    def test_tags_beyond_limit_are_literal(self, parser: UbbParser) -> None:
        """Test that tags nested too deeply are emitted as text."""
        assert parser.parse("[b][i]x[/i][/b]", max_depth=1) == "<strong>[i]x[/i]</strong>"

    def test_deep_nesting_does_not_exhaust_stack(self, parser: UbbParser) -> None:
        """Test thousands of unterminated nested tags."""
        result = parser.parse("[b]" * 5000 + "x")

        depth = DEFAULT_MAX_DEPTH
        assert result == "<strong>" * depth + "[b]" * (5000 - depth) + "x" + "</strong>" * depth

    def test_long_line_break_chain_within_default_limit(
        self, parser: UbbParser, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a post with many [br] tags renders every break."""
        with caplog.at_level(logging.WARNING, logger="ubb2html.context"):
            result = parser.parse("line[br]" * 150 + "end")

        assert result == "line<br />" * 150 + "end"
        assert "[br]" not in result
        assert "Maximum tag depth" not in caplog.text

    def test_long_rule_chain_within_default_limit(self, parser: UbbParser) -> None:
        """Test that a post with many [hr] tags renders every rule."""
        assert parser.parse("[hr]x\n" * 120) == "<hr />x<br />" * 120

    def test_depth_warning_logged_once(self, parser: UbbParser, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the depth limit is reported once per call."""
        with caplog.at_level(logging.WARNING, logger="ubb2html.context"):
            parser.parse("[b][i]x[/i][u]y[/u][/b]", max_depth=1)

        assert caplog.text.count("Maximum tag depth") == 1


@pytest.mark.unit
@pytest.mark.security
class TestInputLengthLimit:
    """Tests for max_input_length."""

    def test_long_input_rendered_as_text(self, parser: UbbParser, caplog: pytest.LogCaptureFixture) -> None:
        """Test that oversized input is escaped without tag processing."""
        with caplog.at_level(logging.WARNING, logger="ubb2html.engine"):
            result = parser.parse("[b]<x>[/b]\nhttp://www.example.nl", max_input_length=10)

        assert result == "[b]&lt;x&gt;[/b]<br />http://www.example.nl"
        assert "max_input_length" in caplog.text

    def test_input_at_limit_is_parsed(self, parser: UbbParser) -> None:
        """Test that input of exactly the limit is processed."""
        assert parser.parse("[b]x[/b]", max_input_length=8) == "<strong>x</strong>"


@pytest.mark.unit
@pytest.mark.security
class TestIterationLimit:
    """Tests for max_iterations."""

    def test_budget_shared_by_nested_scans(self, parser: UbbParser, caplog: pytest.LogCaptureFixture) -> None:
        """Test that nested scans spend the same budget."""
        with caplog.at_level(logging.WARNING, logger="ubb2html.context"):
            result = parser.parse("[b]a[/b][b]b[/b]", max_iterations=1)

        assert result == "<strong>a</strong>[b]b[/b]"
        assert caplog.text.count("Scan budget") == 1

    def test_budget_per_call(self, parser: UbbParser) -> None:
        """Test that every call starts with a fresh budget."""
        parser.parse("[b]a[/b]" * 10, max_iterations=5)

        assert parser.parse("[b]a[/b]", max_iterations=5) == "<strong>a</strong>"

    def test_many_unmatched_brackets(self, parser: UbbParser) -> None:
        """Test that unmatched brackets degrade to text."""
        source = "[x" * 1000

        assert parser.parse(source, max_iterations=100) == source
