#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api_functions.py
"""Integration tests for the public API: parse, strip_tags, register_handler and set_file_url_converter.

The module-level functions share one default parser. Tests that change it use
the ``restore_default_parser`` fixture so registrations and converters never
leak between tests.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import ubb2html
from ubb2html import (
    InvalidOptionsError,
    ParseOptions,
    UbbParser,
    ValidationError,
    parse,
    register_handler,
    set_file_url_converter,
    strip_tags,
)


def _file_path(reference: str) -> str:
    return f"/files/download/{reference}" if reference.isdigit() else reference


@pytest.mark.integration
class TestParse:
    """Tests for the module-level parse function."""

    def test_basic_document(self) -> None:
        """Test a small forum post."""
        source = "[h2]News[/h2]\nRead [b]this[/b] at www.example.nl.\n[list]\none\ntwo\n[/list]\nBye"

        assert parse(source) == (
            "<h2>News</h2>Read <strong>this</strong> at "
            "<a href='http://www.example.nl' class='ubb-url' target='_blank'>www.example.nl</a>.<br />"
            "<ol class='ubb-list'><li>one</li><li>two</li></ol>Bye"
        )

    def test_options_instance(self) -> None:
        """Test passing a ParseOptions instance."""
        options = ParseOptions(convert_newlines=False, class_overrides={"url": "link"})

        assert parse("a\n[url]/x[/url]", options) == "a\n<a href='/x' class='link'>/x</a>"

    def test_options_mapping(self) -> None:
        """Test passing a legacy option mapping."""
        assert parse("a\n[url]/x[/url]", {"convert_newlines": False, "class_url": "link"}) == (
            "a\n<a href='/x' class='link'>/x</a>"
        )

    def test_invalid_options(self) -> None:
        """Test that unsupported options are rejected."""
        with pytest.raises(InvalidOptionsError):
            parse("x", 42)  # type: ignore[arg-type]

    def test_none_text(self) -> None:
        """Test that None renders as an empty string."""
        assert parse(None) == ""  # type: ignore[arg-type]

    def test_package_exports(self) -> None:
        """Test the names exported at package level."""
        assert ubb2html.__version__
        assert ubb2html.parse is parse
        assert isinstance(ubb2html.default_parser, UbbParser)


@pytest.mark.integration
class TestRegisterHandler:
    """Tests for custom tag registration."""

    def test_custom_tag(self, restore_default_parser: UbbParser) -> None:
        """Test registering a new tag on the default parser."""
        register_handler("spoiler", lambda text, attrs, ctx: f"<details>{ctx.parse(text)}</details>")

        assert parse("[spoiler][b]It was him[/b][/spoiler]") == "<details><strong>It was him</strong></details>"

    def test_override_builtin(self, restore_default_parser: UbbParser) -> None:
        """Test that a later registration replaces a built-in."""
        register_handler("b", lambda text, attrs, ctx: f"<b>{ctx.parse(text)}</b>")

        assert parse("[b]x[/b]") == "<b>x</b>"

    def test_registrations_restored(self) -> None:
        """Test that earlier tests did not leak registrations."""
        assert parse("[spoiler]x[/spoiler]") == "[spoiler]x[/spoiler]"
        assert parse("[b]x[/b]") == "<strong>x</strong>"

    def test_custom_options_reach_handler(self, restore_default_parser: UbbParser) -> None:
        """Test that unknown option keys are available to custom handlers."""
        def render_smiley(text, attrs, ctx):
            return f"<img src='{ctx.options.extra['smiley_path']}/{text}.png' />"

        register_handler("smiley", render_smiley)

        assert parse("[smiley]grin[/smiley]", smiley_path="/img") == "<img src='/img/grin.png' />"


@pytest.mark.integration
class TestFileUrlConverter:
    """Tests for the file URL converter hook."""

    def test_converter_installed_and_cleared(self, restore_default_parser: UbbParser) -> None:
        """Test that the converter applies until it is cleared."""
        set_file_url_converter(_file_path)

        assert parse("[url]12345[/url]") == "<a href='/files/download/12345' class='ubb-url'>12345</a>"
        assert parse("[img]42[/img]") == "<img src='/files/download/42' alt='' class='ubb-img' />"
        assert parse("[url]/about[/url]") == "<a href='/about' class='ubb-url'>/about</a>"

        set_file_url_converter(None)

        assert parse("[url]12345[/url]") == "<a href='12345' class='ubb-url'>12345</a>"

    def test_converter_output_is_sanitized(self, restore_default_parser: UbbParser) -> None:
        """Test that converted URLs still pass the scheme check."""
        set_file_url_converter(lambda reference: "javascript:alert(1)")

        assert parse("[url]1[/url]") == "<a href='' class='ubb-url'>1</a>"

    def test_parsers_do_not_share_converters(self) -> None:
        """Test that converters are per parser."""
        with_converter = UbbParser(file_url_converter=_file_path)
        without_converter = UbbParser()

        assert "/files/download/7" in with_converter.parse("[url]7[/url]")
        assert "/files/download/7" not in without_converter.parse("[url]7[/url]")

    def test_invalid_converter(self) -> None:
        """Test that a converter must be callable."""
        with pytest.raises(ValidationError):
            UbbParser().set_file_url_converter("not callable")  # type: ignore[arg-type]


@pytest.mark.integration
class TestStripTags:
    """Tests for plain-text rendering."""

    def test_inline_markup(self) -> None:
        """Test that formatting is removed."""
        assert strip_tags("[b]Hello[/b] [i]world[/i]") == "Hello world"

    def test_unknown_tags_kept(self) -> None:
        """Test that unknown tags stay as typed."""
        assert strip_tags("just [something] unknown") == "just [something] unknown"

    def test_line_structure(self) -> None:
        """Test that line breaks and list items become lines."""
        assert strip_tags("line1\nline2") == "line1\nline2"
        assert strip_tags("[list]\none\ntwo\n[/list]") == "one\ntwo"

    def test_comments_dropped(self) -> None:
        """Test that comments stay hidden."""
        assert strip_tags("[comment]secret[/comment]visible") == "visible"

    def test_email_address_kept(self) -> None:
        """Test that protected addresses are shown in plain text."""
        assert strip_tags("Mail [email]info@mojura.nl[/email]") == "Mail info@mojura.nl"

    def test_links_keep_text(self) -> None:
        """Test that links keep their display text."""
        assert strip_tags("[url=http://www.mojura.nl]Mojura[/url]") == "Mojura"

    def test_literal_html_is_text(self) -> None:
        """Test that escaped HTML comes back as the typed text."""
        assert strip_tags("<b>not markup</b>") == "<b>not markup</b>"


@pytest.mark.integration
def test_concurrent_parsing_with_registration() -> None:
    """Test parsing from many threads while handlers are registered."""
    parser = UbbParser()

    def work(index: int) -> str:
        parser.register_handler(f"tag{index}", lambda text, attrs, ctx: text)
        return parser.parse("[b]x[/b] [i]y[/i]")

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(work, range(64)))

    assert set(results) == {"<strong>x</strong> <em>y</em>"}
    assert all(f"tag{index}" in parser.registry for index in range(64))
