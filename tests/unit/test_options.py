#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for ParseOptions and options coercion."""

from dataclasses import FrozenInstanceError

import pytest

from ubb2html.constants import DEFAULT_MAX_DEPTH, DEFAULT_MAX_INPUT_LENGTH, DEFAULT_MAX_ITERATIONS
from ubb2html.exceptions import InvalidOptionsError
from ubb2html.options import ParseOptions, coerce_options, normalize_tag_name


@pytest.mark.unit
class TestParseOptions:
    """Tests for the ParseOptions dataclass."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = ParseOptions()

        assert options.convert_newlines is True
        assert options.protect_email is True
        assert options.suppress_block_newlines is True
        assert options.strict_mode is False
        assert dict(options.class_overrides) == {}
        assert options.max_depth == DEFAULT_MAX_DEPTH
        assert options.max_input_length == DEFAULT_MAX_INPUT_LENGTH
        assert options.max_iterations == DEFAULT_MAX_ITERATIONS

    def test_frozen(self) -> None:
        """Test that options cannot be modified in place."""
        options = ParseOptions()

        with pytest.raises(FrozenInstanceError):
            options.convert_newlines = False  # type: ignore[misc]

    def test_class_overrides_are_read_only(self) -> None:
        """Test that the caller's mapping is copied and frozen."""
        overrides = {"url": "link"}
        options = ParseOptions(class_overrides=overrides)
        overrides["url"] = "changed"

        assert options.css_class("url") == "link"
        with pytest.raises(TypeError):
            options.class_overrides["url"] = "other"  # type: ignore[index]

    def test_create_updated(self) -> None:
        """Test deriving a modified copy."""
        options = ParseOptions(class_overrides={"url": "link"})
        updated = options.create_updated(convert_newlines=False)

        assert updated.convert_newlines is False
        assert updated.css_class("url") == "link"
        assert options.convert_newlines is True

    @pytest.mark.parametrize("field_name", ["max_depth", "max_input_length", "max_iterations"])
    def test_limits_must_be_positive(self, field_name: str) -> None:
        """Test validation of resource limits."""
        with pytest.raises(ValueError, match=field_name):
            ParseOptions(**{field_name: 0})

    def test_equal_options_hash_equal(self) -> None:
        """Test that options can be used as dictionary keys."""
        first = ParseOptions(class_overrides={"url": "link"})
        second = ParseOptions(class_overrides={"url": "link"})

        assert first == second
        assert hash(first) == hash(second)


@pytest.mark.unit
class TestCssClass:
    """Tests for CSS class resolution."""

    def test_default_class(self) -> None:
        """Test the built-in ubb-<tag> classes."""
        options = ParseOptions()

        assert options.css_class("url") == "ubb-url"
        assert options.css_class("img_left") == "ubb-img-left"
        assert options.css_class("img-left") == "ubb-img-left"

    def test_override(self) -> None:
        """Test configured classes, including an empty one."""
        options = ParseOptions(class_overrides={"img-left": " left ", "email": ""})

        assert options.css_class("img_left") == "left"
        assert options.css_class("email") == ""
        assert options.has_class_override("img_left")
        assert not options.has_class_override("url")

    def test_normalize_tag_name(self) -> None:
        """Test dash normalization."""
        assert normalize_tag_name("img-left") == "img_left"
        assert normalize_tag_name("b") == "b"


@pytest.mark.unit
class TestFromMapping:
    """Tests for ParseOptions.from_mapping."""

    def test_fields_and_class_keys(self) -> None:
        """Test the legacy option mapping shape."""
        options = ParseOptions.from_mapping({"convert_newlines": False, "class_url": "link", "class_img_left": "left"})

        assert options.convert_newlines is False
        assert options.css_class("url") == "link"
        assert options.css_class("img-left") == "left"

    def test_unknown_keys_go_to_extra(self) -> None:
        """Test that keys for custom handlers are kept."""
        options = ParseOptions.from_mapping({"smiley_path": "/img/smileys"})

        assert options.extra["smiley_path"] == "/img/smileys"

    def test_class_keys_merge_with_overrides(self) -> None:
        """Test that class_<tag> keys add to an explicit override mapping."""
        options = ParseOptions.from_mapping({"class_overrides": {"url": "link"}, "class_email": "mail"})

        assert options.css_class("url") == "link"
        assert options.css_class("email") == "mail"

    def test_none_class_value(self) -> None:
        """Test that a None class becomes an empty class."""
        assert ParseOptions.from_mapping({"class_iframe": None}).css_class("iframe") == ""


@pytest.mark.unit
class TestCoerceOptions:
    """Tests for coerce_options."""

    def test_none_gives_defaults(self) -> None:
        """Test that None resolves to default options."""
        assert coerce_options(None) == ParseOptions()

    def test_instance_passes_through(self) -> None:
        """Test that a ParseOptions instance is used as is."""
        options = ParseOptions(protect_email=False)

        assert coerce_options(options) is options

    def test_mapping(self) -> None:
        """Test conversion of a legacy mapping."""
        options = coerce_options({"protect_email": False, "class_table": "grid"})

        assert options.protect_email is False
        assert options.css_class("table") == "grid"

    def test_kwargs_override(self) -> None:
        """Test keyword overrides on top of an instance."""
        base = ParseOptions(class_overrides={"url": "link"}, convert_newlines=False)
        options = coerce_options(base, protect_email=False, class_email="mail")

        assert options.convert_newlines is False
        assert options.protect_email is False
        assert options.css_class("url") == "link"
        assert options.css_class("email") == "mail"
        assert base.protect_email is True

    def test_invalid_type(self) -> None:
        """Test that unsupported option types are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            coerce_options(["convert_newlines"])  # type: ignore[arg-type]

        assert exc_info.value.expected_type is ParseOptions
        assert exc_info.value.received_type is list
        assert exc_info.value.parameter_name == "options"
