#  Copyright (c) 2025 Tom Villani, Ph.D.

# ubb2html/options/ubb.py
"""Configuration options for UBB code parsing.

This module defines the per-call configuration record that flows unchanged
through every recursive call of the scan engine and into every tag handler.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from ubb2html.constants import (
    CLASS_OPTION_PREFIX,
    DEFAULT_CONVERT_NEWLINES,
    DEFAULT_CSS_CLASS_PREFIX,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PROTECT_EMAIL,
    DEFAULT_STRICT_MODE,
    DEFAULT_SUPPRESS_BLOCK_NEWLINES,
)
from ubb2html.options.base import CloneFrozenMixin


def normalize_tag_name(name: str) -> str:
    """Return the registry spelling of a tag name (dashes become underscores)."""
    return name.replace("-", "_")


@dataclass(frozen=True)
class ParseOptions(CloneFrozenMixin):
    """Configuration options for UBB-to-HTML parsing.

    Instances are immutable. Handlers that need a variation for their
    children derive one with ``create_updated`` instead of mutating the
    caller's instance.

    Parameters
    ----------
    convert_newlines : bool, default True
        Whether newlines in literal text become ``<br />`` elements.
    protect_email : bool, default True
        Whether e-mail addresses are rendered as script-protected anchors
        instead of plain ``mailto:`` links.
    class_overrides : Mapping[str, str], default empty
        CSS class(es) per tag name, replacing the built-in ``ubb-<tag>``
        class. Use underscores for dashes (``img_left`` for [img-left]).
    suppress_block_newlines : bool, default True
        Whether a single newline directly after a block-level tag
        (table, list, heading, ...) is dropped instead of becoming ``<br />``.
    max_depth : int, default 180
        Maximum tag nesting depth; deeper tags are emitted as literal text.
        [br] and [hr] render the rest of the text as their content, so every
        one of them counts as a level.
    max_input_length : int, default 1000000
        Inputs longer than this are escaped as literal text without tag
        processing.
    max_iterations : int, default 200000
        Scan step budget for one top-level call; once spent, the remaining
        text is escaped as literal text.
    strict_mode : bool, default False
        Whether an exception raised by a tag handler propagates as RenderError.
        When False, the failing tag is logged and rendered as literal text.
    extra : Mapping[str, Any], default empty
        Free-form options for custom tag handlers.

    Examples
    --------
    Basic usage:
        >>> from ubb2html import parse
        >>> from ubb2html.options import ParseOptions
        >>> parse("[code]x = 1[/code]", ParseOptions(class_overrides={"code": "prettify linenums"}))
        "<pre class='prettify linenums'>x = 1</pre>"

    Legacy mapping:
        >>> options = ParseOptions.from_mapping({"convert_newlines": False, "class_url": "link"})
        >>> options.css_class("url")
        'link'

    """

    convert_newlines: bool = field(
        default=DEFAULT_CONVERT_NEWLINES,
        metadata={"help": "Convert newlines in literal text into <br /> elements", "importance": "core"},
    )
    protect_email: bool = field(
        default=DEFAULT_PROTECT_EMAIL,
        metadata={"help": "Protect e-mail addresses from scraping with inline JavaScript", "importance": "core"},
    )
    class_overrides: Mapping[str, str] = field(
        default_factory=dict,
        metadata={"help": "CSS class(es) per tag, replacing the built-in ubb-<tag> class", "importance": "core"},
    )
    suppress_block_newlines: bool = field(
        default=DEFAULT_SUPPRESS_BLOCK_NEWLINES,
        metadata={"help": "Drop a single newline directly after a block-level tag", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={
            "help": "Maximum tag nesting depth; every [br] or [hr] adds a level for the text after it",
            "type": int,
            "importance": "security",
        },
    )
    max_input_length: int = field(
        default=DEFAULT_MAX_INPUT_LENGTH,
        metadata={"help": "Maximum input length scanned for tags", "type": int, "importance": "security"},
    )
    max_iterations: int = field(
        default=DEFAULT_MAX_ITERATIONS,
        metadata={"help": "Maximum scan steps per top-level call", "type": int, "importance": "security"},
    )
    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={"help": "Raise RenderError when a tag handler fails", "importance": "advanced"},
    )
    extra: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Free-form options for custom tag handlers", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate limits and freeze the mapping fields.

        Raises
        ------
        ValueError
            If any limit is not positive.

        """
        for name in ("max_depth", "max_input_length", "max_iterations"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        overrides = {normalize_tag_name(str(tag)): str(css).strip() for tag, css in self.class_overrides.items()}
        object.__setattr__(self, "class_overrides", MappingProxyType(overrides))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        return hash(
            (
                self.convert_newlines,
                self.protect_email,
                tuple(sorted(self.class_overrides.items())),
                self.suppress_block_newlines,
                self.max_depth,
                self.max_input_length,
                self.max_iterations,
                self.strict_mode,
            )
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ParseOptions:
        """Build options from a legacy option mapping.

        Keys matching a field name set that field, ``class_<tag>`` keys become
        class overrides and every other key is kept in ``extra``.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Option mapping, i.e. ``{"protect_email": False, "class_img_left": "left"}``

        Returns
        -------
        ParseOptions
            The equivalent options instance

        """
        field_names = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        overrides: dict[str, str] = {}
        extra: dict[str, Any] = {}

        for raw_key, value in mapping.items():
            key = str(raw_key)
            if key in field_names:
                values[key] = value
            elif key.startswith(CLASS_OPTION_PREFIX):
                overrides[key[len(CLASS_OPTION_PREFIX) :]] = "" if value is None else str(value)
            else:
                extra[key] = value

        if overrides:
            values["class_overrides"] = {**dict(values.get("class_overrides", {})), **overrides}
        if extra:
            values["extra"] = {**dict(values.get("extra", {})), **extra}

        return cls(**values)

    def has_class_override(self, tag: str) -> bool:
        """Return True when a CSS class override is configured for ``tag``."""
        return normalize_tag_name(tag) in self.class_overrides

    def css_class(self, tag: str) -> str:
        """Return the CSS class(es) for ``tag``.

        Parameters
        ----------
        tag : str
            Tag name, with dashes or underscores

        Returns
        -------
        str
            The configured override, or ``ubb-<tag>`` with underscores as dashes

        """
        key = normalize_tag_name(tag)
        if key in self.class_overrides:
            return self.class_overrides[key]
        return DEFAULT_CSS_CLASS_PREFIX + key.replace("_", "-")
