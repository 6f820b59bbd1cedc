#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/ubb2html/api.py
"""Module-level convenience API backed by a shared default parser.

Handlers registered and converters installed through these functions apply
to every later module-level call. Applications that need separate
configurations should create their own :class:`~ubb2html.parser.UbbParser`.
"""

from __future__ import annotations

from typing import Any, Optional

from ubb2html.context import FileUrlConverter
from ubb2html.parser import OptionsArg, UbbParser
from ubb2html.registry import TagHandler

default_parser = UbbParser()


def parse(text: str, options: OptionsArg = None, **kwargs: Any) -> str:
    """Convert UBB code into HTML.

    Parameters
    ----------
    text : str
        UBB code
    options : ParseOptions or Mapping, optional
        Parse options; a mapping may use the ``class_<tag>`` keys
    **kwargs : Any
        Individual option overrides

    Returns
    -------
    str
        HTML

    Examples
    --------
        >>> parse("[b]test[/b]")
        '<strong>test</strong>'
        >>> parse("just [something] unknown")
        'just [something] unknown'

    """
    return default_parser.parse(text, options, **kwargs)


def strip_tags(text: str, options: OptionsArg = None, **kwargs: Any) -> str:
    """Convert UBB code into plain text.

    Examples
    --------
        >>> strip_tags("[b]Hello[/b] [i]world[/i]")
        'Hello world'

    """
    return default_parser.strip_tags(text, options, **kwargs)


def register_handler(tag_name: str, handler: TagHandler) -> None:
    """Register a handler for ``tag_name`` on the default parser."""
    default_parser.register_handler(tag_name, handler)


def set_file_url_converter(converter: Optional[FileUrlConverter]) -> None:
    """Install or clear (with None) the default parser's file URL converter."""
    default_parser.set_file_url_converter(converter)


__all__ = ["default_parser", "parse", "register_handler", "set_file_url_converter", "strip_tags"]
