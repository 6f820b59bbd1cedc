#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/parser.py
"""UBB code parser.

A UbbParser owns a handler registry and an optional file URL converter. Both
are handed to the scan engine through a fresh RenderContext on every call, so
separate parsers never share configuration.

Examples
--------
    >>> from ubb2html import UbbParser
    >>> parser = UbbParser(file_url_converter=lambda ref: f"/files/{ref}" if ref.isdigit() else ref)
    >>> parser.parse("[url]12345[/url]")
    "<a href='/files/12345' class='ubb-url'>12345</a>"

"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Optional, Union

from ubb2html.context import FileUrlConverter, RenderContext
from ubb2html.engine import render_document
from ubb2html.exceptions import ValidationError
from ubb2html.handlers import build_default_registry
from ubb2html.options import ParseOptions, coerce_options
from ubb2html.registry import HandlerRegistry, TagHandler
from ubb2html.utils.decorators import debug_timer
from ubb2html.utils.html_sanitizer import html_to_text

logger = logging.getLogger(__name__)

OptionsArg = Union[ParseOptions, Mapping[str, Any], None]


class UbbParser:
    """Convert UBB code into sanitized HTML.

    Parameters
    ----------
    options : ParseOptions or Mapping, optional
        Default options for every call; per-call options replace them
    registry : HandlerRegistry, optional
        Tag handlers; a registry with the built-in handlers when omitted
    file_url_converter : callable, optional
        Rewrites [url] and [img] targets, i.e. numeric file ids into paths

    """

    def __init__(
        self,
        options: OptionsArg = None,
        registry: Optional[HandlerRegistry] = None,
        file_url_converter: Optional[FileUrlConverter] = None,
    ) -> None:
        self.options = coerce_options(options)
        self.registry = registry if registry is not None else build_default_registry()
        self._converter_lock = threading.Lock()
        self._file_url_converter: Optional[FileUrlConverter] = None
        self.set_file_url_converter(file_url_converter)

    @property
    def file_url_converter(self) -> Optional[FileUrlConverter]:
        return self._file_url_converter

    def set_file_url_converter(self, converter: Optional[FileUrlConverter]) -> None:
        """Install or clear (with None) the file URL converter.

        Raises
        ------
        ValidationError
            If ``converter`` is neither callable nor None

        """
        if converter is not None and not callable(converter):
            raise ValidationError(
                f"file_url_converter must be callable or None, got {type(converter).__name__}",
                parameter_name="file_url_converter",
                parameter_value=converter,
            )
        with self._converter_lock:
            self._file_url_converter = converter
        logger.debug("File URL converter %s", "installed" if converter is not None else "cleared")

    def register_handler(self, tag_name: str, handler: TagHandler) -> None:
        """Register a handler for ``tag_name``; an existing handler is replaced."""
        self.registry.register(tag_name, handler)

    def _resolve_options(self, options: OptionsArg, kwargs: dict[str, Any]) -> ParseOptions:
        if options is None:
            options = self.options
        return coerce_options(options, **kwargs)

    def _new_context(self, options: ParseOptions) -> RenderContext:
        return RenderContext(
            options=options,
            registry=self.registry,
            file_url_converter=self._file_url_converter,
        )

    def parse(self, text: str, options: OptionsArg = None, **kwargs: Any) -> str:
        """Convert UBB code into HTML.

        Parameters
        ----------
        text : str
            UBB code
        options : ParseOptions or Mapping, optional
            Options for this call; the parser's options when omitted
        **kwargs : Any
            Individual option overrides, i.e. ``convert_newlines=False`` or
            ``class_url="link"``

        Returns
        -------
        str
            HTML. Unknown and malformed tags are kept as text.

        Raises
        ------
        InvalidOptionsError
            If ``options`` has an unsupported type
        RenderError
            If a tag handler fails while ``strict_mode`` is enabled

        """
        if text is None:
            return ""
        resolved = self._resolve_options(options, kwargs)

        with debug_timer(logger, f"Parsing UBB code ({len(text)} characters)"):
            return render_document(str(text), self._new_context(resolved))

    def strip_tags(self, text: str, options: OptionsArg = None, **kwargs: Any) -> str:
        """Render UBB code and reduce the result to plain text.

        All markup is removed: UBB tags are rendered by their handlers and the
        resulting HTML is flattened, so ``[b]bold[/b]`` becomes ``bold`` and
        ``[br]`` a line break. Protected e-mail addresses keep their address.

        Returns
        -------
        str
            Plain text

        """
        if text is None:
            return ""
        resolved = self._resolve_options(options, kwargs).create_updated(protect_email=False, convert_newlines=True)

        with debug_timer(logger, f"Stripping UBB code ({len(text)} characters)"):
            return html_to_text(render_document(str(text), self._new_context(resolved)))


__all__ = ["UbbParser"]
