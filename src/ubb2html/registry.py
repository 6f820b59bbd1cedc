#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/registry.py
"""Tag handler registry.

This module maps UBB tag names to render functions. A handler is any callable
with the signature::

    handler(inner_text: str, attributes: dict[str, str], context: RenderContext) -> str | None

where ``context.options`` is the ParseOptions of the call and
``context.parse(text)`` recursively renders nested UBB code.

Tag names are case-sensitive; dashes are normalized to underscores, so
``[img-left]`` and ``[img_left]`` resolve to the same handler.

Registration is meant to happen at startup. It is serialized by a lock and
replaces the internal mapping as a whole, so concurrent ``parse`` calls
always read a consistent mapping without locking.

Examples
--------
Add a custom tag to a parser:

    >>> from ubb2html import UbbParser
    >>> parser = UbbParser()
    >>> parser.register_handler("kbd", lambda text, attrs, ctx: f"<kbd>{ctx.parse(text)}</kbd>")
    >>> parser.parse("Press [kbd]Ctrl[/kbd]")
    'Press <kbd>Ctrl</kbd>'

"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Callable, Optional

from ubb2html.exceptions import RegistrationError
from ubb2html.options.ubb import normalize_tag_name

if TYPE_CHECKING:
    from ubb2html.context import RenderContext

logger = logging.getLogger(__name__)

TagHandler = Callable[[str, dict[str, str], "RenderContext"], Optional[str]]

_VALID_TAG_NAME = re.compile(r"[\w-]+")


class HandlerRegistry:
    """Mapping from tag name to tag handler.

    Parameters
    ----------
    handlers : Mapping[str, TagHandler], optional
        Initial handlers

    Examples
    --------
        >>> registry = HandlerRegistry()
        >>> registry.register("b", lambda text, attrs, ctx: f"<strong>{ctx.parse(text)}</strong>")
        >>> registry.has("b")
        True

    """

    def __init__(self, handlers: Optional[Mapping[str, TagHandler]] = None) -> None:
        self._lock = threading.Lock()
        self._handlers: Mapping[str, TagHandler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, tag_name: str, handler: TagHandler) -> None:
        """Register a handler for a tag.

        Parameters
        ----------
        tag_name : str
            Tag name as typed in UBB code (``img-left`` and ``img_left`` are
            the same tag)
        handler : TagHandler
            Render function

        Raises
        ------
        RegistrationError
            If the tag name is not made of word characters and dashes, or the
            handler is not callable

        Notes
        -----
        A later registration for the same name replaces the earlier one.

        """
        if not isinstance(tag_name, str) or not _VALID_TAG_NAME.fullmatch(tag_name):
            raise RegistrationError(str(tag_name), "tag names may only contain word characters and dashes")
        if not callable(handler):
            raise RegistrationError(tag_name, f"handler must be callable, got {type(handler).__name__}")

        key = normalize_tag_name(tag_name)
        with self._lock:
            if key in self._handlers:
                logger.debug(f"Tag handler '{key}' already registered, overwriting")
            updated = dict(self._handlers)
            updated[key] = handler
            self._handlers = updated
        logger.debug(f"Registered tag handler: {key}")

    def unregister(self, tag_name: str) -> bool:
        """Remove the handler for a tag.

        Returns
        -------
        bool
            True if a handler was removed, False if none was registered

        """
        key = normalize_tag_name(tag_name)
        with self._lock:
            if key not in self._handlers:
                return False
            updated = dict(self._handlers)
            del updated[key]
            self._handlers = updated
        logger.debug(f"Unregistered tag handler: {key}")
        return True

    def get(self, tag_name: str) -> Optional[TagHandler]:
        """Return the handler for a tag, or None when the tag is unknown."""
        return self._handlers.get(normalize_tag_name(tag_name))

    def has(self, tag_name: str) -> bool:
        return normalize_tag_name(tag_name) in self._handlers

    def names(self) -> list[str]:
        """Return the registered tag names, sorted."""
        return sorted(self._handlers)

    def copy(self) -> HandlerRegistry:
        """Return an independent registry with the same handlers."""
        return HandlerRegistry(self._handlers)

    def __contains__(self, tag_name: object) -> bool:
        return isinstance(tag_name, str) and self.has(tag_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["HandlerRegistry", "TagHandler"]
