#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/handlers/__init__.py
"""Built-in UBB tag handlers.

Handlers are grouped by kind:

- formatting: inline styles, headings, alignment, code, quotes and raw CSS
- structure: lists, tables and CSV data
- links: URLs and (protected) e-mail addresses
- media: images, iframes and video embeds

"""

from __future__ import annotations

from ubb2html.handlers.formatting import FORMATTING_HANDLERS, make_wrapper_handler
from ubb2html.handlers.links import LINK_HANDLERS
from ubb2html.handlers.media import MEDIA_HANDLERS
from ubb2html.handlers.structure import STRUCTURE_HANDLERS
from ubb2html.registry import HandlerRegistry, TagHandler

BUILTIN_HANDLERS: dict[str, TagHandler] = {
    **FORMATTING_HANDLERS,
    **STRUCTURE_HANDLERS,
    **LINK_HANDLERS,
    **MEDIA_HANDLERS,
}


def build_default_registry() -> HandlerRegistry:
    """Create a registry holding every built-in tag handler.

    Returns
    -------
    HandlerRegistry
        A new registry; changes to it do not affect other registries

    """
    return HandlerRegistry(BUILTIN_HANDLERS)


__all__ = [
    "BUILTIN_HANDLERS",
    "build_default_registry",
    "make_wrapper_handler",
]
