#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/context.py
"""Per-call render state passed to every tag handler.

A RenderContext bundles everything a handler may need besides its inner text
and attributes: the ParseOptions of the call, the handler registry, the file
URL converter and the current nesting depth. Nothing here is process-wide;
two parsers with different converters can render concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, Optional

from ubb2html.options.ubb import ParseOptions

if TYPE_CHECKING:
    from ubb2html.registry import HandlerRegistry

logger = logging.getLogger(__name__)

FileUrlConverter = Callable[[str], str]


class ScanBudget:
    """Scan step counter shared by all recursive calls of one ``parse``."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.used = 0
        self.exhausted = False
        self.depth_warned = False

    def spend(self) -> bool:
        """Consume one scan step; return False once the budget is spent."""
        if self.used >= self.limit:
            if not self.exhausted:
                logger.warning(f"Scan budget of {self.limit} steps exhausted; emitting remaining text literally")
                self.exhausted = True
            return False
        self.used += 1
        return True

    def note_depth_exceeded(self, tag_name: str, max_depth: int) -> None:
        """Log the first tag that was not rendered because of the depth limit."""
        if not self.depth_warned:
            logger.warning(f"Maximum tag depth of {max_depth} reached at [{tag_name}]; emitting nested tags literally")
            self.depth_warned = True


@dataclass(frozen=True)
class RenderContext:
    """Render state for one nesting level.

    Parameters
    ----------
    options : ParseOptions
        Options of the top-level call
    registry : HandlerRegistry
        Handlers used to resolve tags
    file_url_converter : callable, optional
        Rewrites bare identifiers in [url] and [img] into full URLs
    depth : int, default 0
        Tag nesting depth of the text rendered with this context
    budget : ScanBudget, optional
        Shared scan step budget; created from ``options.max_iterations``
        when omitted

    """

    options: ParseOptions
    registry: HandlerRegistry
    file_url_converter: Optional[FileUrlConverter] = None
    depth: int = 0
    budget: ScanBudget = field(default=None, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.budget is None:
            object.__setattr__(self, "budget", ScanBudget(self.options.max_iterations))

    @property
    def depth_exceeded(self) -> bool:
        return self.depth >= self.options.max_depth

    def descend(self) -> RenderContext:
        """Return the context for the inner text of a tag at this level."""
        return replace(self, depth=self.depth + 1)

    def with_options(self, options: ParseOptions) -> RenderContext:
        """Return a copy using narrowed options for a handler's children."""
        return replace(self, options=options)

    def parse(self, text: str) -> str:
        """Render nested UBB code at this context's depth."""
        from ubb2html.engine import scan

        return scan(text, self)

    def convert_file_url(self, url: str) -> str:
        """Apply the file URL converter, if any, to ``url``."""
        if self.file_url_converter is None:
            return url
        converted = self.file_url_converter(url)
        return url if converted is None else str(converted)

