#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/engine.py
"""Recursive scan engine converting UBB code into HTML.

The engine makes a single left-to-right pass over its input. Text outside
tags is HTML-escaped, optionally newline-converted and auto-linked. Each
opening tag with a registered handler is matched with the first literal
closing tag of the same spelling; the text in between is handed to the
handler, which may call back into :func:`scan` for nested markup. There is no
explicit syntax tree: the recursion of handlers into the engine is the tree.

Matching is deliberately not nesting-aware::

    [b][i]test[/b][/i]  ->  <strong><em>test</em></strong>[/i]

"""

from __future__ import annotations

import html
import logging
import re
from typing import TYPE_CHECKING, Callable

from ubb2html.attributes import decode_attributes
from ubb2html.constants import (
    ATTRIBUTE_STRING_PATTERN,
    AUTOLINK_PATTERN,
    AUTOLINK_TRAILING_PATTERN,
    BLOCK_LEVEL_TAGS,
    LITERAL_RUN_PATTERN,
    TAG_NAME_PATTERN,
)
from ubb2html.exceptions import RenderError
from ubb2html.options.ubb import normalize_tag_name
from ubb2html.utils.escape import escape_html_entities
from ubb2html.utils.validators import is_email

if TYPE_CHECKING:
    from ubb2html.context import RenderContext
    from ubb2html.registry import TagHandler

logger = logging.getLogger(__name__)


def render_document(text: str, context: RenderContext) -> str:
    """Render a complete top-level document.

    Line endings are normalized before scanning. Inputs longer than
    ``max_input_length`` are escaped as literal text without looking for tags.

    Parameters
    ----------
    text : str
        UBB code
    context : RenderContext
        Top-level render context

    Returns
    -------
    str
        HTML

    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    max_length = context.options.max_input_length
    if len(text) > max_length:
        logger.warning(f"Input of {len(text)} characters exceeds max_input_length={max_length}; rendering as text")
        return render_literal(text, context, autolink=False)

    return scan(text, context)


def scan(text: str, context: RenderContext) -> str:
    """Convert UBB code into HTML at the depth of ``context``.

    Parameters
    ----------
    text : str
        UBB code
    context : RenderContext
        Render state; tags found in ``text`` are rendered one level deeper

    Returns
    -------
    str
        HTML

    """
    options = context.options
    length = len(text)
    pos = 0
    output: list[str] = []

    while pos < length:
        if not context.budget.spend():
            output.append(render_literal(text[pos:], context, autolink=False))
            break

        literal_match = LITERAL_RUN_PATTERN.match(text, pos)
        if literal_match.end() > pos:
            output.append(render_literal(literal_match.group(0), context))
        pos = literal_match.end()

        if pos >= length:
            break

        # text[pos] is "["
        tag_start = pos
        pos += 1
        name_match = TAG_NAME_PATTERN.match(text, pos)
        tag_name = name_match.group(0)
        pos = name_match.end()

        handler = context.registry.get(tag_name) if tag_name else None
        if pos >= length or handler is None:
            output.append("[" + tag_name)
            continue

        if context.depth_exceeded:
            context.budget.note_depth_exceeded(tag_name, options.max_depth)
            output.append("[" + tag_name)
            continue

        attrib_match = ATTRIBUTE_STRING_PATTERN.match(text, pos)
        attributes = decode_attributes(attrib_match.group(0))
        pos = attrib_match.end()
        if pos < length:
            pos += 1  # "]"

        closing_tag = f"[/{tag_name}]"
        closing_pos = text.find(closing_tag, pos)
        if closing_pos < 0:
            inner_text = text[pos:]
            pos = length
        else:
            inner_text = text[pos:closing_pos]
            pos = closing_pos + len(closing_tag)

        output.append(
            _call_handler(
                tag_name,
                handler,
                inner_text,
                attributes,
                context.descend(),
                fallback=lambda source=text[tag_start:pos]: render_literal(source, context, autolink=False),
            )
        )

        if options.suppress_block_newlines and normalize_tag_name(tag_name) in BLOCK_LEVEL_TAGS:
            if text.startswith("\n", pos):
                pos += 1

    return "".join(output)


def render_literal(text: str, context: RenderContext, autolink: bool = True) -> str:
    """Render text outside of tags.

    The text is HTML-escaped first, then newlines become ``<br />`` (when
    enabled), and finally bare URLs and e-mail addresses are auto-linked
    through the ``url`` and ``email`` handlers.

    Parameters
    ----------
    text : str
        Literal text (contains no ``[`` when called by the scanner)
    context : RenderContext
        Render state
    autolink : bool, default True
        Whether to auto-link URLs and e-mail addresses

    Returns
    -------
    str
        HTML

    """
    result = escape_html_entities(text)

    if context.options.convert_newlines:
        result = result.replace("\n", "<br />")

    if autolink:
        result = AUTOLINK_PATTERN.sub(lambda match: _render_autolink(match, context), result)

    return result


def _render_autolink(match: re.Match[str], context: RenderContext) -> str:
    """Render one auto-link match, keeping trailing punctuation outside the link.

    Address-like text that is not a valid e-mail address stays plain text.
    """
    link_text = match.group(0)
    suffix = ""

    trailing = AUTOLINK_TRAILING_PATTERN.search(link_text)
    if trailing:
        suffix = trailing.group(0)
        link_text = link_text[: trailing.start()]

    tag_name = "email" if match.group("email") is not None else "url"
    handler = context.registry.get(tag_name)
    if not link_text or handler is None:
        return match.group(0)

    # Only explicit [email] tags report invalid addresses
    if tag_name == "email" and not is_email(html.unescape(link_text)):
        return match.group(0)

    return _call_handler(tag_name, handler, link_text, {}, context, fallback=lambda: match.group(0)) + suffix


def _call_handler(
    tag_name: str,
    handler: TagHandler,
    inner_text: str,
    attributes: dict[str, str],
    context: RenderContext,
    fallback: Callable[[], str],
) -> str:
    """Invoke a handler, coercing its result to a string.

    Without strict mode a failing handler is logged and its tag is rendered
    as the text returned by ``fallback``.
    """
    try:
        result = handler(inner_text, attributes, context)
    except RenderError:
        raise
    except Exception as e:
        if context.options.strict_mode:
            raise RenderError(tag_name, original_error=e) from e
        logger.warning(f"Handler for [{tag_name}] failed, rendering tag as text: {e}")
        return fallback()

    return result if isinstance(result, str) else ""


__all__ = ["render_document", "render_literal", "scan"]
