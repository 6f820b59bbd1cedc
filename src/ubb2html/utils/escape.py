#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/escape.py
"""HTML, attribute and script escaping utilities.

This module provides the escape functions used by the scan engine and the tag
handlers to keep user text from breaking out of its HTML context.

"""

from __future__ import annotations

import html
import json
import re

_BACKSLASH = re.compile(r"\\")


def escape_html_entities(text: str) -> str:
    """Escape HTML special characters to entities.

    Used for every literal run of UBB text. This function uses Python's
    built-in html.escape() for standard HTML5 entity encoding.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with HTML entities

    Examples
    --------
        >>> escape_html_entities("<script>alert('XSS')</script>")
        '&lt;script&gt;alert(&#x27;XSS&#x27;)&lt;/script&gt;'

    Notes
    -----
    This function escapes the following characters:
    - & -> &amp;
    - < -> &lt;
    - > -> &gt;
    - " -> &quot;
    - ' -> &#x27; (HTML5 standard)

    """
    if not text:
        return text

    return html.escape(text, quote=True)


def normalize_html_text(text: str) -> str:
    """Escape text that may or may not already be entity-escaped.

    Auto-linked text arrives escaped while text from an explicit tag arrives
    raw. Unescaping first makes both end up escaped exactly once.

    Parameters
    ----------
    text : str
        Raw or escaped text

    Returns
    -------
    str
        Text escaped exactly once

    Examples
    --------
        >>> normalize_html_text("a &amp; b")
        'a &amp; b'
        >>> normalize_html_text("a & b")
        'a &amp; b'

    """
    if not text:
        return text

    return escape_html_entities(html.unescape(text))


def escape_attribute_value(value: str) -> str:
    r"""Escape a raw value for use inside a single-quoted HTML attribute.

    Backslashes are doubled, then quotes, angle brackets and ampersands are
    replaced by entities. A backslash in front of a quote does not stop an
    HTML parser from ending the attribute, so quotes are always entities.

    Examples
    --------
        >>> escape_attribute_value("it's")
        'it&#x27;s'
        >>> escape_attribute_value("a\\b")
        'a\\\\b'

    """
    if not value:
        return ""
    return html.escape(_BACKSLASH.sub(r"\\\\", value), quote=True)


def escape_js_string(value: str) -> str:
    """Encode a value as a double-quoted JavaScript string literal.

    The result is safe inside an inline ``<script>`` element: ``</`` is broken
    up so the literal can never close the element.

    Examples
    --------
        >>> escape_js_string('Say "hi"')
        '"Say \\\\"hi\\\\""'

    """
    return json.dumps(value).replace("</", "<\\/")


__all__ = [
    "escape_attribute_value",
    "escape_html_entities",
    "escape_js_string",
    "normalize_html_text",
]
