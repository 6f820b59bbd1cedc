#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/html_sanitizer.py
"""HTML safety and text extraction helpers.

This module contains the URL checks applied to handler-produced ``href`` and
``src`` attributes, and the HTML-to-text conversion used to build plain-text
previews of rendered UBB code.
"""

from __future__ import annotations

import html
import logging
import re

from bs4 import BeautifulSoup

from ubb2html.utils.security import is_url_scheme_dangerous

logger = logging.getLogger(__name__)

# Elements that end a line when rendered output is flattened to text
_TEXT_BLOCK_ELEMENTS = ["p", "div", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre", "table"]

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("javascript:alert('xss')")
    False

    """
    if not url or not url.strip():
        return True

    # Values may arrive entity-escaped from auto-linked text
    return not is_url_scheme_dangerous(html.unescape(url))


def sanitize_url(url: str) -> str:
    """Sanitize a URL by removing dangerous schemes.

    Parameters
    ----------
    url : str
        URL to sanitize

    Returns
    -------
    str
        Sanitized URL, or empty string if the URL is dangerous

    Examples
    --------
    >>> sanitize_url("https://example.com")
    'https://example.com'

    >>> sanitize_url("javascript:alert('xss')")
    ''

    """
    if not is_url_safe(url):
        logger.warning("Dropping URL with dangerous scheme: %s", url[:50])
        return ""
    return url


def html_to_text(content: str) -> str:
    """Flatten rendered HTML into plain text.

    ``<br>`` and ``<hr>`` become newlines, block elements end their line,
    scripts are removed and entities are decoded.

    Parameters
    ----------
    content : str
        HTML content

    Returns
    -------
    str
        Plain text

    Examples
    --------
    >>> html_to_text("<p>Hello <strong>world</strong>!</p>")
    'Hello world!'

    >>> html_to_text("a<br />b")
    'a\\nb'

    """
    if not content:
        return ""

    soup = BeautifulSoup(content, "html.parser")

    for script in soup.find_all(["script", "style"]):
        script.decompose()

    for element in soup.find_all(["br", "hr"]):
        element.replace_with("\n")

    for element in soup.find_all(_TEXT_BLOCK_ELEMENTS):
        element.append("\n")

    text = soup.get_text()
    return _EXCESS_NEWLINES.sub("\n\n", text).strip()


__all__ = ["html_to_text", "is_url_safe", "sanitize_url"]
