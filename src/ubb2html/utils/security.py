#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/security.py
"""Security utilities for link and embed targets.

UBB handlers place user supplied text into ``href`` and ``src`` attributes.
The helpers in this module detect URL schemes that would execute script
when such an attribute is followed or loaded.
"""

from __future__ import annotations

from urllib.parse import urlparse

from ubb2html.constants import DANGEROUS_SCHEMES

_DANGEROUS_DATA_TYPES = tuple(sorted(scheme for scheme in DANGEROUS_SCHEMES if scheme.startswith("data:")))


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL is relative, False otherwise

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("/files/download/12345")
    True
    >>> is_relative_url("https://example.com")
    False
    >>> is_relative_url("javascript:alert(1)")
    False

    """
    if not url or not url.strip():
        return True  # Empty URLs are considered relative

    return url.strip().startswith(("#", "/", "./", "../", "?"))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks or malicious code execution.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous(" JaVaScRiPt:alert(1)")
    True

    """
    if not url or not url.strip():
        return False

    # Browsers ignore embedded whitespace and control characters in schemes
    url_lower = "".join(ch for ch in url.lower().strip() if ch.isprintable() and not ch.isspace())

    if is_relative_url(url_lower):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        parsed = urlparse(url_lower)
    except ValueError:
        # If URL parsing fails, consider it potentially dangerous
        return True

    if parsed.scheme in ("javascript", "vbscript", "about"):
        return True

    if parsed.scheme == "data" and any(danger in url_lower for danger in _DANGEROUS_DATA_TYPES):
        return True

    return False


__all__ = ["is_relative_url", "is_url_scheme_dangerous"]
