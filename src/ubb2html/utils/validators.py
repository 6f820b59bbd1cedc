#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/validators.py
"""Regular-expression based predicates used by the tag handlers."""

from __future__ import annotations

import re
from typing import Any

from ubb2html.constants import EMAIL_PATTERN, URL_PATTERN


def matches_regexp(value: Any, regexp: re.Pattern[str] | str) -> bool:
    """Return True if the string form of ``value`` matches ``regexp``.

    Parameters
    ----------
    value : Any
        Value to test; ``None`` is treated as the empty string
    regexp : re.Pattern or str
        Compiled pattern or pattern source

    Returns
    -------
    bool
        True when the pattern matches anywhere in the value

    """
    text = "" if value is None else str(value)
    return re.search(regexp, text) is not None


def is_email(value: Any) -> bool:
    """Return True if ``value`` is a valid e-mail address.

    Examples
    --------
    >>> is_email("info@example.nl")
    True
    >>> is_email("info@1.n")
    False

    """
    if not isinstance(value, str):
        return False
    return matches_regexp(value, EMAIL_PATTERN)


def is_url(value: Any) -> bool:
    """Return True if ``value`` is a valid http(s) URL.

    Examples
    --------
    >>> is_url("http://www.example.nl/path")
    True
    >>> is_url("www.example.nl")
    False

    """
    if not isinstance(value, str):
        return False
    return matches_regexp(value, URL_PATTERN)


__all__ = ["is_email", "is_url", "matches_regexp"]
