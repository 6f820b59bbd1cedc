#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/attributes.py
"""Conversion between raw tag attribute strings and attribute mappings.

Every tag occurrence gets a fresh mapping. Besides the parsed ``key=value``
pairs it always carries the raw attribute text under ``original_attrib_str``
for handlers that need the unparsed text (CSS declarations, font lists), and
a ``default`` key when the ``[tag=value]`` shorthand was used.

Examples
--------
    >>> decode_attributes("=http://example.nl")
    {'original_attrib_str': 'http://example.nl', 'default': 'http://example.nl'}
    >>> encode_attributes({"src": "a.png", "alt": "it's"})
    "src='a.png' alt='it&#x27;s'"

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ubb2html.constants import ATTRIBUTE_TOKEN_PATTERN
from ubb2html.utils.escape import escape_attribute_value

ORIGINAL_ATTRIBUTES_KEY = "original_attrib_str"
DEFAULT_ATTRIBUTE_KEY = "default"

Attributes = dict[str, str]


def _strip_quotes(value: str) -> str:
    if value[:1] in ("'", '"'):
        value = value[1:]
    if value[-1:] in ("'", '"'):
        value = value[:-1]
    return value


def decode_attributes(attrib_str: Optional[str]) -> Attributes:
    """Convert a raw attribute string into an attribute mapping.

    Parameters
    ----------
    attrib_str : str or None
        Text between the tag name and the closing ``]``, i.e. ``=red`` or
        `` width=100 height="50"``

    Returns
    -------
    dict[str, str]
        Attribute mapping; keys have dashes normalized to underscores

    """
    attrib_str = attrib_str or ""
    result: Attributes = {ORIGINAL_ATTRIBUTES_KEY: attrib_str[1:] if attrib_str.startswith("=") else attrib_str}

    if attrib_str.startswith("="):
        attrib_str = DEFAULT_ATTRIBUTE_KEY + attrib_str

    for match in ATTRIBUTE_TOKEN_PATTERN.finditer(attrib_str):
        key, value = match.group(1), match.group(2)
        result[key.replace("-", "_")] = _strip_quotes(value)

    return result


def encode_attributes(
    attributes: Mapping[str, Any],
    allowed_keys: Optional[Iterable[str]] = None,
    denied_keys: Optional[Iterable[str]] = None,
) -> str:
    """Convert an attribute mapping into an HTML attribute string.

    Parameters
    ----------
    attributes : Mapping[str, Any]
        Attribute mapping; it is not modified
    allowed_keys : iterable of str, optional
        When given, only these keys are kept
    denied_keys : iterable of str, optional
        When given, these keys are dropped

    Returns
    -------
    str
        ``key='value'`` pairs joined by single spaces, in mapping order

    """
    allowed = set(allowed_keys) if allowed_keys is not None else None
    denied = set(denied_keys) if denied_keys is not None else set()

    pairs = []
    for key, value in attributes.items():
        if allowed is not None and key not in allowed:
            continue
        if key in denied:
            continue
        text = "" if value is None else str(value)
        pairs.append(f"{key}='{escape_attribute_value(text)}'")

    return " ".join(pairs)


__all__ = [
    "Attributes",
    "DEFAULT_ATTRIBUTE_KEY",
    "ORIGINAL_ATTRIBUTES_KEY",
    "decode_attributes",
    "encode_attributes",
]
