#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/utils/__init__.py
"""Utility modules for the ubb2html package.

This package contains escaping, URL safety, HTML-to-text and validation
helpers shared by the scan engine and the tag handlers.
"""

from ubb2html.utils.escape import (
    escape_attribute_value,
    escape_html_entities,
    escape_js_string,
    normalize_html_text,
)
from ubb2html.utils.html_sanitizer import html_to_text, is_url_safe, sanitize_url
from ubb2html.utils.validators import is_email, is_url, matches_regexp

__all__ = [
    "escape_attribute_value",
    "escape_html_entities",
    "escape_js_string",
    "normalize_html_text",
    "html_to_text",
    "is_url_safe",
    "sanitize_url",
    "is_email",
    "is_url",
    "matches_regexp",
]
