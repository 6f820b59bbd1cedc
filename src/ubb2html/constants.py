#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the ubb2html library.

This module centralizes the hardcoded values, regular expressions and default
configuration constants used across ubb2html.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Parse Defaults - Default values for ParseOptions
3. Resource Limits - Depth, size and iteration ceilings
4. Scanner Patterns - Regular expressions used by the scan engine
5. Tag Policies - Per-tag constants (CSS classes, embeds, block tags)
6. Security Constants - URL scheme checks
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

VideoProvider = Literal["youtube", "vimeo", "zideo"]

# =============================================================================
# Parse Defaults
# =============================================================================

DEFAULT_CONVERT_NEWLINES = True
DEFAULT_PROTECT_EMAIL = True
DEFAULT_SUPPRESS_BLOCK_NEWLINES = True
DEFAULT_STRICT_MODE = False

# Prefix of the built-in CSS class of every tag, i.e. ``ubb-url`` for [url]
DEFAULT_CSS_CLASS_PREFIX = "ubb-"

# Legacy option keys are spelled ``class_<tag>``
CLASS_OPTION_PREFIX = "class_"

# Class appended to the tag class of inline error messages
ERROR_CSS_CLASS = "ubbparser-error"

# =============================================================================
# Resource Limits
# =============================================================================

# Every rendered tag costs four interpreter frames (scan, handler call, handler,
# nested parse). [br] and [hr] parse the rest of the post as their inner text,
# so each one in a chain adds a level.
DEFAULT_MAX_DEPTH = 180
DEFAULT_MAX_INPUT_LENGTH = 1_000_000
DEFAULT_MAX_ITERATIONS = 200_000

# =============================================================================
# Scanner Patterns
# =============================================================================

LITERAL_RUN_PATTERN = re.compile(r"[^\[]*")
TAG_NAME_PATTERN = re.compile(r"[\w-]*")
ATTRIBUTE_STRING_PATTERN = re.compile(r"[^\]]*")

# key=value tokens; the value is double quoted, single quoted or a bare run
ATTRIBUTE_TOKEN_PATTERN = re.compile(r"""([^\s=]*)=("[^"]*"|'[^']*'|\S*)""")

# Bare URLs inside (already escaped) literal text. The trailing class stops at
# '<' so a link never runs into an inserted <br />.
URL_AUTOLINK_PATTERN = (
    r"(?:(?:https?|ftp)://|www)"
    r"[a-zA-Z0-9\-.]+\.[a-zA-Z]{2,4}"
    r"(?::[a-zA-Z0-9]*)?"
    r"/?"
    r"[a-zA-Z0-9\-._?,'/\\+&;%$#=~]*"
    r"[^.,)(\s<]*"
)

# Bare e-mail addresses inside (already escaped) literal text
EMAIL_AUTOLINK_PATTERN = (
    r"[a-zA-Z0-9_\-.+]+@"
    r"(?:\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.|(?:[a-zA-Z0-9\-]+\.)+)"
    r"(?:[a-zA-Z]{2,4}|[0-9]{1,3})"
    r"\]?"
)

AUTOLINK_PATTERN = re.compile(rf"(?P<email>{EMAIL_AUTOLINK_PATTERN})|(?P<url>{URL_AUTOLINK_PATTERN})")

# Trailing sentence punctuation and escaped delimiters never belong to a link
AUTOLINK_TRAILING_PATTERN = re.compile(r"(?:[.,()]|&gt;|&lt;|&quot;|&#x27;)+$")

EMAIL_PATTERN = re.compile(
    r"^[-a-z0-9~!$%^&*_=+}{'?]+(\.[-a-z0-9~!$%^&*_=+}{'?]+)*@"
    r"([a-z0-9_][-a-z0-9_]*(\.[-a-z0-9_]+)*\."
    r"(aero|arpa|biz|com|coop|edu|gov|info|int|mil|museum|name|net|org|pro|travel|mobi|[a-z][a-z])"
    r"|([0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}))"
    r"(:[0-9]{1,5})?$",
    re.IGNORECASE,
)

_IP_OCTET_FIRST = r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9])"
_IP_OCTET = r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9]|0)"
_IP_OCTET_LAST = r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[0-9])"

URL_PATTERN = re.compile(
    r"^(http|https)://"
    r"([a-zA-Z0-9.\-]+(:[a-zA-Z0-9.&%$\-]+)*@)*"
    rf"({_IP_OCTET_FIRST}\.{_IP_OCTET}\.{_IP_OCTET}\.{_IP_OCTET_LAST}"
    r"|localhost"
    r"|([a-zA-Z0-9\-]+\.)*[a-zA-Z0-9\-]+\.(com|edu|gov|int|mil|net|org|biz|arpa|info|name|pro|aero|coop|museum|[a-zA-Z]{2}))"
    r"(:[0-9]+)*"
    r"(/($|[a-zA-Z0-9.,?'\\+&%$#=~_\-]+))*$"
)

# =============================================================================
# Tag Policies
# =============================================================================

# Tags whose rendering ends a block; a single newline right after them is dropped
BLOCK_LEVEL_TAGS = frozenset(
    {
        "table",
        "tr",
        "td",
        "th",
        "list",
        "bullets",
        "csv",
        "code",
        "p",
        "quote",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "center",
        "left",
        "right",
        "justify",
        "style",
        "color",
        "iframe",
        "youtube",
        "vimeo",
        "zideo",
        "video",
        "clear",
    }
)

TRUTHY_ATTRIBUTE_VALUES = frozenset({"1", "true", "yes", "on", "y"})

DEFAULT_CSV_SEPARATOR = ","

PROTECTED_EMAIL_TITLE = "Protected email address"
EMAIL_ID_PREFIX = "ubb-email-"

IFRAME_ALLOWED_KEYS = ("src", "class", "frameborder", "marginwidth", "marginheight", "width", "height")
IMG_ALLOWED_KEYS = ("src", "alt", "style", "class", "width", "height")

IMG_LEFT_STYLE = "float: left; margin: 0px 10px 10px 0px"
IMG_RIGHT_STYLE = "float: right; margin: 0px 0px 10px 10px"

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{video_id}"
YOUTUBE_DEFAULT_SIZE = ("560", "315")
VIMEO_EMBED_URL = "https://player.vimeo.com/video/{video_id}"
VIMEO_DEFAULT_SIZE = ("500", "281")
ZIDEO_EMBED_URL = "https://www.zideo.nl/zideomediaplayer.php?{video_id}"
ZIDEO_DEFAULT_SIZE = ("480", "270")

UNKNOWN_VIDEO_MESSAGE = "Unknown video"

# =============================================================================
# Security Constants
# =============================================================================

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}
