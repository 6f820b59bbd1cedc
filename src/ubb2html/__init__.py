"""ubb2html - convert UBB code into sanitized HTML.

ubb2html renders forum and comment style bracket markup such as
``[b]bold[/b]`` or ``[url=http://example.com]a link[/url]`` into HTML. Plain
text is HTML-escaped, known tags are expanded by tag handlers, unknown tags
pass through unchanged and bare URLs and e-mail addresses are auto-linked.

Key Features
------------
- Single pass scanner; malformed markup never raises
- Extensible handler registry for custom tags
- Script-protected e-mail links
- Lists, tables and CSV data tables
- Image, iframe and YouTube/Vimeo/Zideo embeds
- Depth, input length and scan step limits for untrusted input

Examples
--------
Basic usage:

    >>> from ubb2html import parse
    >>> parse("[b]Hello[/b] http://www.example.nl")
    "<strong>Hello</strong> <a href='http://www.example.nl' class='ubb-url' target='_blank'>http://www.example.nl</a>"

Custom options and tags:

    >>> from ubb2html import ParseOptions, UbbParser
    >>> parser = UbbParser(ParseOptions(convert_newlines=False, class_overrides={"url": "link"}))
    >>> parser.register_handler("spoiler", lambda text, attrs, ctx: f"<details>{ctx.parse(text)}</details>")
    >>> parser.parse("[spoiler]It was him[/spoiler]")
    '<details>It was him</details>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

__version__ = "1.0.0"

from ubb2html.api import default_parser, parse, register_handler, set_file_url_converter, strip_tags
from ubb2html.context import RenderContext
from ubb2html.exceptions import (
    InvalidOptionsError,
    RegistrationError,
    RenderError,
    Ubb2HtmlError,
    ValidationError,
)
from ubb2html.handlers import build_default_registry, make_wrapper_handler
from ubb2html.options import ParseOptions
from ubb2html.parser import UbbParser
from ubb2html.registry import HandlerRegistry, TagHandler

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "parse",
    "strip_tags",
    "register_handler",
    "set_file_url_converter",
    "default_parser",
    "UbbParser",
    "ParseOptions",
    "RenderContext",
    "HandlerRegistry",
    "TagHandler",
    "build_default_registry",
    "make_wrapper_handler",
    # Exceptions
    "Ubb2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "RegistrationError",
    "RenderError",
]
