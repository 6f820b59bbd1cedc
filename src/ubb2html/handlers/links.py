#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/handlers/links.py
"""Hyperlink and e-mail tag handlers.

Both handlers are also used by the scan engine to auto-link bare URLs and
e-mail addresses found in literal text. In that case the inner text is
already HTML-escaped, so display text is normalized to be escaped exactly
once whichever way the handler was reached.
"""

from __future__ import annotations

import html
import logging
import secrets
from typing import TYPE_CHECKING

from ubb2html.attributes import DEFAULT_ATTRIBUTE_KEY, Attributes
from ubb2html.constants import EMAIL_ID_PREFIX, ERROR_CSS_CLASS, PROTECTED_EMAIL_TITLE, TRUTHY_ATTRIBUTE_VALUES
from ubb2html.utils.escape import (
    escape_attribute_value,
    escape_html_entities,
    escape_js_string,
    normalize_html_text,
)
from ubb2html.utils.html_sanitizer import sanitize_url
from ubb2html.utils.validators import is_email

if TYPE_CHECKING:
    from ubb2html.context import RenderContext
    from ubb2html.registry import TagHandler

logger = logging.getLogger(__name__)

_EXTERNAL_PREFIXES = ("http://", "https://")


def normalize_link_target(value: str) -> str:
    """Unescape and trim a link target, adding ``http://`` to ``www.`` hosts."""
    target = html.unescape(value).strip()
    if target.startswith("www."):
        target = "http://" + target
    return target


def render_url(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [url]target[/url] or [url=target]text[/url] as an anchor.

    Targets starting with ``http://`` or ``https://`` open in a new window.
    Other targets go through the parser's file URL converter, so
    ``[url]12345[/url]`` can point at an uploaded file.

    Parameters
    ----------
    inner_text : str
        Link target, or display text when a ``default`` attribute is given
    attributes : dict[str, str]
        Tag attributes
    context : RenderContext
        Render state

    Returns
    -------
    str
        The anchor element

    """
    target = normalize_link_target(attributes.get(DEFAULT_ATTRIBUTE_KEY) or inner_text)
    external = target.startswith(_EXTERNAL_PREFIXES)
    href = sanitize_url(context.convert_file_url(target))

    display = normalize_html_text(inner_text.strip()) or escape_html_entities(target)
    target_attr = " target='_blank'" if external else ""
    css = escape_attribute_value(context.options.css_class("url"))

    return f"<a href='{escape_attribute_value(href)}' class='{css}'{target_attr}>{display}</a>"


def _email_error(address: str, context: RenderContext) -> str:
    css = f"{context.options.css_class('email')} {ERROR_CSS_CLASS}".strip()
    logger.debug(f"Invalid e-mail address in [email]: {address!r}")
    return (
        f"<span class='{escape_attribute_value(css)}'>"
        f"UBB error: invalid email address {escape_html_entities(address)}</span>"
    )


def _is_protected(attributes: Attributes, context: RenderContext) -> bool:
    if not context.options.protect_email:
        return False
    protected = attributes.get("protected")
    return protected is None or protected.strip().lower() in TRUTHY_ATTRIBUTE_VALUES


def render_email(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render an e-mail address as a (protected) mailto link.

    The address is taken from the ``default`` attribute or the inner text.

    1. An invalid address renders an inline error span.
    2. With protection disabled (``protect_email=False`` or a
       ``protected=false`` attribute) a plain ``mailto:`` anchor is rendered.
    3. Otherwise the anchor carries the address split into ``data-username``
       and ``data-domain``, and an inline script builds the ``mailto:`` link
       in the browser. The visible text is "Protected email address" unless
       the tag has display text other than the address itself.

    Returns
    -------
    str
        HTML for the address

    """
    display_source = html.unescape(inner_text).strip()
    address = html.unescape(attributes.get(DEFAULT_ATTRIBUTE_KEY) or inner_text).strip()
    css = escape_attribute_value(context.options.css_class("email"))

    if not is_email(address):
        return _email_error(address, context)

    if not _is_protected(attributes, context):
        display = escape_html_entities(display_source or address)
        return f"<a href='mailto:{escape_attribute_value(address)}' class='{css}'>{display}</a>"

    username, domain = address.rsplit("@", 1)
    anchor_id = EMAIL_ID_PREFIX + secrets.token_hex(16)

    if not display_source or display_source == address:
        title = escape_html_entities(PROTECTED_EMAIL_TITLE)
        script_title = "email"
    else:
        title = escape_html_entities(display_source)
        script_title = escape_js_string(title)

    script = (
        "(function(){"
        f"var obj=document.getElementById({escape_js_string(anchor_id)});"
        'var email=obj.getAttribute("data-username")+"@"+obj.getAttribute("data-domain");'
        'obj.href="mailto:"+email;'
        f"obj.innerHTML={script_title};"
        "})();"
    )
    return (
        f"<a id='{anchor_id}' class='{css}' href='#' "
        f"data-username='{escape_attribute_value(username)}' data-domain='{escape_attribute_value(domain)}'>"
        f"{title}</a>"
        f"<script type='text/javascript'>{script}</script>"
    )


LINK_HANDLERS: dict[str, TagHandler] = {
    "url": render_url,
    "email": render_email,
}
