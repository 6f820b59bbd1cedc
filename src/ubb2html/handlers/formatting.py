#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/handlers/formatting.py
"""Inline formatting, layout and text-block tag handlers.

Most tags here are simple wrappers: the inner text is parsed recursively and
wrapped in one fixed element. Inline wrappers only carry a CSS class when one
is configured through ``class_overrides``; paragraph-like blocks always carry
their class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ubb2html.attributes import DEFAULT_ATTRIBUTE_KEY, ORIGINAL_ATTRIBUTES_KEY, Attributes
from ubb2html.utils.escape import escape_attribute_value, escape_html_entities

if TYPE_CHECKING:
    from ubb2html.context import RenderContext
    from ubb2html.registry import TagHandler


def class_attribute(tag: str, context: RenderContext) -> str:
    """Return `` class='...'`` for ``tag`` using the configured or built-in class."""
    return f" class='{escape_attribute_value(context.options.css_class(tag))}'"


def make_wrapper_handler(
    element: str,
    tag: str,
    style: Optional[str] = None,
    always_class: bool = False,
) -> TagHandler:
    """Create a handler wrapping the parsed inner text in ``element``.

    Parameters
    ----------
    element : str
        HTML element name, i.e. ``strong``
    tag : str
        UBB tag name, used to look up the CSS class
    style : str, optional
        Fixed inline style of the element
    always_class : bool, default False
        Emit the built-in class even when no override is configured

    Returns
    -------
    TagHandler
        The new handler

    Examples
    --------
        >>> from ubb2html import UbbParser
        >>> parser = UbbParser()
        >>> parser.register_handler("kbd", make_wrapper_handler("kbd", "kbd"))
        >>> parser.parse("[kbd]Esc[/kbd]")
        '<kbd>Esc</kbd>'

    """

    def render(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
        opening = element
        if style:
            opening += f" style='{style}'"
        if always_class or context.options.has_class_override(tag):
            opening += class_attribute(tag, context)
        return f"<{opening}>{context.parse(inner_text)}</{element}>"

    render.__name__ = f"render_{tag}"
    return render


def render_quote(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [quote], [quote=author] or [quote author=...] as a blockquote.

    The author, when given, becomes a leading ``<cite>``.
    """
    author = attributes.get("author", "")
    if not author and DEFAULT_ATTRIBUTE_KEY in attributes:
        author = _raw_attributes(attributes)
    author = author.strip()
    cite = f"<cite>{escape_html_entities(author)}</cite>" if author else ""
    return f"<blockquote{class_attribute('quote', context)}>{cite}{context.parse(inner_text)}</blockquote>"


def render_code(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    # Not parsed: nested tags stay visible as typed.
    return f"<pre{class_attribute('code', context)}>{escape_html_entities(inner_text)}</pre>"


def render_ignore(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Return the inner text unprocessed.

    Nothing is escaped, so [ignore] passes raw HTML through. Sites that accept
    untrusted input should unregister it.
    """
    return inner_text


def render_comment(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return ""


def render_br(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return "<br />" + context.parse(inner_text)


def render_hr(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return "<hr />" + context.parse(inner_text)


def render_clear(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return "<div style='clear: both'></div>" + context.parse(inner_text)


def _raw_attributes(attributes: Attributes) -> str:
    return attributes.get(ORIGINAL_ATTRIBUTES_KEY, "").strip()


def render_style(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [style color: red]...[/style] as a div with the raw CSS."""
    css = escape_attribute_value(_raw_attributes(attributes))
    return f"<div style='{css}'>{context.parse(inner_text)}</div>"


def render_class(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [class=a b]...[/class] as a span with the given classes."""
    classes = escape_attribute_value(_raw_attributes(attributes))
    return f"<span class='{classes}'>{context.parse(inner_text)}</span>"


def render_color(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    color = escape_attribute_value(_raw_attributes(attributes))
    return f"<div style='color:{color}'>{context.parse(inner_text)}</div>"


def render_font(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    family = escape_attribute_value(_raw_attributes(attributes))
    return f"<span style='font-family: {family}'>{context.parse(inner_text)}</span>"


def render_anchor(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [anchor=name]...[/anchor] as a named link target."""
    name = escape_attribute_value(_raw_attributes(attributes))
    return f"<a name='{name}'{class_attribute('anchor', context)}>{context.parse(inner_text)}</a>"


FORMATTING_HANDLERS: dict[str, TagHandler] = {
    "b": make_wrapper_handler("strong", "b"),
    "i": make_wrapper_handler("em", "i"),
    "u": make_wrapper_handler("u", "u"),
    "s": make_wrapper_handler("del", "s"),
    "sup": make_wrapper_handler("sup", "sup"),
    "sub": make_wrapper_handler("sub", "sub"),
    **{f"h{level}": make_wrapper_handler(f"h{level}", f"h{level}") for level in range(1, 7)},
    "center": make_wrapper_handler("div", "center", style="text-align: center"),
    "left": make_wrapper_handler("div", "left", style="text-align: left"),
    "right": make_wrapper_handler("div", "right", style="text-align: right"),
    "justify": make_wrapper_handler("div", "justify", style="text-align: justify"),
    "p": make_wrapper_handler("p", "p", always_class=True),
    "quote": render_quote,
    "code": render_code,
    "ignore": render_ignore,
    "comment": render_comment,
    "br": render_br,
    "hr": render_hr,
    "clear": render_clear,
    "style": render_style,
    "class": render_class,
    "color": render_color,
    "font": render_font,
    "anchor": render_anchor,
}
