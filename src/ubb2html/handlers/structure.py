#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/handlers/structure.py
"""List, table and CSV tag handlers.

Lists take one item per line of their inner text::

    [list]
    first
    second
    [/list]

Tables are built from nested [tr]/[td]/[th] tags. [csv] turns delimited text
into a table, optionally with a header row::

    [csv sepchar=; has_header=1]
    name;price
    "Apple; red";1.20
    [/csv]

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ubb2html.attributes import Attributes
from ubb2html.constants import DEFAULT_CSV_SEPARATOR, TRUTHY_ATTRIBUTE_VALUES
from ubb2html.handlers.formatting import class_attribute
from ubb2html.utils.escape import escape_html_entities

if TYPE_CHECKING:
    from ubb2html.context import RenderContext
    from ubb2html.registry import TagHandler

logger = logging.getLogger(__name__)

# Separator names accepted by [csv sepchar=...]
_SEPARATOR_ALIASES = {"tab": "\t", "\\t": "\t", "space": " "}


def _render_list(inner_text: str, context: RenderContext, element: str, tag: str) -> str:
    items = [line for line in inner_text.split("\n") if line.strip()]
    if not items:
        return ""

    body = "".join(f"<li>{context.parse(item)}</li>" for item in items)
    return f"<{element}{class_attribute(tag, context)}>{body}</{element}>"


def render_list(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [list] as an ordered list, one item per non-blank line."""
    return _render_list(inner_text, context, "ol", "list")


def render_bullets(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [bullets] as an unordered list, one item per non-blank line."""
    return _render_list(inner_text, context, "ul", "bullets")


def render_table(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    body = context.parse(inner_text.strip("\n"))
    return f"<table{class_attribute('table', context)}>{body}</table>"


def render_tr(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return "<tr>" + context.parse(inner_text.strip("\n")) + "</tr>"


def render_td(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return f"<td>{context.parse(inner_text)}</td>"


def render_th(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return f"<th>{context.parse(inner_text)}</th>"


def resolve_separator(attributes: Attributes) -> str:
    """Return the CSV separator of a [csv] tag.

    ``sepchar`` may be given literally or as ``tab``/``space``; an empty value
    falls back to a comma.
    """
    separator = attributes.get("sepchar", "")
    separator = _SEPARATOR_ALIASES.get(separator.lower(), separator)
    return separator or DEFAULT_CSV_SEPARATOR


def csv_field_pattern(separator: str) -> re.Pattern[str]:
    """Compile the field pattern for one separator.

    A quoted field only counts as quoted when nothing but whitespace follows
    its closing quote before the next separator; otherwise the whole field,
    quotes included, is taken as typed.
    """
    sep = re.escape(separator)
    end = rf"(?=\s*(?:{sep}|$))"
    return re.compile(rf"""(?:^|(?<={sep}))\s*("[^"]*"{end}|'[^']*'{end}|(?:(?!{sep}).)*)""")


def split_csv_line(line: str, separator: str | re.Pattern[str]) -> list[str]:
    """Split one CSV line into fields.

    Fields may be wrapped in single or double quotes to contain the separator.
    Empty fields are kept, so every row of a well-formed file has the same
    number of cells.

    Parameters
    ----------
    line : str
        One line of CSV text
    separator : str or re.Pattern
        Field separator, or a pattern from :func:`csv_field_pattern`

    Returns
    -------
    list[str]
        Unquoted, whitespace-trimmed field values

    Examples
    --------
        >>> split_csv_line('1;"a;b";3', ";")
        ['1', 'a;b', '3']
        >>> split_csv_line("1,,3", ",")
        ['1', '', '3']

    """
    field_pattern = separator if isinstance(separator, re.Pattern) else csv_field_pattern(separator)

    fields = []
    for match in field_pattern.finditer(line):
        value = match.group(1).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        fields.append(value)
    return fields


def render_csv(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [csv] delimited text as a table.

    Attributes
    ----------
    sepchar : str, default ","
        Field separator
    has_header : str, optional
        When truthy (``1``, ``true``, ``yes``, ...) the first row becomes
        header cells

    """
    field_pattern = csv_field_pattern(resolve_separator(attributes))
    rows = [split_csv_line(line, field_pattern) for line in inner_text.split("\n") if line.strip()]
    if not rows:
        return ""

    has_header = attributes.get("has_header", "").strip().lower() in TRUTHY_ATTRIBUTE_VALUES

    parts = [f"<table{class_attribute('csv', context)}>"]
    if has_header:
        header, rows = rows[0], rows[1:]
        cells = "".join(f"<th>{escape_html_entities(cell)}</th>" for cell in header)
        parts.append(f"<thead><tr>{cells}</tr></thead>")

    parts.append("<tbody>")
    for row in rows:
        cells = "".join(f"<td>{escape_html_entities(cell)}</td>" for cell in row)
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</tbody></table>")

    logger.debug(f"Rendered CSV table with {len(rows)} body rows (header: {has_header})")
    return "".join(parts)


STRUCTURE_HANDLERS: dict[str, TagHandler] = {
    "list": render_list,
    "bullets": render_bullets,
    "table": render_table,
    "tr": render_tr,
    "td": render_td,
    "th": render_th,
    "csv": render_csv,
}
