#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/ast/builder.py
"""Factory helpers for constructing document trees.

These helpers keep the markdown adapter and hand-built trees short. Each
returns a fresh ``Element``; children are passed positionally.

Examples
--------
>>> tree = root(
...     header(1, text("Title")),
...     paragraph(text("See "), reference("intro"), text(".")),
... )

"""

from __future__ import annotations

from typing import Any, Optional

from asciimark.ast.nodes import Element, HeaderValue, ListItemValue, NodeType
from asciimark.constants import Category


def root(*children: Element) -> Element:
    return Element(NodeType.ROOT, children=list(children))


def paragraph(*children: Element) -> Element:
    return Element(NodeType.PARAGRAPH, children=list(children))


def blank() -> Element:
    return Element(NodeType.BLANK)


def text(content: str) -> Element:
    return Element(NodeType.TEXT, content)


def header(level: int, *children: Element, label: Optional[str] = None, full_mark: Optional[str] = None) -> Element:
    """Create a header node.

    Parameters
    ----------
    level : int
        Heading level, 1 for the outermost section
    *children : Element
        Heading content
    label : str, optional
        Label other nodes may reference this heading by
    full_mark : str, optional
        Precomputed section number. Left to the reference pass when omitted.

    """
    options: dict[str, Any] = {"label": label} if label else {}
    mark = full_mark.rsplit(".", 1)[-1] if full_mark else None
    return Element(
        NodeType.HEADER,
        HeaderValue(level=level, mark=mark, full_mark=full_mark),
        children=list(children),
        options=options,
    )


def unordered_list(*items: Element) -> Element:
    return Element(NodeType.UNORDERED_LIST, children=list(items))


def ordered_list(*items: Element, start: int = 1) -> Element:
    options: dict[str, Any] = {"start": start} if start != 1 else {}
    return Element(NodeType.ORDERED_LIST, children=list(items), options=options)


def list_item(*children: Element, mark: Optional[str] = None, label: Optional[str] = None) -> Element:
    """Create a list item, optionally with a parser-supplied mark and a label."""
    options: dict[str, Any] = {"label": label} if label else {}
    value = ListItemValue(mark=mark) if mark else None
    return Element(NodeType.LIST_ITEM, value, children=list(children), options=options)


def blockquote(*children: Element) -> Element:
    return Element(NodeType.BLOCKQUOTE, children=list(children))


def codeblock(content: str, language: Optional[str] = None) -> Element:
    options: dict[str, Any] = {"language": language} if language else {}
    return Element(NodeType.CODEBLOCK, content, options=options)


def inline_code(content: str) -> Element:
    return Element(NodeType.INLINE_CODE, content)


def horizontal_rule() -> Element:
    return Element(NodeType.HORIZONTAL_RULE)


def emphasis(*children: Element) -> Element:
    return Element(NodeType.EMPHASIS, children=list(children))


def strong(*children: Element) -> Element:
    return Element(NodeType.STRONG, children=list(children))


def link(href: str, *children: Element) -> Element:
    return Element(NodeType.LINK, children=list(children), attr={"href": href})


def image(src: str, alt: str = "") -> Element:
    attr = {"src": src}
    if alt:
        attr["alt"] = alt
    return Element(NodeType.IMAGE, attr=attr)


def line_break() -> Element:
    return Element(NodeType.LINE_BREAK)


def reference(expression: str) -> Element:
    """Create a cross-reference to a label or a relative position (``"++"``)."""
    return Element(NodeType.REFERENCE, expression)


def label(name: str) -> Element:
    """Create a label naming the nearest enclosing header or list item."""
    return Element(NodeType.LABEL, name)


def typographic_symbol(key: str) -> Element:
    return Element(NodeType.TYPOGRAPHIC_SYMBOL, key)


def smart_quote(key: str) -> Element:
    return Element(NodeType.SMART_QUOTE, key)


def math(content: str, category: Category = "span") -> Element:
    return Element(NodeType.MATH, content, options={"category": category})


def raw_passthrough(content: str, category: Category = "span") -> Element:
    return Element(NodeType.RAW_PASSTHROUGH, content, options={"category": category})


def action_item(assignee: str, *children: Element) -> Element:
    return Element(NodeType.ACTION_ITEM, children=list(children), options={"assignee": assignee})


def issue_link(match: str) -> Element:
    return Element(NodeType.ISSUE_LINK, options={"match": match})


def table(*children: Element) -> Element:
    return Element(NodeType.TABLE, children=list(children))


def table_row(*cells: Element) -> Element:
    return Element(NodeType.TABLE_ROW, children=list(cells))


def table_cell(*children: Element) -> Element:
    return Element(NodeType.TABLE_CELL, children=list(children))


def definition_list(*children: Element) -> Element:
    return Element(NodeType.DEFINITION_LIST, children=list(children))


def definition_term(*children: Element) -> Element:
    return Element(NodeType.DEFINITION_TERM, children=list(children))


def definition_description(*children: Element) -> Element:
    return Element(NodeType.DEFINITION_DESCRIPTION, children=list(children))


__all__ = [
    "action_item",
    "blank",
    "blockquote",
    "codeblock",
    "definition_description",
    "definition_list",
    "definition_term",
    "emphasis",
    "header",
    "horizontal_rule",
    "image",
    "inline_code",
    "issue_link",
    "label",
    "line_break",
    "link",
    "list_item",
    "math",
    "ordered_list",
    "paragraph",
    "raw_passthrough",
    "reference",
    "root",
    "smart_quote",
    "strong",
    "table",
    "table_cell",
    "table_row",
    "text",
    "typographic_symbol",
    "unordered_list",
]
