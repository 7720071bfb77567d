#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/ast/nodes.py
"""Node classes for parsed document trees.

This module defines the single node class used to represent a parsed
markdown document, together with the closed set of node kinds it may take
and the payload types attached to headers and list items.

The node model is deliberately uniform: every node is an ``Element`` with a
``type`` drawn from ``NodeType``, a kind-specific ``value``, ordered
``children``, string attributes in ``attr`` and parser/renderer metadata in
``options``. This mirrors the tree produced by the upstream markdown parser.

Node Categories
---------------
Block nodes start a new indented text region:
    - root, blank, paragraph, header, horizontal-rule, blockquote, codeblock
    - unordered-list, ordered-list, list-item
    - table, table-head, table-body, table-foot, table-row, table-cell
    - definition-list, definition-term, definition-description

Span nodes contribute inline text to the enclosing block:
    - text, line-break, emphasis, strong, link, image, inline-code
    - footnote, entity, typographic-symbol, smart-quote, abbreviation
    - reference, label, action-item, issue-link

Flexible nodes take their category from ``options["category"]``:
    - raw-passthrough, math, raw-html-element, xml-comment,
      xml-processing-instruction

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from asciimark.constants import Category


class NodeType(str, Enum):
    """Closed set of node kinds a parsed tree may contain."""

    ROOT = "root"
    BLANK = "blank"
    PARAGRAPH = "paragraph"
    HEADER = "header"
    HORIZONTAL_RULE = "horizontal-rule"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_HEAD = "table-head"
    TABLE_BODY = "table-body"
    TABLE_FOOT = "table-foot"
    BLOCKQUOTE = "blockquote"
    CODEBLOCK = "codeblock"
    UNORDERED_LIST = "unordered-list"
    ORDERED_LIST = "ordered-list"
    LIST_ITEM = "list-item"
    DEFINITION_LIST = "definition-list"
    DEFINITION_TERM = "definition-term"
    DEFINITION_DESCRIPTION = "definition-description"
    TEXT = "text"
    LINE_BREAK = "line-break"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    LINK = "link"
    IMAGE = "image"
    INLINE_CODE = "inline-code"
    FOOTNOTE = "footnote"
    RAW_PASSTHROUGH = "raw-passthrough"
    ENTITY = "entity"
    TYPOGRAPHIC_SYMBOL = "typographic-symbol"
    SMART_QUOTE = "smart-quote"
    MATH = "math"
    ABBREVIATION = "abbreviation"
    REFERENCE = "reference"
    LABEL = "label"
    ACTION_ITEM = "action-item"
    ISSUE_LINK = "issue-link"
    RAW_HTML_ELEMENT = "raw-html-element"
    XML_COMMENT = "xml-comment"
    XML_PROCESSING_INSTRUCTION = "xml-processing-instruction"

    def __str__(self) -> str:
        return self.value


BLOCK_TYPES = frozenset(
    {
        NodeType.ROOT,
        NodeType.BLANK,
        NodeType.PARAGRAPH,
        NodeType.HEADER,
        NodeType.HORIZONTAL_RULE,
        NodeType.TABLE,
        NodeType.TABLE_ROW,
        NodeType.TABLE_CELL,
        NodeType.TABLE_HEAD,
        NodeType.TABLE_BODY,
        NodeType.TABLE_FOOT,
        NodeType.BLOCKQUOTE,
        NodeType.CODEBLOCK,
        NodeType.UNORDERED_LIST,
        NodeType.ORDERED_LIST,
        NodeType.LIST_ITEM,
        NodeType.DEFINITION_LIST,
        NodeType.DEFINITION_TERM,
        NodeType.DEFINITION_DESCRIPTION,
    }
)

SPAN_TYPES = frozenset(
    {
        NodeType.TEXT,
        NodeType.LINE_BREAK,
        NodeType.EMPHASIS,
        NodeType.STRONG,
        NodeType.LINK,
        NodeType.IMAGE,
        NodeType.INLINE_CODE,
        NodeType.FOOTNOTE,
        NodeType.ENTITY,
        NodeType.TYPOGRAPHIC_SYMBOL,
        NodeType.SMART_QUOTE,
        NodeType.ABBREVIATION,
        NodeType.REFERENCE,
        NodeType.LABEL,
        NodeType.ACTION_ITEM,
        NodeType.ISSUE_LINK,
    }
)

# Category comes from options["category"], defaulting to span
FLEXIBLE_TYPES = frozenset(NodeType) - BLOCK_TYPES - SPAN_TYPES


@dataclass
class HeaderValue:
    """Heading marker metadata.

    Parameters
    ----------
    level : int
        Heading level (1 is the outermost section)
    mark : str or None, default = None
        The heading's own counter at its level (e.g. ``"3"``)
    full_mark : str or None, default = None
        Dotted section number (e.g. ``"2.3"``). Filled in by the reference
        pass when the parser did not supply one.

    """

    level: int
    mark: Optional[str] = None
    full_mark: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be positive, got {self.level}")

    def __str__(self) -> str:
        return self.full_mark or ""


@dataclass
class ListItemValue:
    """Ordered list-item marker metadata.

    Parameters
    ----------
    mark : str
        The item's own ordinal mark (``"1"``, ``"b"``, ``"C"``)
    full_mark : str or None, default = None
        Dotted chain of enclosing ordered-item marks ending with this
        item's mark (e.g. ``"1.b"``)

    """

    mark: str
    full_mark: Optional[str] = None

    def __str__(self) -> str:
        return self.full_mark or self.mark


@dataclass
class Element:
    """A node of a parsed document tree.

    Parameters
    ----------
    type : NodeType
        Kind of the node. Strings are coerced to ``NodeType``; unknown kinds
        raise ``ValueError``.
    value : Any, default = None
        Kind-specific payload (text, ``HeaderValue``, ``ListItemValue``,
        symbol key, reference expression, label name, ...)
    children : list of Element, default = empty list
        Ordered child nodes
    attr : dict, default = empty dict
        String attributes (``href``, ``src``, ``title``)
    options : dict, default = empty dict
        Parser and renderer metadata. The reference pass stores
        ``relative_position`` here for headers and list items.
    parent : Element or None, default = None
        Back-reference to the enclosing node. Set by the reference pass on
        the annotated tree; ignored by equality and repr.

    Examples
    --------
    >>> para = Element(NodeType.PARAGRAPH, children=[Element(NodeType.TEXT, "Hello")])
    >>> para.category
    'block'
    >>> para.children[0].category
    'span'

    """

    type: NodeType
    value: Any = None
    children: list[Element] = field(default_factory=list)
    attr: dict[str, str] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)
    parent: Optional[Element] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Coerce the node kind into the closed ``NodeType`` set."""
        self.type = NodeType(self.type)

    @property
    def category(self) -> Category:
        """Return ``"block"`` or ``"span"`` for this node."""
        if self.type in BLOCK_TYPES:
            return "block"
        if self.type in SPAN_TYPES:
            return "span"
        return "block" if self.options.get("category") == "block" else "span"

    @property
    def relative_position(self) -> Optional[int]:
        """Position among same-kind siblings, once the reference pass ran."""
        return self.options.get("relative_position")

    @property
    def full_mark(self) -> Optional[str]:
        """Positional mark of a header or ordered list item, if any."""
        return getattr(self.value, "full_mark", None)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor whose dispatch table maps this node's kind to a
            ``visit_*`` method
        *args : Any
            Extra arguments forwarded to the visit method (e.g. indent)

        Returns
        -------
        Any
            Result from the visitor's matching ``visit_*`` method

        """
        return visitor.dispatch(self, *args)

    def ancestors(self) -> Iterator[Element]:
        """Yield enclosing nodes from the nearest to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def find_first_ancestor(self, *types: NodeType) -> Optional[Element]:
        """Return the nearest ancestor whose kind is one of ``types``."""
        for node in self.ancestors():
            if node.type in types:
                return node
        return None

    def has_ancestor(self, node_type: NodeType) -> bool:
        """Return True if any ancestor has the given kind."""
        return self.find_first_ancestor(node_type) is not None

    def walk(self) -> Iterator[Element]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


def node_label(node: Element) -> Optional[str]:
    """Return the label a header or list item declares through its options."""
    label = node.options.get("label")
    return str(label) if label else None


__all__ = [
    "NodeType",
    "Element",
    "HeaderValue",
    "ListItemValue",
    "BLOCK_TYPES",
    "SPAN_TYPES",
    "FLEXIBLE_TYPES",
    "node_label",
]
