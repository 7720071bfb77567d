#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

This module provides the visitor base class used by the reference pass and
the renderer. Dispatch goes through a closed table mapping every
``NodeType`` to a ``visit_*`` method name, so the set of handlers a visitor
must provide is known when the class is defined.

Visitors that must handle every node kind declare ``exhaustive=True``::

    class MyRenderer(NodeVisitor, exhaustive=True):
        ...

and class creation fails with ``TypeError`` if any ``visit_*`` method is
missing.

"""

from __future__ import annotations

import sys
from typing import IO, Any, Optional

from asciimark.ast.nodes import Element, NodeType


VISIT_METHODS: dict[NodeType, str] = {
    NodeType.ROOT: "visit_root",
    NodeType.BLANK: "visit_blank",
    NodeType.PARAGRAPH: "visit_paragraph",
    NodeType.HEADER: "visit_header",
    NodeType.HORIZONTAL_RULE: "visit_horizontal_rule",
    NodeType.TABLE: "visit_table",
    NodeType.TABLE_ROW: "visit_table_row",
    NodeType.TABLE_CELL: "visit_table_cell",
    NodeType.TABLE_HEAD: "visit_table_head",
    NodeType.TABLE_BODY: "visit_table_body",
    NodeType.TABLE_FOOT: "visit_table_foot",
    NodeType.BLOCKQUOTE: "visit_blockquote",
    NodeType.CODEBLOCK: "visit_codeblock",
    NodeType.UNORDERED_LIST: "visit_unordered_list",
    NodeType.ORDERED_LIST: "visit_ordered_list",
    NodeType.LIST_ITEM: "visit_list_item",
    NodeType.DEFINITION_LIST: "visit_definition_list",
    NodeType.DEFINITION_TERM: "visit_definition_term",
    NodeType.DEFINITION_DESCRIPTION: "visit_definition_description",
    NodeType.TEXT: "visit_text",
    NodeType.LINE_BREAK: "visit_line_break",
    NodeType.EMPHASIS: "visit_emphasis",
    NodeType.STRONG: "visit_strong",
    NodeType.LINK: "visit_link",
    NodeType.IMAGE: "visit_image",
    NodeType.INLINE_CODE: "visit_inline_code",
    NodeType.FOOTNOTE: "visit_footnote",
    NodeType.RAW_PASSTHROUGH: "visit_raw_passthrough",
    NodeType.ENTITY: "visit_entity",
    NodeType.TYPOGRAPHIC_SYMBOL: "visit_typographic_symbol",
    NodeType.SMART_QUOTE: "visit_smart_quote",
    NodeType.MATH: "visit_math",
    NodeType.ABBREVIATION: "visit_abbreviation",
    NodeType.REFERENCE: "visit_reference",
    NodeType.LABEL: "visit_label",
    NodeType.ACTION_ITEM: "visit_action_item",
    NodeType.ISSUE_LINK: "visit_issue_link",
    NodeType.RAW_HTML_ELEMENT: "visit_raw_html_element",
    NodeType.XML_COMMENT: "visit_xml_comment",
    NodeType.XML_PROCESSING_INSTRUCTION: "visit_xml_processing_instruction",
}

_missing_kinds = set(NodeType) - set(VISIT_METHODS)
if _missing_kinds:  # pragma: no cover - guards edits to NodeType
    raise RuntimeError(f"No visit method registered for node kinds: {sorted(map(str, _missing_kinds))}")


class NodeVisitor:
    """Base class for tree visitors.

    Subclasses implement ``visit_*`` methods for the node kinds they care
    about. Kinds without a method fall through to ``generic_visit``, which
    visits the children and returns None.

    Parameters
    ----------
    exhaustive : bool, default = False
        Class keyword. When True, every node kind must have a ``visit_*``
        method on the class, checked when the class is created.

    Examples
    --------
    Simple visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        >>> counter = TextCounter()
        >>> tree.accept(counter)
        >>> print(counter.count)

    """

    def __init_subclass__(cls, exhaustive: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if exhaustive:
            missing = sorted(name for name in VISIT_METHODS.values() if not callable(getattr(cls, name, None)))
            if missing:
                raise TypeError(f"{cls.__name__} does not handle every node kind; missing: {', '.join(missing)}")

    def dispatch(self, node: Element, *args: Any) -> Any:
        """Route ``node`` to the ``visit_*`` method registered for its kind.

        Parameters
        ----------
        node : Element
            Node to visit
        *args : Any
            Extra arguments forwarded to the visit method

        Returns
        -------
        Any
            Result of the visit method

        """
        method = getattr(self, VISIT_METHODS[node.type], None)
        if method is None:
            return self.generic_visit(node, *args)
        return method(node, *args)

    def generic_visit(self, node: Element, *args: Any) -> Any:
        """Fallback visitor for node kinds without a dedicated method.

        The default implementation visits the children in order.

        """
        for child in node.children:
            child.accept(self, *args)
        return None


class TreeDumper(NodeVisitor):
    """Visitor that formats the tree structure for debugging.

    Each node is listed on its own line as ``kind(category) <<value>>``,
    indented two spaces per depth level.

    Examples
    --------
    >>> print(TreeDumper().format(tree))
    root(block) <<>>
      paragraph(block) <<>>
        text(span) <<Hello>>

    """

    def __init__(self) -> None:
        """Initialize the dumper with an empty line buffer."""
        self._lines: list[str] = []
        self._depth = 0

    def format(self, node: Element) -> str:
        """Return the formatted structure of ``node`` and its descendants."""
        self._lines = []
        self._depth = 0
        node.accept(self)
        return "\n".join(self._lines) + "\n"

    def generic_visit(self, node: Element, *args: Any) -> None:
        value = "" if node.value is None else str(node.value).replace("\n", "\\n")
        self._lines.append(f"{'  ' * self._depth}{node.type}({node.category}) <<{value}>>")
        self._depth += 1
        super().generic_visit(node)
        self._depth -= 1


def format_tree(node: Element) -> str:
    """Format the structure of ``node`` as an indented listing."""
    return TreeDumper().format(node)


def dump_tree(node: Element, stream: Optional[IO[str]] = None) -> None:
    """Write the structure of ``node`` to ``stream`` (stderr by default)."""
    (stream or sys.stderr).write(format_tree(node))


__all__ = ["VISIT_METHODS", "NodeVisitor", "TreeDumper", "format_tree", "dump_tree"]
