#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/ast/references.py
"""Reference pass: positions, marks and lookup tables.

This module implements the single pre-order traversal that runs before any
rendering. It produces an annotated copy of the input tree together with
three read-only lookup tables:

- ``label_table`` maps an explicit label to the node that defines it
- ``header_table`` holds every header in document order
- ``item_table`` holds every list item in document order

Each header and list item also receives ``options["relative_position"]``,
its zero-based index among same-kind siblings. The position tables keep the
sibling groups ("scopes") as well as the global order, so a relative
reference can step forward or backward within the group of its anchor.

Headers and ordered list items that arrive without a positional mark get
one here: dotted section numbers for headers (``"2.3"``) and per-depth
ordinal marks for ordered items (``"1"``, ``"b"``, ``"C"``).

Examples
--------
>>> from asciimark.ast.builder import header, root, text
>>> resolved = resolve(root(header(1, text("Intro")), header(1, text("Usage"))))
>>> [node.full_mark for node in resolved.header_table]
['1', '2']
>>> [node.relative_position for node in resolved.header_table]
[0, 1]

"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import NamedTuple, Optional, overload

from asciimark.ast.nodes import Element, HeaderValue, ListItemValue, NodeType, node_label
from asciimark.ast.visitors import NodeVisitor
from asciimark.constants import ORDERED_MARK_STYLES, MarkStyle

logger = logging.getLogger(__name__)


def format_ordinal(number: int, style: MarkStyle) -> str:
    """Format a 1-based ordinal in the given mark style.

    Alphabetic styles continue past ``z`` as ``aa``, ``ab``, ... Numbers
    below 1 fall back to decimal.

    Parameters
    ----------
    number : int
        Ordinal to format
    style : {"decimal", "lower-alpha", "upper-alpha"}
        Mark style

    Returns
    -------
    str
        Formatted mark

    Examples
    --------
    >>> format_ordinal(3, "lower-alpha")
    'c'
    >>> format_ordinal(28, "upper-alpha")
    'AB'

    """
    if style == "decimal" or number < 1:
        return str(number)

    letters = []
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("a") + remainder))
    mark = "".join(reversed(letters))
    return mark.upper() if style == "upper-alpha" else mark


class PositionTable(Sequence[Element]):
    """Document-order table of headers or list items.

    Indexing and iteration follow document order across the whole tree.
    The table also records each node's sibling group, keyed by its parent,
    so that ``relative()`` can step through the group the anchor belongs to.
    Within a group, a node's index equals its ``relative_position``.

    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._entries: list[Element] = []
        self._scopes: dict[Optional[int], list[Element]] = {}

    @overload
    def __getitem__(self, index: int) -> Element: ...

    @overload
    def __getitem__(self, index: slice) -> list[Element]: ...

    def __getitem__(self, index):  # type: ignore[no-untyped-def]
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PositionTable({[str(node.full_mark) for node in self._entries]})"

    @staticmethod
    def _scope_key(node: Element) -> Optional[int]:
        return id(node.parent) if node.parent is not None else None

    def add(self, node: Element) -> int:
        """Append ``node`` and return its position within its sibling group."""
        siblings = self._scopes.setdefault(self._scope_key(node), [])
        siblings.append(node)
        self._entries.append(node)
        return len(siblings) - 1

    def relative(self, anchor: Element, offset: int) -> Optional[Element]:
        """Return the node ``offset`` steps away from ``anchor`` in its group.

        Parameters
        ----------
        anchor : Element
            A node previously added to this table
        offset : int
            Signed distance; positive steps forward, negative backward

        Returns
        -------
        Element or None
            The target node, or None when the anchor has no position or the
            index falls outside the group

        """
        position = anchor.relative_position
        if position is None:
            return None

        siblings = self._scopes.get(self._scope_key(anchor))
        index = position + offset
        if not siblings or index < 0 or index >= len(siblings):
            return None
        return siblings[index]


class ResolvedTree(NamedTuple):
    """Output of the reference pass."""

    tree: Element
    label_table: dict[str, Element]
    header_table: PositionTable
    item_table: PositionTable


class ReferenceVisitor(NodeVisitor):
    """Pre-order visitor that annotates a tree for cross-referencing.

    The visitor never mutates its input. ``traverse()`` builds a copy of the
    tree with parent links, relative positions and materialized marks, and
    fills ``label_table``, ``header_table`` and ``item_table`` as it goes.

    Labels are last-write-wins: when the same label is declared twice, the
    later declaration in document order replaces the earlier one.

    Examples
    --------
    >>> visitor = ReferenceVisitor()
    >>> annotated = visitor.traverse(tree)
    >>> visitor.label_table["intro"].full_mark
    '1'

    """

    def __init__(self) -> None:
        """Initialize empty lookup tables."""
        self.label_table: dict[str, Element] = {}
        self.header_table = PositionTable()
        self.item_table = PositionTable()
        self._section_counters: list[int] = []
        self._ordered_marks: list[str] = []

    def traverse(self, tree: Element) -> Element:
        """Annotate ``tree`` and populate the lookup tables.

        Parameters
        ----------
        tree : Element
            Root of the parsed tree

        Returns
        -------
        Element
            Annotated copy of the tree

        """
        self.label_table = {}
        self.header_table = PositionTable()
        self.item_table = PositionTable()
        self._section_counters = []
        self._ordered_marks = []

        annotated = self._annotate(tree, None)
        logger.debug(
            "Reference pass: %d labels, %d headers, %d list items",
            len(self.label_table),
            len(self.header_table),
            len(self.item_table),
        )
        return annotated

    def _annotate(self, node: Element, parent: Optional[Element]) -> Element:
        clone = Element(
            node.type,
            copy.copy(node.value),
            attr=dict(node.attr),
            options=dict(node.options),
            parent=parent,
        )
        clone.accept(self)

        entered_item = clone.type == NodeType.LIST_ITEM and isinstance(clone.value, ListItemValue)
        if entered_item:
            self._ordered_marks.append(clone.value.mark)
        clone.children = [self._annotate(child, clone) for child in node.children]
        if entered_item:
            self._ordered_marks.pop()
        return clone

    def _register_label(self, label: str, node: Element) -> None:
        previous = self.label_table.get(label)
        if previous is not None and previous is not node:
            logger.debug("Label %r redefined; the later definition wins", label)
        self.label_table[label] = node

    def visit_header(self, node: Element) -> None:
        node.options["relative_position"] = self.header_table.add(node)

        value = node.value
        if not isinstance(value, HeaderValue):
            level = value if isinstance(value, int) else node.options.get("level", 1)
            value = HeaderValue(level=max(1, int(level)))

        counters = self._section_counters
        if len(counters) < value.level:
            counters.extend([0] * (value.level - len(counters)))
        counters[value.level - 1] += 1
        del counters[value.level :]

        if value.full_mark is None:
            segments = list(counters)
            while len(segments) > 1 and segments[0] == 0:
                segments.pop(0)
            value = replace(
                value,
                mark=value.mark or str(counters[-1]),
                full_mark=".".join(str(segment) for segment in segments),
            )
        node.value = value

        label = node_label(node)
        if label:
            self._register_label(label, node)

    def visit_list_item(self, node: Element) -> None:
        position = self.item_table.add(node)
        node.options["relative_position"] = position

        value = node.value
        if isinstance(value, str) and value:
            value = ListItemValue(mark=value)
        if value is None and node.parent is not None and node.parent.type == NodeType.ORDERED_LIST:
            depth = sum(1 for ancestor in node.ancestors() if ancestor.type == NodeType.ORDERED_LIST) - 1
            style = ORDERED_MARK_STYLES[depth % len(ORDERED_MARK_STYLES)]
            start = int(node.parent.options.get("start", 1))
            value = ListItemValue(mark=format_ordinal(start + position, style))
        if isinstance(value, ListItemValue) and value.full_mark is None:
            value = replace(value, full_mark=".".join([*self._ordered_marks, value.mark]))
        node.value = value

        label = node_label(node)
        if label:
            self._register_label(label, node)

    def visit_label(self, node: Element) -> None:
        if not node.value:
            return
        target = node.find_first_ancestor(NodeType.HEADER, NodeType.LIST_ITEM) or node.parent
        if target is None:
            logger.debug("Label %r has no enclosing node to name", node.value)
            return
        self._register_label(str(node.value), target)

    def generic_visit(self, node: Element, *args: object) -> None:
        # Children are visited by _annotate as they are copied
        return None


def resolve(tree: Element) -> ResolvedTree:
    """Run the reference pass over ``tree``.

    Parameters
    ----------
    tree : Element
        Root of the parsed tree. It is not modified.

    Returns
    -------
    ResolvedTree
        ``(tree, label_table, header_table, item_table)`` where ``tree`` is
        the annotated copy

    """
    visitor = ReferenceVisitor()
    annotated = visitor.traverse(tree)
    return ResolvedTree(annotated, visitor.label_table, visitor.header_table, visitor.item_table)


__all__ = ["PositionTable", "ReferenceVisitor", "ResolvedTree", "format_ordinal", "resolve"]
