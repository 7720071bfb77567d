#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/renderers/resolver.py
"""Render-time resolution of cross-references.

A ``reference`` node's value is either a label declared somewhere in the
document or a relative expression: a run of ``+`` (forward) or ``-``
(backward) whose length is the distance in sibling positions. Relative
expressions are anchored on the nearest enclosing header and only fall back
to the nearest enclosing list item when there is no header.

Resolution never raises. Anything that does not lead to a node with a full
mark renders as ``(???)``.

"""

from __future__ import annotations

import logging
from typing import Optional

from asciimark.ast.nodes import Element, NodeType
from asciimark.ast.references import PositionTable, ResolvedTree
from asciimark.constants import RELATIVE_REFERENCE_PATTERN, UNRESOLVED_REFERENCE

logger = logging.getLogger(__name__)

# Anchor kinds for relative references, in order of precedence
RELATIVE_ANCHOR_PRECEDENCE: tuple[NodeType, ...] = (NodeType.HEADER, NodeType.LIST_ITEM)


def format_reference(target: Optional[Element]) -> Optional[str]:
    """Return ``"(<full mark>)"`` for ``target``, or None if it has no full mark."""
    if target is None or not target.full_mark:
        return None
    return f"({target.full_mark})"


class ReferenceResolver:
    """Resolve ``reference`` nodes against the reference-pass tables.

    Parameters
    ----------
    resolved : ResolvedTree
        Output of ``asciimark.ast.references.resolve``

    Examples
    --------
    >>> resolver = ReferenceResolver(resolve(tree))
    >>> resolver.resolve(reference_node)
    '(2)'

    """

    def __init__(self, resolved: ResolvedTree) -> None:
        self.label_table = resolved.label_table
        self._tables: dict[NodeType, PositionTable] = {
            NodeType.HEADER: resolved.header_table,
            NodeType.LIST_ITEM: resolved.item_table,
        }

    def resolve(self, node: Element) -> str:
        """Return the literal text of ``node``'s reference.

        Parameters
        ----------
        node : Element
            A ``reference`` node from the annotated tree

        Returns
        -------
        str
            ``"(<full mark>)"`` of the target, or ``"(???)"``

        """
        expression = "" if node.value is None else str(node.value)

        if expression in self.label_table:
            text = format_reference(self.label_table[expression])
            if text is None:
                logger.warning("Reference %r names a node without a mark", expression)
                return UNRESOLVED_REFERENCE
            return text

        match = RELATIVE_REFERENCE_PATTERN.match(expression)
        if match is None:
            logger.warning("Unresolved reference %r", expression)
            return UNRESOLVED_REFERENCE

        run = match.group(1)
        offset = len(run) if run[0] == "+" else -len(run)
        text = format_reference(self._relative_target(node, offset))
        if text is None:
            logger.warning("Relative reference %r has no target", expression)
            return UNRESOLVED_REFERENCE
        return text

    def _relative_target(self, node: Element, offset: int) -> Optional[Element]:
        for anchor_type in RELATIVE_ANCHOR_PRECEDENCE:
            anchor = node.find_first_ancestor(anchor_type)
            if anchor is not None:
                return self._tables[anchor_type].relative(anchor, offset)
        return None


__all__ = ["RELATIVE_ANCHOR_PRECEDENCE", "ReferenceResolver", "format_reference"]
