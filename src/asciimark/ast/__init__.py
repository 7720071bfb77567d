#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/ast/__init__.py
"""Document tree representation and traversal.

The module consists of several components:

- nodes: the ``Element`` node class, ``NodeType`` and mark payloads
- visitors: closed-dispatch visitor base and the debug tree dumper
- references: the reference pass building label and position tables
- builder: factory helpers for constructing trees

Examples
--------
Basic usage:

    >>> from asciimark.ast import builder, resolve
    >>> tree = builder.root(
    ...     builder.header(1, builder.text("Intro")),
    ...     builder.header(1, builder.text("Usage")),
    ... )
    >>> resolved = resolve(tree)
    >>> [node.full_mark for node in resolved.header_table]
    ['1', '2']

"""

from __future__ import annotations

from asciimark.ast import builder
from asciimark.ast.nodes import (
    BLOCK_TYPES,
    FLEXIBLE_TYPES,
    SPAN_TYPES,
    Element,
    HeaderValue,
    ListItemValue,
    NodeType,
)
from asciimark.ast.references import PositionTable, ReferenceVisitor, ResolvedTree, resolve
from asciimark.ast.visitors import VISIT_METHODS, NodeVisitor, TreeDumper, dump_tree, format_tree

__all__ = [
    "BLOCK_TYPES",
    "FLEXIBLE_TYPES",
    "SPAN_TYPES",
    "VISIT_METHODS",
    "Element",
    "HeaderValue",
    "ListItemValue",
    "NodeType",
    "NodeVisitor",
    "PositionTable",
    "ReferenceVisitor",
    "ResolvedTree",
    "TreeDumper",
    "builder",
    "dump_tree",
    "format_tree",
    "resolve",
]
