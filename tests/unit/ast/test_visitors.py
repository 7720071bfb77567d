#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_visitors.py
"""Unit tests for visitor dispatch and the tree dumper.

Tests cover:
- Dispatch through the closed method table
- Exhaustiveness checks at class creation
- Tree dump formatting

"""

from io import StringIO

import pytest

from asciimark.ast import builder
from asciimark.ast.nodes import NodeType
from asciimark.ast.visitors import VISIT_METHODS, NodeVisitor, TreeDumper, dump_tree, format_tree


@pytest.mark.unit
class TestDispatch:
    """Tests for NodeVisitor dispatch."""

    def test_every_kind_has_a_method_name(self):
        """Test that the dispatch table covers the whole taxonomy."""
        assert set(VISIT_METHODS) == set(NodeType)
        assert len(set(VISIT_METHODS.values())) == len(NodeType)

    def test_visit_method_receives_extra_arguments(self):
        """Test that accept forwards arguments to the visit method."""

        class Recorder(NodeVisitor):
            def visit_text(self, node, indent):
                return f"{indent}:{node.value}"

        assert builder.text("hi").accept(Recorder(), 4) == "4:hi"

    def test_generic_visit_walks_children(self):
        """Test that kinds without a method fall through to the children."""

        class TextCounter(NodeVisitor):
            def __init__(self):
                self.count = 0

            def visit_text(self, node):
                self.count += 1

        tree = builder.root(
            builder.paragraph(builder.text("a"), builder.emphasis(builder.text("b"))),
            builder.blockquote(builder.paragraph(builder.text("c"))),
        )
        counter = TextCounter()
        tree.accept(counter)
        assert counter.count == 3


@pytest.mark.unit
class TestExhaustiveVisitor:
    """Tests for the exhaustive class keyword."""

    def test_missing_method_fails_class_creation(self):
        """Test that an incomplete exhaustive visitor cannot be defined."""
        namespace = {name: (lambda self, node: None) for name in VISIT_METHODS.values()}
        del namespace["visit_xml_comment"]
        with pytest.raises(TypeError, match="visit_xml_comment"):
            type("Incomplete", (NodeVisitor,), namespace, exhaustive=True)

    def test_complete_visitor_is_accepted(self):
        """Test that a visitor with every method can be defined."""
        namespace = {name: (lambda self, node: str(node.type)) for name in VISIT_METHODS.values()}
        complete = type("Complete", (NodeVisitor,), namespace, exhaustive=True)
        assert builder.blank().accept(complete()) == "blank"

    def test_non_exhaustive_visitor_may_be_partial(self):
        """Test that the check only applies when requested."""

        class Partial(NodeVisitor):
            def visit_text(self, node):
                return node.value

        assert builder.text("x").accept(Partial()) == "x"


@pytest.mark.unit
class TestTreeDumper:
    """Tests for TreeDumper and its helpers."""

    def test_format(self):
        """Test the listing of a small tree."""
        tree = builder.root(builder.paragraph(builder.text("Hello")))
        assert TreeDumper().format(tree) == (
            "root(block) <<>>\n"
            "  paragraph(block) <<>>\n"
            "    text(span) <<Hello>>\n"
        )

    def test_newlines_in_values_are_escaped(self):
        """Test that multi-line values stay on one line."""
        dump = format_tree(builder.codeblock("a\nb\n"))
        assert dump == "codeblock(block) <<a\\nb\\n>>\n"

    def test_flexible_category_is_shown(self):
        """Test that flexible kinds report their effective category."""
        dump = format_tree(builder.math("x", category="block"))
        assert dump == "math(block) <<x>>\n"

    def test_dump_tree_writes_to_stream(self):
        """Test writing the dump to a stream."""
        stream = StringIO()
        dump_tree(builder.blank(), stream)
        assert stream.getvalue() == "blank(block) <<>>\n"
