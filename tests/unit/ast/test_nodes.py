#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for the document node model.

Tests cover:
- Node kind coercion and the closed kind set
- Block/span categories, including flexible kinds
- Header and list-item payloads
- Ancestor navigation and pre-order walking

"""

import pytest

from asciimark.ast import builder
from asciimark.ast.nodes import (
    BLOCK_TYPES,
    FLEXIBLE_TYPES,
    SPAN_TYPES,
    Element,
    HeaderValue,
    ListItemValue,
    NodeType,
    node_label,
)


@pytest.mark.unit
class TestNodeType:
    """Tests for the NodeType enumeration."""

    def test_kind_count(self):
        """Test that the taxonomy holds exactly forty kinds."""
        assert len(NodeType) == 40

    def test_categories_partition_kinds(self):
        """Test that block, span and flexible kinds do not overlap and cover all kinds."""
        assert not BLOCK_TYPES & SPAN_TYPES
        assert not FLEXIBLE_TYPES & (BLOCK_TYPES | SPAN_TYPES)
        assert BLOCK_TYPES | SPAN_TYPES | FLEXIBLE_TYPES == frozenset(NodeType)

    def test_flexible_kinds(self):
        """Test the set of kinds whose category comes from options."""
        assert FLEXIBLE_TYPES == {
            NodeType.RAW_PASSTHROUGH,
            NodeType.MATH,
            NodeType.RAW_HTML_ELEMENT,
            NodeType.XML_COMMENT,
            NodeType.XML_PROCESSING_INSTRUCTION,
        }

    def test_str_is_kind_name(self):
        """Test that a kind formats as its hyphenated name."""
        assert str(NodeType.HORIZONTAL_RULE) == "horizontal-rule"


@pytest.mark.unit
class TestElement:
    """Tests for the Element class."""

    def test_string_kind_is_coerced(self):
        """Test that a kind given as a string becomes a NodeType."""
        node = Element("paragraph")
        assert node.type is NodeType.PARAGRAPH

    def test_unknown_kind_raises(self):
        """Test that a kind outside the taxonomy is rejected."""
        with pytest.raises(ValueError):
            Element("sidebar")

    def test_defaults(self):
        """Test default field values."""
        node = Element(NodeType.TEXT)
        assert node.value is None
        assert node.children == []
        assert node.attr == {}
        assert node.options == {}
        assert node.parent is None

    def test_block_and_span_category(self):
        """Test fixed categories."""
        assert Element(NodeType.PARAGRAPH).category == "block"
        assert Element(NodeType.TEXT).category == "span"

    def test_flexible_category_defaults_to_span(self):
        """Test that flexible kinds without a category option are spans."""
        assert Element(NodeType.MATH, "x").category == "span"
        assert Element(NodeType.MATH, "x", options={"category": "block"}).category == "block"

    def test_equality_ignores_parent(self):
        """Test that parent links do not take part in comparison."""
        parent = builder.paragraph()
        assert Element(NodeType.TEXT, "a", parent=parent) == Element(NodeType.TEXT, "a")

    def test_repr_omits_parent(self):
        """Test that repr does not recurse into the parent."""
        parent = builder.paragraph()
        assert "parent" not in repr(Element(NodeType.TEXT, "a", parent=parent))

    def test_full_mark(self):
        """Test full mark access for headers, items and other nodes."""
        assert Element(NodeType.HEADER, HeaderValue(1, "2", "1.2")).full_mark == "1.2"
        assert Element(NodeType.LIST_ITEM, ListItemValue("b", "1.b")).full_mark == "1.b"
        assert Element(NodeType.TEXT, "plain").full_mark is None

    def test_relative_position_unset(self):
        """Test that relative position is None before the reference pass."""
        assert builder.header(1, builder.text("A")).relative_position is None

    def test_walk_is_preorder(self):
        """Test pre-order traversal of a small tree."""
        tree = builder.root(builder.paragraph(builder.text("a"), builder.strong(builder.text("b"))))
        kinds = [str(node.type) for node in tree.walk()]
        assert kinds == ["root", "paragraph", "text", "strong", "text"]

    def test_ancestor_navigation(self):
        """Test ancestors, nearest ancestor lookup and has_ancestor."""
        outer = builder.header(1)
        para = Element(NodeType.PARAGRAPH, parent=outer)
        text = Element(NodeType.TEXT, "x", parent=para)

        assert list(text.ancestors()) == [para, outer]
        assert text.find_first_ancestor(NodeType.HEADER, NodeType.LIST_ITEM) is outer
        assert text.has_ancestor(NodeType.PARAGRAPH)
        assert not text.has_ancestor(NodeType.BLOCKQUOTE)


@pytest.mark.unit
class TestPayloads:
    """Tests for header and list-item payloads."""

    def test_header_level_must_be_positive(self):
        """Test that level 0 is rejected."""
        with pytest.raises(ValueError, match="positive"):
            HeaderValue(level=0)

    def test_header_str_is_full_mark(self):
        """Test string form of a header payload."""
        assert str(HeaderValue(2, "3", "1.3")) == "1.3"
        assert str(HeaderValue(2)) == ""

    def test_list_item_str_falls_back_to_mark(self):
        """Test string form of a list-item payload."""
        assert str(ListItemValue("c")) == "c"
        assert str(ListItemValue("c", "2.c")) == "2.c"

    def test_node_label(self):
        """Test reading a declared label from options."""
        assert node_label(builder.header(1, label="intro")) == "intro"
        assert node_label(builder.header(1)) is None


@pytest.mark.unit
class TestBuilder:
    """Tests for the tree factory helpers."""

    def test_header_with_full_mark(self):
        """Test that a precomputed full mark also sets the own mark."""
        node = builder.header(2, builder.text("T"), full_mark="3.4")
        assert node.value == HeaderValue(level=2, mark="4", full_mark="3.4")

    def test_ordered_list_start(self):
        """Test that only a non-default start is recorded."""
        assert builder.ordered_list().options == {}
        assert builder.ordered_list(start=5).options == {"start": 5}

    def test_list_item_mark_and_label(self):
        """Test explicit marks and labels on list items."""
        item = builder.list_item(builder.text("x"), mark="iv", label="step")
        assert item.value == ListItemValue("iv")
        assert item.options == {"label": "step"}
        assert builder.list_item().value is None

    def test_flexible_helpers_set_category(self):
        """Test that math and raw passthrough record their category."""
        assert builder.math("x^2", category="block").category == "block"
        assert builder.raw_passthrough("<b>").category == "span"

    def test_image_alt_is_optional(self):
        """Test image attributes."""
        assert builder.image("a.png").attr == {"src": "a.png"}
        assert builder.image("a.png", "A").attr == {"src": "a.png", "alt": "A"}
