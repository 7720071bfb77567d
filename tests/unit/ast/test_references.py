#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_references.py
"""Unit tests for the reference pass.

Tests cover:
- Relative positions, dense and zero-based per sibling scope
- Document-order header and list-item tables
- Section numbers and ordered-item marks
- Label registration and redefinition
- Immutability of the input tree

"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from asciimark.ast import builder
from asciimark.ast.nodes import NodeType
from asciimark.ast.references import PositionTable, ReferenceVisitor, format_ordinal, resolve


def _text(node):
    return "".join(child.value for child in node.walk() if child.type == NodeType.TEXT)


@pytest.mark.unit
class TestFormatOrdinal:
    """Tests for ordinal formatting."""

    @pytest.mark.parametrize(
        "number,style,expected",
        [
            (1, "decimal", "1"),
            (12, "decimal", "12"),
            (1, "lower-alpha", "a"),
            (26, "lower-alpha", "z"),
            (27, "lower-alpha", "aa"),
            (28, "upper-alpha", "AB"),
            (0, "lower-alpha", "0"),
        ],
    )
    def test_format(self, number, style, expected):
        """Test ordinal formatting in each style."""
        assert format_ordinal(number, style) == expected


@pytest.mark.unit
class TestPositions:
    """Tests for relative position assignment."""

    def test_positions_are_dense_per_scope(self):
        """Test that each sibling group is numbered from zero without gaps."""
        tree = builder.root(
            builder.header(1, builder.text("A")),
            builder.header(1, builder.text("B")),
            builder.ordered_list(
                builder.list_item(builder.text("a1")),
                builder.list_item(builder.text("a2")),
            ),
            builder.unordered_list(builder.list_item(builder.text("b1"))),
        )
        resolved = resolve(tree)

        assert [node.relative_position for node in resolved.header_table] == [0, 1]
        assert [node.relative_position for node in resolved.item_table] == [0, 1, 0]

    @given(shape=st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=5))
    def test_dense_positions_property(self, shape):
        """Test that every list numbers its items 0..n-1 and headers do the same."""
        tree = builder.root(
            *[builder.header(1, builder.text(f"h{i}")) for i in range(len(shape))],
            *[builder.ordered_list(*[builder.list_item(builder.text("x")) for _ in range(n)]) for n in shape],
        )
        resolved = resolve(tree)

        assert [node.relative_position for node in resolved.header_table] == list(range(len(shape)))
        lists = [node for node in resolved.tree.children if node.type == NodeType.ORDERED_LIST]
        for lst, n in zip(lists, shape):
            assert [item.relative_position for item in lst.children] == list(range(n))

    def test_tables_follow_document_order(self):
        """Test that nested items appear in pre-order."""
        tree = builder.root(
            builder.unordered_list(
                builder.list_item(
                    builder.text("outer"),
                    builder.unordered_list(builder.list_item(builder.text("inner"))),
                ),
                builder.list_item(builder.text("last")),
            )
        )
        resolved = resolve(tree)
        assert [_text(node) for node in resolved.item_table] == ["outerinner", "inner", "last"]

    def test_only_headers_and_items_get_positions(self):
        """Test that other kinds are left without a position."""
        resolved = resolve(builder.root(builder.paragraph(builder.text("x"))))
        assert all("relative_position" not in node.options for node in resolved.tree.walk())

    def test_parent_links(self):
        """Test that the annotated tree links children to parents."""
        resolved = resolve(builder.root(builder.paragraph(builder.text("x"))))
        paragraph = resolved.tree.children[0]
        assert paragraph.parent is resolved.tree
        assert paragraph.children[0].parent is paragraph


@pytest.mark.unit
class TestHeaderMarks:
    """Tests for section numbering."""

    def test_dotted_numbers(self):
        """Test numbering across levels."""
        tree = builder.root(
            builder.header(1, builder.text("A")),
            builder.header(2, builder.text("A.1")),
            builder.header(2, builder.text("A.2")),
            builder.header(1, builder.text("B")),
            builder.header(2, builder.text("B.1")),
        )
        resolved = resolve(tree)
        assert [node.full_mark for node in resolved.header_table] == ["1", "1.1", "1.2", "2", "2.1"]
        assert [node.value.mark for node in resolved.header_table] == ["1", "1", "2", "2", "1"]

    def test_leading_zero_segments_dropped(self):
        """Test a document that starts below the top level."""
        resolved = resolve(builder.root(builder.header(2, builder.text("A")), builder.header(2, builder.text("B"))))
        assert [node.full_mark for node in resolved.header_table] == ["1", "2"]

    def test_precomputed_mark_is_kept(self):
        """Test that a parser-supplied full mark is not replaced."""
        resolved = resolve(builder.root(builder.header(1, builder.text("A"), full_mark="IV")))
        assert resolved.header_table[0].full_mark == "IV"


@pytest.mark.unit
class TestItemMarks:
    """Tests for ordered-item marks."""

    def test_styles_cycle_by_depth(self):
        """Test decimal, lower-alpha, upper-alpha nesting."""
        tree = builder.root(
            builder.ordered_list(
                builder.list_item(
                    builder.text("one"),
                    builder.ordered_list(
                        builder.list_item(builder.text("a")),
                        builder.list_item(
                            builder.text("b"),
                            builder.ordered_list(builder.list_item(builder.text("A"))),
                        ),
                    ),
                ),
                builder.list_item(builder.text("two")),
            )
        )
        resolved = resolve(tree)
        assert [node.value.mark for node in resolved.item_table] == ["1", "a", "b", "A", "2"]
        assert [node.full_mark for node in resolved.item_table] == ["1", "1.a", "1.b", "1.b.A", "2"]

    def test_start_option(self):
        """Test that the list's start number offsets the marks."""
        tree = builder.root(
            builder.ordered_list(builder.list_item(builder.text("x")), builder.list_item(builder.text("y")), start=3)
        )
        resolved = resolve(tree)
        assert [node.full_mark for node in resolved.item_table] == ["3", "4"]

    def test_unordered_items_have_no_mark(self):
        """Test that bullet items stay unmarked and do not extend the chain."""
        tree = builder.root(
            builder.ordered_list(
                builder.list_item(
                    builder.text("one"),
                    builder.unordered_list(
                        builder.list_item(
                            builder.text("bullet"),
                            builder.ordered_list(builder.list_item(builder.text("deep"))),
                        )
                    ),
                )
            )
        )
        resolved = resolve(tree)
        assert [node.full_mark for node in resolved.item_table] == ["1", None, "1.a"]

    def test_explicit_mark_is_kept(self):
        """Test that a parser-supplied mark is used as is."""
        resolved = resolve(builder.root(builder.ordered_list(builder.list_item(builder.text("x"), mark="iv"))))
        assert resolved.item_table[0].full_mark == "iv"


@pytest.mark.unit
class TestLabels:
    """Tests for the label table."""

    def test_label_node_names_enclosing_header(self):
        """Test that a label inside a header registers the header."""
        resolved = resolve(builder.root(builder.header(1, builder.text("Intro"), builder.label("intro"))))
        assert resolved.label_table["intro"] is resolved.header_table[0]

    def test_label_node_names_enclosing_item(self):
        """Test that a label inside a list item registers the item."""
        tree = builder.root(
            builder.ordered_list(builder.list_item(builder.paragraph(builder.text("x"), builder.label("step"))))
        )
        resolved = resolve(tree)
        assert resolved.label_table["step"] is resolved.item_table[0]

    def test_label_node_falls_back_to_parent(self):
        """Test that a label outside headers and items names its parent."""
        resolved = resolve(builder.root(builder.paragraph(builder.text("x"), builder.label("para"))))
        assert resolved.label_table["para"] is resolved.tree.children[0]

    def test_label_option(self):
        """Test labels declared through node options."""
        resolved = resolve(builder.root(builder.header(1, builder.text("A"), label="a")))
        assert resolved.label_table["a"].full_mark == "1"

    def test_last_definition_wins(self, caplog):
        """Test that a redefined label points at the later node."""
        tree = builder.root(
            builder.header(1, builder.text("First"), label="dup"),
            builder.header(1, builder.text("Second"), label="dup"),
        )
        with caplog.at_level(logging.DEBUG, logger="asciimark.ast.references"):
            resolved = resolve(tree)
        assert resolved.label_table["dup"].full_mark == "2"
        assert "redefined" in caplog.text

    def test_empty_label_is_ignored(self):
        """Test that an empty label node registers nothing."""
        resolved = resolve(builder.root(builder.header(1, builder.label(""))))
        assert resolved.label_table == {}


@pytest.mark.unit
class TestImmutability:
    """Tests that the pass works on a copy."""

    def test_input_is_not_modified(self):
        """Test that marks and positions only appear on the copy."""
        original_header = builder.header(1, builder.text("A"))
        original_item = builder.list_item(builder.text("x"))
        tree = builder.root(original_header, builder.ordered_list(original_item))

        resolved = resolve(tree)

        assert resolved.tree is not tree
        assert original_header.value.full_mark is None
        assert original_header.options == {}
        assert original_item.value is None
        assert original_header.parent is None
        assert resolved.header_table[0] is not original_header

    def test_repeated_traversal_resets_tables(self):
        """Test that a visitor can be reused."""
        tree = builder.root(builder.header(1, builder.text("A"), label="a"))
        visitor = ReferenceVisitor()
        visitor.traverse(tree)
        visitor.traverse(tree)
        assert len(visitor.header_table) == 1
        assert visitor.header_table[0].full_mark == "1"


@pytest.mark.unit
class TestPositionTable:
    """Tests for scoped relative lookup."""

    def _items(self):
        resolved = resolve(
            builder.root(
                builder.ordered_list(*(builder.list_item(builder.text(str(n))) for n in range(3))),
                builder.ordered_list(builder.list_item(builder.text("other"))),
            )
        )
        return resolved.item_table

    def test_relative_within_scope(self):
        """Test stepping forward and backward among siblings."""
        table = self._items()
        assert table.relative(table[0], 2) is table[2]
        assert table.relative(table[2], -1) is table[1]
        assert table.relative(table[1], 0) is table[1]

    def test_relative_out_of_range(self):
        """Test that steps outside the sibling group give None."""
        table = self._items()
        assert table.relative(table[2], 1) is None
        assert table.relative(table[0], -1) is None
        assert table.relative(table[3], 1) is None

    def test_anchor_without_position(self):
        """Test that a node never added has no relative target."""
        assert PositionTable().relative(builder.header(1), 1) is None
