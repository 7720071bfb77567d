#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/parsers/markdown.py
"""Markdown to document tree converter.

This module drives the mistune parser and maps its token stream onto the
asciimark node kinds. Besides the mistune plugins selected by the options,
it registers four inline rules for the cross-referencing syntax:

- ``[label:ID]`` declares a label for the enclosing header or list item
- ``[ref:EXPR]`` references a label, or a relative position (``++``, ``-``)
- ``-->(NAME)`` marks an action item assigned to NAME
- ``#12`` and ``owner/repo#12`` are issue links

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from asciimark.ast.builder import root
from asciimark.ast.nodes import Element, HeaderValue, NodeType
from asciimark.constants import DEPS_MARKDOWN, Category
from asciimark.exceptions import ParsingError
from asciimark.options.markdown import MarkdownParserOptions
from asciimark.parsers.base import BaseParser
from asciimark.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

LABEL_PATTERN = r"\[label:(?P<asciimark_label_id>[^\]\s]+)\]"
REFERENCE_PATTERN = r"\[ref:(?P<asciimark_ref_expr>[^\]\s]+)\]"
ACTION_ITEM_PATTERN = r"-->\((?P<asciimark_assignee>[^)\n]*)\)"
ISSUE_LINK_PATTERN = r"(?<![\w.\-/#])(?P<asciimark_issue>(?:[\w.\-]+/[\w.\-]+)?#\d+)\b"


def parse_label(inline: Any, m: Any, state: Any) -> int:
    state.append_token({"type": "asciimark_label", "raw": m.group("asciimark_label_id")})
    return m.end()


def parse_reference(inline: Any, m: Any, state: Any) -> int:
    state.append_token({"type": "asciimark_reference", "raw": m.group("asciimark_ref_expr")})
    return m.end()


def parse_action_item(inline: Any, m: Any, state: Any) -> int:
    state.append_token({"type": "asciimark_action_item", "raw": m.group("asciimark_assignee")})
    return m.end()


def parse_issue_link(inline: Any, m: Any, state: Any) -> int:
    state.append_token({"type": "asciimark_issue_link", "raw": m.group("asciimark_issue")})
    return m.end()


def extensions_plugin(md: Any) -> None:
    """Mistune plugin registering the cross-referencing inline syntax."""
    md.inline.register("asciimark_label", LABEL_PATTERN, parse_label, before="link")
    md.inline.register("asciimark_reference", REFERENCE_PATTERN, parse_reference, before="link")
    md.inline.register("asciimark_action_item", ACTION_ITEM_PATTERN, parse_action_item, before="link")
    md.inline.register("asciimark_issue_link", ISSUE_LINK_PATTERN, parse_issue_link, before="link")


def _is_html_comment(content: str) -> bool:
    stripped = content.strip()
    return stripped.startswith("<!--") and stripped.endswith("-->")


def _is_processing_instruction(content: str) -> bool:
    stripped = content.strip()
    return stripped.startswith("<?") and stripped.endswith("?>")


class MarkdownParser(BaseParser):
    r"""Convert Markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> tree = parser.parse("# Hello\\n\\nSee [ref:++].")

    Without the cross-referencing syntax:

        >>> parser = MarkdownParser(MarkdownParserOptions(parse_extensions=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, text: str) -> Element:
        """Parse Markdown text into a document tree.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        Element
            ``root`` node of the tree

        Raises
        ------
        ParsingError
            If mistune fails on the input
        DependencyError
            If mistune is not installed

        """
        import mistune

        plugins: list[Any] = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_math:
            plugins.append("math")
        if self.options.parse_definition_lists:
            plugins.append("def_list")
        if self.options.parse_abbreviations:
            plugins.append("abbr")
        if self.options.parse_extensions:
            plugins.append(extensions_plugin)

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            tokens, _state = markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug("Parsed %d top-level blocks", len(children))
        return root(*children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Element]:
        nodes: list[Element] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[Element]:
        """Process a single block-level mistune token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Element or None
            Resulting node, or None for tokens without a counterpart

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Element(NodeType.PARAGRAPH, children=self._inline_children(token))
        elif token_type == "blank_line":
            return Element(NodeType.BLANK)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return Element(NodeType.BLOCKQUOTE, children=self._block_children(token))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "list_item":
            return Element(NodeType.LIST_ITEM, children=self._block_children(token))
        elif token_type == "thematic_break":
            return Element(NodeType.HORIZONTAL_RULE)
        elif token_type == "block_html":
            return self._process_html(token.get("raw", ""), "block")
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "block_math":
            return Element(NodeType.MATH, token.get("raw", ""), options={"category": "block"})
        elif token_type == "def_list":
            return self._process_definition_list(token)

        logger.debug("Skipping mistune block token %r", token_type)
        return None

    def _inline_children(self, token: dict[str, Any]) -> list[Element]:
        children = token.get("children", [])
        return self._process_inline_tokens(children) if isinstance(children, list) else []

    def _block_children(self, token: dict[str, Any]) -> list[Element]:
        children = token.get("children", [])
        return self._process_tokens(children) if isinstance(children, list) else []

    def _process_heading(self, token: dict[str, Any]) -> Element:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1:
            level = 1
        return Element(NodeType.HEADER, HeaderValue(level=level), children=self._inline_children(token))

    def _process_code_block(self, token: dict[str, Any]) -> Element:
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        options: dict[str, Any] = {}
        if info_string and info_string.strip():
            options["language"] = info_string.split(maxsplit=1)[0]
        return Element(NodeType.CODEBLOCK, token.get("raw", ""), options=options)

    def _process_list(self, token: dict[str, Any]) -> Element:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'attrs' (ordered, start)

        Returns
        -------
        Element
            ``ordered-list`` or ``unordered-list`` node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        if not attrs.get("ordered", False):
            return Element(NodeType.UNORDERED_LIST, children=self._block_children(token))

        options: dict[str, Any] = {}
        start = attrs.get("start", 1)
        if isinstance(start, int) and start != 1:
            options["start"] = start
        return Element(NodeType.ORDERED_LIST, children=self._block_children(token), options=options)

    def _process_table(self, token: dict[str, Any]) -> Element:
        """Process table token.

        Header cells are direct children of ``table_head`` in mistune's
        output; they are wrapped in a row so every section holds rows.

        """
        sections = []
        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                row = Element(NodeType.TABLE_ROW, children=self._table_cells(section))
                sections.append(Element(NodeType.TABLE_HEAD, children=[row]))
            elif section_type == "table_body":
                rows = [
                    Element(NodeType.TABLE_ROW, children=self._table_cells(row_token))
                    for row_token in section.get("children", [])
                ]
                sections.append(Element(NodeType.TABLE_BODY, children=rows))
        return Element(NodeType.TABLE, children=sections)

    def _table_cells(self, row_token: dict[str, Any]) -> list[Element]:
        cells = []
        for cell_token in row_token.get("children", []):
            attrs = cell_token.get("attrs", {})
            align = attrs.get("align") if isinstance(attrs, dict) else None
            cells.append(
                Element(
                    NodeType.TABLE_CELL,
                    children=self._inline_children(cell_token),
                    options={"align": align} if align else {},
                )
            )
        return cells

    def _process_definition_list(self, token: dict[str, Any]) -> Element:
        children = []
        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                term = self._inline_children(child)
                if not term and child.get("text"):
                    term = [Element(NodeType.TEXT, child["text"])]
                children.append(Element(NodeType.DEFINITION_TERM, children=term))
            elif child_type == "def_list_item":
                children.append(Element(NodeType.DEFINITION_DESCRIPTION, children=self._block_children(child)))
        return Element(NodeType.DEFINITION_LIST, children=children)

    def _process_html(self, content: str, category: Category) -> Element:
        if _is_html_comment(content):
            node_type = NodeType.XML_COMMENT
        elif _is_processing_instruction(content):
            node_type = NodeType.XML_PROCESSING_INSTRUCTION
        else:
            node_type = NodeType.RAW_HTML_ELEMENT
        return Element(node_type, content, options={"category": category})

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Element]:
        nodes: list[Element] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Element:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        attr = {"href": attrs.get("url", "")}
        if attrs.get("title"):
            attr["title"] = attrs["title"]
        return Element(NodeType.LINK, children=self._inline_children(token), attr=attr)

    def _handle_image_token(self, token: dict[str, Any]) -> Element:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        attr = {"src": attrs.get("url", "")}
        # Alt text is in children, not attrs
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        if alt_text:
            attr["alt"] = alt_text
        if attrs.get("title"):
            attr["title"] = attrs["title"]
        return Element(NodeType.IMAGE, attr=attr)

    def _handle_abbr_token(self, token: dict[str, Any]) -> Element:
        """Handle abbreviation token; the definition becomes the title."""
        attrs = token.get("attrs", {})
        title = attrs.get("title", "") if isinstance(attrs, dict) else ""
        text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        return Element(NodeType.ABBREVIATION, text, attr={"title": title} if title else {})

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Element]:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Element or None
            Inline node

        """
        token_type = token.get("type", "")
        raw = token.get("raw", "")

        if token_type == "text":
            return Element(NodeType.TEXT, raw)
        elif token_type == "softbreak":
            return Element(NodeType.TEXT, "\n")
        elif token_type == "linebreak":
            return Element(NodeType.LINE_BREAK)
        elif token_type in ("emphasis", "strikethrough"):
            return Element(NodeType.EMPHASIS, children=self._inline_children(token))
        elif token_type == "strong":
            return Element(NodeType.STRONG, children=self._inline_children(token))
        elif token_type == "codespan":
            return Element(NodeType.INLINE_CODE, raw)
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        elif token_type == "inline_html":
            return self._process_html(raw, "span")
        elif token_type == "inline_math":
            return Element(NodeType.MATH, raw, options={"category": "span"})
        elif token_type == "block_math":
            # $$...$$ inside a paragraph
            return Element(NodeType.MATH, raw, options={"category": "block"})
        elif token_type == "abbr":
            return self._handle_abbr_token(token)
        elif token_type == "footnote_ref":
            # raw holds the footnote key
            return Element(NodeType.FOOTNOTE, raw)
        elif token_type == "asciimark_label":
            return Element(NodeType.LABEL, raw)
        elif token_type == "asciimark_reference":
            return Element(NodeType.REFERENCE, raw)
        elif token_type == "asciimark_action_item":
            return Element(NodeType.ACTION_ITEM, options={"assignee": raw})
        elif token_type == "asciimark_issue_link":
            return Element(NodeType.ISSUE_LINK, options={"match": raw})

        logger.debug("Skipping mistune inline token %r", token_type)
        return None


def markdown_to_tree(markdown_content: str, options: MarkdownParserOptions | None = None) -> Element:
    r"""Convert a Markdown string to a document tree.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Element
        ``root`` node of the tree

    Examples
    --------
    >>> tree = markdown_to_tree("# Hello\\n\\nWorld")
    >>> [str(child.type) for child in tree.children]
    ['header', 'blank', 'paragraph']

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "extensions_plugin", "markdown_to_tree"]
