#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/renderers/ascii.py
"""Fixed-width ASCII rendering from document trees.

This module provides the AsciiRenderer class which converts a parsed
markdown tree into indented, wrapped plain text. Structure survives through
layout rather than markup:

- headers and list items hang under a bullet (``1.2)``, ``(a)``, ``*``)
- blockquotes and code are bracketed by a rule of dashes
- span text is wrapped to the column budget and indented with its block
- cross-references are resolved into the marks of their targets

Rendering is a two-stage pipeline. ``render_to_string`` first runs the
reference pass (``asciimark.ast.references.resolve``), then converts the
annotated tree top-down. Each block conversion returns text that is already
indented to the indent it was given and ends with exactly one newline; each
span conversion returns raw inline text that its enclosing block wraps and
indents.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Optional, Union

from asciimark.ast.nodes import Element, ListItemValue, NodeType
from asciimark.ast.references import resolve
from asciimark.ast.visitors import VISIT_METHODS, NodeVisitor, format_tree
from asciimark.constants import (
    DEBUG_MARKER_PATTERN,
    SMART_QUOTES,
    TYPOGRAPHIC_SYMBOLS,
    UNORDERED_BULLET,
    UNRESOLVED_REFERENCE,
)
from asciimark.exceptions import MalformedTreeError, RenderingError
from asciimark.options.ascii import AsciiRendererOptions
from asciimark.renderers.base import BaseRenderer
from asciimark.renderers.resolver import ReferenceResolver
from asciimark.utils.decorators import debug_timer
from asciimark.utils.width import display_width, wrap_text

logger = logging.getLogger(__name__)

# A newline and the indentation that follows it, removed from inline formatting
_SPAN_NEWLINE = re.compile(r"\n *")
_CELL_NEWLINE = re.compile(r"\s*\n\s*")
# Whitespace followed only by debug markers up to the end of the line
_SPACE_BEFORE_TRAILING_MARKERS = re.compile(rf"[ \t]+(?=(?:{DEBUG_MARKER_PATTERN.pattern}|[ \t])*$)")
# Whitespace and debug markers at the start of span text
_LEADING_SPACE = re.compile(rf"^(?:{DEBUG_MARKER_PATTERN.pattern}|\s)+")
# NUL-delimited index of an inline code block held out of the span flow
_HELD_CODE = re.compile(r"\x00(\d+)\x00")


class AsciiRenderer(NodeVisitor, BaseRenderer, exhaustive=True):
    """Render document trees to fixed-width plain text.

    Every node kind has a ``visit_*`` method taking ``(node, indent)`` and
    returning a string; the class fails to build if one is missing.

    Parameters
    ----------
    options : AsciiRendererOptions or None, default = None
        ASCII rendering options

    Examples
    --------
    Basic usage:

        >>> from asciimark.ast.builder import header, paragraph, root, text
        >>> tree = root(header(1, text("Title")), paragraph(text("Body text.")))
        >>> print(AsciiRenderer().render_to_string(tree), end="")
        1) Title
        Body text.

    """

    def __init__(self, options: AsciiRendererOptions | None = None):
        """Initialize the ASCII renderer with options."""
        BaseRenderer._validate_options_type(options, AsciiRendererOptions, "ascii")
        options = options or AsciiRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AsciiRendererOptions = options
        self._resolver: Optional[ReferenceResolver] = None
        self._held_code: list[str] = []

    def render_to_string(self, tree: Element) -> str:
        """Render a document tree to plain text.

        The input tree is not modified; the reference pass works on a copy.

        Parameters
        ----------
        tree : Element
            Root of the parsed tree

        Returns
        -------
        str
            Rendered text ending with a single newline

        Raises
        ------
        RenderingError
            If a node kind has no conversion rule
        MalformedTreeError
            If a span node contains a block node under the ``reject`` policy

        """
        resolved = resolve(tree)
        if self.options.debug:
            logger.debug("Document tree:\n%s", format_tree(resolved.tree))

        self._resolver = ReferenceResolver(resolved)
        self._held_code = []
        try:
            with debug_timer(logger, "ASCII rendering"):
                return self.convert(resolved.tree)
        finally:
            self._resolver = None

    def render(self, tree: Element, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a document tree to a file path or stream."""
        self.write_text_output(self.render_to_string(tree), output)

    def convert(self, node: Element, indent: int = 0) -> str:
        """Convert ``node`` and its subtree at the given indentation.

        Parameters
        ----------
        node : Element
            Node to convert
        indent : int, default = 0
            Column at which block output starts; negative values are clamped
            to 0

        Returns
        -------
        str
            Block text (indented, newline-terminated) or span text

        """
        if node.type not in VISIT_METHODS:
            raise RenderingError(f"No conversion rule for node kind {node.type!r}", rendering_stage="dispatch")

        result = node.accept(self, max(0, indent))
        if self.options.debug:
            result = self._tag(node, result)
        return result

    def generic_visit(self, node: Element, *args: object) -> str:
        raise RenderingError(f"No conversion rule for node kind {node.type!r}", rendering_stage="dispatch")

    # ------------------------------------------------------------------
    # Layout helpers
    # ------------------------------------------------------------------

    def _is_blank(self, line: str) -> bool:
        if self.options.debug:
            line = DEBUG_MARKER_PATTERN.sub("", line)
        return not line.strip()

    def _rstrip(self, line: str) -> str:
        if self.options.debug:
            return _SPACE_BEFORE_TRAILING_MARKERS.sub("", line)
        return line.rstrip()

    def _indent_lines(self, text: str, indent: int) -> str:
        prefix = " " * indent
        return "\n".join(line if self._is_blank(line) else prefix + self._rstrip(line) for line in text.split("\n"))

    def _lstrip(self, text: str) -> str:
        if self.options.debug:
            match = _LEADING_SPACE.match(text)
            if match is None:
                return text
            return "".join(DEBUG_MARKER_PATTERN.findall(match.group())) + text[match.end() :]
        return text.lstrip()

    def _hold_code(self, text: str) -> str:
        self._held_code.append(text)
        return f"\x00{len(self._held_code) - 1}\x00"

    def _flush_span(self, span: list[str], parts: list[str], indent: int, wrap: bool) -> None:
        text = "".join(span)
        span.clear()
        parts.append(self._layout_span(text, indent, wrap))

    def _layout_span(self, text: str, indent: int, wrap: bool) -> str:
        """Wrap and indent span text, giving held inline code lines of its own.

        Debug markers left over between two pieces of code are attached to
        the neighbouring output so the tags stay balanced.

        """
        chunks: list[str] = []
        markers = ""
        for index, piece in enumerate(_HELD_CODE.split(text)):
            if index % 2:
                chunk = self._held_code[int(piece)]
            elif self._is_blank(piece):
                if self.options.debug:
                    markers += "".join(DEBUG_MARKER_PATTERN.findall(piece))
                continue
            else:
                chunk = self._fill(piece, indent, wrap)

            if markers and chunks:
                chunks[-1] = chunks[-1][:-1] + markers + "\n"
                markers = ""
            elif markers:
                body = chunk.lstrip(" ")
                chunk = chunk[: len(chunk) - len(body)] + markers + body
                markers = ""
            chunks.append(chunk)

        if markers and chunks:
            chunks[-1] = chunks[-1][:-1] + markers + "\n"
        return "".join(chunks)

    def _fill(self, text: str, indent: int, wrap: bool) -> str:
        text = self._lstrip(text)
        if wrap and self.options.wrap_text:
            zero_width = DEBUG_MARKER_PATTERN if self.options.debug else None
            text = wrap_text(text, self.options.max_column - indent, zero_width=zero_width)
        return self._trim_end(self._indent_lines(text, indent)) + "\n"

    def _render_block(self, node: Element, indent: int, add_indent: int = 0, bullet: Optional[str] = None) -> str:
        """Render the children of a block node.

        Span children accumulate into a pending buffer that is wrapped and
        indented when a block child (or inline code) interrupts it and at
        the end. Block children are already indented by their own
        conversion.

        Parameters
        ----------
        node : Element
            Block node whose children are rendered
        indent : int
            Indentation of the node itself
        add_indent : int, default = 0
            Extra indentation for the children
        bullet : str, optional
            Bullet to hang the children under

        Returns
        -------
        str
            Indented text ending with exactly one newline

        """
        inner_indent = max(0, indent + add_indent)
        if bullet is not None:
            inner_indent = indent + display_width(bullet) + 1
        wrap = node.type != NodeType.BLOCKQUOTE and not node.has_ancestor(NodeType.BLOCKQUOTE)

        parts: list[str] = []
        span: list[str] = []
        for child in node.children:
            text = self.convert(child, inner_indent)
            if child.type == NodeType.INLINE_CODE:
                span.append(self._hold_code(text))
            elif child.category == "span":
                span.append(text)
            else:
                self._flush_span(span, parts, inner_indent, wrap)
                parts.append(text)
        self._flush_span(span, parts, inner_indent, wrap)

        body = "".join(parts)
        if bullet is not None:
            body = self._add_bullet(bullet, body, indent, inner_indent)
        return self._trim_end(body) + "\n"

    def _trim_end(self, text: str) -> str:
        lines = text.rstrip().split("\n")
        while len(lines) > 1 and self._is_blank(lines[-1]):
            lines.pop()
        return "\n".join(lines).rstrip()

    def _add_bullet(self, bullet: str, body: str, indent: int, inner_indent: int) -> str:
        lines = body.split("\n")
        while lines and self._is_blank(lines[0]):
            lines.pop(0)
        if not lines:
            return " " * indent + bullet

        first = lines[0]
        leading = min(len(first) - len(first.lstrip(" ")), inner_indent)
        lines[0] = f"{' ' * indent}{bullet} {first[leading:]}"
        return "\n".join(lines)

    def _render_inline(self, node: Element, indent: int) -> str:
        if not node.children:
            return "" if node.value is None else str(node.value)

        pieces = []
        for child in node.children:
            if child.type == NodeType.INLINE_CODE:
                pieces.append(self._hold_code(self.convert(child, indent)))
            elif child.category == "block":
                pieces.append(self._flatten_block(node, child, indent))
            else:
                pieces.append(self.convert(child, indent))
        return "".join(pieces)

    def _flatten_block(self, parent: Element, child: Element, indent: int) -> str:
        if self.options.nesting_policy == "reject":
            raise MalformedTreeError(
                f"Span node '{parent.type}' contains block node '{child.type}'", node_type=str(child.type)
            )
        logger.warning("Span node '%s' contains block node '%s'; flattening its text", parent.type, child.type)
        return " ".join(self.convert(child, 0).split())

    def _rule(self, indent: int) -> str:
        return " " * indent + "-" * self.options.separator_width

    def _verbatim(self, content: str, indent: int) -> str:
        if not content.endswith("\n"):
            content += "\n"
        if indent:
            prefix = " " * indent
            content = "".join(prefix + line if line.strip() else line for line in content.splitlines(keepends=True))
        rule = self._rule(indent)
        return f"{rule}\n{content}{rule}\n"

    def _tag(self, node: Element, text: str) -> str:
        kind = str(node.type)
        if node.category == "span" and node.type != NodeType.INLINE_CODE:
            return f"<SPAN:{kind}>{text}</SPAN:{kind}>"

        body = text.lstrip(" ")
        lead = text[: len(text) - len(body)]
        newline = ""
        if body.endswith("\n"):
            body, newline = body[:-1], "\n"
        return f"{lead}<BLOCK:{kind}>{body}</BLOCK:{kind}>{newline}"

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_root(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_blank(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_paragraph(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_header(self, node: Element, indent: int) -> str:
        """Render a header hanging under its section number (``2.1)``).

        Parameters
        ----------
        node : Element
            Header to render
        indent : int
            Current indentation

        """
        full_mark = node.full_mark
        bullet = f"{full_mark})" if full_mark else None
        return self._render_block(node, indent, bullet=bullet)

    def visit_horizontal_rule(self, node: Element, indent: int) -> str:
        return " " * indent + "-" * max(1, self.options.max_column - indent) + "\n"

    def visit_blockquote(self, node: Element, indent: int) -> str:
        """Render a blockquote between two rules, its content indented.

        Content inside a blockquote is never wrapped.

        """
        rule = self._rule(indent)
        body = self._render_block(node, indent, add_indent=self.options.blockquote_indent)
        return f"{rule}\n{body}{rule}\n"

    def visit_codeblock(self, node: Element, indent: int) -> str:
        """Render a code block verbatim between two rules.

        At indent 0 the content is reproduced byte for byte; otherwise
        non-blank lines are prefixed with the indentation.

        Parameters
        ----------
        node : Element
            Code block to render
        indent : int
            Current indentation

        """
        return self._verbatim("" if node.value is None else str(node.value), indent)

    def visit_unordered_list(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_ordered_list(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_list_item(self, node: Element, indent: int) -> str:
        """Render a list item under ``(mark)`` when ordered, ``*`` otherwise.

        Parameters
        ----------
        node : Element
            List item to render
        indent : int
            Current indentation

        """
        if isinstance(node.value, ListItemValue):
            bullet = f"({node.value.mark})"
        else:
            bullet = UNORDERED_BULLET
        return self._render_block(node, indent, bullet=bullet)

    def visit_table(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_table_head(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_table_body(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_table_foot(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_table_row(self, node: Element, indent: int) -> str:
        """Render a table row on one line with cells joined by the separator.

        Parameters
        ----------
        node : Element
            Table row to render
        indent : int
            Current indentation

        """
        cells = []
        for cell in node.children:
            content = self.convert(cell, 0).strip()
            # Remove newlines from cell content
            cells.append(_CELL_NEWLINE.sub(" ", content))
        return (" " * indent + self.options.table_cell_separator.join(cells)).rstrip() + "\n"

    def visit_table_cell(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_definition_list(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_definition_term(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent)

    def visit_definition_description(self, node: Element, indent: int) -> str:
        return self._render_block(node, indent, add_indent=self.options.indent_step)

    # ------------------------------------------------------------------
    # Span nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Element, indent: int) -> str:
        return "" if node.value is None else str(node.value)

    def visit_line_break(self, node: Element, indent: int) -> str:
        return "\n"

    def visit_emphasis(self, node: Element, indent: int) -> str:
        return _SPAN_NEWLINE.sub("", self._render_inline(node, indent))

    def visit_strong(self, node: Element, indent: int) -> str:
        return _SPAN_NEWLINE.sub("", self._render_inline(node, indent))

    def visit_entity(self, node: Element, indent: int) -> str:
        return _SPAN_NEWLINE.sub("", self._render_inline(node, indent))

    def visit_abbreviation(self, node: Element, indent: int) -> str:
        return _SPAN_NEWLINE.sub("", self._render_inline(node, indent))

    def visit_math(self, node: Element, indent: int) -> str:
        """Render math as plain text; block math takes a line of its own."""
        content = _SPAN_NEWLINE.sub("", self._render_inline(node, indent))
        if node.category == "block":
            return self._layout_span(content, indent, wrap=False)
        return content

    def visit_link(self, node: Element, indent: int) -> str:
        """Render a link as ``[text]`` when its only child is text, else its URL."""
        if len(node.children) == 1:
            child = node.children[0]
            if child.type == NodeType.TEXT and child.value:
                return f"[{child.value}]"
        return node.attr.get("href", "")

    def visit_image(self, node: Element, indent: int) -> str:
        return node.attr.get("src") or node.attr.get("href", "")

    def visit_inline_code(self, node: Element, indent: int) -> str:
        """Render inline code like a code block; it breaks the span flow."""
        return self._verbatim("" if node.value is None else str(node.value), indent)

    def visit_typographic_symbol(self, node: Element, indent: int) -> str:
        key = str(node.value)
        if key not in TYPOGRAPHIC_SYMBOLS:
            logger.warning("Unknown typographic symbol %r", key)
            return ""
        return TYPOGRAPHIC_SYMBOLS[key]

    def visit_smart_quote(self, node: Element, indent: int) -> str:
        key = str(node.value)
        if key not in SMART_QUOTES:
            logger.warning("Unknown smart quote %r", key)
            return ""
        return SMART_QUOTES[key]

    def visit_reference(self, node: Element, indent: int) -> str:
        """Render a cross-reference as the mark of its target, or ``(???)``."""
        if self._resolver is None:
            logger.warning("Reference %r rendered outside render_to_string; left unresolved", node.value)
            return UNRESOLVED_REFERENCE
        return self._resolver.resolve(node)

    def visit_action_item(self, node: Element, indent: int) -> str:
        return f"-->({node.options.get('assignee', '')})"

    def visit_issue_link(self, node: Element, indent: int) -> str:
        match = node.options.get("match", node.value)
        return "" if match is None else str(match)

    def visit_raw_passthrough(self, node: Element, indent: int) -> str:
        content = "" if node.value is None else str(node.value)
        return content + "\n" if node.category == "block" else content

    # Suppressed kinds

    def visit_footnote(self, node: Element, indent: int) -> str:
        return ""

    def visit_label(self, node: Element, indent: int) -> str:
        return ""

    def visit_raw_html_element(self, node: Element, indent: int) -> str:
        return ""

    def visit_xml_comment(self, node: Element, indent: int) -> str:
        return ""

    def visit_xml_processing_instruction(self, node: Element, indent: int) -> str:
        return ""


__all__ = ["AsciiRenderer"]
