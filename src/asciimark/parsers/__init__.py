#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/parsers/__init__.py
"""Parsers building asciimark document trees from source text.

The Markdown parser requires the optional ``mistune`` dependency, which is
checked when ``parse`` is called.
"""

from asciimark.parsers.base import BaseParser
from asciimark.parsers.markdown import MarkdownParser, markdown_to_tree

__all__ = ["BaseParser", "MarkdownParser", "markdown_to_tree"]
