#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/options/__init__.py
"""Options classes for the markdown adapter and the ASCII renderer."""

from asciimark.options.ascii import AsciiRendererOptions
from asciimark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from asciimark.options.markdown import MarkdownParserOptions

__all__ = [
    "AsciiRendererOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
]
