#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/utils/__init__.py
"""Utility modules for asciimark package.

This package contains width measurement and wrapping, output helpers and
dependency-checking decorators.
"""

from asciimark.utils.io_utils import write_content
from asciimark.utils.width import char_width, display_width, wrap_text

__all__ = [
    "char_width",
    "display_width",
    "wrap_text",
    "write_content",
]
