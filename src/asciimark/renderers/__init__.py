#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/asciimark/renderers/__init__.py
"""Renderers for converting document trees to text.

- AsciiRenderer: Render to fixed-width ASCII plain text
- ReferenceResolver: Resolve cross-references during rendering

Examples
--------
    >>> from asciimark.ast.builder import header, root, text
    >>> from asciimark.renderers import AsciiRenderer
    >>> AsciiRenderer().render_to_string(root(header(1, text("Title"))))
    '1) Title\n'

"""

from asciimark.renderers.ascii import AsciiRenderer
from asciimark.renderers.base import BaseRenderer
from asciimark.renderers.resolver import ReferenceResolver

__all__ = ["AsciiRenderer", "BaseRenderer", "ReferenceResolver"]
