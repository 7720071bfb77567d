"""asciimark - Render parsed Markdown as fixed-width ASCII plain text.

asciimark turns a Markdown document tree into indented, wrapped plain text
for terminals, e-mail and other fixed-width media. Structure is kept through
layout: section numbers hang in front of headings, list items carry their
marks, blockquotes and code are set off by rules. Cross-references written
in the source (``[ref:intro]``, ``[ref:++]``) are replaced by the marks of
their targets.

Requirements
------------
- Python 3.10+
- mistune 3 for parsing Markdown text

Examples
--------
Render Markdown text:

    >>> from asciimark import to_ascii
    >>> print(to_ascii("# Intro [label:intro]\\n\\nSee [ref:intro].\\n"), end="")
    1) Intro
    <BLANKLINE>
    See (1).

Render a tree built by hand:

    >>> from asciimark.ast import builder
    >>> from asciimark.renderers import AsciiRenderer
    >>> tree = builder.root(builder.ordered_list(builder.list_item(builder.text("first"))))
    >>> AsciiRenderer().render_to_string(tree)
    '(1) first\\n'

See Also
--------
asciimark.ast : Node definitions, visitors and the reference pass
asciimark.renderers : The ASCII renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "asciimark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from asciimark.api import to_ascii  # noqa: E402
from asciimark.ast.nodes import Element, NodeType  # noqa: E402
from asciimark.exceptions import (  # noqa: E402
    AsciiMarkError,
    DependencyError,
    InvalidOptionsError,
    MalformedTreeError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from asciimark.options import AsciiRendererOptions, MarkdownParserOptions  # noqa: E402
from asciimark.renderers.ascii import AsciiRenderer  # noqa: E402

__all__ = [
    "__version__",
    "to_ascii",
    "Element",
    "NodeType",
    "AsciiRenderer",
    "AsciiRendererOptions",
    "MarkdownParserOptions",
    "AsciiMarkError",
    "DependencyError",
    "InvalidOptionsError",
    "MalformedTreeError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
