#  Copyright (c) 2025 Tom Villani, Ph.D.
# asciimark/options/ascii.py
"""Configuration options for ASCII rendering.

This module defines options for rendering document trees to fixed-width
plain text.
"""

import os
from dataclasses import dataclass, field

from asciimark.constants import (
    DEBUG_ENV_VAR,
    DEFAULT_BLOCKQUOTE_INDENT,
    DEFAULT_INDENT_STEP,
    DEFAULT_MAX_COLUMN,
    DEFAULT_NESTING_POLICY,
    DEFAULT_SEPARATOR_WIDTH,
    DEFAULT_TABLE_CELL_SEPARATOR,
    TRUTHY_ENV_VALUES,
    NestingPolicy,
)
from asciimark.options.base import BaseRendererOptions


def debug_from_environment() -> bool:
    """Return True when the debug environment variable holds a truthy value."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in TRUTHY_ENV_VALUES


@dataclass(frozen=True)
class AsciiRendererOptions(BaseRendererOptions):
    """Configuration options for ASCII rendering.

    Parameters
    ----------
    max_column : int, default 80
        Column budget for wrapped text and width of horizontal rules.
    indent_step : int, default 2
        Extra indentation of definition descriptions.
    blockquote_indent : int, default 4
        Extra indentation of blockquote content.
    separator_width : int, default 23
        Number of dashes in the rule that brackets blockquotes and code.
    wrap_text : bool, default True
        Whether to wrap span text to the column budget.
    table_cell_separator : str, default " | "
        Separator between the cells of a table row.
    nesting_policy : {"flatten", "reject"}, default "flatten"
        What to do with a block node found directly inside a span node:
        - "flatten": collapse its text into the span and log a warning
        - "reject": raise MalformedTreeError
    debug : bool
        Wrap every node's output in ``<BLOCK:kind>``/``<SPAN:kind>`` tags and
        log the tree structure. Defaults to the value of the
        ``ASCIIMARK_DEBUG`` environment variable when the options are built.

    Examples
    --------
        >>> from asciimark.renderers.ascii import AsciiRenderer
        >>> options = AsciiRendererOptions(max_column=60)
        >>> renderer = AsciiRenderer(options)
        >>> text = renderer.render_to_string(tree)

    """

    max_column: int = field(
        default=DEFAULT_MAX_COLUMN,
        metadata={"help": "Column budget for wrapping and horizontal rules", "type": int, "importance": "core"},
    )
    indent_step: int = field(
        default=DEFAULT_INDENT_STEP,
        metadata={"help": "Indentation of definition descriptions", "type": int, "importance": "advanced"},
    )
    blockquote_indent: int = field(
        default=DEFAULT_BLOCKQUOTE_INDENT,
        metadata={"help": "Indentation of blockquote content", "type": int, "importance": "advanced"},
    )
    separator_width: int = field(
        default=DEFAULT_SEPARATOR_WIDTH,
        metadata={"help": "Width of the rule around blockquotes and code", "type": int, "importance": "advanced"},
    )
    wrap_text: bool = field(
        default=True,
        metadata={"help": "Wrap text to the column budget", "importance": "core"},
    )
    table_cell_separator: str = field(
        default=DEFAULT_TABLE_CELL_SEPARATOR,
        metadata={"help": "Separator between table cells", "type": str, "importance": "advanced"},
    )
    nesting_policy: NestingPolicy = field(
        default=DEFAULT_NESTING_POLICY,
        metadata={
            "help": "Handling of block nodes nested in span nodes",
            "choices": ["flatten", "reject"],
            "importance": "advanced",
        },
    )
    debug: bool = field(
        default_factory=debug_from_environment,
        metadata={"help": "Tag output with node kinds and log the tree structure", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate layout values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.max_column < 1:
            raise ValueError(f"max_column must be positive, got {self.max_column}")
        for name in ("indent_step", "blockquote_indent", "separator_width"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.nesting_policy not in ("flatten", "reject"):
            raise ValueError(f"nesting_policy must be 'flatten' or 'reject', got {self.nesting_policy!r}")
