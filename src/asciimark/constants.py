#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/constants.py
"""Constants and default values for the asciimark library.

This module centralizes the layout numbers, lookup tables and literal
strings used across the reference pass and the renderer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Layout - Column budget, indentation and separator widths
3. Substitution Tables - ASCII approximations of typographic characters
4. References - Placeholder text and reference syntax
5. Environment and Dependencies
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Category = Literal["block", "span"]
NestingPolicy = Literal["flatten", "reject"]
MarkStyle = Literal["decimal", "lower-alpha", "upper-alpha"]

# =============================================================================
# Layout
# =============================================================================

DEFAULT_MAX_COLUMN = 80
DEFAULT_INDENT_STEP = 2
DEFAULT_BLOCKQUOTE_INDENT = 4
DEFAULT_SEPARATOR_WIDTH = 23
DEFAULT_TABLE_CELL_SEPARATOR = " | "
DEFAULT_NESTING_POLICY: NestingPolicy = "flatten"

UNORDERED_BULLET = "*"

# Ordered-list mark styles, cycled by ordered-list nesting depth
ORDERED_MARK_STYLES: tuple[MarkStyle, ...] = ("decimal", "lower-alpha", "upper-alpha")

# =============================================================================
# Substitution Tables
# =============================================================================

TYPOGRAPHIC_SYMBOLS: dict[str, str] = {
    "mdash": "---",
    "ndash": "--",
    "hellip": "...",
    "laquo_space": "<<",
    "raquo_space": ">>",
    "laquo": "<< ",
    "raquo": " >>",
}

SMART_QUOTES: dict[str, str] = {
    "lsquo": "'",
    "rsquo": "'",
    "ldquo": '"',
    "rdquo": '"',
}

# =============================================================================
# References
# =============================================================================

UNRESOLVED_REFERENCE = "(???)"

# A run of "+" (forward) or "-" (backward); the run length is the distance
RELATIVE_REFERENCE_PATTERN = re.compile(r"^(\++|-+)$")

# Debug markers are zero-width for wrapping purposes
DEBUG_MARKER_PATTERN = re.compile(r"</?(?:BLOCK|SPAN):[a-z-]+>")

# =============================================================================
# Environment and Dependencies
# =============================================================================

DEBUG_ENV_VAR = "ASCIIMARK_DEBUG"
TRUTHY_ENV_VALUES = frozenset({"1", "true", "yes", "on"})

DEPS_MARKDOWN = [("mistune", "mistune")]
