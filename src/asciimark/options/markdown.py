#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the options of the mistune-based markdown adapter.
"""
# src/asciimark/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from asciimark.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references.
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_definition_lists : bool, default True
        Whether to parse definition lists (term : definition).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_abbreviations : bool, default True
        Whether to parse abbreviations defined by ``*[ABBR]: Definition``
        lines; the definitions themselves are removed from the output.
    parse_extensions : bool, default True
        Whether to parse the cross-referencing syntax: ``[label:ID]``,
        ``[ref:EXPR]``, ``-->(NAME)`` and issue links (``#12``,
        ``owner/repo#12``).

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references", "importance": "core"},
    )
    parse_math: bool = field(
        default=True,
        metadata={"help": "Parse inline and block math ($...$ and $$...$$)", "importance": "core"},
    )
    parse_definition_lists: bool = field(
        default=True,
        metadata={"help": "Parse definition lists (term : definition)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_abbreviations: bool = field(
        default=True,
        metadata={"help": "Parse abbreviation definitions (*[ABBR]: Definition)", "importance": "advanced"},
    )
    parse_extensions: bool = field(
        default=True,
        metadata={"help": "Parse label, reference, action-item and issue-link syntax", "importance": "core"},
    )
