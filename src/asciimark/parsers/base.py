#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class parsers inherit from. A parser
turns source text into an asciimark document tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from asciimark.ast.nodes import Element
from asciimark.exceptions import InvalidOptionsError
from asciimark.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, text: str) -> Element:
        """Parse source text into a document tree.

        Parameters
        ----------
        text : str
            Source text

        Returns
        -------
        Element
            Root node of the parsed tree

        Raises
        ------
        ParsingError
            If the source cannot be turned into a tree
        DependencyError
            If a required package is not installed

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )


__all__ = ["BaseParser"]
