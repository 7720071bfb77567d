#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class renderers inherit from. The
BaseRenderer provides a consistent interface for converting an asciimark
document tree into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from asciimark.ast.nodes import Element
from asciimark.exceptions import InvalidOptionsError
from asciimark.options.base import BaseRendererOptions
from asciimark.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render(self, tree, output):
        ...         self.write_text_output(self.render_to_string(tree), output)
        ...
        ...     def render_to_string(self, tree):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, tree: Element, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree to the specified output.

        Parameters
        ----------
        tree : Element
            Root node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode

        Raises
        ------
        RenderingError
            If rendering fails
        IOError
            If output cannot be written

        """
        pass

    def render_to_string(self, tree: Element) -> str:
        """Render the tree to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("1) Title", buffer)
            >>> print(buffer.getvalue())
            1) Title

        """
        write_content(text, output)


__all__ = ["BaseRenderer"]
