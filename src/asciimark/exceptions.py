#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the asciimark library.

This module defines the exception classes raised while building, resolving
and rendering document trees. Broken cross-references are deliberately not
represented here: they render as a placeholder instead of raising.

Exception Hierarchy
-------------------
- AsciiMarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (markdown adapter failures)

  - RenderingError (output generation failures)
    - MalformedTreeError (structural invariant violations)

  - DependencyError (missing optional packages)

"""

from typing import Any


class AsciiMarkError(Exception):
    """Base exception class for all asciimark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AsciiMarkError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing MarkdownParserOptions to the ASCII renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(AsciiMarkError):
    """Exception raised when the markdown adapter cannot build a tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(AsciiMarkError):
    """Exception raised when output rendering fails.

    Raised when the renderer meets a node kind that has no conversion rule,
    which means the node taxonomy and the dispatch table disagree.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MalformedTreeError(RenderingError):
    """Exception raised when a tree violates a structural invariant.

    The renderer raises this for a span node that directly contains a block
    node when the ``reject`` nesting policy is selected.

    Parameters
    ----------
    message : str
        Description of the violation
    node_type : str, optional
        Kind of the offending node

    """

    def __init__(self, message: str, node_type: str | None = None):
        """Initialize the malformed tree error."""
        super().__init__(message, rendering_stage="structure")
        self.node_type = node_type


class DependencyError(AsciiMarkError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[str]
        Install names of the packages that could not be imported
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError encountered

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[str],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = (
                f"{converter_name} requires the following packages: {pkg_list}\n"
                f"Install with: pip install {' '.join(missing_packages)}"
            )
        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.original_import_error = original_import_error


__all__ = [
    "AsciiMarkError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "MalformedTreeError",
    "DependencyError",
]
