"""The exported API function for ASCII conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/asciimark/api.py

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Union

from asciimark.ast.nodes import Element
from asciimark.exceptions import ValidationError
from asciimark.options.ascii import AsciiRendererOptions
from asciimark.options.markdown import MarkdownParserOptions
from asciimark.parsers.markdown import MarkdownParser
from asciimark.renderers.ascii import AsciiRenderer
from asciimark.utils.decorators import debug_timer
from asciimark.utils.io_utils import write_content

logger = logging.getLogger(__name__)


def _options_with_overrides(options: Optional[AsciiRendererOptions], **kwargs: Any) -> AsciiRendererOptions:
    options = options or AsciiRendererOptions()
    if not kwargs:
        return options

    known = {f.name for f in fields(AsciiRendererOptions)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ValidationError(
            f"Unknown rendering option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )
    return options.create_updated(**kwargs)


def to_ascii(
    source: Union[str, Path, Element],
    *,
    options: Optional[AsciiRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Convert Markdown text or a document tree to fixed-width ASCII text.

    Parameters
    ----------
    source : str, Path, or Element
        Markdown text, a path to a Markdown file, or an already-built tree
    options : AsciiRendererOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Options for the Markdown adapter; ignored when ``source`` is a tree
    output : str, Path, IO[bytes], IO[str], optional
        Where to also write the rendered text
    kwargs : Any
        Individual rendering options overriding fields of ``options``
        (e.g. ``max_column=60``)

    Returns
    -------
    str
        Rendered text

    Raises
    ------
    ValidationError
        If a keyword does not name a rendering option
    ParsingError
        If the Markdown adapter fails
    DependencyError
        If Markdown input is given and mistune is not installed
    MalformedTreeError
        If the tree nests a block inside a span under the ``reject`` policy

    Examples
    --------
    >>> print(to_ascii("# Title\\n\\nSee [ref:intro].\\n"), end="")
    1) Title
    <BLANKLINE>
    See (???).

    """
    renderer_options = _options_with_overrides(options, **kwargs)

    if isinstance(source, Element):
        tree = source
    else:
        text = Path(source).read_text(encoding="utf-8") if isinstance(source, Path) else source
        with debug_timer(logger, "Parsing (markdown)"):
            tree = MarkdownParser(parser_options).parse(text)

    result = AsciiRenderer(renderer_options).render_to_string(tree)
    if output is not None:
        write_content(result, output)
    return result


__all__ = ["to_ascii"]
