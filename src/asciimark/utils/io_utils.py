#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/utils/io_utils.py
"""I/O utilities for handling output destinations.

Rendered text is written to a file path or to a text or binary file-like
object.

"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to an output destination.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: Writes content to the file at that path (UTF-8)
        - IO[bytes]: Writes UTF-8 encoded content to a binary stream
        - IO[str]: Writes content to a text stream

    Raises
    ------
    TypeError
        If content is not text or the output type is not supported

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if hasattr(output, "write"):
        if isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
