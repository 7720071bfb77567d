#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/asciimark/utils/width.py
"""Column width measurement and greedy line wrapping.

Width follows a simple byte rule: a character whose UTF-8 encoding is a
single byte occupies one column, any other character occupies two, so every
non-ASCII character counts as double-width.

Unlike ``textwrap.fill``, ``wrap_text`` measures with ``display_width`` and
may break between two double-width characters without whitespace. Marker
substrings (debug tags) can be measured as zero-width.

"""

from __future__ import annotations

import re
from typing import Optional, Pattern

_WHITESPACE = re.compile(r"\s+")


def char_width(char: str) -> int:
    """Return the column width of a single character.

    Characters that cannot be encoded (lone surrogates) count as one column.

    Examples
    --------
    >>> char_width("a"), char_width("é"), char_width("中")
    (1, 2, 2)

    """
    try:
        return 1 if len(char.encode("utf-8")) == 1 else 2
    except UnicodeEncodeError:
        return 1


def display_width(text: str, zero_width: Optional[Pattern[str]] = None) -> int:
    """Return the column width of ``text``.

    Parameters
    ----------
    text : str
        Text to measure. Newlines are measured like any other character.
    zero_width : Pattern, optional
        Substrings matching this pattern are not counted

    Returns
    -------
    int
        Sum of the widths of the characters

    Examples
    --------
    >>> display_width("abc")
    3
    >>> display_width("日本")
    4

    """
    if zero_width is not None:
        text = zero_width.sub("", text)
    return sum(char_width(char) for char in text)


def _token_pattern(zero_width: Optional[Pattern[str]]) -> Pattern[str]:
    if zero_width is None:
        return re.compile(r"(?P<space>\s+)|(?P<word>[!-~]+)|(?P<wide>.)", re.DOTALL)
    marker = zero_width.pattern
    return re.compile(
        rf"(?P<marker>{marker})|(?P<space>\s+)|(?P<word>(?:(?!{marker})[!-~])+)|(?P<wide>.)",
        re.DOTALL,
    )


class _LineFiller:
    """Greedy filler for a single hard line."""

    def __init__(self, width: int, zero_width: Optional[Pattern[str]]) -> None:
        self.width = width
        self.zero_width = zero_width
        self.lines: list[str] = []
        self.current = ""
        self.current_width = 0
        self.has_word = False

    def break_line(self) -> None:
        carry = ""
        line = self.current
        if self.zero_width is not None:
            line, carry = self._split_trailing_markers(line)
        self.lines.append(line.rstrip())
        self.current = carry
        self.current_width = 0
        self.has_word = False

    def _split_trailing_markers(self, line: str) -> tuple[str, str]:
        # Markers after the last whitespace belong to the next line
        assert self.zero_width is not None
        index = len(line)
        while index > 0:
            stripped = line[:index].rstrip()
            if len(stripped) != index:
                index = len(stripped)
                continue
            match = None
            for candidate in self.zero_width.finditer(line[:index]):
                if candidate.end() == index:
                    match = candidate
            if match is None:
                break
            index = match.start()
        tail = line[index:]
        space = _WHITESPACE.search(tail)
        if space is None:
            return line, ""
        return line[: index + space.start()], "".join(self.zero_width.findall(tail[space.start() :]))

    def add_marker(self, marker: str) -> None:
        self.current += marker

    def add_space(self, space: str) -> None:
        if self.lines and not self.has_word:
            # Whitespace at a break is dropped
            return
        space_width = display_width(space)
        if self.current_width + space_width > self.width:
            if self.has_word:
                self.break_line()
            else:
                # Leading indentation that cannot fit is dropped
                self._drop_whitespace()
            return
        self.current += space
        self.current_width += space_width

    def add_word(self, word: str) -> None:
        word_width = display_width(word)
        if self.current_width + word_width <= self.width:
            self._append(word, word_width)
            return
        if self.has_word:
            self.break_line()
        elif self.current_width:
            self._drop_whitespace()
        if word_width <= self.width:
            self._append(word, word_width)
            return
        for char in word:
            width = char_width(char)
            if self.has_word and self.current_width + width > self.width:
                self.break_line()
            self._append(char, width)

    def _drop_whitespace(self) -> None:
        markers = self.zero_width.findall(self.current) if self.zero_width is not None else []
        self.current = "".join(markers)
        self.current_width = 0

    def _append(self, text: str, width: int) -> None:
        self.current += text
        self.current_width += width
        self.has_word = True

    def finish(self) -> list[str]:
        if self.has_word or not self.lines:
            self.lines.append(self.current.rstrip())
        elif self.current.strip():
            # Only markers remain; keep them on the last line
            self.lines[-1] += self.current.strip()
        return self.lines


def wrap_text(text: str, width: int, zero_width: Optional[Pattern[str]] = None) -> str:
    """Greedily wrap ``text`` so each line fits in ``width`` columns.

    Existing newlines are hard breaks. Breaks prefer whitespace, which is
    dropped at the break. A run of double-width characters may break
    between any two of them. A word wider than the budget is split between
    characters. Leading whitespace of a hard line is kept when it fits.
    Wrapped lines carry no trailing whitespace.

    A line exceeds ``width`` only when it holds a single character wider
    than the budget.

    Parameters
    ----------
    text : str
        Text to wrap
    width : int
        Column budget; values below 1 are treated as 1
    zero_width : Pattern, optional
        Substrings matching this pattern are kept intact and measured as
        zero columns

    Returns
    -------
    str
        Wrapped text

    Examples
    --------
    >>> wrap_text("the quick brown fox", 10)
    'the quick\\nbrown fox'

    """
    width = max(1, width)
    tokens = _token_pattern(zero_width)
    wrapped: list[str] = []

    for hard_line in text.split("\n"):
        filler = _LineFiller(width, zero_width)
        for match in tokens.finditer(hard_line):
            kind = match.lastgroup
            if kind == "marker":
                filler.add_marker(match.group())
            elif kind == "space":
                filler.add_space(match.group())
            else:
                filler.add_word(match.group())
        wrapped.extend(filler.finish())

    return "\n".join(wrapped)


__all__ = ["char_width", "display_width", "wrap_text"]
