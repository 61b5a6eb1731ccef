"""Character-level text filters."""

from __future__ import annotations

import re
from typing import Iterable, TextIO, Union

_WHITESPACE = frozenset(" \n\t")
_BLANK_RUN = re.compile(" {2,}")
_VISIBLE_ESCAPES = str.maketrans({"\t": "\\t", "\b": "\\b", "\\": "\\\\"})


def _check_tabsize(tabsize: int) -> None:
    if tabsize <= 0:
        raise ValueError(f"tabsize must be positive, got {tabsize}")


def copy_text(text: Union[str, Iterable[str], TextIO]) -> str:
    """Copy the input to the output character for character.

    Accepts a string, a readable text stream or an iterable of text chunks,
    and returns everything it holds as one string.
    """
    source = text.read() if hasattr(text, "read") else text
    return "".join(source)


def squeeze_blanks(text: str) -> str:
    """Replace every run of blanks with a single blank."""
    return _BLANK_RUN.sub(" ", text)


def escape_visible(text: str) -> str:
    """Make tabs, backspaces and backslashes visible as escape sequences."""
    return text.translate(_VISIBLE_ESCAPES)


def one_word_per_line(text: str) -> str:
    """Print each word on its own line, dropping blanks, tabs and newlines."""
    out: list[str] = []
    in_word = False
    for ch in text:
        if ch in _WHITESPACE:
            if in_word:
                in_word = False
                out.append("\n")
            continue
        in_word = True
        out.append(ch)
    return "".join(out)


def detab(text: str, tabsize: int = 4) -> str:
    """Replace tabs with blanks up to the next tab stop."""
    _check_tabsize(tabsize)
    out: list[str] = []
    column = 0
    for ch in text:
        if ch == "\t":
            next_stop = column + tabsize - (column + tabsize) % tabsize
            out.append(" " * (next_stop - column))
            column = next_stop
            continue
        out.append(ch)
        column += 1
        if ch == "\n":
            column = 0
    return "".join(out)


def entab(text: str, tabsize: int = 2) -> str:
    """Replace runs of blanks with tabs and blanks covering the same width.

    Blanks still pending at the end of the input are dropped.
    """
    _check_tabsize(tabsize)
    out: list[str] = []
    column = 0
    desired = 0
    for ch in text:
        if ch == " ":
            desired += 1
            continue
        if ch == "\t":
            desired += tabsize
            desired -= desired % tabsize
            continue

        while column < desired:
            if desired - column >= tabsize:
                out.append("\t")
                column += tabsize
            else:
                out.append(" ")
                column += 1

        out.append(ch)
        column += 1
        desired = column

        if ch == "\n":
            column = desired = 0
    return "".join(out)