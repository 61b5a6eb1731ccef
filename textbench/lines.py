"""Line readers and line-oriented filters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

_TRAILING = " \t\n"


def read_lines(stream: TextIO, limit: int | None = None) -> Iterator[str]:
    """Yield the lines of ``stream``, newlines kept.

    With ``limit``, a line longer than ``limit - 1`` characters
    (newline included) is split into chunks of at most ``limit - 1``.
    """
    if limit is not None and limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    size = -1 if limit is None else limit - 1
    while line := stream.readline(size):
        yield line


def longest_line(lines: Iterable[str]) -> str | None:
    """Return the first of the longest lines, or None if every line is empty."""
    longest: str | None = None
    for line in lines:
        if line and (longest is None or len(line) > len(longest)):
            longest = line
    return longest


def lines_at_least(lines: Iterable[str], threshold: int = 50) -> Iterator[str]:
    """Yield the lines whose length, newline included, reaches ``threshold``."""
    return (line for line in lines if len(line) >= threshold)


def strip_trailing(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines without trailing blanks and tabs; blank lines are dropped."""
    for line in lines:
        stripped = line.rstrip(_TRAILING)
        if stripped:
            yield stripped + "\n"


def reverse_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line reversed, its newline moved back to the end."""
    for line in lines:
        body = line[:-1] if line.endswith("\n") else line
        yield body[::-1] + "\n"