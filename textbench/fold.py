"""Folding of long lines at blanks or tabs."""

from __future__ import annotations

_BREAKS = " \t"


def _check_width(width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")


def fold_line(line: str, width: int = 80) -> str:
    """Break ``line`` into pieces of at most ``width`` characters.

    A break goes at the last blank or tab within reach, which is dropped;
    with none in reach the text is cut at exactly ``width`` characters.
    """
    _check_width(width)
    pieces: list[str] = []
    start = 0
    end = len(line)
    while end - start > width:
        cut = next(
            (i for i in range(start + width, start, -1) if line[i] in _BREAKS),
            None,
        )
        if cut is None:
            cut = next_start = start + width
        else:
            next_start = cut + 1
        pieces.append(line[start:cut] + "\n")
        start = next_start
    pieces.append(line[start:])
    return "".join(pieces)


def fold_text(text: str, width: int = 80) -> str:
    """Fold every line of ``text``."""
    _check_width(width)
    return "".join(fold_line(line, width) for line in text.splitlines(keepends=True))