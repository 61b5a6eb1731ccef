"""Word-length and character-frequency histograms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

BLOCK = "█"
_WHITESPACE = frozenset(" \n\t")
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 127


def word_lengths(text: str, max_length: int = 25) -> Counter[int]:
    """Count word lengths, capping long words at ``max_length``.

    A word is counted only once a blank, tab or newline follows it.
    """
    counts: Counter[int] = Counter()
    current = 0
    for ch in text:
        if ch in _WHITESPACE:
            if current:
                counts[min(current, max_length)] += 1
                current = 0
        else:
            current += 1
    return counts


def _present(counts: Mapping[int, int]) -> list[int]:
    return sorted(length for length, count in counts.items() if length > 0 and count)


def horizontal_histogram(counts: Mapping[int, int], max_count: int = 40) -> str:
    """Render one bar per word length, bars capped at ``max_count`` blocks."""
    return "".join(
        f"{length:3d} {BLOCK * min(counts[length], max_count)}\n"
        for length in _present(counts)
    )


def vertical_histogram(counts: Mapping[int, int], max_count: int = 25) -> str:
    """Render upright bars for each word length with a label row below."""
    lengths = _present(counts)
    height = min(max((counts[length] for length in lengths), default=0), max_count)
    rows = [
        "".join(
            BLOCK * 3 + " " if counts[length] >= level else "    "
            for length in lengths
        )
        for level in range(height, 0, -1)
    ]
    rows.append(
        "".join(
            f"{counts[length]:2d}+ " if counts[length] == max_count else f"{length:2d}  "
            for length in lengths
        )
    )
    return "\n".join(rows) + "\n"


def char_frequencies(text: str) -> Counter[str]:
    """Count printable ASCII characters (codes 32 to 127)."""
    return Counter(
        ch for ch in text if _FIRST_PRINTABLE <= ord(ch) <= _LAST_PRINTABLE
    )


def frequency_histogram(text: str, max_count: int = 40) -> str:
    """Render one bar per printable ASCII character found, in code order."""
    counts = char_frequencies(text)
    lines = []
    for code in range(_FIRST_PRINTABLE, _LAST_PRINTABLE + 1):
        count = min(counts[chr(code)], max_count)
        if count:
            lines.append(f"{chr(code)} {BLOCK * count}\n")
    return "".join(lines)