"""Character, line, word and digit counters."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

_WHITESPACE = frozenset(" \n\t")


@dataclass(frozen=True)
class WhitespaceCounts:
    """Numbers of blanks, tabs and newlines in a text."""

    blanks: int
    tabs: int
    newlines: int

    def report(self) -> str:
        return (
            f"Blanks: {self.blanks}\n"
            f"Tabs: {self.tabs}\n"
            f"Newlines: {self.newlines}\n"
        )


@dataclass(frozen=True)
class WordCount:
    """Lines, words and characters of a text."""

    lines: int
    words: int
    chars: int

    def report(self) -> str:
        return f"{self.lines} {self.words} {self.chars}\n"


@dataclass(frozen=True)
class DigitStats:
    """Occurrences of each decimal digit, of white space and of the rest."""

    digits: tuple[int, ...]
    white: int
    other: int

    def report(self) -> str:
        digits = "".join(f" {count}" for count in self.digits)
        return f"digits ={digits}, white space = {self.white}, other = {self.other}\n"


def count_chars(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def count_lines(text: str) -> int:
    """Return the number of newline characters in ``text``."""
    return text.count("\n")


def count_whitespace(text: str) -> WhitespaceCounts:
    """Count blanks, tabs and newlines."""
    counts = Counter(ch for ch in text if ch in _WHITESPACE)
    return WhitespaceCounts(blanks=counts[" "], tabs=counts["\t"], newlines=counts["\n"])


def word_count(text: str) -> WordCount:
    """Count lines, words and characters; words are split by blanks, tabs, newlines."""
    lines = words = 0
    in_word = False
    for ch in text:
        if ch == "\n":
            lines += 1
        if ch in _WHITESPACE:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return WordCount(lines=lines, words=words, chars=len(text))


def digit_stats(text: str) -> DigitStats:
    """Count each ASCII digit, white space and all other characters."""
    digits = [0] * 10
    white = other = 0
    for ch in text:
        if "0" <= ch <= "9":
            digits[ord(ch) - ord("0")] += 1
        elif ch in _WHITESPACE:
            white += 1
        else:
            other += 1
    return DigitStats(digits=tuple(digits), white=white, other=other)