"""Comment removal and bracket checking for C source text."""

from __future__ import annotations

from collections.abc import Iterator

_PAIRS = {")": "(", "]": "[", "}": "{"}
_MATCHING = {**_PAIRS, **{opening: closing for closing, opening in _PAIRS.items()}}
_OPENING = frozenset(_PAIRS.values())
_CLOSING = frozenset(_PAIRS)


class LintError(ValueError):
    """Raised when C source has unbalanced brackets or a broken literal."""


def _copy_literal(chars: Iterator[str], quote: str, out: list[str]) -> None:
    """Copy a literal body up to and including its closing ``quote``."""
    for ch in chars:
        out.append(ch)
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is not None:
                out.append(escaped)
            continue
        if ch == quote:
            return


def _skip_line_comment(chars: Iterator[str]) -> None:
    for ch in chars:
        if ch == "\n":
            return


def _skip_block_comment(chars: Iterator[str]) -> None:
    previous = ""
    for ch in chars:
        if previous == "*" and ch == "/":
            return
        previous = ch


def uncomment(source: str) -> str:
    """Remove comments from C source, leaving string and char literals intact.

    A ``//`` comment becomes a blank followed by a newline; a block comment
    becomes a single blank.
    """
    out: list[str] = []
    chars = iter(source)
    for ch in chars:
        if ch in "\"'":
            out.append(ch)
            _copy_literal(chars, ch, out)
            continue
        if ch == "/":
            following = next(chars, None)
            if following == "/":
                _skip_line_comment(chars)
                out.append(" \n")
                continue
            if following == "*":
                _skip_block_comment(chars)
                out.append(" ")
                continue
            out.append("/")
            if following is not None:
                out.append(following)
            continue
        out.append(ch)
    return "".join(out)


def matching_token(token: str) -> str:
    """Return the bracket that pairs with ``token``."""
    try:
        return _MATCHING[token]
    except KeyError:
        raise ValueError(f"not a bracket: {token!r}") from None


def _skip_string(chars: Iterator[str]) -> None:
    for ch in chars:
        if ch == "\n":
            raise LintError("unterminated string literal meets newline")
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            if escaped == "\n":
                raise LintError("unterminated string literal meets newline")
            continue
        if ch == '"':
            return
    raise LintError("unterminated string literal meets EOF")


def _skip_char(chars: Iterator[str]) -> None:
    for ch in chars:
        if ch == "\\":
            next(chars, None)
            continue
        if ch == "'":
            return


def check_brackets(source: str) -> int:
    """Check that parentheses, brackets and braces in C source balance.

    Brackets inside literals and comments are ignored. Returns the number of
    matched pairs; raises LintError on the first problem found.
    """
    stack: list[str] = []
    pairs = 0
    last: str | None = None
    chars = iter(source)
    for ch in chars:
        if ch == '"':
            _skip_string(chars)
            last = None
            continue
        if ch == "'":
            _skip_char(chars)
            last = None
            continue
        if ch == "*" and last == "/":
            _skip_block_comment(chars)
            last = None
            continue
        if ch == "/" and last == "/":
            _skip_line_comment(chars)
            last = None
            continue
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _CLOSING:
            expected = matching_token(ch)
            previous = stack.pop() if stack else None
            if previous != expected:
                raise LintError(
                    f"unmatched token {ch}, expected the last token on the "
                    f"stack to be {expected}"
                )
            pairs += 1
        last = ch
    if stack:
        previous = stack.pop()
        raise LintError(
            f"EOF reached without matching closing token "
            f"{matching_token(previous)} for token {previous}"
        )
    return pairs