"""Reversal of UTF-8 encoded text that keeps multi-byte characters intact."""

from __future__ import annotations


def reverse_bytes(data: bytes) -> bytes:
    """Return the bytes of ``data`` in reverse order."""
    return bytes(reversed(data))


def _sequence_length(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 1


def reverse_utf8(data: bytes) -> bytes:
    """Reverse UTF-8 ``data`` character by character.

    Raises ValueError when a lead byte lacks its continuation bytes.
    """
    buf = bytearray(reversed(data))
    i = len(buf) - 1
    while i > 0:
        size = _sequence_length(buf[i])
        if size > 1:
            start = i - size + 1
            if start < 0:
                raise ValueError(f"truncated UTF-8 sequence at byte {i}")
            buf[start : i + 1] = buf[start : i + 1][::-1]
        i -= size
    return bytes(buf)


def reverse_line(line: str) -> str:
    """Reverse ``line``, leaving a trailing newline in place."""
    newline = line.endswith("\n")
    body = line[:-1] if newline else line
    reversed_body = reverse_utf8(body.encode("utf-8")).decode("utf-8")
    return reversed_body + ("\n" if newline else "")