"""Base32 encoding and decoding with the RFC 4648 alphabet."""

from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PADDING = "="

_DECODE = {symbol: value for value, symbol in enumerate(ALPHABET)}
_GROUP = 8
_QUANTUM = 5
_BITS = 5
# Number of symbols in a final group mapped to the number of bytes they carry.
_BYTES_FOR_SYMBOLS = {8: 5, 7: 4, 5: 3, 4: 2, 2: 1}


class Base32Error(ValueError):
    """Raised for base32 input with bad padding or an unknown symbol."""


def encode(data: bytes) -> str:
    """Encode ``data`` as padded base32 text."""
    groups: list[str] = []
    for start in range(0, len(data), _QUANTUM):
        chunk = data[start : start + _QUANTUM]
        acc = int.from_bytes(chunk.ljust(_QUANTUM, b"\0"), "big")
        symbols = "".join(
            ALPHABET[(acc >> shift) & 0x1F]
            for shift in range(_BITS * (_GROUP - 1), -1, -_BITS)
        )
        used = _GROUP if len(chunk) == _QUANTUM else len(chunk) * 8 // _BITS + 1
        groups.append(symbols[:used].ljust(_GROUP, PADDING))
    return "".join(groups)


def _strip_padding(group: str, last: bool) -> str:
    pad = group.find(PADDING)
    if pad == -1:
        return group
    if pad < 2 or not last:
        raise Base32Error(f"incorrect symbol {PADDING!r}")
    if group[pad:] != PADDING * (len(group) - pad) or pad not in _BYTES_FOR_SYMBOLS:
        raise Base32Error("incorrect padding")
    return group[:pad]


def decode(text: str) -> bytes:
    """Decode padded base32 ``text``; white space is ignored.

    Raises Base32Error on incorrect padding or an unknown symbol.
    """
    symbols = "".join(text.split())
    if len(symbols) % _GROUP:
        raise Base32Error("incorrect padding")
    groups = [symbols[start : start + _GROUP] for start in range(0, len(symbols), _GROUP)]
    out = bytearray()
    for number, group in enumerate(groups, 1):
        data = _strip_padding(group, last=number == len(groups))
        acc = 0
        for symbol in data:
            value = _DECODE.get(symbol)
            if value is None:
                raise Base32Error(f"incorrect symbol {symbol!r}")
            acc = acc << _BITS | value
        acc <<= _BITS * (_GROUP - len(data))
        out += acc.to_bytes(_QUANTUM, "big")[: _BYTES_FOR_SYMBOLS[len(data)]]
    return bytes(out)