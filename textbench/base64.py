"""Base64 encodings over a configurable alphabet."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

STD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
STD_PADDING = "="

_GROUP = 4
_QUANTUM = 3
_BITS = 6


@dataclass(frozen=True)
class Base64Encoding:
    """A base64 alphabet with an optional padding character (None for none)."""

    alphabet: str
    padding: str | None = STD_PADDING
    decode_map: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.alphabet) != 64 or len(set(self.alphabet)) != 64:
            raise ValueError("alphabet must hold 64 distinct characters")
        if any(symbol.isspace() for symbol in self.alphabet):
            raise ValueError("alphabet must not contain white space")
        if self.padding is not None:
            if len(self.padding) != 1 or self.padding.isspace():
                raise ValueError(f"invalid padding character {self.padding!r}")
            if self.padding in self.alphabet:
                raise ValueError("padding character is part of the alphabet")
        object.__setattr__(
            self,
            "decode_map",
            MappingProxyType({symbol: value for value, symbol in enumerate(self.alphabet)}),
        )

    def encode(self, data: bytes) -> str:
        """Encode ``data`` with this alphabet."""
        groups: list[str] = []
        for start in range(0, len(data), _QUANTUM):
            chunk = data[start : start + _QUANTUM]
            acc = int.from_bytes(chunk.ljust(_QUANTUM, b"\0"), "big")
            used = _GROUP if len(chunk) == _QUANTUM else len(chunk) * 8 // _BITS + 1
            symbols = "".join(
                self.alphabet[(acc >> shift) & 0x3F]
                for shift in range(_BITS * (_GROUP - 1), -1, -_BITS)
            )[:used]
            if self.padding is not None:
                symbols = symbols.ljust(_GROUP, self.padding)
            groups.append(symbols)
        return "".join(groups)

    def _strip_padding(self, group: str, last: bool) -> str:
        if self.padding is None:
            return group
        pad = group.find(self.padding)
        if pad == -1:
            return group
        if pad < 2 or not last:
            raise ValueError(f"incorrect symbol {self.padding!r}")
        if group[pad:] != self.padding * (len(group) - pad):
            raise ValueError("incorrect padding")
        return group[:pad]

    def decode(self, text: str) -> bytes:
        """Decode ``text``; white space is ignored. Raises ValueError when malformed."""
        symbols = "".join(text.split())
        if self.padding is not None:
            if len(symbols) % _GROUP:
                raise ValueError("incorrect padding")
        elif len(symbols) % _GROUP == 1:
            raise ValueError("incorrect length")
        groups = [symbols[start : start + _GROUP] for start in range(0, len(symbols), _GROUP)]
        out = bytearray()
        for number, group in enumerate(groups, 1):
            data = self._strip_padding(group, last=number == len(groups))
            acc = 0
            for symbol in data:
                value = self.decode_map.get(symbol)
                if value is None:
                    raise ValueError(f"incorrect symbol {symbol!r}")
                acc = acc << _BITS | value
            acc <<= _BITS * (_GROUP - len(data))
            out += acc.to_bytes(_QUANTUM, "big")[: len(data) * _BITS // 8]
        return bytes(out)


def std_encoding() -> Base64Encoding:
    """Return the standard padded base64 encoding."""
    return Base64Encoding(STD_ALPHABET, STD_PADDING)


def url_encoding() -> Base64Encoding:
    """Return the padded URL- and file-name-safe base64 encoding."""
    return Base64Encoding(URL_ALPHABET, STD_PADDING)