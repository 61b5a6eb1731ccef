import base64 as std_base64

import pytest

from textbench.base32 import Base32Error, decode, encode

ENCODED = "4DIDVDK7NMU72R34TF5XNXWQBJYEI2RQ"
BINARY = bytes(
    [
        0xE0, 0xD0, 0x3A, 0x8D, 0x5F, 0x6B, 0x29, 0xFD, 0x47, 0x7C,
        0x99, 0x7B, 0x76, 0xDE, 0xD0, 0x0A, 0x70, 0x44, 0x6A, 0x30,
    ]
)


def test_base32_decode():
    decoded = decode(ENCODED)
    assert len(decoded) == 20
    assert decoded == BINARY


def test_base32_encode():
    assert encode(BINARY) == ENCODED


@pytest.mark.parametrize(
    ("raw", "text"),
    [
        (b"", ""),
        (b"f", "MY======"),
        (b"fo", "MZXQ===="),
        (b"foo", "MZXW6==="),
        (b"foob", "MZXW6YQ="),
        (b"fooba", "MZXW6YTB"),
        (b"foobar", "MZXW6YTBOI======"),
    ],
)
def test_rfc_vectors(raw, text):
    assert encode(raw) == text
    assert decode(text) == raw


@pytest.mark.parametrize("length", range(0, 21))
def test_round_trip_matches_standard_library(length):
    data = bytes((i * 37 + 11) % 256 for i in range(length))
    text = encode(data)
    assert text == std_base64.b32encode(data).decode("ascii")
    assert decode(text) == data
    assert len(text) % 8 == 0


def test_white_space_is_ignored():
    assert decode(" 4DIDVDK7\nNMU72R34\tTF5XNXWQ BJYEI2RQ\n") == BINARY


@pytest.mark.parametrize("text", ["mzxw6ytb", "MZXW6YT1", "=MZXW6YT", "MY======MZXW6YTB"])
def test_incorrect_symbol(text):
    with pytest.raises(Base32Error, match="symbol"):
        decode(text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        decode("M0======")