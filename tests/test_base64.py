import base64 as std_base64

import pytest

from textbench.base64 import Base64Encoding, std_encoding, url_encoding


def test_base64_decode():
    std = std_encoding()
    assert std.padding == "="
    assert std.decode_map["A"] == 0
    assert std.decode_map["/"] == 63
    assert std.decode(std_base64.b64encode(b"hello world").decode()) == b"hello world"


def test_url_encoding_map():
    url = url_encoding()
    assert url.decode_map["-"] == 62
    assert url.decode_map["_"] == 63
    assert "+" not in url.decode_map


@pytest.mark.parametrize("length", range(0, 16))
def test_encode_matches_standard_library(length):
    data = bytes((i * 53 + 250) % 256 for i in range(length))
    assert std_encoding().encode(data) == std_base64.b64encode(data).decode()
    assert url_encoding().encode(data) == std_base64.urlsafe_b64encode(data).decode()


@pytest.mark.parametrize("length", range(0, 16))
def test_round_trip(length):
    data = bytes((i * 91 + 7) % 256 for i in range(length))
    for encoding in (std_encoding(), url_encoding()):
        assert encoding.decode(encoding.encode(data)) == data


def test_unpadded_round_trip():
    encoding = Base64Encoding(std_encoding().alphabet, None)
    for length in range(0, 10):
        data = bytes(range(length))
        text = encoding.encode(data)
        assert "=" not in text
        assert encoding.decode(text) == data


def test_white_space_ignored():
    assert std_encoding().decode("aGVs\nbG8g d29y\tbGQ=") == b"hello world"


@pytest.mark.parametrize("text", ["aGVsbG8", "aG=sbG8=", "a===", "aGVs=G8="])
def test_bad_padding(text):
    with pytest.raises(ValueError):
        std_encoding().decode(text)


def test_unknown_symbol():
    with pytest.raises(ValueError, match="symbol"):
        url_encoding().decode("ab+c")


def test_unpadded_bad_length():
    with pytest.raises(ValueError, match="length"):
        Base64Encoding(std_encoding().alphabet, None).decode("abcde")


def test_invalid_alphabet():
    with pytest.raises(ValueError):
        Base64Encoding("abc")


def test_padding_in_alphabet():
    with pytest.raises(ValueError):
        Base64Encoding(std_encoding().alphabet, "A")