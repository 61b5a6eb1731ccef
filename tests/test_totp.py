import pytest

from textbench.base32 import encode
from textbench.totp import encode_time_step, hotp, main, totp

RFC_SEED = b"12345678901234567890"


def test_hotp_rfc4226_vectors():
    assert hotp(RFC_SEED, 0) == 755224
    assert hotp(RFC_SEED, 1) == 287082


def test_totp_rfc6238_vector():
    assert totp(RFC_SEED, 59, digits=8) == 94287082


@pytest.mark.parametrize("step", [0, 1, 255, 256, 57_000_000, 2**64 - 1])
def test_encode_time_step_round_trip(step):
    encoded = encode_time_step(step)
    assert len(encoded) == 8
    assert int.from_bytes(encoded, "big") == step


@pytest.mark.parametrize("step", [-1, 2**64])
def test_encode_time_step_out_of_range(step):
    with pytest.raises(ValueError):
        encode_time_step(step)


@pytest.mark.parametrize("timestamp", [0, 29, 30, 1_111_111_109, 2_000_000_000])
def test_totp_uses_time_step(timestamp):
    assert totp(RFC_SEED, timestamp) == hotp(RFC_SEED, timestamp // 30)


def test_totp_constant_within_period():
    assert totp(RFC_SEED, 60) == totp(RFC_SEED, 89)
    assert totp(RFC_SEED, 120, period=60) == totp(RFC_SEED, 179, period=60)


@pytest.mark.parametrize("digits", [1, 4, 6, 8])
def test_code_fits_digits(digits):
    for counter in range(20):
        assert 0 <= hotp(RFC_SEED, counter, digits) < 10**digits


def test_fewer_digits_is_suffix():
    assert hotp(RFC_SEED, 3, 6) == hotp(RFC_SEED, 3, 8) % 10**6


def test_invalid_digits():
    with pytest.raises(ValueError):
        hotp(RFC_SEED, 0, 0)


def test_invalid_period():
    with pytest.raises(ValueError):
        totp(RFC_SEED, 0, period=0)


def test_main_prints_step_and_code(capsys):
    assert main([encode(RFC_SEED), "--time", "59"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert int(lines[0]) == 59 // 30
    assert bytes.fromhex("".join(lines[1].split())) == encode_time_step(59 // 30)
    assert len(bytes.fromhex("".join(lines[2].split()))) == 20
    assert lines[3] == f"{hotp(RFC_SEED, 59 // 30):06d}"


def test_main_digits_option(capsys):
    assert main([encode(RFC_SEED), "--time", "59", "--digits", "8"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == f"{totp(RFC_SEED, 59, digits=8):08d}"


def test_main_rejects_bad_key(capsys):
    assert main(["not base32!", "--time", "0"]) == 1
    assert "invalid key" in capsys.readouterr().err