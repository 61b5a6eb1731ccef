"""HMAC-based and time-based one-time passwords."""

from __future__ import annotations

import argparse
import hashlib
import hmac
import sys
import time
from collections.abc import Sequence

from textbench.base32 import Base32Error, decode

DEFAULT_PERIOD = 30
DEFAULT_DIGITS = 6
_STEP_BYTES = 8


def encode_time_step(step: int) -> bytes:
    """Return ``step`` as eight big-endian bytes."""
    try:
        return step.to_bytes(_STEP_BYTES, "big")
    except OverflowError:
        raise ValueError(f"time step out of range: {step}") from None


def _digest(key: bytes, counter: int) -> bytes:
    return hmac.new(key, encode_time_step(counter), hashlib.sha1).digest()


def _truncate(digest: bytes, digits: int) -> int:
    offset = digest[-1] & 0x0F
    binary = int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF
    return binary % 10**digits


def _check_digits(digits: int) -> None:
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")


def hotp(key: bytes, counter: int, digits: int = DEFAULT_DIGITS) -> int:
    """Return the HMAC-SHA1 one-time password for ``counter``."""
    _check_digits(digits)
    return _truncate(_digest(key, counter), digits)


def totp(
    key: bytes,
    timestamp: float | None = None,
    period: int = DEFAULT_PERIOD,
    digits: int = DEFAULT_DIGITS,
) -> int:
    """Return the one-time password for ``timestamp`` (now if None)."""
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    if timestamp is None:
        timestamp = time.time()
    return hotp(key, int(timestamp // period), digits)


def _hex_dump(data: bytes) -> str:
    return "".join(f"{byte:02X} " for byte in data)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the time step, its bytes, the HMAC digest and the current code."""
    parser = argparse.ArgumentParser(
        prog="textbench-totp", description="Compute a time-based one-time password."
    )
    parser.add_argument("key", help="base32-encoded shared key")
    parser.add_argument("--time", type=int, dest="timestamp", help="unix time in seconds")
    parser.add_argument("--period", type=int, default=DEFAULT_PERIOD)
    parser.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    args = parser.parse_args(argv)

    if args.period <= 0:
        parser.error("--period must be positive")
    if args.digits < 1:
        parser.error("--digits must be positive")

    try:
        key = decode(args.key)
    except Base32Error as exc:
        print(f"invalid key: {exc}", file=sys.stderr)
        return 1

    timestamp = time.time() if args.timestamp is None else args.timestamp
    step = int(timestamp // args.period)
    try:
        moving_factor = encode_time_step(step)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    digest = hmac.new(key, moving_factor, hashlib.sha1).digest()
    print(step)
    print(_hex_dump(moving_factor))
    print(_hex_dump(digest))
    print(f"{_truncate(digest, args.digits):0{args.digits}d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())