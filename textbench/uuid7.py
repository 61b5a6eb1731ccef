"""Generation of time-ordered version 7 UUIDs."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

_TIMESTAMP_BYTES = 6
_RANDOM_BYTES = 10
_TIMESTAMP_MASK = (1 << (_TIMESTAMP_BYTES * 8)) - 1
_UUID_BYTES = _TIMESTAMP_BYTES + _RANDOM_BYTES
_DASH_AFTER = frozenset({4, 6, 8, 10})


def epoch_ms() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class UUIDv7Generator:
    """Produces version 7 UUIDs with strictly increasing timestamps."""

    last: int = 0
    clock: Callable[[], int] = field(default=epoch_ms, repr=False)

    def generate(self) -> bytes:
        """Return 16 bytes: 48-bit millisecond timestamp, version, variant, random bits.

        When the clock has not moved past the last timestamp used, the
        timestamp is the last one plus a millisecond.
        """
        ms = self.clock()
        if self.last >= ms:
            ms = self.last + 1
        self.last = ms

        data = bytearray((ms & _TIMESTAMP_MASK).to_bytes(_TIMESTAMP_BYTES, "big"))
        data += os.urandom(_RANDOM_BYTES)
        data[6] = (data[6] & 0x0F) | 0x70
        data[8] = (data[8] & 0x3F) | 0x80
        return bytes(data)


def format_uuid(data: bytes) -> str:
    """Render 16 bytes as lower-case hex in groups of 5, 2, 2, 2 and 5 bytes."""
    if len(data) != _UUID_BYTES:
        raise ValueError(f"a UUID has {_UUID_BYTES} bytes, got {len(data)}")
    return "".join(
        f"{byte:02x}" + ("-" if position in _DASH_AFTER else "")
        for position, byte in enumerate(data)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print freshly generated version 7 UUIDs, one per line."""
    parser = argparse.ArgumentParser(
        prog="textbench-uuid7", description="Generate version 7 UUIDs."
    )
    parser.add_argument("-n", "--count", type=int, default=10)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")

    generator = UUIDv7Generator()
    for _ in range(args.count):
        print(format_uuid(generator.generate()))
    return 0


if __name__ == "__main__":
    sys.exit(main())