"""Temperature conversion, power and numeric-limit tables."""

from __future__ import annotations

import struct
import sys

TABLE_HEADER = "TEMPERATURE CONVERSION TABLE"

_FLT_MIN = float.fromhex("0x1p-126")
_FLT_MAX = float.fromhex("0x1.fffffep+127")


def fahr_to_celsius(fahr: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (5.0 / 9.0) * (fahr - 32)


def celsius_to_fahr(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return (9.0 / 5.0) * celsius + 32


def _check_step(step: float) -> None:
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")


def celsius_table(lower: float = 0, upper: float = 300, step: float = 5) -> list[str]:
    """Return a Celsius-to-Fahrenheit table, header first."""
    _check_step(step)
    lines = [TABLE_HEADER]
    celsius = float(lower)
    while celsius <= upper:
        lines.append(f"{celsius:6.1f}\t{celsius_to_fahr(celsius):3.0f}")
        celsius += step
    return lines


def fahrenheit_table(lower: int = 0, upper: int = 300, step: int = 20) -> list[str]:
    """Return a Fahrenheit-to-Celsius table, one row per line."""
    _check_step(step)
    return [
        f"{fahr:3d} {fahr_to_celsius(fahr):6.1f}"
        for fahr in range(lower, upper + 1, step)
    ]


def power(base: int, n: int) -> int:
    """Raise ``base`` to the non-negative power ``n``."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = 1
    for _ in range(n):
        result *= base
    return result


def power_table(count: int = 10) -> list[str]:
    """Return rows ``i 2**i (-3)**i`` for ``i`` in ``range(count)``."""
    return [f"{i} {power(2, i)} {power(-3, i)}" for i in range(count)]


def _signed(bits: int) -> tuple[int, int]:
    half = 1 << (bits - 1)
    return -half, half - 1


def _unsigned_max(bits: int) -> int:
    return (1 << bits) - 1


def limits_report() -> list[str]:
    """Return the ranges of the native integer and floating types."""
    short_bits = struct.calcsize("h") * 8
    int_bits = struct.calcsize("i") * 8
    long_bits = struct.calcsize("l") * 8

    char_min, char_max = _signed(8)
    short_min, short_max = _signed(short_bits)
    int_min, int_max = _signed(int_bits)
    long_min, long_max = _signed(long_bits)

    return [
        f"char:\t\tmin = {char_min},\t\t\tmax = {char_max}",
        f"short:\t\tmin = {short_min},\t\t\tmax = {short_max}",
        f"int:\t\tmin = {int_min},\t\tmax = {int_max}",
        f"long:\t\tmin = {long_min},\tmax = {long_max}",
        f"unsigned char:\tmin = 0,\t\t\tmax = {_unsigned_max(8)}",
        f"unsigned short:\tmin = 0,\t\t\tmax = {_unsigned_max(short_bits)}",
        f"unsigned int:\tmin = 0,\t\t\tmax = {_unsigned_max(int_bits)}",
        f"unsigned long:\tmin = 0,\t\t\tmax = {_unsigned_max(long_bits)}",
        f"float: min = {_FLT_MIN:f}, max = {_FLT_MAX:f}",
        f"double: min = {sys.float_info.min:f}, max = {sys.float_info.max:f}",
    ]


def repeat_line(char: str = "a", count: int = 1500) -> str:
    """Return ``char`` repeated ``count`` times followed by a newline."""
    return char * count + "\n"