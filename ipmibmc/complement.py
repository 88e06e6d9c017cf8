"""Conversion of one's and two's complement numbers to Python integers."""

from collections.abc import Sequence


def _as_int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def ones(b: int) -> int:
    """Parse an 8-bit one's complement number.

    The result lies between -127 and 127; both zeros map to 0.
    """
    if b & 0x80:
        b = (b + 1) & 0xFF
    return _as_int8(b)


def twos(big_endian: Sequence[int], bits: int) -> int:
    """Parse a two's complement number of up to 16 bits.

    ``big_endian`` holds two bytes, most significant first; bits above
    ``bits`` must be zero.
    """
    if len(big_endian) != 2:
        raise ValueError(f"expected 2 bytes, got {len(big_endian)}")
    numerical = (big_endian[0] << 8) | big_endian[1]
    mask = 1 << (bits - 1) if 0 < bits <= 16 else 0
    numerical = ((numerical ^ mask) - mask) & 0xFFFF
    return numerical - 0x10000 if numerical & 0x8000 else numerical