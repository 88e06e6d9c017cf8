"""Decoding of Binary-coded Decimal bytes, e.g. 0x10 is 10 and 0x99 is 99."""


def decode(b: int) -> int:
    """Convert a single BCD byte into its value.

    Valid input gives 0 through 99; the result is unspecified for nibbles
    above 0x9.
    """
    return ((b & 0xF0) >> 4) * 10 + (b & 0x0F)