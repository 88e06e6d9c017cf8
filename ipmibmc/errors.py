"""Exceptions raised by the package."""


class DecodeError(ValueError):
    """Raised when wire data cannot be decoded into a valid structure."""