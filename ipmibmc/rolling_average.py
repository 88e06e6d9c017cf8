"""Rolling average time periods of the DCMI enhanced power statistics."""

from datetime import timedelta

_MAX_DAYS = 63


def seconds_multiplier(unit: int) -> int:
    """Seconds per unit of the 2-bit duration unit of a rolling average period.

    Only bits 0 and 1 of the input are interpreted.
    """
    unit &= 0x03
    if unit == 0:
        return 1
    if unit == 1:
        return 60
    if unit == 2:
        return 60 * 60
    return 60 * 60 * 24


def period_from_byte(b: int) -> timedelta:
    """Turn the wire form of a rolling average period into a duration.

    The result is a whole number of seconds between 0 and 63 days.
    """
    value = b & 0x3F
    if value == 0:
        return timedelta(0)
    return timedelta(seconds=value * seconds_multiplier((b >> 6) & 0x03))


def period_to_byte(period: timedelta) -> int:
    """Turn a duration into the wire form of a rolling average period.

    Only some durations are representable, so this is best effort: a
    duration of at least one of the next larger unit is expressed in that
    unit, truncating, and durations beyond 63 days become 63 days.
    """
    if period < timedelta(0):
        raise ValueError(f"rolling average period cannot be negative: {period}")
    if period < timedelta(minutes=1):
        return period // timedelta(seconds=1)
    if period < timedelta(hours=1):
        return (period // timedelta(minutes=1)) | 0x40
    if period < timedelta(days=1):
        return (period // timedelta(hours=1)) | 0x80
    days = min(period // timedelta(days=1), _MAX_DAYS)
    return days | 0xC0