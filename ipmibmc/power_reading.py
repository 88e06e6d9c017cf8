"""The DCMI Get Power Reading command (section 6.6.1)."""

import struct
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum

from .errors import DecodeError
from .rolling_average import period_to_byte

_RESPONSE_LENGTH = 17


class SystemPowerStatisticsMode(IntEnum):
    """Whether enhanced system power statistics are in use."""

    NORMAL = 0x01
    ENHANCED = 0x02

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        return member

    def description(self) -> str:
        """Human-friendly name of the mode."""
        return _MODE_NAMES.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self)}({self.description()})"


_MODE_NAMES = {0x01: "Normal", 0x02: "Enhanced"}


@dataclass
class PowerReadingRequest:
    """A Get Power Reading request.

    ``period`` is only sent in enhanced mode, and must be one of the rolling
    average periods the BMC advertises.
    """

    mode: SystemPowerStatisticsMode = SystemPowerStatisticsMode.NORMAL
    period: timedelta = timedelta(0)

    def encode(self) -> bytes:
        """Encode the request data into its 3-byte wire form."""
        if self.mode == SystemPowerStatisticsMode.ENHANCED:
            period = period_to_byte(self.period)
        else:
            period = 0x00
        return bytes([int(self.mode), period, 0x00])


@dataclass
class PowerReading:
    """The response to a Get Power Reading command; power values in watts.

    ``timestamp`` is the end of the averaging window in enhanced mode, and
    ``period`` the window over which statistics were gathered.
    """

    instantaneous: int
    min: int
    max: int
    avg: int
    timestamp: datetime
    period: timedelta
    active: bool


def decode_power_reading(data: bytes) -> PowerReading:
    """Decode a Get Power Reading response; DecodeError if truncated."""
    if len(data) < _RESPONSE_LENGTH:
        if not data:
            raise DecodeError(
                "0-byte power reading response; this is known to happen "
                "when the BMC is not connected to the power supply"
            )
        raise DecodeError(
            f"power reading response must be 17 bytes, got {len(data)}"
        )
    instantaneous, minimum, maximum, average, seconds, millis = struct.unpack_from(
        "<4HII", data
    )
    return PowerReading(
        instantaneous=instantaneous,
        min=minimum,
        max=maximum,
        avg=average,
        timestamp=datetime.fromtimestamp(seconds, timezone.utc),
        period=timedelta(milliseconds=millis),
        active=bool(data[16] & (1 << 6)),
    )