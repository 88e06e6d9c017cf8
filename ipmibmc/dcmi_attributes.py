"""Decoders for the attribute responses of Get DCMI Capabilities Info.

These cover parameters 3, 4 and 5 of the request: optional platform
attributes, manageability access attributes and enhanced system power
statistics attributes.
"""

from dataclasses import dataclass, field
from datetime import timedelta

from .dcmi_capabilities import CapabilitiesHeader, decode_header
from .errors import DecodeError
from .rolling_average import period_from_byte

UNSUPPORTED_CHANNEL = 0xFF


def _require_body(body: bytes, minimum: int) -> None:
    if len(body) < minimum:
        raise DecodeError(
            f"invalid capabilities response: need at least {minimum} bytes, "
            f"got {len(body)}"
        )


@dataclass
class OptionalPlatformAttrs:
    """Response to parameter 3: the power management controller.

    ``power_management_slave_address`` is the 7-bit I2C slave address of the
    power management device on the IPMB.
    """

    header: CapabilitiesHeader
    power_management_slave_address: int
    power_management_channel: int
    power_management_revision: int
    payload: bytes = b""


def decode_optional_platform_attrs(data: bytes) -> OptionalPlatformAttrs:
    """Decode a response to a parameter 3 request."""
    header, body = decode_header(data)
    minimum = 2
    _require_body(body, minimum)
    return OptionalPlatformAttrs(
        header=header,
        power_management_slave_address=body[0] >> 1,
        power_management_channel=body[1] >> 4,
        power_management_revision=body[1] & 0x0F,
        payload=body[minimum:],
    )


@dataclass
class ManageabilityAccessAttrs:
    """Response to parameter 4: out-of-band channel numbers.

    A channel of 0xFF means the channel is not supported.
    """

    header: CapabilitiesHeader
    primary_lan_oob_channel: int
    secondary_lan_oob_channel: int
    serial_oob_channel: int
    payload: bytes = b""

    @property
    def primary_lan_oob_supported(self) -> bool:
        """Whether a primary LAN OOB channel is available."""
        return self.primary_lan_oob_channel != UNSUPPORTED_CHANNEL

    @property
    def secondary_lan_oob_supported(self) -> bool:
        """Whether a secondary LAN OOB channel is available."""
        return self.secondary_lan_oob_channel != UNSUPPORTED_CHANNEL

    @property
    def serial_oob_supported(self) -> bool:
        """Whether a serial OOB TMODE channel is available."""
        return self.serial_oob_channel != UNSUPPORTED_CHANNEL


def decode_manageability_access_attrs(data: bytes) -> ManageabilityAccessAttrs:
    """Decode a response to a parameter 4 request."""
    header, body = decode_header(data)
    minimum = 3
    _require_body(body, minimum)
    return ManageabilityAccessAttrs(
        header=header,
        primary_lan_oob_channel=body[0],
        secondary_lan_oob_channel=body[1],
        serial_oob_channel=body[2],
        payload=body[minimum:],
    )


@dataclass
class EnhancedSystemPowerStatisticsAttrs:
    """Response to parameter 5, which v1.0 does not support.

    ``power_rolling_avg_time_periods`` lists, in the order the BMC gave
    them, the rolling average periods usable with Get Power Reading; a zero
    period means the current reading can be obtained.
    """

    header: CapabilitiesHeader
    power_rolling_avg_time_periods: list[timedelta] = field(default_factory=list)
    payload: bytes = b""


def decode_enhanced_system_power_statistics_attrs(
    data: bytes,
) -> EnhancedSystemPowerStatisticsAttrs:
    """Decode a response to a parameter 5 request."""
    header, body = decode_header(data)
    _require_body(body, 1)
    periods = body[0]
    if len(body) < 1 + periods:
        raise DecodeError(
            f"managed system indicated {periods} supported rolling average "
            f"time periods, but only room for {len(body) - 1} in payload of "
            f"length {len(body)}"
        )
    end = 1 + periods
    return EnhancedSystemPowerStatisticsAttrs(
        header=header,
        power_rolling_avg_time_periods=[period_from_byte(b) for b in body[1:end]],
        payload=body[end:],
    )