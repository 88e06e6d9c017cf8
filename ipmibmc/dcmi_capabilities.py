"""The DCMI Get DCMI Capabilities Info command (section 6.1).

Each parameter of the request yields a differently shaped response, and a
response alone does not say which parameter was asked for, so each response
kind has its own decoder.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

from .errors import DecodeError

_HEADER_LENGTH = 3


class CapabilitiesParameter(IntEnum):
    """Selects which capabilities or attributes a request asks for."""

    SUPPORTED_CAPABILITIES = 1
    MANDATORY_PLATFORM_ATTRS = 2
    OPTIONAL_PLATFORM_ATTRS = 3
    MANAGEABILITY_ACCESS_ATTRS = 4
    ENHANCED_SYSTEM_POWER_STATISTICS_ATTRS = 5

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        return member

    def description(self) -> str:
        """Human-readable name of the parameter."""
        return _PARAMETER_NAMES.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self)}({self.description()})"


_PARAMETER_NAMES = {
    1: "Supported DCMI Capabilities",
    2: "Mandatory Platform Attributes",
    3: "Optional Platform Attributes",
    4: "Manageability Access Attributes",
    5: "Enhanced System Power Statistics Attributes",
}


def encode_capabilities_request(parameter: int) -> bytes:
    """Encode the request data for the given parameter."""
    value = int(parameter)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"capabilities parameter out of range: {value}")
    return bytes([value])


@dataclass(frozen=True)
class CapabilitiesHeader:
    """The header common to every Get DCMI Capabilities Info response.

    ``revision`` is the revision of the parameter data, not of the spec.
    """

    major_version: int
    minor_version: int
    revision: int

    @property
    def is_v1_0(self) -> bool:
        """Whether the header claims DCMI v1.0 conformance."""
        return self.major_version == 1 and self.minor_version == 0


def decode_header(data: bytes) -> tuple[CapabilitiesHeader, bytes]:
    """Decode the response header, returning it and the remaining bytes."""
    if len(data) < _HEADER_LENGTH:
        raise DecodeError(
            f"invalid response header, got length {len(data)}, need 3"
        )
    header = CapabilitiesHeader(data[0], data[1], data[2])
    return header, bytes(data[_HEADER_LENGTH:])


def _require_body(body: bytes, minimum: int) -> None:
    if len(body) < minimum:
        raise DecodeError(
            f"invalid capabilities response: need at least {minimum} bytes, "
            f"got {len(body)}"
        )


def _bit(value: int, bit: int) -> bool:
    return bool(value & (1 << bit))


@dataclass
class SupportedCapabilities:
    """Response to parameter 1: conformance for platform and access.

    Fields that only exist in v1.0 are forced to true for later versions.
    ``ib_system_interface_channel_available`` is always false for v1.0,
    which uses that bit for the KCS channel.
    """

    header: CapabilitiesHeader
    temperature_monitor: bool
    chassis_power: bool
    sel_logging: bool
    identification: bool
    power_management: bool
    vlan_capable: bool
    sol_supported: bool
    oob_primary_lan_channel_available: bool
    oob_secondary_lan_channel_available: bool
    serial_tmode_available: bool
    ib_kcs_channel_available: bool
    ib_system_interface_channel_available: bool
    payload: bytes = b""


def decode_supported_capabilities(data: bytes) -> SupportedCapabilities:
    """Decode a response to a parameter 1 request."""
    header, body = decode_header(data)
    minimum = 3
    _require_body(body, minimum)
    platform, optional, access = body[0], body[1], body[2]
    v10 = header.is_v1_0

    return SupportedCapabilities(
        header=header,
        temperature_monitor=_bit(platform, 3) if v10 else True,
        chassis_power=_bit(platform, 2) if v10 else True,
        sel_logging=_bit(platform, 1) if v10 else True,
        identification=_bit(platform, 0) if v10 else True,
        power_management=_bit(optional, 0),
        vlan_capable=_bit(access, 5) if v10 else True,
        sol_supported=_bit(access, 4) if v10 else True,
        oob_primary_lan_channel_available=_bit(access, 3) if v10 else True,
        oob_secondary_lan_channel_available=_bit(access, 2),
        serial_tmode_available=_bit(access, 1),
        ib_kcs_channel_available=_bit(access, 0) if v10 else True,
        ib_system_interface_channel_available=False if v10 else _bit(access, 0),
        payload=body[minimum:],
    )


@dataclass
class MandatoryPlatformAttrs:
    """Response to parameter 2: mandatory platform attributes.

    Flush-on-rollover flags are unspecified, and reported false, for v1.0.
    Fields removed after v1.0 are forced to true for later versions, and
    ``temperature_sampling_frequency`` is zero for v1.0.
    """

    header: CapabilitiesHeader
    sel_auto_rollover: bool
    sel_flush_on_rollover: bool
    sel_record_level_flush_on_rollover: bool
    sel_max_entries: int
    asset_tag_support: bool
    dhcp_host_name_support: bool
    guid_support: bool
    baseboard_temperature: bool
    processors_temperature: bool
    inlet_temperature: bool
    temperature_sampling_frequency: timedelta
    payload: bytes = b""


def decode_mandatory_platform_attrs(data: bytes) -> MandatoryPlatformAttrs:
    """Decode a response to a parameter 2 request.

    Some BMCs claim v1.1 but send a v1.0 body, so every 4-byte body is
    treated as v1.0; trailing bytes after a v1.0 body therefore cannot be
    recognised unless the header says v1.0.
    """
    header, body = decode_header(data)
    _require_body(body, 4)
    v10 = len(body) == 4 or header.is_v1_0

    first = body[0]
    sel_max_entries = (first & 0x0F) | (body[1] << 8)

    if v10:
        return MandatoryPlatformAttrs(
            header=header,
            sel_auto_rollover=_bit(first, 7),
            sel_flush_on_rollover=False,
            sel_record_level_flush_on_rollover=False,
            sel_max_entries=sel_max_entries,
            asset_tag_support=_bit(body[2], 2),
            dhcp_host_name_support=_bit(body[2], 1),
            guid_support=_bit(body[2], 0),
            baseboard_temperature=_bit(body[3], 2),
            processors_temperature=_bit(body[3], 1),
            inlet_temperature=_bit(body[3], 0),
            temperature_sampling_frequency=timedelta(0),
            payload=body[4:],
        )
    return MandatoryPlatformAttrs(
        header=header,
        sel_auto_rollover=_bit(first, 7),
        sel_flush_on_rollover=_bit(first, 6),
        sel_record_level_flush_on_rollover=_bit(first, 5),
        sel_max_entries=sel_max_entries,
        asset_tag_support=True,
        dhcp_host_name_support=True,
        guid_support=True,
        baseboard_temperature=True,
        processors_temperature=True,
        inlet_temperature=True,
        temperature_sampling_frequency=timedelta(seconds=body[4]),
        payload=body[5:],
    )