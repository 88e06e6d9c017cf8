from datetime import timedelta

import pytest

from ipmibmc.dcmi_attributes import (
    decode_enhanced_system_power_statistics_attrs,
    decode_manageability_access_attrs,
    decode_optional_platform_attrs,
)
from ipmibmc.dcmi_capabilities import CapabilitiesHeader
from ipmibmc.errors import DecodeError

V15 = CapabilitiesHeader(1, 5, 2)


def test_optional_platform_attrs_too_short():
    with pytest.raises(DecodeError):
        decode_optional_platform_attrs(bytes(4))


def test_optional_platform_attrs_with_trailing():
    attrs = decode_optional_platform_attrs(
        bytes([0x01, 0x05, 0x02, 0x20, 0xF0, 0x05, 0x06])
    )
    assert attrs.header == V15
    assert attrs.power_management_slave_address == 0x10
    assert attrs.power_management_channel == 0x0F
    assert attrs.power_management_revision == 0
    assert attrs.payload == bytes([0x05, 0x06])


def test_optional_platform_attrs_max_values():
    attrs = decode_optional_platform_attrs(bytes([0x01, 0x05, 0x02, 0xFF, 0x0F]))
    assert attrs.header == V15
    assert attrs.power_management_slave_address == 0x7F
    assert attrs.power_management_channel == 0
    assert attrs.power_management_revision == 15
    assert attrs.payload == b""


def test_manageability_access_attrs_too_short():
    with pytest.raises(DecodeError):
        decode_manageability_access_attrs(bytes(5))


def test_manageability_access_attrs_with_trailing():
    attrs = decode_manageability_access_attrs(
        bytes([0x01, 0x05, 0x02, 0x01, 0xFF, 0x03, 0x07, 0x08])
    )
    assert attrs.header == V15
    assert attrs.primary_lan_oob_channel == 1
    assert attrs.secondary_lan_oob_channel == 0xFF
    assert attrs.serial_oob_channel == 3
    assert attrs.payload == bytes([0x07, 0x08])
    assert attrs.primary_lan_oob_supported is True
    assert attrs.secondary_lan_oob_supported is False


def test_manageability_access_attrs_unsupported():
    attrs = decode_manageability_access_attrs(
        bytes([0x01, 0x05, 0x02, 0xFF, 0x02, 0xFF])
    )
    assert attrs.primary_lan_oob_channel == 0xFF
    assert attrs.secondary_lan_oob_channel == 2
    assert attrs.serial_oob_channel == 0xFF
    assert attrs.payload == b""
    assert attrs.serial_oob_supported is False


@pytest.mark.parametrize(
    "data",
    [
        bytes(3),
        bytes([0x01, 0x05, 0x02, 0x01]),
        bytes([0x01, 0x05, 0x02, 0x04, 0x01, 0x02, 0x03]),
    ],
)
def test_enhanced_attrs_errors(data):
    with pytest.raises(DecodeError):
        decode_enhanced_system_power_statistics_attrs(data)


def test_enhanced_attrs_no_periods():
    attrs = decode_enhanced_system_power_statistics_attrs(
        bytes([0x01, 0x05, 0x02, 0x00, 0x09, 0x0A])
    )
    assert attrs.header == V15
    assert attrs.power_rolling_avg_time_periods == []
    assert attrs.payload == bytes([0x09, 0x0A])


def test_enhanced_attrs_one_period():
    attrs = decode_enhanced_system_power_statistics_attrs(
        bytes([0x01, 0x05, 0x02, 0x01, 0x00])
    )
    assert attrs.power_rolling_avg_time_periods == [timedelta(0)]
    assert attrs.payload == b""


def test_enhanced_attrs_five_periods_with_trailing():
    attrs = decode_enhanced_system_power_statistics_attrs(
        bytes([0x01, 0x05, 0x02, 0x05, 0x2A, 0xD5, 0xB3, 0x4C, 0x27, 0x00, 0x00])
    )
    assert attrs.header == V15
    assert attrs.power_rolling_avg_time_periods == [
        timedelta(seconds=42),
        timedelta(days=21),
        timedelta(hours=51),
        timedelta(minutes=12),
        timedelta(seconds=39),
    ]
    assert attrs.payload == bytes([0x00, 0x00])