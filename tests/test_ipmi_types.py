import pytest

from ipmibmc.errors import DecodeError
from ipmibmc.ipmi_types import (
    AuthenticationAlgorithm,
    AuthenticationPayload,
    AuthenticationType,
    BodyCode,
    algorithm_name,
    decode_authentication_payload,
)


@pytest.mark.parametrize(
    "wire",
    [
        # too short
        bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00]),
        # not authentication payload
        bytes([0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00]),
        # simultaneously wildcard and not-None
        bytes([0x00, 0x00, 0x00, 0x00, 0x02, 0x00, 0x00, 0x00]),
    ],
)
def test_decode_authentication_payload_errors(wire):
    with pytest.raises(DecodeError):
        decode_authentication_payload(wire)


@pytest.mark.parametrize(
    "wire, payload, remaining",
    [
        (
            bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01]),
            AuthenticationPayload(wildcard=True),
            bytes([0x01]),
        ),
        (
            bytes([0x00, 0x00, 0x00, 0x08, 0x03, 0x00, 0x00, 0x00]),
            AuthenticationPayload(algorithm=AuthenticationAlgorithm.HMAC_SHA256),
            b"",
        ),
    ],
)
def test_authentication_payload(wire, payload, remaining):
    assert payload.serialise() == wire[:8]
    decoded, rest = decode_authentication_payload(wire)
    assert decoded == payload
    assert rest == remaining


def test_authentication_payload_round_trip():
    for algorithm in AuthenticationAlgorithm:
        payload = AuthenticationPayload(algorithm=algorithm)
        decoded, rest = decode_authentication_payload(payload.serialise())
        assert decoded == payload
        assert rest == b""


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "None"),
        (1, "RAKP-HMAC-SHA1"),
        (2, "RAKP-HMAC-MD5"),
        (3, "RAKP-HMAC-SHA256"),
        (0xC0, "OEM"),
        (0xFF, "OEM"),
        (0x10, "Unknown"),
    ],
)
def test_algorithm_name(value, expected):
    assert algorithm_name(value) == expected


def test_authentication_algorithm_str():
    assert str(AuthenticationAlgorithm.HMAC_MD5) == "RAKP-HMAC-MD5"
    assert str(AuthenticationAlgorithm(0xC1)) == "OEM"


@pytest.mark.parametrize(
    "value, expected",
    [
        (AuthenticationType.NONE, "0(None)"),
        (AuthenticationType.MD5, "2(MD5)"),
        (AuthenticationType.PASSWORD, "4(Password/Key)"),
        (AuthenticationType.RMCP_PLUS, "6(RMCP+)"),
    ],
)
def test_authentication_type_str(value, expected):
    assert str(value) == expected


def test_authentication_type_reserved_value():
    assert str(AuthenticationType(3)) == "3(Unknown)"


def test_authentication_type_out_of_range():
    with pytest.raises(ValueError):
        AuthenticationType(16)


def test_body_code_str():
    assert str(BodyCode.DCMI) == "DCMI"
    assert str(BodyCode.VSO) == "VITA Standards Organization (VSO)"
    assert str(BodyCode(0x10)) == "Unknown"
    assert BodyCode.DCMI == 0xDC