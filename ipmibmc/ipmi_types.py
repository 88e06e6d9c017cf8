"""IPMI identifiers and the RMCP+ authentication payload."""

from dataclasses import dataclass
from enum import IntEnum

from .errors import DecodeError


def _pseudo_member(cls, value, limit):
    if not isinstance(value, int) or not 0 <= value <= limit:
        return None
    member = int.__new__(cls, value)
    member._name_ = f"UNKNOWN_{value}"
    member._value_ = value
    return member


class AuthenticationAlgorithm(IntEnum):
    """Authentication algorithm used during RMCP+ session establishment."""

    NONE = 0
    HMAC_SHA1 = 1
    HMAC_MD5 = 2
    HMAC_SHA256 = 3

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 0xFF)

    def __str__(self) -> str:
        return algorithm_name(self)


_ALGORITHM_NAMES = {
    0: "None",
    1: "RAKP-HMAC-SHA1",
    2: "RAKP-HMAC-MD5",
    3: "RAKP-HMAC-SHA256",
}


def algorithm_name(value: int) -> str:
    """Human-readable name of an authentication algorithm number."""
    name = _ALGORITHM_NAMES.get(int(value))
    if name is not None:
        return name
    if 0xC0 <= value <= 0xFF:
        return "OEM"
    return "Unknown"


class AuthenticationType(IntEnum):
    """Authentication type in the IPMI session header; 4 bits on the wire."""

    NONE = 0
    MD2 = 1
    MD5 = 2
    PASSWORD = 4
    OEM = 5
    RMCP_PLUS = 6

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 0x0F)

    def __str__(self) -> str:
        return f"{int(self)}({_AUTH_TYPE_NAMES.get(int(self), 'Unknown')})"


_AUTH_TYPE_NAMES = {
    0: "None",
    1: "MD2",
    2: "MD5",
    4: "Password/Key",
    5: "OEM",
    6: "RMCP+",
}


class BodyCode(IntEnum):
    """Defining body code for Group Extension network functions."""

    PICMG = 0x00
    DMTF = 0x01
    SSI = 0x02
    VSO = 0x03
    DCMI = 0xDC

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 0xFF)

    def __str__(self) -> str:
        return _BODY_CODE_NAMES.get(int(self), "Unknown")


_BODY_CODE_NAMES = {
    0x00: "PCI Industrial Computer Manufacturer's Group",
    0x01: "DMTF Pre-OS Working Group ASF Specification",
    0x02: "Server System Infrastructure (SSI) Forum",
    0x03: "VITA Standards Organization (VSO)",
    0xDC: "DCMI",
}

_PAYLOAD_LENGTH = 8


@dataclass
class AuthenticationPayload:
    """One authentication algorithm preference in an RMCP+ Open Session Request.

    If ``wildcard`` is true the BMC chooses the algorithm, and ``algorithm``
    is NONE.
    """

    wildcard: bool = False
    algorithm: AuthenticationAlgorithm = AuthenticationAlgorithm.NONE

    def serialise(self) -> bytes:
        """Encode the payload into its 8-byte wire form."""
        if self.wildcard:
            # a wildcard is a zero-length payload
            length, algorithm = 0x00, 0x00
        else:
            length, algorithm = 0x08, int(self.algorithm) & 0xFF
        return bytes([0x00, 0x00, 0x00, length, algorithm, 0x00, 0x00, 0x00])


def decode_authentication_payload(
    data: bytes,
) -> tuple[AuthenticationPayload, bytes]:
    """Decode an authentication payload, returning it and the unconsumed bytes.

    Raises DecodeError if the data is truncated or invalid.
    """
    if len(data) < _PAYLOAD_LENGTH:
        raise DecodeError(
            f"authentication payloads are 8 bytes, only {len(data)} remaining"
        )
    if data[0] != 0x00:
        raise DecodeError("data does not represent an authentication payload")
    wildcard = data[3] == 0x00
    algorithm = AuthenticationAlgorithm(data[4] & 0x3F)
    if wildcard and algorithm != AuthenticationAlgorithm.NONE:
        raise DecodeError(
            "if authentication algorithm is wildcard, concrete algorithm "
            "must be None"
        )
    payload = AuthenticationPayload(wildcard=wildcard, algorithm=algorithm)
    return payload, bytes(data[_PAYLOAD_LENGTH:])