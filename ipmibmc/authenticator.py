"""Key derivation and authentication codes for RMCP+ session establishment."""

import hmac
import struct
from collections.abc import Callable
from dataclasses import dataclass

from .ipmi_types import AuthenticationAlgorithm


@dataclass(frozen=True)
class Mac:
    """An HMAC keyed with ``key``, optionally truncated to ``length`` bytes."""

    digest: str
    key: bytes
    length: int | None = None

    @property
    def size(self) -> int:
        """Length in bytes of the tags this MAC produces."""
        if self.length is not None:
            return self.length
        return hmac.new(self.key, digestmod=self.digest).digest_size

    def __call__(self, data: bytes) -> bytes:
        tag = hmac.new(self.key, data, self.digest).digest()
        return tag if self.length is None else tag[: self.length]


@dataclass(frozen=True)
class AuthenticationParams:
    """The configurable parameters of an RAKP authentication algorithm.

    ``icv_length`` of 0 means the RAKP Message 4 ICV is not truncated.
    """

    digest: str
    icv_length: int = 0

    def auth_code(self, kuid: bytes) -> Mac:
        """MAC for producing and verifying RAKP message 2 and 3 AuthCodes."""
        return Mac(self.digest, bytes(kuid))

    def sik(self, kg: bytes) -> Mac:
        """MAC for producing the SIK from RAKP messages 1 and 2."""
        return Mac(self.digest, bytes(kg))

    def k(self, sik: bytes) -> Mac:
        """MAC for creating additional key material (K_N)."""
        return Mac(self.digest, bytes(sik))

    def icv(self, sik: bytes) -> Mac:
        """MAC for validating the ICV field in RAKP Message 4."""
        return Mac(self.digest, bytes(sik), self.icv_length or None)


def authentication_params(algorithm: AuthenticationAlgorithm) -> AuthenticationParams:
    """Parameters for an authentication algorithm; ValueError if unsupported."""
    if algorithm == AuthenticationAlgorithm.HMAC_SHA1:
        return AuthenticationParams("sha1", 12)
    if algorithm == AuthenticationAlgorithm.HMAC_SHA256:
        return AuthenticationParams("sha256", 16)
    if algorithm == AuthenticationAlgorithm.HMAC_MD5:
        return AuthenticationParams("md5")
    raise ValueError(f"unknown authentication algorithm: {algorithm}")


class AdditionalKeyMaterialGenerator:
    """Derives K_N from the negotiated algorithm loaded with the SIK."""

    def __init__(self, mac: Mac) -> None:
        self.mac = mac

    def k(self, n: int) -> bytes:
        """Compute K_N; N is defined for 1 through 255."""
        # the constant is as long as the output tag, not the hash block size
        return self.mac(bytes([n & 0xFF]) * self.mac.size)


@dataclass
class RAKPParameters:
    """Fields of RAKP messages 1 and 2 that feed the session keys and codes."""

    remote_console_session_id: int
    managed_system_session_id: int
    remote_console_random: bytes
    managed_system_random: bytes
    managed_system_guid: bytes
    max_privilege_level: int
    privilege_level_lookup: bool
    username: str

    @property
    def role(self) -> int:
        """The requested role byte as it appeared on the wire."""
        role = self.max_privilege_level & 0xFF
        if not self.privilege_level_lookup:
            role |= 1 << 4
        return role

    def _role_and_user(self) -> bytes:
        name = self.username.encode()
        return bytes([self.role, len(name) & 0xFF]) + name


def _uint32(value: int) -> bytes:
    return struct.pack("<I", value & 0xFFFFFFFF)


MacFunction = Callable[[bytes], bytes]


def calculate_sik(mac: MacFunction, rakp: RAKPParameters) -> bytes:
    """Compute the Session Integrity Key."""
    return mac(
        bytes(rakp.remote_console_random)
        + bytes(rakp.managed_system_random)
        + rakp._role_and_user()
    )


def calculate_rakp2_auth_code(mac: MacFunction, rakp: RAKPParameters) -> bytes:
    """Compute the AuthCode the BMC should send in RAKP Message 2."""
    return mac(
        _uint32(rakp.remote_console_session_id)
        + _uint32(rakp.managed_system_session_id)
        + bytes(rakp.remote_console_random)
        + bytes(rakp.managed_system_random)
        + bytes(rakp.managed_system_guid)
        + rakp._role_and_user()
    )


def calculate_rakp3_auth_code(mac: MacFunction, rakp: RAKPParameters) -> bytes:
    """Compute the AuthCode the remote console sends in RAKP Message 3."""
    return mac(
        bytes(rakp.managed_system_random)
        + _uint32(rakp.remote_console_session_id)
        + rakp._role_and_user()
    )


def calculate_rakp4_icv(mac: MacFunction, rakp: RAKPParameters) -> bytes:
    """Compute the ICV expected in RAKP Message 4."""
    return mac(
        bytes(rakp.remote_console_random)
        + _uint32(rakp.managed_system_session_id)
        + bytes(rakp.managed_system_guid)
    )