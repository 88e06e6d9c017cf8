"""A UDP transport for exchanging packets with a BMC."""

import socket

DEFAULT_PORT = 623
_RECEIVE_BUFFER = 512


def with_default_port(addr: str) -> str:
    """Append the IPMI port 623 to an address lacking a port.

    IPv6 literals must be enclosed in square brackets.
    """
    if ":" not in addr or addr.endswith("]"):
        return f"{addr}:{DEFAULT_PORT}"
    return addr


def _split_host_port(addr: str) -> tuple[str, int]:
    if addr.startswith("["):
        host, sep, rest = addr[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError(f"invalid address: {addr}")
        port_text = rest[1:]
    else:
        host, sep, port_text = addr.rpartition(":")
        if not sep:
            raise ValueError(f"missing port in address: {addr}")
        if ":" in host:
            raise ValueError(f"too many colons in address: {addr}")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in address: {addr}") from None
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"invalid port in address: {addr}")
    return host, port


def _resolve(host: str, port: int):
    infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    if not infos:
        raise OSError(f"no addresses found for {host}")
    # IPv4 is preferred where a name has both A and AAAA records
    for info in infos:
        if info[0] == socket.AF_INET:
            return info
    return infos[0]


class Transport:
    """A connected UDP socket with a receive buffer; not safe for concurrent use.

    The address is of the form IP[:port]; the port defaults to 623.
    """

    def __init__(self, addr: str) -> None:
        host, port = _split_host_port(with_default_port(addr))
        family, type_, proto, _, sockaddr = _resolve(host, port)
        self._socket = socket.socket(family, type_, proto)
        try:
            self._socket.connect(sockaddr)
        except OSError:
            self._socket.close()
            raise

    def address(self) -> tuple[str, int]:
        """The remote (host, port) of the endpoint."""
        host, port = self._socket.getpeername()[:2]
        return host, port

    def send(self, data: bytes, timeout: float | None = None) -> bytes:
        """Send a packet and block until a reply arrives, returning its data.

        Raises TimeoutError if no reply arrives within ``timeout`` seconds,
        or OSError on a network error. Replies are truncated to 512 bytes.
        """
        self._socket.settimeout(timeout)
        sent = self._socket.send(data)
        if sent != len(data):
            raise OSError(f"wrote incomplete message ({sent}/{len(data)} bytes)")
        return self._socket.recv(_RECEIVE_BUFFER)

    def close(self) -> None:
        """Shut down the transport, rendering it unusable."""
        self._socket.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *args) -> None:
        self.close()