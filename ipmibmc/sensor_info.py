"""The DCMI Get DCMI Sensor Info command (section 6.5.2)."""

import struct
from dataclasses import dataclass, field

from .errors import DecodeError


@dataclass
class SensorInfoRequest:
    """A Get DCMI Sensor Info request.

    ``instance`` of 0 retrieves all instances of the entity, starting from
    ``instance_start``; otherwise ``instance_start`` is ignored.
    """

    sensor_type: int
    entity: int
    instance: int = 0
    instance_start: int = 0

    def encode(self) -> bytes:
        """Encode the request data into its 4-byte wire form."""
        start = self.instance_start if self.instance == 0 else 0
        return bytes([self.sensor_type, self.entity, self.instance, start])


@dataclass
class SensorInfoResponse:
    """The response to a Get DCMI Sensor Info request.

    ``instances`` is the total number of instances of the entity; if more
    than the record IDs returned, further requests can fetch the rest.
    ``payload`` holds any bytes after the record IDs.
    """

    instances: int
    record_ids: list[int] = field(default_factory=list)
    payload: bytes = b""


def decode_sensor_info(data: bytes) -> SensorInfoResponse:
    """Decode a Get DCMI Sensor Info response; DecodeError if truncated."""
    if len(data) < 2:
        raise DecodeError(f"expected at least 2 bytes, got {len(data)}")
    count = data[1]
    # the spec caps this at 8, but that is not enforced
    expected = 2 + count * 2
    if len(data) < expected:
        raise DecodeError(
            f"expected {expected} bytes for {count} record IDs, got {len(data)}"
        )
    record_ids = [rid for (rid,) in struct.iter_unpack("<H", data[2:expected])]
    return SensorInfoResponse(
        instances=data[0],
        record_ids=record_ids,
        payload=bytes(data[expected:]),
    )