# ipmibmc

Building blocks for talking to a baseboard management controller (BMC)
over IPMI v2.0 and DCMI. The package encodes and decodes a set of
protocol messages, derives the key material and authentication codes of
RMCP+ session establishment (RAKP), and offers a small UDP transport.
It needs nothing beyond the standard library.

## Installation

```
pip install .
```

Add the test extra to get pytest: `pip install ".[test]"`.

## What is inside

| Module | Purpose |
| --- | --- |
| `ipmibmc.errors` | `DecodeError`, raised by every decoder on malformed input (a `ValueError`) |
| `ipmibmc.bcd` | `decode()` for Binary-coded Decimal bytes |
| `ipmibmc.complement` | `ones()` and `twos()` for one's and two's complement numbers |
| `ipmibmc.ipmi_types` | `AuthenticationAlgorithm`, `AuthenticationType`, `BodyCode`, `AuthenticationPayload`, `decode_authentication_payload()` |
| `ipmibmc.authenticator` | `authentication_params()`, `Mac`, `RAKPParameters`, `AdditionalKeyMaterialGenerator` and the `calculate_*` functions for the SIK and RAKP codes |
| `ipmibmc.transport` | a UDP `Transport` and `with_default_port()` |
| `ipmibmc.rolling_average` | `period_from_byte()`, `period_to_byte()` and `seconds_multiplier()` for DCMI rolling average periods |
| `ipmibmc.power_reading` | `SystemPowerStatisticsMode`, `PowerReadingRequest`, `PowerReading`, `decode_power_reading()` |
| `ipmibmc.sensor_info` | `SensorInfoRequest`, `SensorInfoResponse`, `decode_sensor_info()` |
| `ipmibmc.dcmi_capabilities` | `CapabilitiesParameter`, `encode_capabilities_request()`, `decode_header()`, `decode_supported_capabilities()`, `decode_mandatory_platform_attrs()` |
| `ipmibmc.dcmi_attributes` | `decode_optional_platform_attrs()`, `decode_manageability_access_attrs()`, `decode_enhanced_system_power_statistics_attrs()` |

## Examples

Decode a DCMI power reading response:

```python
from ipmibmc.power_reading import decode_power_reading

reading = decode_power_reading(bytes([
    0xAE, 0x08, 0x57, 0x04, 0x05, 0x0D, 0xD2, 0x04,
    0x73, 0xB6, 0x44, 0x5D, 0xAA, 0xBB, 0xCC, 0xDD, 0x40,
]))
print(reading.instantaneous, reading.min, reading.avg, reading.max)
# 2222 1111 1234 3333
print(reading.timestamp, reading.period, reading.active)
# timestamp is a UTC datetime, period a timedelta
```

Build requests:

```python
from datetime import timedelta

from ipmibmc.dcmi_capabilities import CapabilitiesParameter, encode_capabilities_request
from ipmibmc.power_reading import PowerReadingRequest, SystemPowerStatisticsMode
from ipmibmc.sensor_info import SensorInfoRequest

PowerReadingRequest(
    mode=SystemPowerStatisticsMode.ENHANCED, period=timedelta(minutes=5)
).encode()
# b'\x02E\x00'  (0x45 encodes five minutes)

SensorInfoRequest(sensor_type=0x01, entity=0x37, instance_start=1).encode()
# b'\x017\x00\x01'

encode_capabilities_request(CapabilitiesParameter.SUPPORTED_CAPABILITIES)
# b'\x01'
```

Decode a sensor info response:

```python
from ipmibmc.sensor_info import decode_sensor_info

rsp = decode_sensor_info(bytes([0x09, 0x02, 0xF0, 0x0F, 0x0F, 0xF0, 0xFF]))
rsp.instances, [hex(r) for r in rsp.record_ids], rsp.payload
# (9, ['0xff0', '0xf00f'], b'\xff')
```

Derive RMCP+ session keys from the fields of RAKP messages 1 and 2:

```python
from ipmibmc.authenticator import (
    AdditionalKeyMaterialGenerator,
    RAKPParameters,
    authentication_params,
    calculate_rakp3_auth_code,
    calculate_rakp4_icv,
    calculate_sik,
)
from ipmibmc.ipmi_types import AuthenticationAlgorithm

params = authentication_params(AuthenticationAlgorithm.HMAC_SHA1)
rakp = RAKPParameters(
    remote_console_session_id=0x11223344,
    managed_system_session_id=0x55667788,
    remote_console_random=bytes(16),
    managed_system_random=bytes(16),
    managed_system_guid=bytes(16),
    max_privilege_level=4,
    privilege_level_lookup=False,
    username="admin",
)
auth_code = calculate_rakp3_auth_code(params.auth_code(b"password"), rakp)
sik = calculate_sik(params.sik(b"password"), rakp)
keys = AdditionalKeyMaterialGenerator(params.k(sik))
k1, k2 = keys.k(1), keys.k(2)
expected_icv = calculate_rakp4_icv(params.icv(sik), rakp)  # 12 bytes for HMAC-SHA1-96
```

Exchange a packet with a BMC over UDP:

```python
from ipmibmc.transport import Transport

with Transport("192.0.2.10") as transport:  # port 623 is added when missing
    reply = transport.send(packet_bytes, timeout=1.0)
```

`send()` raises `TimeoutError` when no reply arrives in time.

## What this package does not do

- It does not build or parse the RMCP, session or message layers that
  wrap a command, so it cannot on its own send a command to a BMC;
  `Transport` carries whatever bytes it is given.
- It does not open or close sessions, retry requests or check
  completion codes.
- It does not encrypt or decrypt payloads; the derived K_2 is returned
  as bytes for the caller to use.
- It has no command-line program.

## Running the tests

```
pytest
```