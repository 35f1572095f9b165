# xrtkit

Data models and conversion helpers for the management messages, device
metadata and readings exchanged with an XRT device connector. It also maps
them to and from EdgeX-style device and event structures. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `xrtkit.request`
  - `Operation` is an enum of the operation names, such as `device:add` and
    `profile:read`.
  - `Request` holds the `op`, the `client`, a `request_id` and a `payload`.
    A new `Request` gets a fresh UUID as its `request_id`. `to_dict()` puts
    the header fields and the payload fields together in one JSON-ready
    mapping. `to_json()` encodes that mapping as a JSON string.
  - Builders: `new_base_request`, `new_all_profiles_request`,
    `new_profile_add_request`, `new_profile_update_request`,
    `new_profile_get_request`, `new_profile_delete_request`,
    `new_device_add_request`, `new_discovered_device_add_request`,
    `new_device_scan_request`, `new_device_update_request`,
    `new_all_devices_request`, `new_device_get_request`,
    `new_device_delete_request`, `new_device_resource_get_request`,
    `new_device_resource_set_request`, `new_all_schedules_request`,
    `new_schedule_add_request`, `new_schedule_delete_request`,
    `new_component_update_request`, `new_component_discover_request` and
    `new_discovery_request`.
  - `new_component_discover_request` leaves out the `category` field when the
    category is empty.

- `xrtkit.response`
  - `XrtStatus` holds the reply status codes: `OK`, `NOT_FOUND`,
    `NOT_SUPPORTED`, `INVALID_OPERATION`, `ALREADY_EXISTS` and
    `SERVER_ERROR`.
  - `BaseResult`, `Reading`, `MultiResourcesResult` and
    `ComponentsDiscoveryResponse` can each be built from decoded JSON with
    `from_dict()`.
  - `BaseResult.error()` returns `None` for status `OK`. For any other status
    it returns an `EdgeXError` of the matching kind, and unknown statuses
    become `SERVER_ERROR`.
  - `xrt_error_code(err)` maps an error's kind back to an `XrtStatus`.

- `xrtkit.deviceinfo`
  - `DeviceInfo` is a device in its JSON form. Use `to_dict()` and
    `from_dict()` to convert it.
  - `to_xrt_device` does a JSON round trip of the device. It then folds the
    EtherNet/IP sections into a single `EtherNet-IP` entry, using
    `process_ethernet_ip`, which works in place.
  - `to_edgex_v2_device` returns a `v2models.Device`. The protocol property
    values in it are rendered as strings.
  - `to_edgex_v3_device` returns a `DeviceInfo`. It is unlocked and up, and
    its lower-case protocol name is stored under the `ProtocolName` property.

- `xrtkit.protocols`
  - Protocol and property name constants.
  - `property_conversion_list(protocol)` returns three lists: the integer,
    float and boolean properties of that protocol.
  - `to_edgex_properties(protocol, properties)` renders every property as a
    string:
    - integer properties have no decimal point or exponent, so
      `4194302.0` becomes `"4194302"`;
    - float properties use the fewest digits, so `5.2` becomes `"5.2"`.
  - `format_value` gives the default text form used for other values.

- `xrtkit.readings`
  - Value type names and `normalize_value_type`. It matches names
    case-insensitively and raises `ValueError` for an unknown type.
  - `parse_xrt_reading_value(value_type, reading)` converts a JSON-decoded
    value to the declared type. For example:
    - integers wrap to the width of their type;
    - binary data is decoded from base64;
    - `Uint8Array` accepts either a list or a base64 string.
  - `to_edgex_v2_event(result)` turns a `MultiResourcesResult` into an
    `Event` holding one `BaseReading` per resource.

- `xrtkit.component`
  - `Component`, `DeviceStatus`, `Notification` and `Schedule`, each with
    `to_dict()`. Most also have `from_dict()`.
  - Constants for connector settings, their environment variable names,
    message types and notification event types.
  - `Schedule` raises `ValueError` for a negative interval. Its `to_dict()`
    leaves out a zero interval and options that are `None`.

- `xrtkit.v2models`
  - The version 2 `Device`, `DeviceProfile`, `DeviceResource`,
    `DeviceCommand`, `ResourceOperation`, `ResourceProperties`, `AutoEvent`
    and `DBTimestamp` dataclasses.
  - The `AdminState` and `OperatingState` enums.

- `xrtkit.errors`
  - `EdgeXError`, which carries a `kind`, a `message` and an optional
    `cause`.
  - `ErrorKind`, the enum of those kinds.

## Example

```python
from xrtkit.errors import ErrorKind
from xrtkit.request import new_device_get_request
from xrtkit.response import BaseResult, XrtStatus, xrt_error_code

request = new_device_get_request("sensor-1", "my-client")
payload = request.to_json()  # {"client": "my-client", "request_id": "...", "op": "device:read", "device": "sensor-1"}

result = BaseResult.from_dict({"status": 1, "error": "device not found"})
err = result.error()
assert err.kind is ErrorKind.ENTITY_DOES_NOT_EXIST
assert xrt_error_code(err) is XrtStatus.NOT_FOUND
```

## Errors

- Most conversions raise `EdgeXError` when the data does not fit.
  - A reading value that does not match its declared type raises
    `ErrorKind.CONTRACT_INVALID`.
  - `to_xrt_device` raises when the device cannot be represented as JSON.
- `normalize_value_type` raises `ValueError` for an unknown value type.
- `Schedule` raises `ValueError` for a negative interval.

## What it does not do

The package only builds and parses messages. It has:

- no MQTT or other transport client;
- no command-line program;
- no storage.

Sending requests and receiving replies or telemetry is left to the
application that uses it.