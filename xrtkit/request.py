"""Request messages sent to the runtime and the functions that build them."""

from __future__ import annotations

import dataclasses
import json
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from xrtkit.component import Schedule
from xrtkit.deviceinfo import DeviceInfo


class Operation(str, Enum):
    """Operations a request can ask the runtime to perform."""

    PROFILE_ADD = "profile:add"
    PROFILE_UPDATE = "profile:update"
    PROFILE_LIST = "profile:list"
    PROFILE_GET = "profile:read"
    PROFILE_DELETE = "profile:delete"

    DEVICE_ADD = "device:add"
    DEVICE_UPDATE = "device:update"
    DEVICE_RESOURCE_GET = "device:get"
    DEVICE_GET = "device:read"
    DEVICE_RESOURCE_SET = "device:put"
    DEVICE_DELETE = "device:delete"
    DEVICE_LIST = "device:list"
    DEVICE_SCAN = "device:scan"

    SCHEDULE_ADD = "schedule:add"
    SCHEDULE_LIST = "schedule:list"
    SCHEDULE_DELETE = "schedule:delete"

    DISCOVERY_TRIGGER = "discovery:trigger"

    COMPONENT_UPDATE = "component:update"
    # State and configuration of all components in one instance.
    COMPONENT_DISCOVER = "component:discover"
    # State and configuration of all components of all instances.
    COMPONENT_DISCOVERY = "discovery:discover"


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return _serialize(to_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _serialize(dataclasses.asdict(value))
    if isinstance(value, dict):
        return {str(_serialize(k)): _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


@dataclass
class Request:
    """A request message: the common header and the operation's own fields."""

    op: Operation | str
    client: str
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the request as a JSON-ready mapping."""
        data: dict[str, Any] = {
            "client": self.client,
            "request_id": self.request_id,
            "op": _serialize(self.op),
        }
        data.update(_serialize(self.payload))
        return data

    def to_json(self) -> str:
        """Return the request encoded as JSON."""
        return json.dumps(self.to_dict())


def new_base_request(op: Operation | str, client_name: str) -> Request:
    """Create a request carrying only the common header."""
    return Request(op=op, client=client_name)


def new_all_profiles_request(client_name: str) -> Request:
    return Request(Operation.PROFILE_LIST, client_name)


def new_profile_add_request(profile: Any, client_name: str) -> Request:
    """Create a request that adds a device profile."""
    return Request(Operation.PROFILE_ADD, client_name, payload={"profile": profile})


def new_profile_update_request(profile: Any, client_name: str) -> Request:
    """Create a request that updates a device profile."""
    return Request(Operation.PROFILE_UPDATE, client_name, payload={"profile": profile})


def new_profile_get_request(profile_name: str, client_name: str) -> Request:
    return Request(Operation.PROFILE_GET, client_name, payload={"profile": profile_name})


def new_profile_delete_request(profile_name: str, client_name: str) -> Request:
    return Request(Operation.PROFILE_DELETE, client_name, payload={"profile": profile_name})


def new_device_add_request(device: DeviceInfo, client_name: str) -> Request:
    return Request(
        Operation.DEVICE_ADD,
        client_name,
        payload={"device": device.name, "device_info": device},
    )


def new_discovered_device_add_request(device: DeviceInfo, client_name: str) -> Request:
    """Create a request adding a discovered device without a profile, before a scan."""
    return Request(
        Operation.DEVICE_ADD,
        client_name,
        payload={"device": device.name, "device_info": {"protocols": device.protocols}},
    )


def new_device_scan_request(
    device: DeviceInfo, client_name: str, options: dict[str, Any] | None
) -> Request:
    """Create a request that scans a device to generate its profile."""
    return Request(
        Operation.DEVICE_SCAN,
        client_name,
        payload={
            "device": device.name,
            "profile": device.profile_name,
            "options": options,
        },
    )


def new_device_update_request(device: DeviceInfo, client_name: str) -> Request:
    return Request(
        Operation.DEVICE_UPDATE,
        client_name,
        payload={"device": device.name, "device_info": device},
    )


def new_all_devices_request(client_name: str) -> Request:
    return Request(Operation.DEVICE_LIST, client_name)


def new_device_get_request(device_name: str, client_name: str) -> Request:
    return Request(Operation.DEVICE_GET, client_name, payload={"device": device_name})


def new_device_delete_request(device_name: str, client_name: str) -> Request:
    return Request(Operation.DEVICE_DELETE, client_name, payload={"device": device_name})


def new_device_resource_get_request(
    device_name: str, client_name: str, resources: list[str] | None
) -> Request:
    return Request(
        Operation.DEVICE_RESOURCE_GET,
        client_name,
        payload={"device": device_name, "resource": resources},
    )


def new_device_resource_set_request(
    device_name: str,
    client_name: str,
    values: dict[str, Any] | None,
    options: dict[str, Any] | None,
) -> Request:
    return Request(
        Operation.DEVICE_RESOURCE_SET,
        client_name,
        payload={"device": device_name, "values": values, "options": options},
    )


def new_all_schedules_request(client_name: str) -> Request:
    return Request(Operation.SCHEDULE_LIST, client_name)


def new_schedule_add_request(client_name: str, schedule: Schedule) -> Request:
    return Request(Operation.SCHEDULE_ADD, client_name, payload={"schedule": schedule})


def new_schedule_delete_request(schedule_name: str, client_name: str) -> Request:
    return Request(Operation.SCHEDULE_DELETE, client_name, payload={"schedule": schedule_name})


def new_component_update_request(
    component: str, client_name: str, config: dict[str, Any] | None
) -> Request:
    return Request(
        Operation.COMPONENT_UPDATE,
        client_name,
        payload={"component": component, "config": config},
    )


def new_component_discover_request(client_name: str, category: str) -> Request:
    """Create a component discovery request; an empty category is left out."""
    payload = {"category": category} if category else {}
    return Request(Operation.COMPONENT_DISCOVER, client_name, payload=payload)


def new_discovery_request(client_name: str, options: dict[str, Any] | None) -> Request:
    return Request(Operation.DISCOVERY_TRIGGER, client_name, payload={"options": options})