"""Device information exchanged with the runtime and its conversions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from xrtkit.errors import EdgeXError
from xrtkit.protocols import (
    ETHERNET_IP,
    ETHERNET_IP_EXPLICIT_CONNECTED,
    ETHERNET_IP_KEY,
    ETHERNET_IP_O2T,
    ETHERNET_IP_T2O,
    ETHERNET_IP_XRT,
    PROTOCOL_NAME,
    to_edgex_properties,
)
from xrtkit.v2models import AdminState, Device, OperatingState


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return value or ""


@dataclass
class DeviceInfo:
    """A device in the form used by the runtime and the version 3 API."""

    id: str = ""
    name: str = ""
    description: str = ""
    admin_state: str = ""
    operating_state: str = ""
    labels: list[str] | None = None
    location: Any = None
    service_name: str = ""
    profile_name: str = ""
    auto_events: list[dict[str, Any]] | None = None
    protocols: dict[str, dict[str, Any]] = field(default_factory=dict)
    tags: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        if self.description:
            data["description"] = self.description
        data["adminState"] = _text(self.admin_state)
        data["operatingState"] = _text(self.operating_state)
        if self.labels:
            data["labels"] = list(self.labels)
        if self.location is not None:
            data["location"] = self.location
        data["serviceName"] = self.service_name
        data["profileName"] = self.profile_name
        if self.auto_events:
            data["autoEvents"] = list(self.auto_events)
        data["protocols"] = {name: dict(props) for name, props in self.protocols.items()}
        if self.tags:
            data["tags"] = dict(self.tags)
        data["properties"] = None if self.properties is None else dict(self.properties)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceInfo:
        protocols = data.get("protocols") or {}
        properties = data.get("properties")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            admin_state=_text(data.get("adminState")),
            operating_state=_text(data.get("operatingState")),
            labels=data.get("labels"),
            location=data.get("location"),
            service_name=data.get("serviceName") or "",
            profile_name=data.get("profileName") or "",
            auto_events=data.get("autoEvents"),
            protocols={name: dict(props or {}) for name, props in protocols.items()},
            tags=data.get("tags"),
            properties=None if properties is None else dict(properties),
        )


def to_edgex_v2_device(device: DeviceInfo, service_name: str) -> Device:
    """Convert a device to the version 2 core metadata model."""
    protocols: dict[str, dict[str, str]] = {}
    protocol_name = ""
    for protocol, properties in device.protocols.items():
        protocols[protocol] = to_edgex_properties(protocol, properties)
        protocol_name = protocol.lower()
    return Device(
        name=device.name,
        admin_state=AdminState.UNLOCKED,
        operating_state=OperatingState.UP,
        protocol_name=protocol_name,
        protocols=protocols,
        service_name=service_name,
        profile_name=device.profile_name,
        properties=device.properties,
    )


def to_edgex_v3_device(device: DeviceInfo, service_name: str) -> DeviceInfo:
    """Convert a device to the version 3 form, recording its protocol name."""
    properties = dict(device.properties or {})
    for protocol in device.protocols:
        properties[PROTOCOL_NAME] = protocol.lower()
    return DeviceInfo(
        name=device.name,
        admin_state=AdminState.UNLOCKED.value,
        operating_state=OperatingState.UP.value,
        protocols=device.protocols,
        service_name=service_name,
        profile_name=device.profile_name,
        properties=properties,
    )


def to_xrt_device(device: DeviceInfo | dict[str, Any]) -> DeviceInfo:
    """Convert a version 3 device (object or JSON mapping) to the runtime form.

    Raises EdgeXError when the device cannot be represented as JSON.
    """
    data = device.to_dict() if isinstance(device, DeviceInfo) else device
    try:
        info = DeviceInfo.from_dict(json.loads(json.dumps(data)))
    except (TypeError, ValueError, AttributeError) as exc:
        raise EdgeXError(cause=exc) from exc

    if ETHERNET_IP in info.protocols:
        process_ethernet_ip(info.protocols)
    return info


def process_ethernet_ip(protocol_properties: dict[str, dict[str, Any]]) -> None:
    """Fold the EtherNet/IP sub-sections into one protocol entry, in place."""
    if ETHERNET_IP in protocol_properties:
        protocol_properties[ETHERNET_IP_XRT] = protocol_properties.pop(ETHERNET_IP)
    for section in (
        ETHERNET_IP_EXPLICIT_CONNECTED,
        ETHERNET_IP_O2T,
        ETHERNET_IP_T2O,
        ETHERNET_IP_KEY,
    ):
        if section in protocol_properties:
            protocol_properties[ETHERNET_IP_XRT][section] = protocol_properties.pop(section)