"""Core metadata models of the version 2 API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AdminState(str, Enum):
    """Administrative state of a device."""

    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class OperatingState(str, Enum):
    """Operating state of a device."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


@dataclass
class AutoEvent:
    """A periodic or on-change reading of a device source."""

    interval: str = ""
    on_change: bool = False
    source_name: str = ""


@dataclass
class DBTimestamp:
    """Creation and modification times of a stored entity."""

    created: int = 0
    modified: int = 0


@dataclass
class Device(DBTimestamp):
    """A device as described by core metadata."""

    id: str = ""
    name: str = ""
    description: str = ""
    admin_state: AdminState | str = ""
    operating_state: OperatingState | str = ""
    protocol_name: str = ""
    protocols: dict[str, dict[str, str]] = field(default_factory=dict)
    last_connected: int = 0
    last_reported: int = 0
    labels: list[str] | None = None
    location: Any = None
    tags: dict[str, Any] | None = None
    service_name: str = ""
    profile_name: str = ""
    auto_events: list[AutoEvent] | None = None
    notify: bool = False
    # Extra information gathered about the device during discovery.
    properties: dict[str, Any] | None = None


@dataclass
class ResourceProperties:
    """Value properties of a device resource."""

    value_type: str = ""
    read_write: str = ""
    units: str = ""
    minimum: str = ""
    maximum: str = ""
    default_value: str = ""
    mask: str = ""
    shift: str = ""
    scale: str = ""
    offset: str = ""
    base: str = ""
    assertion: str = ""
    media_type: str = ""


@dataclass
class DeviceResource:
    """A single readable or writable value of a device."""

    description: str = ""
    name: str = ""
    is_hidden: bool = False
    tag: str = ""
    tags: dict[str, Any] | None = None
    properties: ResourceProperties = field(default_factory=ResourceProperties)
    attributes: dict[str, Any] | None = None


@dataclass
class ResourceOperation:
    """One resource access inside a device command."""

    device_resource: str = ""
    default_value: str = ""
    mappings: dict[str, str] | None = None


@dataclass
class DeviceCommand:
    """A named group of resource operations."""

    name: str = ""
    is_hidden: bool = False
    read_write: str = ""
    resource_operations: list[ResourceOperation] = field(default_factory=list)
    tags: dict[str, Any] | None = None


@dataclass
class DeviceProfile(DBTimestamp):
    """A device profile: the resources and commands of a device type."""

    api_version: str = ""
    description: str = ""
    id: str = ""
    name: str = ""
    manufacturer: str = ""
    model: str = ""
    labels: list[str] | None = None
    device_resources: list[DeviceResource] = field(default_factory=list)
    device_commands: list[DeviceCommand] = field(default_factory=list)