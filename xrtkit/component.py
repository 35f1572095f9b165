"""Component, device status, notification and schedule messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Device connector setting names.
NAME = "Name"
EVENT_TOPIC = "EventTopic"
REPLY_TOPIC = "ReplyTopic"
REQUEST_TOPIC = "RequestTopic"
TELEMETRY_TOPIC = "TelemetryTopic"
OPCUA_SERVER_REQUEST_TIMEOUT = "OPCUAServerRequestTimeout"
OPCUA_SERVER_USE_TELEMETRY_VALUES = "OPCUAServerUseTelemetryValues"
OPCUA_SERVER_STALE_TELEMETRY_VALUE_TIME = "OPCUAServerStaleTelemetryValueTime"
OPCUA_SERVER_TOPIC_MIDDLEWARE_PREFIX = "OPCUAServerTopicMiddlewarePrefix"
OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REQUEST = "OPCUAServerUseMiddlewarePrefixRequest"
OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REPLY = "OPCUAServerUseMiddlewarePrefixReply"
OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_TELEMETRY = "OPCUAServerUseMiddlewarePrefixTelemetry"
OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EVENT = "OPCUAServerUseMiddlewarePrefixEvent"
OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EDGEX_EVENT = "OPCUAServerUseMiddlewarePrefixEdgeXEvent"
OPCUA_SERVER_EDGEX_EVENT_TOPIC_BASE = "OPCUAServerEdgeXEventTopicBase"
EDGEX_COMPAT = "EdgeXCompat"

DEVICE_SERVICE_CATEGORY = "XRT::DeviceService"
DEVICE_SERVICE_RUNNING_STATUS = "Running"

# Environment variables that override device connector settings.
ENV_XRT_OPCUA_SERVER_REQUEST_TIMEOUT = "XRT_OPCUA_SERVER_REQUEST_TIMEOUT"
ENV_XRT_OPCUA_SERVER_USE_TELEMETRY_VALUES = "XRT_OPCUA_SERVER_USE_TELEMETRY_VALUES"
ENV_XRT_OPCUA_SERVER_STALE_TELEMETRY_VALUE_TIME = "XRT_OPCUA_SERVER_STALE_TELEMETRY_VALUE_TIME"
ENV_XRT_OPCUA_SERVER_TOPIC_MIDDLEWARE_PREFIX = "XRT_OPCUA_SERVER_TOPIC_MIDDLEWARE_PREFIX"
ENV_XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REQUEST = "XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REQUEST"
ENV_XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REPLY = "XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_REPLY"
ENV_XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_TELEMETRY = "XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_TELEMETRY"
ENV_XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EVENT = "XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EVENT"
ENV_XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EDGEX_EVENT = (
    "XRT_OPCUA_SERVER_USE_MIDDLEWARE_PREFIX_EDGEX_EVENT"
)
ENV_XRT_OPCUA_SERVER_EDGEX_EVENT_TOPIC_BASE = "XRT_OPCUA_SERVER_EDGEX_EVENT_TOPIC_BASE"

# Message types.
MESSAGE_TYPE_REQUEST = "xrt.request:1.0"
MESSAGE_TYPE_REPLY = "xrt.reply:1.0"
MESSAGE_TYPE_TELEMETRY = "xrt.telemetry:1.0"
MESSAGE_TYPE_DEVICE_DISCOVERY = "xrt.device.discovery:1.0"
MESSAGE_TYPE_DISCOVERY = "xrt.discovery:1.0"
MESSAGE_TYPE_EVENT = "xrt.event:1.0"

# Notification event types.
EVENT_TYPE_DEVICE_ADDED = "device:added"
EVENT_TYPE_DEVICE_UPDATED = "device:updated"
EVENT_TYPE_DEVICE_DELETED = "device:deleted"


@dataclass
class Component:
    """A component of an instance with its configuration and state."""

    category: str = ""
    config: dict[str, Any] = field(default_factory=dict)
    name: str = ""
    state: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "config": dict(self.config),
            "name": self.name,
            "state": self.state,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Component:
        return cls(
            category=data.get("category") or "",
            config=dict(data.get("config") or {}),
            name=data.get("name") or "",
            state=data.get("state") or "",
            type=data.get("type") or "",
        )


@dataclass
class DeviceStatus:
    """Operational status of a device."""

    device: str = ""
    operational: bool = False
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"device": self.device, "operational": self.operational, "type": self.type}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceStatus:
        return cls(
            device=data.get("device") or "",
            operational=bool(data.get("operational", False)),
            type=data.get("type") or "",
        )


@dataclass
class Notification:
    """A notice that a device of a device service has changed."""

    device_service_name: str = ""
    event: Any = None
    event_type: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "device_service": self.device_service_name,
            "event": self.event,
            "event_type": self.event_type,
            "type": self.type,
        }


@dataclass
class Schedule:
    """A timed, polled read of device resources."""

    name: str = ""
    device: str = ""
    resource: list[str] = field(default_factory=list)
    interval: int = 0
    on_change: bool = False
    bounds: dict[str, float] = field(default_factory=dict)
    publish: bool = False
    units: bool = False
    options: Any = None

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError(f"schedule interval must not be negative: {self.interval}")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "device": self.device,
            "resource": list(self.resource),
        }
        if self.interval:
            data["interval"] = self.interval
        data.update(
            on_change=self.on_change,
            bounds=dict(self.bounds),
            publish=self.publish,
            units=self.units,
        )
        if self.options is not None:
            data["options"] = self.options
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schedule:
        return cls(
            name=data.get("name") or "",
            device=data.get("device") or "",
            resource=list(data.get("resource") or []),
            interval=int(data.get("interval") or 0),
            on_change=bool(data.get("on_change", False)),
            bounds={k: float(v) for k, v in (data.get("bounds") or {}).items()},
            publish=bool(data.get("publish", False)),
            units=bool(data.get("units", False)),
            options=data.get("options"),
        )