"""Reply messages and the mapping between status codes and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from xrtkit.component import Component
from xrtkit.errors import EdgeXError, ErrorKind


class XrtStatus(IntEnum):
    """Result status codes of a reply."""

    OK = 0
    NOT_FOUND = 1
    NOT_SUPPORTED = 2
    INVALID_OPERATION = 3
    ALREADY_EXISTS = 7
    SERVER_ERROR = 500  # used for any error not covered above


_STATUS_TO_KIND = {
    XrtStatus.NOT_FOUND: ErrorKind.ENTITY_DOES_NOT_EXIST,
    XrtStatus.NOT_SUPPORTED: ErrorKind.NOT_IMPLEMENTED,
    XrtStatus.INVALID_OPERATION: ErrorKind.INVALID_ID,
    XrtStatus.ALREADY_EXISTS: ErrorKind.DUPLICATE_NAME,
}

_KIND_TO_STATUS = {kind: status for status, kind in _STATUS_TO_KIND.items()}


def _error_kind(err: BaseException | None) -> ErrorKind:
    while isinstance(err, EdgeXError):
        if err.kind is not ErrorKind.UNKNOWN:
            return err.kind
        err = err.cause
    return ErrorKind.UNKNOWN


def xrt_error_code(err: BaseException | None) -> XrtStatus:
    """Return the status code matching the kind of an error."""
    return _KIND_TO_STATUS.get(_error_kind(err), XrtStatus.SERVER_ERROR)


@dataclass
class BaseResult:
    """Status and error message common to every reply result."""

    status: int = XrtStatus.OK
    error_message: str = ""

    def error(self) -> EdgeXError | None:
        """Return the error this result reports, or None when it succeeded."""
        if self.status == XrtStatus.OK:
            return None
        kind = _STATUS_TO_KIND.get(self.status, ErrorKind.SERVER_ERROR)
        return EdgeXError(kind, self.error_message)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BaseResult:
        return cls(**_base_fields(data))


def _base_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "status": int(data.get("status") or 0),
        "error_message": data.get("error") or "",
    }


@dataclass
class Reading:
    """A single reading value with its type, origin time and tags."""

    value: Any = None
    type: str = ""
    origin: int = 0
    tags: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Reading:
        return cls(
            value=data.get("value"),
            type=data.get("type") or "",
            origin=int(data.get("origin") or 0),
            tags=data.get("tags"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "type": self.type,
            "origin": self.origin,
            "tags": self.tags,
        }


@dataclass
class MultiResourcesResult(BaseResult):
    """Readings of several resources of one device."""

    device: str = ""
    profile: str = ""
    source_name: str = ""
    readings: dict[str, Reading] = field(default_factory=dict)
    tags: dict[str, Any] | None = None
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultiResourcesResult:
        return cls(
            **_base_fields(data),
            device=data.get("device") or "",
            profile=data.get("profile") or "",
            source_name=data.get("sourceName") or "",
            readings={
                name: Reading.from_dict(reading)
                for name, reading in (data.get("readings") or {}).items()
            },
            tags=data.get("tags"),
            type=data.get("type") or "",
        )


@dataclass
class ComponentsDiscoveryResponse:
    """Reply to a component discovery: the components of one instance."""

    components: list[Component] = field(default_factory=list)
    node_id: str = ""
    server_id: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComponentsDiscoveryResponse:
        return cls(
            components=[Component.from_dict(c) for c in data.get("components") or []],
            node_id=data.get("node_id") or "",
            server_id=data.get("server_id") or "",
            type=data.get("type") or "",
        )