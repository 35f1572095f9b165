import pytest

from xrtkit.component import Component
from xrtkit.errors import EdgeXError, ErrorKind
from xrtkit.response import (
    BaseResult,
    ComponentsDiscoveryResponse,
    MultiResourcesResult,
    Reading,
    XrtStatus,
    xrt_error_code,
)


@pytest.mark.parametrize(
    "kind, code",
    [
        (ErrorKind.ENTITY_DOES_NOT_EXIST, 1),
        (ErrorKind.NOT_IMPLEMENTED, 2),
        (ErrorKind.INVALID_ID, 3),
        (ErrorKind.DUPLICATE_NAME, 7),
        (ErrorKind.SERVER_ERROR, 500),
    ],
)
def test_error_codes_are_wire_integers(kind, code):
    assert xrt_error_code(EdgeXError(kind, "x")) == code


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ErrorKind.ENTITY_DOES_NOT_EXIST, XrtStatus.NOT_FOUND),
        (ErrorKind.NOT_IMPLEMENTED, XrtStatus.NOT_SUPPORTED),
        (ErrorKind.INVALID_ID, XrtStatus.INVALID_OPERATION),
        (ErrorKind.DUPLICATE_NAME, XrtStatus.ALREADY_EXISTS),
        (ErrorKind.SERVER_ERROR, XrtStatus.SERVER_ERROR),
    ],
)
def test_xrt_error_code(kind, expected):
    assert xrt_error_code(EdgeXError(kind, "", None)) == expected


def test_xrt_error_code_of_wrapped_error():
    inner = EdgeXError(ErrorKind.DUPLICATE_NAME, "dup")
    assert xrt_error_code(EdgeXError(cause=inner)) == XrtStatus.ALREADY_EXISTS


def test_xrt_error_code_of_plain_exception():
    assert xrt_error_code(ValueError("x")) == XrtStatus.SERVER_ERROR


def test_ok_result_has_no_error():
    assert BaseResult(status=XrtStatus.OK).error() is None


@pytest.mark.parametrize(
    "status, kind",
    [
        (1, ErrorKind.ENTITY_DOES_NOT_EXIST),
        (2, ErrorKind.NOT_IMPLEMENTED),
        (3, ErrorKind.INVALID_ID),
        (7, ErrorKind.DUPLICATE_NAME),
        (4, ErrorKind.SERVER_ERROR),
        (500, ErrorKind.SERVER_ERROR),
    ],
)
def test_result_error_kind(status, kind):
    err = BaseResult(status=status, error_message="boom").error()
    assert err.kind is kind
    assert str(err) == "boom"


@pytest.mark.parametrize("status", [1, 2, 3, 7, 500])
def test_status_round_trips_through_error(status):
    assert xrt_error_code(BaseResult(status=status).error()) == status


def test_base_result_from_dict():
    result = BaseResult.from_dict({"status": 1, "error": "not found"})
    assert result == BaseResult(status=1, error_message="not found")


def test_reading_round_trip():
    reading = Reading(value=1.5, type="Float64", origin=123, tags={"a": "b"})
    assert Reading.from_dict(reading.to_dict()) == reading


def test_multi_resources_result_from_dict():
    data = {
        "status": 0,
        "device": "d1",
        "profile": "p1",
        "sourceName": "src",
        "readings": {"temp": {"value": 21.5, "type": "Float64", "origin": 99}},
        "tags": {"site": "lab"},
        "type": "xrt.telemetry:1.0",
    }
    result = MultiResourcesResult.from_dict(data)
    assert result.error() is None
    assert result.device == "d1"
    assert result.source_name == "src"
    assert result.readings["temp"] == Reading(value=21.5, type="Float64", origin=99)
    assert result.tags == {"site": "lab"}


def test_multi_resources_result_error():
    result = MultiResourcesResult.from_dict({"status": 1, "error": "no device"})
    err = result.error()
    assert err.kind is ErrorKind.ENTITY_DOES_NOT_EXIST
    assert result.readings == {}


def test_components_discovery_response_from_dict():
    comp = Component(category="XRT::DeviceService", name="modbus", state="Running")
    data = {
        "components": [comp.to_dict()],
        "node_id": "node",
        "server_id": "server",
        "type": "xrt.reply:1.0",
    }
    response = ComponentsDiscoveryResponse.from_dict(data)
    assert response.components == [comp]
    assert (response.node_id, response.server_id) == ("node", "server")