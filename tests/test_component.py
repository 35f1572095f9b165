import pytest

from xrtkit.component import (
    DEVICE_SERVICE_CATEGORY,
    EVENT_TYPE_DEVICE_ADDED,
    MESSAGE_TYPE_EVENT,
    Component,
    DeviceStatus,
    Notification,
    Schedule,
)


def test_component_round_trip():
    comp = Component(
        category=DEVICE_SERVICE_CATEGORY,
        config={"Name": "modbus", "RequestTopic": "xrt/request"},
        name="modbus",
        state="Running",
        type="xrt",
    )
    assert Component.from_dict(comp.to_dict()) == comp


def test_component_keys():
    data = Component(name="x").to_dict()
    assert set(data) == {"category", "config", "name", "state", "type"}


def test_component_from_dict_with_null_config():
    comp = Component.from_dict({"name": "x", "config": None})
    assert comp.config == {}
    assert comp.name == "x"


def test_device_status_round_trip():
    status = DeviceStatus(device="d1", operational=True, type="status")
    assert DeviceStatus.from_dict(status.to_dict()) == status
    assert status.to_dict()["operational"] is True


def test_notification_wire_keys():
    note = Notification(
        device_service_name="svc",
        event={"device": "d1"},
        event_type=EVENT_TYPE_DEVICE_ADDED,
        type=MESSAGE_TYPE_EVENT,
    )
    data = note.to_dict()
    assert data["device_service"] == "svc"
    assert data["event_type"] == "device:added"
    assert data["type"] == "xrt.event:1.0"
    assert data["event"] == {"device": "d1"}


def test_schedule_omits_zero_interval_and_missing_options():
    data = Schedule(name="s", device="d", resource=["r"]).to_dict()
    assert "interval" not in data
    assert "options" not in data
    assert data["resource"] == ["r"]


def test_schedule_keeps_interval_and_options():
    sched = Schedule(name="s", device="d", interval=1000, options={"k": 1})
    data = sched.to_dict()
    assert data["interval"] == 1000
    assert data["options"] == {"k": 1}


def test_schedule_round_trip():
    sched = Schedule(
        name="s",
        device="d",
        resource=["a", "b"],
        interval=500,
        on_change=True,
        bounds={"a": 1.5},
        publish=True,
        units=True,
    )
    assert Schedule.from_dict(sched.to_dict()) == sched


def test_schedule_rejects_negative_interval():
    with pytest.raises(ValueError):
        Schedule(interval=-1)