import json
import uuid

import pytest

from xrtkit.component import Schedule
from xrtkit.deviceinfo import DeviceInfo
from xrtkit.request import (
    Operation,
    Request,
    new_all_devices_request,
    new_all_profiles_request,
    new_all_schedules_request,
    new_base_request,
    new_component_discover_request,
    new_component_update_request,
    new_device_add_request,
    new_device_delete_request,
    new_device_get_request,
    new_device_resource_get_request,
    new_device_resource_set_request,
    new_device_scan_request,
    new_device_update_request,
    new_discovered_device_add_request,
    new_discovery_request,
    new_profile_add_request,
    new_profile_delete_request,
    new_profile_get_request,
    new_profile_update_request,
    new_schedule_add_request,
    new_schedule_delete_request,
)

CLIENT = "testClient"

_CASES = [
    ("add profile", lambda d: new_profile_add_request({}, CLIENT), "profile:add"),
    ("update profile", lambda d: new_profile_update_request({}, CLIENT), "profile:update"),
    ("get profile", lambda d: new_profile_get_request("", CLIENT), "profile:read"),
    ("delete profile", lambda d: new_profile_delete_request("", CLIENT), "profile:delete"),
    ("add device", lambda d: new_device_add_request(d, CLIENT), "device:add"),
    ("update device", lambda d: new_device_update_request(d, CLIENT), "device:update"),
    ("get device", lambda d: new_device_get_request(d.name, CLIENT), "device:read"),
    ("delete device", lambda d: new_device_delete_request(d.name, CLIENT), "device:delete"),
    ("get resource", lambda d: new_device_resource_get_request(d.name, CLIENT, []), "device:get"),
    (
        "set resource",
        lambda d: new_device_resource_set_request(d.name, CLIENT, {}, {}),
        "device:put",
    ),
    (
        "component discover",
        lambda d: new_component_discover_request(CLIENT, "IOT::Core"),
        "component:discover",
    ),
    ("device scan", lambda d: new_device_scan_request(d, CLIENT, {}), "device:scan"),
]


@pytest.mark.parametrize("name,factory,expected_op", _CASES, ids=[c[0] for c in _CASES])
def test_new_request_round_trip(name, factory, expected_op):
    request_obj = factory(DeviceInfo())
    decoded = json.loads(request_obj.to_json())
    assert decoded["client"] == CLIENT
    assert decoded["op"] == expected_op


def test_request_id_is_unique_uuid():
    first = new_all_devices_request(CLIENT)
    second = new_all_devices_request(CLIENT)
    assert first.request_id != second.request_id
    assert str(uuid.UUID(first.request_id)) == first.request_id


@pytest.mark.parametrize(
    "factory,op",
    [
        (new_all_profiles_request, "profile:list"),
        (new_all_devices_request, "device:list"),
        (new_all_schedules_request, "schedule:list"),
    ],
)
def test_list_requests_hold_only_header(factory, op):
    data = factory(CLIENT).to_dict()
    assert set(data) == {"client", "request_id", "op"}
    assert data["op"] == op


def test_base_request_accepts_operation():
    data = new_base_request(Operation.COMPONENT_DISCOVERY, CLIENT).to_dict()
    assert data["op"] == "discovery:discover"
    assert data["client"] == CLIENT


def test_device_add_request_carries_device_info():
    device = DeviceInfo(name="dev-1", profile_name="prof", protocols={"BLE": {"MAC": "placeholder"}})
    data = new_device_add_request(device, CLIENT).to_dict()
    assert data["device"] == "dev-1"
    assert data["device_info"]["name"] == "dev-1"
    assert data["device_info"]["profileName"] == "prof"
    assert data["device_info"]["protocols"] == {"BLE": {"MAC": "placeholder"}}


def test_discovered_device_add_request_only_protocols():
    device = DeviceInfo(name="dev-2", profile_name="prof", protocols={"S7": {"Rack": 0}})
    data = new_discovered_device_add_request(device, CLIENT).to_dict()
    assert data["op"] == "device:add"
    assert data["device"] == "dev-2"
    assert data["device_info"] == {"protocols": {"S7": {"Rack": 0}}}


def test_device_scan_request_fields():
    device = DeviceInfo(name="dev-3", profile_name="generated")
    data = new_device_scan_request(device, CLIENT, {"depth": 2}).to_dict()
    assert data["device"] == "dev-3"
    assert data["profile"] == "generated"
    assert data["options"] == {"depth": 2}


def test_resource_get_request_keeps_resources():
    data = new_device_resource_get_request("dev", CLIENT, ["a", "b"]).to_dict()
    assert data["resource"] == ["a", "b"]
    assert new_device_resource_get_request("dev", CLIENT, None).to_dict()["resource"] is None


def test_resource_set_request_fields():
    data = new_device_resource_set_request("dev", CLIENT, {"r": 1}, None).to_dict()
    assert data["values"] == {"r": 1}
    assert data["options"] is None
    assert data["op"] == "device:put"


def test_schedule_requests():
    schedule = Schedule(name="s1", device="dev", resource=["r"], interval=1000)
    add = new_schedule_add_request(CLIENT, schedule).to_dict()
    assert add["op"] == "schedule:add"
    assert add["schedule"]["name"] == "s1"
    assert add["schedule"]["interval"] == 1000
    delete = new_schedule_delete_request("s1", CLIENT).to_dict()
    assert delete == {
        "client": CLIENT,
        "request_id": delete["request_id"],
        "op": "schedule:delete",
        "schedule": "s1",
    }


def test_component_update_request():
    data = new_component_update_request("comp", CLIENT, {"Name": "x"}).to_dict()
    assert data["component"] == "comp"
    assert data["config"] == {"Name": "x"}
    assert data["op"] == "component:update"


def test_component_discover_omits_empty_category():
    assert "category" not in new_component_discover_request(CLIENT, "").to_dict()
    assert new_component_discover_request(CLIENT, "IOT::Core").to_dict()["category"] == "IOT::Core"


def test_discovery_request():
    data = new_discovery_request(CLIENT, {"timeout": 5}).to_dict()
    assert data["op"] == "discovery:trigger"
    assert data["options"] == {"timeout": 5}


def test_request_with_explicit_id_and_string_op():
    request = Request(op="custom:op", client=CLIENT, request_id="fixed", payload={"k": [1]})
    assert json.loads(request.to_json()) == {
        "client": CLIENT,
        "request_id": "fixed",
        "op": "custom:op",
        "k": [1],
    }