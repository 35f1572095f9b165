"""Protocol names, property keys and conversion of protocol properties."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

# Protocol names.
BACNET_IP = "BACnet-IP"
BACNET_MSTP = "BACnet-MSTP"
GPS = "GPS"
MODBUS_TCP = "modbus-tcp"
MODBUS_RTU = "modbus-rtu"
OPCUA = "OPC-UA"
S7 = "S7"
CANBUS = "CAN"
ETHERNET_IP = "EtherNetIP"
ETHERNET_IP_XRT = "EtherNet-IP"
ETHERNET_IP_EXPLICIT_CONNECTED = "ExplicitConnected"
ETHERNET_IP_O2T = "O2T"
ETHERNET_IP_T2O = "T2O"
ETHERNET_IP_KEY = "Key"

# Device property holding the lower-case protocol name.
PROTOCOL_NAME = "ProtocolName"

# BACnet properties.
BACNET_DEVICE_INSTANCE = "DeviceInstance"
BACNET_PORT = "Port"

# GPS properties.
GPS_GPSD_PORT = "GpsdPort"
GPS_GPSD_RETRIES = "GpsdRetries"
GPS_GPSD_CONN_TIMEOUT = "GpsdConnTimeout"
GPS_GPSD_REQUEST_TIMEOUT = "GpsdRequestTimeout"

# Modbus properties.
MODBUS_UNIT_ID = "UnitID"
MODBUS_PORT = "Port"
MODBUS_BAUD_RATE = "BaudRate"
MODBUS_DATA_BITS = "DataBits"
MODBUS_STOP_BITS = "StopBits"
MODBUS_READ_MAX_HOLDING_REGISTERS = "ReadMaxHoldingRegisters"
MODBUS_READ_MAX_INPUT_REGISTERS = "ReadMaxInputRegisters"
MODBUS_READ_MAX_BITS_COILS = "ReadMaxBitsCoils"
MODBUS_READ_MAX_BITS_DISCRETE_INPUTS = "ReadMaxBitsDiscreteInputs"
MODBUS_WRITE_MAX_HOLDING_REGISTERS = "WriteMaxHoldingRegisters"
MODBUS_WRITE_MAX_BITS_COILS = "WriteMaxBitsCoils"

# OPC UA properties.
OPCUA_REQUESTED_SESSION_TIMEOUT = "RequestedSessionTimeout"
OPCUA_BROWSE_DEPTH = "BrowseDepth"
OPCUA_CONNECTION_READING_POST_DELAY = "ConnectionReadingPostDelay"
OPCUA_READ_BATCH_SIZE = "ReadBatchSize"
OPCUA_WRITE_BATCH_SIZE = "WriteBatchSize"
OPCUA_NODES_PER_BROWSE = "NodesPerBrowse"
OPCUA_BROWSE_PUBLISH_INTERVAL = "BrowsePublishInterval"
OPCUA_SESSION_KEEP_ALIVE_INTERVAL = "SessionKeepAliveInterval"
OPCUA_ID_TYPE = "IDType"

# S7 properties.
S7_RACK = "Rack"
S7_SLOT = "Slot"

# EtherNet/IP properties.
ETHERNET_IP_ADDRESS = "Address"
ETHERNET_IP_RPI = "RPI"
ETHERNET_IP_SAVE_VALUE = "SaveValue"
ETHERNET_IP_CONNECTION_TYPE = "ConnectionType"
ETHERNET_IP_PRIORITY = "Priority"
ETHERNET_IP_OWNERSHIP = "Ownership"
ETHERNET_IP_DEVICE_RESOURCE = "DeviceResource"
ETHERNET_IP_METHOD = "Method"
ETHERNET_IP_VENDOR_ID = "VendorID"
ETHERNET_IP_DEVICE_TYPE = "DeviceType"
ETHERNET_IP_PRODUCT_CODE = "ProductCode"
ETHERNET_IP_MAJOR_REVISION = "MajorRevision"
ETHERNET_IP_MINOR_REVISION = "MinorRevision"

# CAN bus properties.
CANBUS_ID = "ID"
CANBUS_DATA_SIZE = "DataSize"
CANBUS_PORT = "Port"

_INT_PROPERTIES: dict[str, list[str]] = {
    BACNET_IP: [BACNET_DEVICE_INSTANCE, BACNET_PORT],
    BACNET_MSTP: [BACNET_DEVICE_INSTANCE, BACNET_PORT],
    GPS: [GPS_GPSD_PORT, GPS_GPSD_RETRIES, GPS_GPSD_CONN_TIMEOUT, GPS_GPSD_REQUEST_TIMEOUT],
    MODBUS_TCP: [
        MODBUS_UNIT_ID,
        MODBUS_PORT,
        MODBUS_READ_MAX_HOLDING_REGISTERS,
        MODBUS_READ_MAX_INPUT_REGISTERS,
        MODBUS_READ_MAX_BITS_COILS,
        MODBUS_READ_MAX_BITS_DISCRETE_INPUTS,
        MODBUS_WRITE_MAX_HOLDING_REGISTERS,
        MODBUS_WRITE_MAX_BITS_COILS,
    ],
    MODBUS_RTU: [
        MODBUS_UNIT_ID,
        MODBUS_BAUD_RATE,
        MODBUS_DATA_BITS,
        MODBUS_STOP_BITS,
        MODBUS_READ_MAX_HOLDING_REGISTERS,
        MODBUS_READ_MAX_INPUT_REGISTERS,
        MODBUS_READ_MAX_BITS_COILS,
        MODBUS_READ_MAX_BITS_DISCRETE_INPUTS,
        MODBUS_WRITE_MAX_HOLDING_REGISTERS,
        MODBUS_WRITE_MAX_BITS_COILS,
    ],
    OPCUA: [
        OPCUA_REQUESTED_SESSION_TIMEOUT,
        OPCUA_BROWSE_DEPTH,
        OPCUA_CONNECTION_READING_POST_DELAY,
        OPCUA_READ_BATCH_SIZE,
        OPCUA_WRITE_BATCH_SIZE,
        OPCUA_NODES_PER_BROWSE,
    ],
    S7: [S7_RACK, S7_SLOT],
    ETHERNET_IP_EXPLICIT_CONNECTED: [ETHERNET_IP_RPI],
    ETHERNET_IP_O2T: [ETHERNET_IP_RPI],
    ETHERNET_IP_T2O: [ETHERNET_IP_RPI],
    ETHERNET_IP_KEY: [
        ETHERNET_IP_VENDOR_ID,
        ETHERNET_IP_DEVICE_TYPE,
        ETHERNET_IP_PRODUCT_CODE,
        ETHERNET_IP_MAJOR_REVISION,
        ETHERNET_IP_MINOR_REVISION,
    ],
    CANBUS: [CANBUS_ID, CANBUS_DATA_SIZE, CANBUS_PORT],
}

_FLOAT_PROPERTIES: dict[str, list[str]] = {
    OPCUA: [OPCUA_BROWSE_PUBLISH_INTERVAL, OPCUA_SESSION_KEEP_ALIVE_INTERVAL],
}

_BOOL_PROPERTIES: dict[str, list[str]] = {
    ETHERNET_IP_EXPLICIT_CONNECTED: [ETHERNET_IP_SAVE_VALUE],
}


def property_conversion_list(protocol: str) -> tuple[list[str], list[str], list[str]]:
    """Return the integer, float and boolean property names of a protocol."""
    return (
        list(_INT_PROPERTIES.get(protocol, [])),
        list(_FLOAT_PROPERTIES.get(protocol, [])),
        list(_BOOL_PROPERTIES.get(protocol, [])),
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _special_float(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return None


def _split_sign(value: float) -> tuple[str, float]:
    """Split a float into its sign prefix (keeping negative zero) and magnitude."""
    if math.copysign(1.0, value) < 0:
        return "-", -value
    return "", value


def _format_general(value: float) -> str:
    """Shortest representation, switching to exponent form for large or tiny values."""
    special = _special_float(value)
    if special is not None:
        return special
    sign, magnitude = _split_sign(value)
    if magnitude == 0:
        return sign + "0"
    number = Decimal(repr(magnitude)).normalize()
    _, digits, exponent = number.as_tuple()
    exp = len(digits) + exponent - 1
    if exp < -4 or exp >= 6:
        mantissa = str(digits[0])
        rest = "".join(str(d) for d in digits[1:])
        if rest:
            mantissa += "." + rest
        return f"{sign}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"
    return sign + format(number, "f")


def _format_fixed(value: float) -> str:
    """Fewest digits that represent the value exactly, never in exponent form."""
    special = _special_float(value)
    if special is not None:
        return special
    sign, magnitude = _split_sign(value)
    if magnitude == 0:
        return sign + "0"
    return sign + format(Decimal(repr(magnitude)).normalize(), "f")


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "map[string]interface {}"
    if isinstance(value, (list, tuple)):
        return "[]interface {}"
    return type(value).__name__


def format_value(value: Any) -> str:
    """Render a value in the default text form used for property strings."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_general(value)
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda item: str(item[0]))
        return "map[" + " ".join(f"{format_value(k)}:{format_value(v)}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(v) for v in value) + "]"
    return str(value)


def _format_integral(value: Any) -> str:
    if value is None:
        return "%!f(<nil>)"
    if not _is_number(value):
        return f"%!f({_type_name(value)}={format_value(value)})"
    if isinstance(value, int):
        return str(value)
    special = _special_float(value)
    if special is not None:
        return special
    return f"{value:.0f}"


def to_edgex_properties(protocol: str, protocol_properties: dict[str, Any]) -> dict[str, str]:
    """Convert protocol property values to strings, formatting numbers per protocol."""
    int_properties, float_properties, bool_properties = property_conversion_list(protocol)

    result = {key: format_value(value) for key, value in protocol_properties.items()}

    # Integral values are printed without a decimal point or exponent.
    for name in int_properties:
        if name in protocol_properties:
            result[name] = _format_integral(protocol_properties[name])

    for name in float_properties:
        value = protocol_properties.get(name)
        if _is_number(value):
            result[name] = _format_fixed(float(value))

    for name in bool_properties:
        if name in protocol_properties:
            result[name] = format_value(protocol_properties[name])

    return result