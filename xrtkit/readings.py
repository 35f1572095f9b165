"""Reading value parsing and conversion of runtime readings to events."""

from __future__ import annotations

import base64
import binascii
import math
import struct
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

from xrtkit.errors import EdgeXError, ErrorKind
from xrtkit.protocols import format_value
from xrtkit.response import MultiResourcesResult

VALUE_TYPE_BOOL = "Bool"
VALUE_TYPE_STRING = "String"
VALUE_TYPE_UINT8 = "Uint8"
VALUE_TYPE_UINT16 = "Uint16"
VALUE_TYPE_UINT32 = "Uint32"
VALUE_TYPE_UINT64 = "Uint64"
VALUE_TYPE_INT8 = "Int8"
VALUE_TYPE_INT16 = "Int16"
VALUE_TYPE_INT32 = "Int32"
VALUE_TYPE_INT64 = "Int64"
VALUE_TYPE_FLOAT32 = "Float32"
VALUE_TYPE_FLOAT64 = "Float64"
VALUE_TYPE_BINARY = "Binary"
VALUE_TYPE_BOOL_ARRAY = "BoolArray"
VALUE_TYPE_STRING_ARRAY = "StringArray"
VALUE_TYPE_UINT8_ARRAY = "Uint8Array"
VALUE_TYPE_UINT16_ARRAY = "Uint16Array"
VALUE_TYPE_UINT32_ARRAY = "Uint32Array"
VALUE_TYPE_UINT64_ARRAY = "Uint64Array"
VALUE_TYPE_INT8_ARRAY = "Int8Array"
VALUE_TYPE_INT16_ARRAY = "Int16Array"
VALUE_TYPE_INT32_ARRAY = "Int32Array"
VALUE_TYPE_INT64_ARRAY = "Int64Array"
VALUE_TYPE_FLOAT32_ARRAY = "Float32Array"
VALUE_TYPE_FLOAT64_ARRAY = "Float64Array"
VALUE_TYPE_OBJECT = "Object"
VALUE_TYPE_OBJECT_ARRAY = "ObjectArray"

VALUE_TYPES = (
    VALUE_TYPE_BOOL,
    VALUE_TYPE_STRING,
    VALUE_TYPE_UINT8,
    VALUE_TYPE_UINT16,
    VALUE_TYPE_UINT32,
    VALUE_TYPE_UINT64,
    VALUE_TYPE_INT8,
    VALUE_TYPE_INT16,
    VALUE_TYPE_INT32,
    VALUE_TYPE_INT64,
    VALUE_TYPE_FLOAT32,
    VALUE_TYPE_FLOAT64,
    VALUE_TYPE_BINARY,
    VALUE_TYPE_BOOL_ARRAY,
    VALUE_TYPE_STRING_ARRAY,
    VALUE_TYPE_UINT8_ARRAY,
    VALUE_TYPE_UINT16_ARRAY,
    VALUE_TYPE_UINT32_ARRAY,
    VALUE_TYPE_UINT64_ARRAY,
    VALUE_TYPE_INT8_ARRAY,
    VALUE_TYPE_INT16_ARRAY,
    VALUE_TYPE_INT32_ARRAY,
    VALUE_TYPE_INT64_ARRAY,
    VALUE_TYPE_FLOAT32_ARRAY,
    VALUE_TYPE_FLOAT64_ARRAY,
    VALUE_TYPE_OBJECT,
    VALUE_TYPE_OBJECT_ARRAY,
)

_NORMALIZED = {name.lower(): name for name in VALUE_TYPES}


def normalize_value_type(value_type: str) -> str:
    """Return the canonical spelling of a value type, matched case-insensitively.

    Raises ValueError for an unknown value type.
    """
    try:
        return _NORMALIZED[value_type.lower()]
    except KeyError:
        raise ValueError(f"unable to normalize the unknown value type {value_type}") from None


def _invalid(message: str, cause: BaseException | None = None) -> EdgeXError:
    return EdgeXError(ErrorKind.CONTRACT_INVALID, message, cause)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _integer(bits: int, signed: bool) -> Callable[[float], int]:
    mask = (1 << bits) - 1
    half = 1 << (bits - 1)

    def convert(value: float) -> int:
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        number = int(value) & mask
        if signed and number >= half:
            number -= 1 << bits
        return number

    return convert


def _float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _float64(value: float) -> float:
    return float(value)


_SCALAR_NUMBERS: dict[str, Callable[[float], Any]] = {
    VALUE_TYPE_UINT8: _integer(8, False),
    VALUE_TYPE_UINT16: _integer(16, False),
    VALUE_TYPE_UINT32: _integer(32, False),
    VALUE_TYPE_UINT64: _integer(64, False),
    VALUE_TYPE_INT8: _integer(8, True),
    VALUE_TYPE_INT16: _integer(16, True),
    VALUE_TYPE_INT32: _integer(32, True),
    VALUE_TYPE_INT64: _integer(64, True),
    VALUE_TYPE_FLOAT32: _float32,
    VALUE_TYPE_FLOAT64: _float64,
}

_ARRAY_NUMBERS: dict[str, Callable[[float], Any]] = {
    VALUE_TYPE_UINT16_ARRAY: _integer(16, False),
    VALUE_TYPE_UINT32_ARRAY: _integer(32, False),
    VALUE_TYPE_UINT64_ARRAY: _integer(64, False),
    VALUE_TYPE_INT8_ARRAY: _integer(8, True),
    VALUE_TYPE_INT16_ARRAY: _integer(16, True),
    VALUE_TYPE_INT32_ARRAY: _integer(32, True),
    VALUE_TYPE_INT64_ARRAY: _integer(64, True),
    VALUE_TYPE_FLOAT32_ARRAY: _float32,
    VALUE_TYPE_FLOAT64_ARRAY: _float64,
}

_UNSIGNED_ARRAYS = {VALUE_TYPE_UINT16_ARRAY, VALUE_TYPE_UINT32_ARRAY, VALUE_TYPE_UINT64_ARRAY}


def _decode_base64(text: str) -> bytes:
    return base64.b64decode(text.encode("utf-8"), validate=True)


def _convert_numbers(reading: list[Any], convert: Callable[[float], Any], word: str) -> list[Any]:
    result = []
    for item in reading:
        if not _is_number(item):
            raise _invalid(f"invalid {word} '{format_value(item)}'")
        result.append(convert(item))
    return result


def parse_xrt_reading_value(value_type: str, reading: Any) -> Any:
    """Convert a JSON-decoded reading value to the value of the given value type.

    Raises EdgeXError of kind CONTRACT_INVALID when the value does not fit the type.
    """
    shown = format_value(reading)
    number_message = f"invalid number '{shown}'"
    array_message = f"invalid array '{shown}'"

    if value_type == VALUE_TYPE_STRING:
        if not isinstance(reading, str):
            raise _invalid(f"invalid string value '{shown}'")
        return reading
    if value_type == VALUE_TYPE_BOOL:
        if not isinstance(reading, bool):
            raise _invalid(f"invalid bool value '{shown}'")
        return reading
    if value_type in _SCALAR_NUMBERS:
        if not _is_number(reading):
            if value_type in (VALUE_TYPE_UINT8, VALUE_TYPE_UINT16):
                raise _invalid(f"invalid numbers '{shown}'")
            raise _invalid(number_message)
        return _SCALAR_NUMBERS[value_type](reading)
    if value_type == VALUE_TYPE_BINARY:
        # Binary data travels as a base64 encoded string.
        if not isinstance(reading, str):
            raise _invalid(f"invalid string value '{shown}'")
        try:
            return _decode_base64(reading)
        except (binascii.Error, ValueError) as exc:
            raise _invalid(f"fail to decode the base64 string '{shown}'", exc) from exc
    if value_type == VALUE_TYPE_BOOL_ARRAY:
        if not isinstance(reading, list):
            raise _invalid(array_message)
        for item in reading:
            if not isinstance(item, bool):
                raise _invalid(f"invalid bool value '{format_value(item)}'")
        return list(reading)
    if value_type == VALUE_TYPE_STRING_ARRAY:
        if not isinstance(reading, list):
            raise _invalid(array_message)
        for item in reading:
            if not isinstance(item, str):
                raise _invalid(f"invalid string value '{format_value(item)}'")
        return list(reading)
    if value_type == VALUE_TYPE_UINT8_ARRAY:
        if not isinstance(reading, list):
            try:
                return _decode_base64(shown)
            except (binascii.Error, ValueError):
                raise _invalid(array_message) from None
        return bytes(_convert_numbers(reading, _integer(8, False), "nunmber"))
    if value_type in _ARRAY_NUMBERS:
        if not isinstance(reading, list):
            raise _invalid(array_message)
        word = "nunmber" if value_type in _UNSIGNED_ARRAYS else "number"
        return _convert_numbers(reading, _ARRAY_NUMBERS[value_type], word)
    if value_type == VALUE_TYPE_OBJECT:
        return reading
    if value_type == VALUE_TYPE_OBJECT_ARRAY:
        if not isinstance(reading, list):
            raise _invalid(array_message)
        return reading
    raise _invalid(f"none supported value type '{value_type}'")


def _format_float32(value: float) -> str:
    if not math.isfinite(value):
        return format_value(value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _float32(float(text)) == value:
            return format_value(float(text))
    return format_value(value)


def _format_simple(value_type: str, value: Any) -> str:
    if value_type == VALUE_TYPE_FLOAT32:
        return _format_float32(value)
    if value_type == VALUE_TYPE_FLOAT32_ARRAY:
        return "[" + " ".join(_format_float32(item) for item in value) + "]"
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(item) for item in value) + "]"
    return format_value(value)


@dataclass
class BaseReading:
    """One reading of an event: a simple, binary or object value."""

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    origin: int = 0
    device_name: str = ""
    resource_name: str = ""
    profile_name: str = ""
    value_type: str = ""
    units: str = ""
    tags: dict[str, Any] | None = None
    value: str = ""
    binary_value: bytes | None = None
    media_type: str = ""
    object_value: Any = None


@dataclass
class Event:
    """A group of readings taken from one source of a device."""

    id: str = ""
    device_name: str = ""
    profile_name: str = ""
    source_name: str = ""
    origin: int = 0
    readings: list[BaseReading] = field(default_factory=list)
    tags: dict[str, Any] | None = None


def _make_reading(result: MultiResourcesResult, resource_name: str, value_type: str, value: Any) -> BaseReading:
    reading = BaseReading(
        device_name=result.device,
        resource_name=resource_name,
        profile_name=result.profile,
        value_type=value_type,
    )
    if value_type == VALUE_TYPE_BINARY:
        if not isinstance(value, (bytes, bytearray)):
            raise _invalid(f"invalid binary value '{format_value(value)}'")
        reading.binary_value = bytes(value)
    elif value_type in (VALUE_TYPE_OBJECT, VALUE_TYPE_OBJECT_ARRAY):
        reading.object_value = value
    else:
        reading.value = _format_simple(value_type, value)
    return reading


def to_edgex_v2_event(xrt_event: MultiResourcesResult) -> Event:
    """Build an event from the readings of a multi-resource result.

    Raises EdgeXError when a reading has an unknown type or an invalid value.
    """
    event = Event(
        device_name=xrt_event.device,
        profile_name=xrt_event.profile,
        source_name=xrt_event.source_name,
        tags=xrt_event.tags,
    )
    for resource_name, xrt_reading in xrt_event.readings.items():
        try:
            value_type = normalize_value_type(xrt_reading.type)
        except ValueError as exc:
            raise EdgeXError(cause=exc) from exc
        try:
            value = parse_xrt_reading_value(value_type, xrt_reading.value)
        except EdgeXError as exc:
            raise EdgeXError(cause=exc) from exc
        reading = _make_reading(xrt_event, resource_name, value_type, value)
        reading.origin = xrt_reading.origin
        reading.tags = xrt_reading.tags
        event.origin = xrt_reading.origin
        event.readings.append(reading)
    return event