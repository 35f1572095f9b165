"""Models and converters for XRT device connector messages and EdgeX device metadata."""

__version__ = "0.1.0"

__all__ = [
    "component",
    "deviceinfo",
    "errors",
    "protocols",
    "readings",
    "request",
    "response",
    "v2models",
]