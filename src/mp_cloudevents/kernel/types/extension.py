"""Extension Value Set – the closed set of types an extension may hold.

Allowed shapes::

    str | bool | int (signed 32-bit) | bytes | URI | aware datetime

Validation happens once, when a value is inserted; stored values are trusted.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any

from mp_cloudevents.kernel.errors.domain import (
    InvalidExtensionNameError,
    TypeRejectedError,
)
from mp_cloudevents.kernel.types.uri import URI

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_EXTENSION_NAME_RE = re.compile(r"[a-z0-9]+")

type ExtensionValue = str | bool | int | bytes | URI | datetime


class ExtensionKind(str, Enum):
    """Tag of a validated extension value."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    BINARY = "binary"
    URI = "uri"
    TIMESTAMP = "timestamp"

    @classmethod
    def of(cls, value: Any, name: str | None = None) -> "ExtensionKind":
        """Return the tag of *value*, or raise :class:`TypeRejectedError`."""
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.BINARY
        if isinstance(value, URI):
            return cls.URI
        if isinstance(value, datetime):
            return cls.TIMESTAMP
        raise TypeRejectedError(name, value)


def validate_extension_value(value: Any, name: str | None = None) -> ExtensionValue:
    """Return *value* normalised to a member of the extension type set.

    ``bytearray`` and ``memoryview`` are copied into immutable ``bytes``.
    Integers outside the signed 32-bit range and naive datetimes are rejected.
    """
    kind = ExtensionKind.of(value, name)

    if kind is ExtensionKind.INTEGER and not INT32_MIN <= value <= INT32_MAX:
        raise TypeRejectedError(name, value, detail={"reason": "integer out of 32-bit range"})
    if kind is ExtensionKind.TIMESTAMP and value.utcoffset() is None:
        raise TypeRejectedError(name, value, detail={"reason": "timestamp without UTC offset"})
    if kind is ExtensionKind.BINARY and not isinstance(value, bytes):
        return bytes(value)
    return value


def is_valid_extension_name(name: str) -> bool:
    return isinstance(name, str) and _EXTENSION_NAME_RE.fullmatch(name) is not None


def validate_extension_name(name: str) -> str:
    """Return *name* unchanged, or raise :class:`InvalidExtensionNameError`."""
    if not is_valid_extension_name(name):
        raise InvalidExtensionNameError(str(name))
    return name


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "ExtensionKind",
    "ExtensionValue",
    "is_valid_extension_name",
    "validate_extension_name",
    "validate_extension_value",
]
