"""Kernel types – URI value object and the extension value set."""

from mp_cloudevents.kernel.types.extension import (
    INT32_MAX,
    INT32_MIN,
    ExtensionKind,
    ExtensionValue,
    is_valid_extension_name,
    validate_extension_name,
    validate_extension_value,
)
from mp_cloudevents.kernel.types.uri import URI

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "URI",
    "ExtensionKind",
    "ExtensionValue",
    "is_valid_extension_name",
    "validate_extension_name",
    "validate_extension_value",
]
