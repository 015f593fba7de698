"""Event Payload Handle – opaque holders for the event's business data.

The envelope never interprets its payload; it only compares handles for
equality and hands them to writers.
"""

from __future__ import annotations

import copy
import dataclasses
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

from mp_cloudevents.kernel.errors.domain import InvalidAttributeValueError

T = TypeVar("T")


@runtime_checkable
class CloudEventData(Protocol):
    """Anything that can render itself as bytes.

    Envelopes compare payloads with ``==``. An unhashable payload still lets
    the envelope hash, by payload type.
    """

    def to_bytes(self) -> bytes: ...


@dataclasses.dataclass(frozen=True, slots=True)
class BytesCloudEventData:
    """Payload already in serialised form."""

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            # bytearray / memoryview: keep an immutable copy
            object.__setattr__(self, "value", bytes(self.value))

    def to_bytes(self) -> bytes:
        return self.value

    def __repr__(self) -> str:
        return f"BytesCloudEventData({self.value!r})"


class StructuredCloudEventData(Generic[T]):
    """Payload held as a structured value plus the serializer that renders it.

    Equality compares the structured values only; the serializer is a
    rendering detail. *value* is deep-copied on construction so the handle
    owns it; treat :attr:`value` as read-only.
    """

    __slots__ = ("_serializer", "_value")

    def __init__(self, value: T, serializer: Callable[[T], bytes]) -> None:
        self._value = copy.deepcopy(value)
        self._serializer = serializer

    @property
    def value(self) -> T:
        return self._value

    def to_bytes(self) -> bytes:
        return self._serializer(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredCloudEventData):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        try:
            return hash(self._value)
        except TypeError:
            # dicts, lists: equal values still share a bucket
            return hash(type(self._value))

    def __repr__(self) -> str:
        return f"StructuredCloudEventData({self._value!r})"


def wrap(value: Any) -> CloudEventData | None:
    """Return a payload handle for *value*.

    ``None`` stays ``None``; ``bytes``-like values become
    :class:`BytesCloudEventData`; existing handles pass through.
    """
    if value is None or isinstance(value, CloudEventData):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesCloudEventData(bytes(value))
    raise InvalidAttributeValueError(
        "data",
        value,
        f"cannot use {type(value).__name__} as event data, wrap it in StructuredCloudEventData",
    )


__all__ = ["BytesCloudEventData", "CloudEventData", "StructuredCloudEventData", "wrap"]
