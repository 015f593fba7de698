"""Context Writer / Context Reader protocols.

The envelope drives traversal by calling back into a writer once per
non-null fixed attribute (canonical order) and once per extension
(insertion order)::

    class HeadersWriter:
        def __init__(self) -> None:
            self.headers: dict[str, str] = {}

        def with_context_attribute(self, name: str, value: AttributeValue) -> "HeadersWriter":
            self.headers[f"ce-{name}"] = str(value)
            return self

    event.read_context(HeadersWriter())

A writer that rejects a value raises
:class:`~mp_cloudevents.kernel.errors.StructuredWriteError`; traversal stops
at that point and the error reaches the caller unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, Self, TypeVar, runtime_checkable

from mp_cloudevents.kernel.types.uri import URI

if TYPE_CHECKING:
    from mp_cloudevents.core.data import CloudEventData
    from mp_cloudevents.core.spec_version import SpecVersion

R = TypeVar("R", covariant=True)

type AttributeValue = str | URI | datetime | bool | int | bytes


@runtime_checkable
class CloudEventContextWriter(Protocol):
    """Receives one ``(name, value)`` pair at a time."""

    def with_context_attribute(self, name: str, value: AttributeValue) -> Self: ...


@runtime_checkable
class CloudEventContextReader(Protocol):
    """Anything that can replay its context attributes into a writer."""

    def read_context(self, writer: CloudEventContextWriter) -> None: ...


class CloudEventWriter(CloudEventContextWriter, Protocol[R]):
    """A context writer that also consumes the payload and yields a result."""

    def end(self, data: "CloudEventData | None" = None) -> R: ...


class CloudEventWriterFactory(Protocol[R]):
    """Creates a :class:`CloudEventWriter` for a given spec version."""

    def create(self, spec_version: "SpecVersion") -> CloudEventWriter[R]: ...


__all__ = [
    "AttributeValue",
    "CloudEventContextReader",
    "CloudEventContextWriter",
    "CloudEventWriter",
    "CloudEventWriterFactory",
]
