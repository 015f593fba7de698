"""Base Envelope – state and helpers shared by every version variant.

Each version variant composes an :class:`EnvelopeBase` (payload handle plus
extensions) and delegates traversal, validation and rendering to the free
functions below.  A new variant only declares its fixed attributes and an
accessor table.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from mp_cloudevents.core.data import CloudEventData
from mp_cloudevents.core.rw import CloudEventContextReader
from mp_cloudevents.core.spec_version import SPECVERSION, SpecVersion
from mp_cloudevents.kernel.errors.domain import (
    InvalidAttributeValueError,
    InvalidExtensionNameError,
    MissingMandatoryAttributeError,
    ReservedAttributeNameError,
    UnknownAttributeError,
)
from mp_cloudevents.kernel.types.extension import (
    ExtensionKind,
    ExtensionValue,
    validate_extension_value,
)
from mp_cloudevents.kernel.types.uri import URI
from mp_cloudevents.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_cloudevents.core.rw import CloudEventContextWriter, CloudEventWriterFactory

R = TypeVar("R")

_log = get_logger(__name__)

type Accessor = Callable[[Any], Any]

# Expected Python type per fixed attribute; names absent here are never stored.
ATTRIBUTE_TYPES: Mapping[str, type] = MappingProxyType(
    {
        "id": str,
        "source": URI,
        "type": str,
        "datacontenttype": str,
        "schemaurl": URI,
        "dataschema": URI,
        "subject": str,
        "time": datetime,
    }
)


class Envelope(CloudEventContextReader, Protocol):
    """What the shared helpers need from a version variant."""

    ACCESSORS: Mapping[str, Accessor]

    @property
    def spec_version(self) -> SpecVersion: ...

    @property
    def base(self) -> "EnvelopeBase": ...

    def read_context(self, writer: "CloudEventContextWriter") -> None: ...


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class EnvelopeBase:
    """Payload handle plus extensions, owned exclusively by one envelope.

    ``extensions`` is exposed as a read-only view that keeps insertion order.
    Every value is checked against the extension type set on construction.
    """

    data: CloudEventData | None = None
    extensions: Mapping[str, ExtensionValue] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        for name in self.extensions:
            if not isinstance(name, str) or not name:
                raise InvalidExtensionNameError(name, reason="must be a non-empty string")
        validated = {
            name: validate_extension_value(value, name)
            for name, value in self.extensions.items()
        }
        object.__setattr__(self, "extensions", MappingProxyType(validated))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvelopeBase):
            return NotImplemented
        # Extension order matters for traversal, never for equality.
        return self.data == other.data and self._tagged() == other._tagged()

    def __hash__(self) -> int:
        try:
            data_hash = hash(self.data)
        except TypeError:
            # payload types with __eq__ but no __hash__
            data_hash = hash(type(self.data))
        return hash((data_hash, frozenset(self._tagged().items())))

    def _tagged(self) -> dict[str, tuple[ExtensionKind, ExtensionValue]]:
        # keeps True and 1 apart
        return {name: (ExtensionKind.of(value), value) for name, value in self.extensions.items()}


def build_accessors(
    spec_version: SpecVersion, fields: Mapping[str, str]
) -> Mapping[str, Accessor]:
    """Return the name → accessor table for one version.

    *fields* maps attribute names to the instance attribute holding them.
    Declared names missing from *fields* (other than ``specversion``)
    resolve to ``None``.
    """
    table: dict[str, Accessor] = {SPECVERSION: lambda event: event.spec_version}
    for name in spec_version.all_attributes - {SPECVERSION}:
        field = fields.get(name)
        if field is None:
            table[name] = lambda event: None
        else:
            table[name] = lambda event, _field=field: getattr(event, _field)
    return MappingProxyType(table)


def get_attribute(event: Envelope, name: str) -> Any:
    accessor = event.ACCESSORS.get(name)
    if accessor is None:
        raise UnknownAttributeError(name, event.spec_version)
    return accessor(event)


def validate_fixed_attributes(spec_version: SpecVersion, values: Mapping[str, Any]) -> None:
    """Check mandatory presence and the type of every fixed attribute."""
    missing = [
        name
        for name in spec_version.mandatory_attributes
        if name != SPECVERSION and values.get(name) is None
    ]
    if missing:
        raise MissingMandatoryAttributeError(missing, spec_version)

    for name, value in values.items():
        if value is None:
            continue
        expected = ATTRIBUTE_TYPES[name]
        if not isinstance(value, expected):
            raise InvalidAttributeValueError(
                name, value, f"expected {expected.__name__}, got {type(value).__name__}"
            )
        if expected is datetime and value.utcoffset() is None:
            raise InvalidAttributeValueError(name, value, "timestamp without UTC offset")


def check_extension_collisions(spec_version: SpecVersion, base: EnvelopeBase) -> None:
    for name in base.extensions:
        if spec_version.is_known(name):
            raise ReservedAttributeNameError(name, spec_version)


def read_fixed_attributes(event: Envelope, writer: "CloudEventContextWriter") -> None:
    for name in event.spec_version.attribute_names():
        value = event.ACCESSORS[name](event)
        if value is not None:
            writer.with_context_attribute(name, value)


def read_extensions(base: EnvelopeBase, writer: "CloudEventContextWriter") -> None:
    for name, value in base.extensions.items():
        writer.with_context_attribute(name, value)


def traverse(event: Envelope, writer: "CloudEventContextWriter") -> None:
    """Drive *writer* over fixed attributes then extensions.

    A writer error stops the traversal and propagates unchanged.
    """
    try:
        read_fixed_attributes(event, writer)
        read_extensions(event.base, writer)
    except Exception as exc:
        _log.debug(
            "cloudevent.read_context.aborted",
            spec_version=event.spec_version.value,
            error=type(exc).__name__,
        )
        raise


def read_event(event: Envelope, writer_factory: "CloudEventWriterFactory[R]") -> R:
    writer = writer_factory.create(event.spec_version)
    event.read_context(writer)
    return writer.end(event.base.data)


def render(event: Envelope) -> str:
    """``CloudEvent{id='…', source=…, …}`` with unset optionals left out."""
    parts: list[str] = []
    for name in event.spec_version.attribute_names():
        value = event.ACCESSORS[name](event)
        if value is None:
            continue
        if isinstance(value, str):
            parts.append(f"{name}='{value}'")
        elif isinstance(value, datetime):
            parts.append(f"{name}={value.isoformat()}")
        else:
            parts.append(f"{name}={value}")
    if event.base.data is not None:
        parts.append(f"data={event.base.data!r}")
    if event.base.extensions:
        parts.append(f"extensions={dict(event.base.extensions)!r}")
    return "CloudEvent{" + ", ".join(parts) + "}"


__all__ = [
    "ATTRIBUTE_TYPES",
    "Envelope",
    "EnvelopeBase",
    "build_accessors",
    "check_extension_collisions",
    "get_attribute",
    "read_event",
    "read_extensions",
    "read_fixed_attributes",
    "render",
    "traverse",
    "validate_fixed_attributes",
]
