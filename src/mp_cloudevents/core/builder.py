"""Builders – assemble immutable CloudEvents attribute by attribute.

A builder is the reading side of the context protocol: it accepts
``with_context_attribute`` calls (it *is* a context writer) and yields an
envelope once every mandatory attribute is present::

    event = (
        CloudEventBuilder.v1()
        .with_id("A234-1234-1234")
        .with_source("https://example.com/source")
        .with_type("example.event")
        .with_extension("traceparent", "00-abc-01")
        .build()
    )

Builders are mutable and not thread-safe; keep one confined to a single
owner until :meth:`CloudEventBuilder.build` publishes the event.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from mp_cloudevents.core.base import EnvelopeBase
from mp_cloudevents.core.data import CloudEventData, wrap
from mp_cloudevents.core.event import CloudEvent
from mp_cloudevents.core.spec_version import (
    DATACONTENTENCODING,
    DATACONTENTTYPE,
    DATASCHEMA,
    ID,
    SCHEMAURL,
    SOURCE,
    SPECVERSION,
    SUBJECT,
    TIME,
    TYPE,
    SpecVersion,
)
from mp_cloudevents.core.v03 import CloudEventV03
from mp_cloudevents.core.v1 import CloudEventV1
from mp_cloudevents.kernel.errors.domain import (
    InvalidAttributeValueError,
    MissingMandatoryAttributeError,
    ValidationError,
)
from mp_cloudevents.kernel.types.extension import validate_extension_name, validate_extension_value
from mp_cloudevents.kernel.types.uri import URI
from mp_cloudevents.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_cloudevents.config.settings.cloudevents import CloudEventSettings
    from mp_cloudevents.core.rw import AttributeValue

E = TypeVar("E", CloudEventV03, CloudEventV1)

_log = get_logger(__name__)


def _as_str(name: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise InvalidAttributeValueError(name, value, f"expected str, got {type(value).__name__}")


def _as_uri(name: str, value: Any) -> URI | None:
    if value is None or isinstance(value, URI):
        return value
    if isinstance(value, str):
        try:
            return URI.parse(value)
        except ValidationError as exc:
            raise InvalidAttributeValueError(name, value, "not a valid URI", cause=exc) from exc
    raise InvalidAttributeValueError(name, value, f"expected URI, got {type(value).__name__}")


def _as_time(name: str, value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise InvalidAttributeValueError(name, value, "not an RFC 3339 timestamp", cause=exc) from exc
    raise InvalidAttributeValueError(name, value, f"expected datetime, got {type(value).__name__}")


class CloudEventBuilder(abc.ABC, Generic[E]):
    """Version-independent builder state and the context-writer entry point."""

    spec_version: ClassVar[SpecVersion]

    # attribute name -> setter; version builders extend this table
    _SETTERS: ClassVar[Mapping[str, Callable[[Any, Any], Any]]] = {
        ID: lambda b, v: b.with_id(v),
        SOURCE: lambda b, v: b.with_source(v),
        TYPE: lambda b, v: b.with_type(v),
        DATACONTENTTYPE: lambda b, v: b.with_data_content_type(v),
        SUBJECT: lambda b, v: b.with_subject(v),
        TIME: lambda b, v: b.with_time(v),
    }

    def __init__(self, *, strict_extension_names: bool = True) -> None:
        self._strict_extension_names = strict_extension_names
        self._id: str | None = None
        self._source: URI | None = None
        self._type: str | None = None
        self._datacontenttype: str | None = None
        self._dataschema: URI | None = None
        self._subject: str | None = None
        self._time: datetime | None = None
        self._data: CloudEventData | None = None
        self._extensions: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @staticmethod
    def v03(event: CloudEvent | None = None) -> "CloudEventV03Builder":
        """Return a v0.3 builder, optionally pre-filled (and converted) from *event*."""
        builder = CloudEventV03Builder()
        if event is not None:
            builder.load(event)
        return builder

    @staticmethod
    def v1(event: CloudEvent | None = None) -> "CloudEventV1Builder":
        """Return a v1.0 builder, optionally pre-filled (and converted) from *event*."""
        builder = CloudEventV1Builder()
        if event is not None:
            builder.load(event)
        return builder

    @staticmethod
    def for_version(
        spec_version: SpecVersion | str, *, strict_extension_names: bool = True
    ) -> "CloudEventBuilder[Any]":
        version = SpecVersion.parse(spec_version)
        return _BUILDERS[version](strict_extension_names=strict_extension_names)

    @staticmethod
    def from_event(event: CloudEvent) -> "CloudEventBuilder[Any]":
        """Return a builder of *event*'s own version holding a copy of its state."""
        return CloudEventBuilder.for_version(event.spec_version).load(event)

    @staticmethod
    def from_settings(settings: "CloudEventSettings") -> "CloudEventBuilder[Any]":
        """Return a builder configured by *settings*.

        Raises :class:`~mp_cloudevents.config.InvalidSettingValueError` when
        *settings* fails :class:`~mp_cloudevents.config.SettingsValidator`.
        """
        from mp_cloudevents.config.settings.validator import SettingsValidator

        SettingsValidator().ensure_valid(settings)
        return CloudEventBuilder.for_version(
            settings.default_spec_version,
            strict_extension_names=settings.strict_extension_names,
        )

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def with_id(self, value: str) -> Self:
        self._id = _as_str(ID, value)
        return self

    def with_source(self, value: URI | str) -> Self:
        self._source = _as_uri(SOURCE, value)
        return self

    def with_type(self, value: str) -> Self:
        self._type = _as_str(TYPE, value)
        return self

    def with_data_content_type(self, value: str | None) -> Self:
        self._datacontenttype = _as_str(DATACONTENTTYPE, value)
        return self

    def with_data_schema(self, value: URI | str | None) -> Self:
        """Set ``schemaurl`` (v0.3) or ``dataschema`` (v1.0)."""
        self._dataschema = _as_uri(self._schema_attribute, value)
        return self

    def with_subject(self, value: str | None) -> Self:
        self._subject = _as_str(SUBJECT, value)
        return self

    def with_time(self, value: datetime | str | None) -> Self:
        self._time = _as_time(TIME, value)
        return self

    def with_data(
        self,
        data: CloudEventData | bytes | None,
        *,
        content_type: str | None = None,
        schema: URI | str | None = None,
    ) -> Self:
        self._data = wrap(data)
        if content_type is not None:
            self.with_data_content_type(content_type)
        if schema is not None:
            self.with_data_schema(schema)
        return self

    def without_data(self) -> Self:
        self._data = None
        return self

    def with_extension(self, name: str, value: Any) -> Self:
        """Add or replace an extension; name and value are checked immediately.

        Collisions with fixed attribute names surface in :meth:`build`.
        """
        if self._strict_extension_names:
            validate_extension_name(name)
        return self._put_extension(name, value)

    def _put_extension(self, name: str, value: Any) -> Self:
        self._extensions[name] = validate_extension_value(value, name)
        return self

    def with_extensions(self, extensions: Mapping[str, Any]) -> Self:
        for name, value in extensions.items():
            self.with_extension(name, value)
        return self

    def without_extension(self, name: str) -> Self:
        self._extensions.pop(name, None)
        return self

    # ------------------------------------------------------------------
    # Context writer protocol
    # ------------------------------------------------------------------

    def with_context_attribute(self, name: str, value: "AttributeValue") -> Self:
        """Route *name* to its setter, or store it as an extension.

        Extension names arriving here come from an existing envelope, so the
        strict naming rule of :meth:`with_extension` is not reapplied.
        """
        if name == SPECVERSION:
            if SpecVersion.parse(str(value)) is not self.spec_version:
                raise InvalidAttributeValueError(
                    name, value, f"builder is for spec version {self.spec_version.value}"
                )
            return self
        setter = self._SETTERS.get(name)
        if setter is None:
            return self._put_extension(name, value)
        setter(self, value)
        return self

    def create(self, spec_version: SpecVersion) -> "CloudEventBuilder[Any]":
        """Writer-factory entry point: a fresh builder for *spec_version*."""
        return CloudEventBuilder.for_version(
            spec_version, strict_extension_names=self._strict_extension_names
        )

    def end(self, data: CloudEventData | None = None) -> E:
        if data is not None:
            self._data = data
        return self.build()

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def load(self, event: CloudEvent) -> Self:
        """Copy every attribute, the payload and the extensions of *event*.

        Works across versions: ``schemaurl`` and ``dataschema`` map onto each
        other.
        """
        self._id = event.id
        self._source = event.source
        self._type = event.type
        self._datacontenttype = event.datacontenttype
        self._dataschema = event.data_schema
        self._subject = event.subject
        self._time = event.time
        self._data = event.data
        self._extensions = dict(event.extensions)
        return self

    def copy(self) -> Self:
        clone = type(self)(strict_extension_names=self._strict_extension_names)
        clone.__dict__.update(self.__dict__)
        clone._extensions = dict(self._extensions)
        return clone

    def build(self) -> E:
        """Validate mandatory attributes and return the immutable event."""
        missing = [
            name
            for name, value in ((ID, self._id), (SOURCE, self._source), (TYPE, self._type))
            if value is None
        ]
        if missing:
            raise MissingMandatoryAttributeError(missing, self.spec_version)
        event = self._build(EnvelopeBase(self._data, dict(self._extensions)))
        _log.debug(
            "cloudevent.built",
            spec_version=self.spec_version.value,
            event_id=self._id,
            event_type=self._type,
            extensions=len(self._extensions),
        )
        return event

    @property
    @abc.abstractmethod
    def _schema_attribute(self) -> str: ...

    @abc.abstractmethod
    def _build(self, base: EnvelopeBase) -> E: ...


class CloudEventV03Builder(CloudEventBuilder[CloudEventV03]):
    """Builder for spec v0.3 events."""

    spec_version = SpecVersion.V03

    _SETTERS = {
        **CloudEventBuilder._SETTERS,
        SCHEMAURL: lambda b, v: b.with_data_schema(v),
        DATACONTENTENCODING: lambda b, v: b._drop(DATACONTENTENCODING),
    }

    @property
    def _schema_attribute(self) -> str:
        return SCHEMAURL

    def _drop(self, name: str) -> None:
        # v0.3 declares datacontentencoding but events never store it
        _log.debug("cloudevent.attribute_dropped", attribute=name, spec_version=self.spec_version.value)

    def _build(self, base: EnvelopeBase) -> CloudEventV03:
        return CloudEventV03(
            id=self._id,  # type: ignore[arg-type]
            source=self._source,  # type: ignore[arg-type]
            type=self._type,  # type: ignore[arg-type]
            datacontenttype=self._datacontenttype,
            schemaurl=self._dataschema,
            subject=self._subject,
            time=self._time,
            base=base,
        )


class CloudEventV1Builder(CloudEventBuilder[CloudEventV1]):
    """Builder for spec v1.0 events."""

    spec_version = SpecVersion.V1

    _SETTERS = {
        **CloudEventBuilder._SETTERS,
        DATASCHEMA: lambda b, v: b.with_data_schema(v),
    }

    @property
    def _schema_attribute(self) -> str:
        return DATASCHEMA

    def _build(self, base: EnvelopeBase) -> CloudEventV1:
        return CloudEventV1(
            id=self._id,  # type: ignore[arg-type]
            source=self._source,  # type: ignore[arg-type]
            type=self._type,  # type: ignore[arg-type]
            datacontenttype=self._datacontenttype,
            dataschema=self._dataschema,
            subject=self._subject,
            time=self._time,
            base=base,
        )


_BUILDERS: Mapping[SpecVersion, type[CloudEventBuilder[Any]]] = {
    SpecVersion.V03: CloudEventV03Builder,
    SpecVersion.V1: CloudEventV1Builder,
}


__all__ = [
    "CloudEventBuilder",
    "CloudEventV03Builder",
    "CloudEventV1Builder",
]
