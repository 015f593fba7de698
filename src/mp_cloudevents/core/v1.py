"""CloudEvent implementation for spec version 1.0."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from mp_cloudevents.core import base as _base
from mp_cloudevents.core.base import Accessor, EnvelopeBase
from mp_cloudevents.core.data import CloudEventData
from mp_cloudevents.core.spec_version import SpecVersion
from mp_cloudevents.kernel.types.extension import ExtensionValue
from mp_cloudevents.kernel.types.uri import URI

if TYPE_CHECKING:
    from mp_cloudevents.core.rw import CloudEventContextWriter, CloudEventWriterFactory

R = TypeVar("R")


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class CloudEventV1:
    """Immutable CloudEvent conforming to spec v1.0 (``dataschema`` replaces v0.3 ``schemaurl``)."""

    id: str
    source: URI
    type: str
    datacontenttype: str | None = None
    dataschema: URI | None = None
    subject: str | None = None
    time: datetime | None = None
    base: EnvelopeBase = dataclasses.field(default_factory=EnvelopeBase)

    ACCESSORS: ClassVar[Mapping[str, Accessor]]

    def __post_init__(self) -> None:
        _base.validate_fixed_attributes(
            SpecVersion.V1,
            {name: getattr(self, name) for name in SpecVersion.V1.attribute_names()},
        )
        _base.check_extension_collisions(SpecVersion.V1, self.base)

    @property
    def spec_version(self) -> SpecVersion:
        return SpecVersion.V1

    @property
    def data_schema(self) -> URI | None:
        return self.dataschema

    @property
    def data(self) -> CloudEventData | None:
        return self.base.data

    @property
    def extensions(self) -> Mapping[str, ExtensionValue]:
        return self.base.extensions

    @property
    def attribute_names(self) -> frozenset[str]:
        return SpecVersion.V1.all_attributes

    @property
    def extension_names(self) -> tuple[str, ...]:
        return tuple(self.base.extensions)

    def get_attribute(self, name: str) -> Any:
        return _base.get_attribute(self, name)

    def get_extension(self, name: str) -> ExtensionValue | None:
        return self.base.extensions.get(name)

    def read_context(self, writer: "CloudEventContextWriter") -> None:
        _base.traverse(self, writer)

    def read(self, writer_factory: "CloudEventWriterFactory[R]") -> R:
        return _base.read_event(self, writer_factory)

    def __repr__(self) -> str:
        return _base.render(self)

    __str__ = __repr__


CloudEventV1.ACCESSORS = _base.build_accessors(
    SpecVersion.V1,
    {
        "id": "id",
        "source": "source",
        "type": "type",
        "datacontenttype": "datacontenttype",
        "dataschema": "dataschema",
        "subject": "subject",
        "time": "time",
    },
)


__all__ = ["CloudEventV1"]
