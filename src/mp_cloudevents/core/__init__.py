"""Core – versioned CloudEvent envelopes, builders and the context protocol."""
from mp_cloudevents.core.base import EnvelopeBase
from mp_cloudevents.core.builder import (
    CloudEventBuilder,
    CloudEventV03Builder,
    CloudEventV1Builder,
)
from mp_cloudevents.core.data import (
    BytesCloudEventData,
    CloudEventData,
    StructuredCloudEventData,
)
from mp_cloudevents.core.event import CloudEvent
from mp_cloudevents.core.rw import (
    AttributeValue,
    CloudEventContextReader,
    CloudEventContextWriter,
    CloudEventWriter,
    CloudEventWriterFactory,
)
from mp_cloudevents.core.spec_version import SpecVersion
from mp_cloudevents.core.v03 import CloudEventV03
from mp_cloudevents.core.v1 import CloudEventV1

__all__ = [
    "AttributeValue",
    "BytesCloudEventData",
    "CloudEvent",
    "CloudEventBuilder",
    "CloudEventContextReader",
    "CloudEventContextWriter",
    "CloudEventData",
    "CloudEventV03",
    "CloudEventV03Builder",
    "CloudEventV1",
    "CloudEventV1Builder",
    "CloudEventWriter",
    "CloudEventWriterFactory",
    "EnvelopeBase",
    "SpecVersion",
    "StructuredCloudEventData",
]
