"""The closed set of envelope variants."""

from __future__ import annotations

from mp_cloudevents.core.v03 import CloudEventV03
from mp_cloudevents.core.v1 import CloudEventV1

type CloudEvent = CloudEventV03 | CloudEventV1

__all__ = ["CloudEvent"]
