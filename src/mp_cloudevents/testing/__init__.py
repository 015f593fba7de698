"""Testing support – recording writers and (optional) hypothesis strategies.

The strategies live in :mod:`mp_cloudevents.testing.strategies` and need
the ``test`` extra::

    from mp_cloudevents.testing.strategies import cloud_event_strategy
"""

from mp_cloudevents.testing.fakes import (
    RecordedEvent,
    RecordingContextWriter,
    RecordingEventWriter,
    RecordingWriterFactory,
)

__all__ = [
    "RecordedEvent",
    "RecordingContextWriter",
    "RecordingEventWriter",
    "RecordingWriterFactory",
]
