"""Unit tests for the testing fakes."""

from __future__ import annotations

import pytest

from mp_cloudevents.core import CloudEventContextWriter, SpecVersion
from mp_cloudevents.kernel.errors import StructuredWriteError
from mp_cloudevents.testing import (
    RecordedEvent,
    RecordingContextWriter,
    RecordingEventWriter,
    RecordingWriterFactory,
)


class TestRecordingContextWriter:
    def test_records_in_order(self) -> None:
        writer = RecordingContextWriter()
        writer.with_context_attribute("b", 1).with_context_attribute("a", "x")
        assert writer.calls == [("b", 1), ("a", "x")]
        assert writer.names == ["b", "a"]
        assert writer.as_dict() == {"b": 1, "a": "x"}

    def test_fail_on(self) -> None:
        writer = RecordingContextWriter(fail_on="a")
        with pytest.raises(StructuredWriteError) as exc_info:
            writer.with_context_attribute("a", 1)
        assert exc_info.value.attribute == "a"
        assert writer.calls == []

    def test_is_context_writer(self) -> None:
        assert isinstance(RecordingContextWriter(), CloudEventContextWriter)


class TestRecordingWriterFactory:
    def test_creates_version_bound_writers(self) -> None:
        factory = RecordingWriterFactory()
        writer = factory.create(SpecVersion.V03)
        assert isinstance(writer, RecordingEventWriter)
        assert writer.spec_version is SpecVersion.V03
        assert factory.created == [writer]

    def test_end_returns_recorded_event(self) -> None:
        writer = RecordingWriterFactory().create(SpecVersion.V1)
        writer.with_context_attribute("id", "1")
        recorded = writer.end(None)
        assert recorded == RecordedEvent(SpecVersion.V1, (("id", "1"),), None)
