"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_cloudevents.core import CloudEventBuilder
from mp_cloudevents.kernel.errors import StructuredWriteError
from mp_cloudevents.observability.logging import JsonLoggerFactory, get_logger
from mp_cloudevents.testing import RecordingContextWriter


@pytest.fixture
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


class TestGetLogger:
    def test_returns_logger_with_level_methods(self) -> None:
        log = get_logger("mp_cloudevents.test")
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(log, method))

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", component="builder").info("hello")
        assert logs[0]["component"] == "builder"
        assert logs[0]["event"] == "hello"


class TestLibraryEvents:
    def test_build_logs_debug_event(self) -> None:
        with capture_logs() as logs:
            CloudEventBuilder.v1().with_id("1").with_source("/s").with_type("t").build()
        built = [entry for entry in logs if entry["event"] == "cloudevent.built"]
        assert built[0]["log_level"] == "debug"
        assert built[0]["event_id"] == "1"
        assert built[0]["spec_version"] == "1.0"

    def test_dropped_attribute_logged(self) -> None:
        with capture_logs() as logs:
            CloudEventBuilder.v03().with_context_attribute("datacontentencoding", "base64")
        assert logs[0]["event"] == "cloudevent.attribute_dropped"
        assert logs[0]["attribute"] == "datacontentencoding"

    def test_aborted_traversal_logged(self) -> None:
        event = CloudEventBuilder.v1().with_id("1").with_source("/s").with_type("t").build()
        with capture_logs() as logs, pytest.raises(StructuredWriteError):
            event.read_context(RecordingContextWriter(fail_on="source"))
        aborted = [entry for entry in logs if entry["event"] == "cloudevent.read_context.aborted"]
        assert aborted[0]["error"] == "StructuredWriteError"


class TestJsonLoggerFactory:
    def test_renders_json(self, reset_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("mp_cloudevents.test").info("cloudevent.test", event_id="A1")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "cloudevent.test"
        assert payload["event_id"] == "A1"
        assert payload["level"] == "info"

    def test_level_filters(self, reset_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        structlog.get_logger("mp_cloudevents.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err
