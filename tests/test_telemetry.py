from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

import pytest

from scribe.buffer import BufferValidationError, Position, SharedDocument
from scribe.runtime import telemetry

Record = Tuple[str, str, Dict[str, str]]


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[Record] = []
        self.context: Dict[str, str] = {}
        self.context_seen: List[Tuple[str, str]] = []
        self.components: List[str] = []
        self.profiles: List[str] = []

    def _record(self, level: str, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append((level, message, dict(pairs)))

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("debug", message, pairs)

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("info", message, pairs)

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("error", message, pairs)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value
        self.context_seen.append((key, value))

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiles.append(name)
        yield


class RecordingConfig:
    def __init__(self) -> None:
        self.profiling = False

    def with_profiling(self, enabled: bool) -> None:
        self.profiling = enabled


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_span_logs_failure_and_reraises(recorder: RecordingLogger) -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("work", component="worker", metadata={"doc": "a"}):
            raise RuntimeError("boom")

    assert recorder.records == [
        (
            "error",
            "span::fail",
            {"span": "work", "doc": "a", "reason": "boom", "component": "worker"},
        )
    ]
    assert recorder.profiles == ["work"]
    assert recorder.components == ["worker"]
    assert recorder.context == {}


def test_record_event_payload_shape(recorder: RecordingLogger) -> None:
    telemetry.record_event("saved", data={"line": 3})

    assert recorder.records == [("info", "event::saved", {"event": "saved", "line": "3"})]


def test_record_event_rejects_unknown_level(recorder: RecordingLogger) -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        telemetry.record_event("saved", level="verbose")


def test_document_edit_runs_inside_named_span(recorder: RecordingLogger) -> None:
    shared = SharedDocument.from_text("abc", name="notes")

    shared.insert(Position(line=0, offset=3), "d")

    assert recorder.profiles == ["document::insert"]
    assert recorder.components == ["document::insert"]
    assert recorder.context_seen == [("document", "notes")]
    assert recorder.context == {}
    assert recorder.records == [
        (
            "debug",
            "event::document.commit",
            {
                "event": "document.commit",
                "document": "notes",
                "label": "insert",
                "version": "1",
            },
        )
    ]


def test_failed_document_edit_is_reported(recorder: RecordingLogger) -> None:
    shared = SharedDocument.from_text("abc")

    with pytest.raises(BufferValidationError):
        shared.insert(Position(line=4, offset=0), "x")

    [(level, message, payload)] = recorder.records
    assert (level, message) == ("error", "span::fail")
    assert payload["span"] == "document::insert"
    assert payload["reason"] == "Line out of range"


def test_explicit_config_forces_profiling_and_has_no_settings() -> None:
    config = RecordingConfig()
    try:
        telemetry.configure(config=config)

        assert config.profiling is True
        assert telemetry.current_settings() is None
    finally:
        telemetry.configure()
