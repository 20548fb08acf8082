from __future__ import annotations

import json
from pathlib import Path

import pytest

from remote_configs.adapters.log_sinks import InMemoryLogSink, JsonlLogSink, StdoutLogSink
from remote_configs.domain.selectors import EnvironmentType
from remote_configs.observability.logging import LogMessage
from remote_configs.ports.log_sink import LogSink


def test_stdout_sink_prints_compact_json(capsys: pytest.CaptureFixture[str]) -> None:
    StdoutLogSink().emit(LogMessage(level="info", message="ready", fields={"env": EnvironmentType.LIVE}))
    line = capsys.readouterr().out.strip()
    payload = json.loads(line)
    assert payload["message"] == "ready"
    assert payload["env"] == "live"
    assert ", " not in line


def test_stdout_sink_drops_messages_below_threshold(capsys: pytest.CaptureFixture[str]) -> None:
    sink = StdoutLogSink(min_level="warning")
    sink.emit(LogMessage(level="info", message="quiet"))
    sink.emit(LogMessage(level="error", message="loud"))
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["loud"]


def test_jsonl_sink_appends_one_line_per_message(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "configs.jsonl"
    sink = JsonlLogSink(path)
    sink.emit(LogMessage(level="info", message="one"))
    sink.emit(LogMessage(level="warning", message="two"))
    sink.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["one", "two"]


def test_in_memory_sink_collects_messages() -> None:
    sink = InMemoryLogSink()
    sink.emit(LogMessage(level="error", message="boom"))
    assert isinstance(sink, LogSink)
    assert sink.levels() == ["error"]


def test_jsonl_sink_as_context_manager_filters_and_closes(tmp_path: Path) -> None:
    path = tmp_path / "diag" / "store.jsonl"
    with JsonlLogSink(path, min_level="warning") as sink:
        sink.emit(LogMessage(level="info", message="skipped"))
        assert not path.exists()
        sink.emit(LogMessage(level="error", message="kept"))
    sink.emit(LogMessage(level="error", message="after close"))
    sink.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["kept"]
