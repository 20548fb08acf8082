from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from remote_configs.observability.logging import LOG_LEVELS, LogMessage, log_to_dict
from remote_configs.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Compact JSON line per message on stdout, dropping anything below min_level.
    def __init__(self, min_level: str = "info") -> None:
        self._threshold = LOG_LEVELS.index(min_level)

    def emit(self, message: LogMessage) -> None:
        if message.severity < self._threshold:
            return
        print(_encode(message))


class JsonlLogSink(LogSink):
    """Append-only JSONL file of store diagnostics.

    The file opens on the first kept message, so a sink that never logs
    leaves no file behind. Usable as a context manager; messages emitted
    after ``close`` are dropped.
    """

    def __init__(self, path: Path, min_level: str = "debug") -> None:
        self.path = path
        self._threshold = LOG_LEVELS.index(min_level)
        self._file: TextIO | None = None
        self._closed = False

    def emit(self, message: LogMessage) -> None:
        if self._closed or message.severity < self._threshold:
            return
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path.open("a", encoding="utf-8")
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._closed = True
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> JsonlLogSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass(slots=True)
class InMemoryLogSink(LogSink):
    # Collects messages for tests and for embedding apps that render their own diagnostics.
    messages: list[LogMessage] = field(default_factory=list)

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def levels(self) -> list[str]:
        return [message.level for message in self.messages]


def _encode(message: LogMessage) -> str:
    # default=str keeps enum/path field values printable.
    return json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
