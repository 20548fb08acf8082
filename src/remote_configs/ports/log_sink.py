from __future__ import annotations

from typing import Protocol, runtime_checkable

from remote_configs.observability.logging import LogMessage


# LogSink isolates where diagnostics go; the store only knows this port.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
