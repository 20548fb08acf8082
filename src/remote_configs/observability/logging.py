from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

# Severities the store emits, lowest first.
LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class LogMessage:
    """One structured diagnostic from the config store.

    ``fields`` carries machine-readable context (config name, key, stage,
    error type) so sinks can filter without parsing ``message``.
    """

    level: str
    message: str
    fields: dict[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.level}', expected one of {', '.join(LOG_LEVELS)}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")

    @property
    def severity(self) -> int:
        return LOG_LEVELS.index(self.level)


def log_to_dict(message: LogMessage) -> dict[str, object]:
    # Flat JSON shape: context fields sit beside level/message, never over them.
    payload: dict[str, object] = dict(message.fields)
    payload.update(
        ts=message.timestamp.isoformat().replace("+00:00", "Z"),
        level=message.level,
        message=message.message,
    )
    return payload
