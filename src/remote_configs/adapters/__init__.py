from .log_sinks import InMemoryLogSink, JsonlLogSink, StdoutLogSink
from .memory_provider import InMemoryRemoteProvider
from .yaml_provider import YamlFileRemoteProvider

__all__ = [
    "InMemoryLogSink",
    "InMemoryRemoteProvider",
    "JsonlLogSink",
    "StdoutLogSink",
    "YamlFileRemoteProvider",
]
