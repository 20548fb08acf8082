from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from remote_configs.adapters.refresh import RefreshHub
from remote_configs.ports.remote_provider import RefreshCallback, RemoteProvider, Unsubscribe


class InMemoryRemoteProvider(RemoteProvider):
    """Provider backed by an in-process mapping.

    ``publish`` swaps the whole snapshot at once, which is how a real remote
    source delivers a refresh; readers never observe a half-applied update.
    """

    def __init__(self, sections: Mapping[str, object] | None = None) -> None:
        self._snapshot: Mapping[str, object] = MappingProxyType(dict(sections or {}))
        self._hub = RefreshHub()
        self.name: str | None = None
        self.paths: set[str] = set()
        self.symmetric_paths: set[str] = set()
        self.connected = False

    def initialize(
        self,
        *,
        name: str,
        paths: set[str],
        symmetric_paths: set[str],
        connected: bool,
        listening: bool,
    ) -> None:
        self.name = name
        self.paths = set(paths)
        self.symmetric_paths = set(symmetric_paths)
        self.connected = connected
        self._hub.listening = listening

    @property
    def data(self) -> Mapping[str, object]:
        return self._snapshot

    def on_refresh(self, callback: RefreshCallback) -> Unsubscribe:
        return self._hub.add(callback)

    def publish(self, sections: Mapping[str, object]) -> None:
        self._snapshot = MappingProxyType(dict(sections))
        self._hub.fire()
