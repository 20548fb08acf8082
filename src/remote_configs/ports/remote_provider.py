from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

RefreshCallback = Callable[[], None]
Unsubscribe = Callable[[], None]


# Boundary with whatever fetches and persists remote configuration data.
@runtime_checkable
class RemoteProvider(Protocol):
    def initialize(
        self,
        *,
        name: str,
        paths: set[str],
        symmetric_paths: set[str],
        connected: bool,
        listening: bool,
    ) -> None:
        """Establish the named source and block until initial data is available."""
        raise NotImplementedError("RemoteProvider is a port; use a concrete adapter.")

    @property
    def data(self) -> Mapping[str, object]:
        """Read-only snapshot of all sections keyed by section name."""
        raise NotImplementedError("RemoteProvider is a port; use a concrete adapter.")

    def on_refresh(self, callback: RefreshCallback) -> Unsubscribe:
        """Invoke callback whenever the snapshot is replaced."""
        raise NotImplementedError("RemoteProvider is a port; use a concrete adapter.")
