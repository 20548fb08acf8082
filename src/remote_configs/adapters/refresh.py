from __future__ import annotations

from remote_configs.ports.remote_provider import RefreshCallback, Unsubscribe


class RefreshHub:
    # Shared refresh-callback bookkeeping for provider adapters.
    def __init__(self) -> None:
        self._callbacks: list[RefreshCallback] = []
        self.listening = True

    def add(self, callback: RefreshCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def fire(self) -> None:
        if not self.listening:
            return
        # Iterate over a copy so callbacks may (un)subscribe while being notified.
        for callback in list(self._callbacks):
            callback()
