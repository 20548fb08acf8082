from __future__ import annotations

from collections.abc import Callable

Listener = Callable[[], None]
ErrorHandler = Callable[[Listener, Exception], None]


class ChangeNotifier:
    """Synchronous publish/subscribe channel.

    Listeners run on the caller's thread in registration order. The listener
    list is copied before each dispatch, so adding or removing listeners from
    inside a callback is safe; a listener removed mid-dispatch is skipped if it
    has not run yet.
    """

    def __init__(self, *, on_error: ErrorHandler | None = None) -> None:
        self._listeners: list[Listener] = []
        self._on_error = on_error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self.add_listener(listener)

        def _unsubscribe() -> None:
            self.remove_listener(listener)

        return _unsubscribe

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        # Removing an unknown listener is a no-op (detach may run twice).
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def notify(self) -> None:
        for listener in list(self._listeners):
            if listener not in self._listeners:
                continue
            try:
                listener()
            except Exception as exc:
                if self._on_error is None:
                    raise
                self._on_error(listener, exc)
