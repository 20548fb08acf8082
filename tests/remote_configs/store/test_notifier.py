from __future__ import annotations

import pytest

from remote_configs.store.notifier import ChangeNotifier


def test_listeners_run_in_registration_order() -> None:
    notifier = ChangeNotifier()
    calls: list[str] = []
    notifier.add_listener(lambda: calls.append("a"))
    notifier.add_listener(lambda: calls.append("b"))
    notifier.notify()
    assert calls == ["a", "b"]


def test_unsubscribe_is_idempotent() -> None:
    notifier = ChangeNotifier()
    calls: list[int] = []
    unsubscribe = notifier.subscribe(lambda: calls.append(1))
    unsubscribe()
    unsubscribe()
    notifier.notify()
    assert calls == []
    assert not notifier.has_listeners


def test_listener_added_during_dispatch_waits_for_next_round() -> None:
    # Dispatch iterates a copy, so subscribing from a callback is safe.
    notifier = ChangeNotifier()
    calls: list[str] = []
    added: list[object] = []

    def late() -> None:
        calls.append("late")

    def first() -> None:
        calls.append("first")
        if not added:
            added.append(late)
            notifier.add_listener(late)

    notifier.add_listener(first)
    notifier.notify()
    assert calls == ["first"]
    notifier.notify()
    assert calls == ["first", "first", "late"]


def test_listener_removed_during_dispatch_is_skipped() -> None:
    notifier = ChangeNotifier()
    calls: list[str] = []

    def second() -> None:
        calls.append("second")

    def first() -> None:
        calls.append("first")
        notifier.remove_listener(second)

    notifier.add_listener(first)
    notifier.add_listener(second)
    notifier.notify()
    assert calls == ["first"]


def test_listener_errors_go_to_handler_and_dispatch_continues() -> None:
    errors: list[str] = []
    notifier = ChangeNotifier(on_error=lambda _listener, exc: errors.append(str(exc)))
    calls: list[str] = []

    def broken() -> None:
        raise RuntimeError("boom")

    notifier.add_listener(broken)
    notifier.add_listener(lambda: calls.append("ok"))
    notifier.notify()
    assert errors == ["boom"]
    assert calls == ["ok"]


def test_listener_errors_propagate_without_handler() -> None:
    notifier = ChangeNotifier()

    def broken() -> None:
        raise RuntimeError("boom")

    notifier.add_listener(broken)
    with pytest.raises(RuntimeError):
        notifier.notify()
