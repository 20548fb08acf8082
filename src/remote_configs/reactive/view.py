from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from remote_configs.domain.selectors import EnvironmentType, PlatformType
from remote_configs.store.configs import ConfigStore

T = TypeVar("T")


@dataclass(slots=True)
class ConfigView(Generic[T]):
    """Keeps one resolved value in sync with a render callback.

    ``attach`` renders immediately and subscribes to the store. Each store
    change re-resolves with the same parameters and renders again only when
    the value differs by equality from the last one. ``detach`` (or leaving
    the ``with`` block) drops the subscription.
    """

    store: ConfigStore
    key: str
    render: Callable[[T | None], None]
    path: str | None = None
    kind: type[T] | Any = object
    initial: T | None = None
    environment: EnvironmentType | str | None = None
    platform: PlatformType | str | None = None
    parser: Callable[[object], T | None] | None = None
    modifier: Callable[[T], T | None] | None = None
    value: T | None = field(default=None, init=False)
    _unsubscribe: Callable[[], None] | None = field(default=None, init=False, repr=False)

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def fetch(self) -> T | None:
        return self.store.get_or_none(
            self.key,
            kind=self.kind,
            path=self.path,
            environment=self.environment,
            platform=self.platform,
            parser=self.parser,
            modifier=self.modifier,
        )

    def attach(self) -> ConfigView[T]:
        if self._unsubscribe is not None:
            return self
        self.value = self.fetch()
        self._unsubscribe = self.store.subscribe(self._on_change)
        self._render()
        return self

    def detach(self) -> None:
        if self._unsubscribe is None:
            return
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        unsubscribe()

    def __enter__(self) -> ConfigView[T]:
        return self.attach()

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    def _on_change(self) -> None:
        fresh = self.fetch()
        if fresh == self.value:
            return
        self.value = fresh
        self._render()

    def _render(self) -> None:
        self.render(self.initial if self.value is None else self.value)
