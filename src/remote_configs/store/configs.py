from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from remote_configs.adapters.log_sinks import StdoutLogSink
from remote_configs.config.settings import (
    APPLICATION_SECTION,
    DEFAULT_CONFIG_NAME,
    DEFAULT_CONFIG_PATHS,
    DEFAULT_SYMMETRIC_PATHS,
    THEMES_SECTION,
)
from remote_configs.domain.errors import ConfigNotFoundError
from remote_configs.domain.selectors import (
    EnvironmentType,
    PlatformType,
    coerce_environment,
    coerce_platform,
    effective_environment,
    effective_platform,
)
from remote_configs.observability.logging import LogMessage
from remote_configs.parsing.finder import conforms, find_or_none, finds_or_none
from remote_configs.ports.log_sink import LogSink
from remote_configs.ports.remote_provider import RemoteProvider
from remote_configs.resolution.resolver import Resolver
from remote_configs.store.notifier import ChangeNotifier, Listener

T = TypeVar("T")

EnvironmentArg = EnvironmentType | str | None
PlatformArg = PlatformType | str | None


class ConfigStore:
    """Resolved-value store over a remote provider's raw sections.

    One instance per process is the convention; the hosting application
    constructs it and hands it to whatever needs configuration. State changes
    only through ``init``, the ``environment``/``platform`` setters and
    provider refreshes, and every change notifies subscribers synchronously.

    Typed accessors never raise for bad data: resolution, parsing and
    modifier failures are logged and turned into the caller's default. Only
    ``get``/``gets`` raise, and only when nothing was found.
    """

    def __init__(self, provider: RemoteProvider, *, log_sink: LogSink | None = None) -> None:
        self._provider = provider
        self._log_sink = log_sink if log_sink is not None else StdoutLogSink()
        self._notifier = ChangeNotifier(on_error=self._on_listener_error)
        self._props: Mapping[str, object] = MappingProxyType({})
        self._name = DEFAULT_CONFIG_NAME
        self._default_path = APPLICATION_SECTION
        self._environment: EnvironmentType | None = None
        self._platform: PlatformType | None = None
        self._show_logs = True
        self._initialized = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_path(self) -> str:
        return self._default_path

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def props(self) -> Mapping[str, object]:
        return self._props

    @property
    def environment(self) -> EnvironmentType:
        return effective_environment(self._environment)

    @environment.setter
    def environment(self, value: EnvironmentType | str) -> None:
        self._environment = coerce_environment(value)
        self._notifier.notify()

    @property
    def platform(self) -> PlatformType:
        return effective_platform(self._platform)

    @platform.setter
    def platform(self, value: PlatformType | str) -> None:
        self._platform = coerce_platform(value)
        self._notifier.notify()

    def init(
        self,
        *,
        name: str | None = None,
        paths: Iterable[str] | None = None,
        symmetric_paths: Iterable[str] | None = None,
        connected: bool = False,
        listening: bool = True,
        show_logs: bool = True,
        on_ready: Callable[[], None] | None = None,
        default_path: str = APPLICATION_SECTION,
        environment: EnvironmentType | str = EnvironmentType.SYSTEM,
        platform: PlatformType | str = PlatformType.SYSTEM,
    ) -> None:
        if self._initialized:
            self._log("info", "Config store already initialized", name=self._name)
            return

        self._show_logs = show_logs
        self._name = name or DEFAULT_CONFIG_NAME
        self._default_path = default_path
        self._environment = coerce_environment(environment)
        self._platform = coerce_platform(platform)

        try:
            self._provider.initialize(
                name=self._name,
                paths={*DEFAULT_CONFIG_PATHS, *(paths or ())},
                symmetric_paths={*DEFAULT_SYMMETRIC_PATHS, *(symmetric_paths or ())},
                connected=connected,
                listening=listening,
            )
        except Exception as exc:
            self._log_provider_failure("initialize", exc)
        try:
            self._provider.on_refresh(self._on_provider_refresh)
        except Exception as exc:
            self._log_provider_failure("on_refresh", exc)

        self._props = self._snapshot()
        self._initialized = True
        self._log(
            "info",
            "Config store ready",
            name=self._name,
            sections=sorted(self._props),
            environment=self.environment.value,
            platform=self.platform.value,
        )
        self._notifier.notify()
        if on_ready is not None:
            on_ready()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    def add_listener(self, listener: Listener) -> None:
        self._notifier.add_listener(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._notifier.remove_listener(listener)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolver(self) -> Resolver:
        # Snapshot of current state; a refresh during a read never leaks into it.
        return Resolver(
            props=self._props,
            default_path=self._default_path,
            environment=self._environment,
            platform=self._platform,
        )

    def select(
        self,
        key: str,
        *,
        path: str | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
    ) -> object:
        return self.resolver().select(
            key,
            path=path,
            environment=coerce_environment(environment),
            platform=coerce_platform(platform),
        )

    def find_section(
        self,
        name: str,
        *,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
    ) -> dict[object, object] | None:
        return self.resolver().find_section(
            name,
            environment=coerce_environment(environment),
            platform=coerce_platform(platform),
        )

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get_or_none(
        self,
        key: str,
        *,
        kind: type[T] | Any = object,
        path: str | None = None,
        default: T | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
        parser: Callable[[object], T | None] | None = None,
        modifier: Callable[[T], T | None] | None = None,
    ) -> T | None:
        try:
            raw = self.select(key, path=path, environment=environment, platform=platform)
            return _finish(find_or_none(raw, kind, parser), kind, default, modifier)
        except Exception as exc:
            self._log_fallback(key, path, kind, exc)
            return default

    def get(
        self,
        key: str,
        *,
        kind: type[T] | Any = object,
        path: str | None = None,
        default: T | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
        parser: Callable[[object], T | None] | None = None,
        modifier: Callable[[T], T | None] | None = None,
    ) -> T:
        value = self.get_or_none(
            key,
            kind=kind,
            path=path,
            default=default,
            environment=environment,
            platform=platform,
            parser=parser,
            modifier=modifier,
        )
        if value is None:
            raise ConfigNotFoundError(key, kind, self._name)
        return value

    def gets_or_none(
        self,
        key: str,
        *,
        kind: type[T] | Any = object,
        path: str | None = None,
        default: list[T] | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
        parser: Callable[[object], T | None] | None = None,
        modifier: Callable[[T], T | None] | None = None,
    ) -> list[T] | None:
        try:
            raw = self.select(key, path=path, environment=environment, platform=platform)
            values = finds_or_none(raw, kind, parser)
            if values is None:
                return default
            if modifier is not None:
                modified = (modifier(value) for value in values)
                values = [value for value in modified if value is not None and conforms(value, kind)]
            return values
        except Exception as exc:
            self._log_fallback(key, path, kind, exc)
            return default

    def gets(
        self,
        key: str,
        *,
        kind: type[T] | Any = object,
        path: str | None = None,
        default: list[T] | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
        parser: Callable[[object], T | None] | None = None,
        modifier: Callable[[T], T | None] | None = None,
    ) -> list[T]:
        values = self.gets_or_none(
            key,
            kind=kind,
            path=path,
            default=default,
            environment=environment,
            platform=platform,
            parser=parser,
            modifier=modifier,
        )
        if values is None:
            raise ConfigNotFoundError(key, list[kind], self._name)
        return values

    def load(
        self,
        name: str = THEMES_SECTION,
        *,
        kind: type[T] | Any = object,
        default: T | None = None,
        environment: EnvironmentArg = None,
        platform: PlatformArg = None,
        parser: Callable[[object], T | None] | None = None,
        modifier: Callable[[T], T | None] | None = None,
    ) -> T | None:
        try:
            raw = self.find_section(name, environment=environment, platform=platform)
            return _finish(find_or_none(raw, kind, parser), kind, default, modifier)
        except Exception as exc:
            self._log_fallback(name, None, kind, exc)
            return default

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _snapshot(self) -> Mapping[str, object]:
        # An unavailable provider snapshot is treated as an empty store.
        try:
            data = self._provider.data
        except Exception as exc:
            self._log_provider_failure("data", exc)
            return MappingProxyType({})
        if not isinstance(data, Mapping):
            return MappingProxyType({})
        return MappingProxyType(dict(data))

    def _on_provider_refresh(self) -> None:
        self._props = self._snapshot()
        self._log("info", "Config store refreshed", name=self._name, sections=sorted(self._props))
        self._notifier.notify()

    def _on_listener_error(self, listener: Listener, exc: Exception) -> None:
        self._log(
            "error",
            "Config listener failed",
            listener=getattr(listener, "__qualname__", repr(listener)),
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def _log_fallback(self, key: str, path: str | None, kind: object, exc: Exception) -> None:
        self._log(
            "warning",
            f"Falling back to default for '{key}'",
            name=self._name,
            key=key,
            path=path,
            kind=getattr(kind, "__name__", repr(kind)),
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def _log_provider_failure(self, stage: str, exc: Exception) -> None:
        self._log(
            "error",
            "Remote provider failure",
            name=self._name,
            stage=stage,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def _log(self, level: str, message: str, **fields: object) -> None:
        if not self._show_logs:
            return
        self._log_sink.emit(LogMessage(level=level, message=message, fields=fields))


def _finish(
    value: T | None,
    kind: type[T] | Any,
    default: T | None,
    modifier: Callable[[T], T | None] | None,
) -> T | None:
    # Anything that is not an instance of the requested kind falls back to the default.
    if value is None or not conforms(value, kind):
        return default
    if modifier is not None:
        return modifier(value)
    return value
