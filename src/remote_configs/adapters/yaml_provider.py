from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml

from remote_configs.adapters.refresh import RefreshHub
from remote_configs.domain.errors import ProviderError
from remote_configs.ports.remote_provider import RefreshCallback, RemoteProvider, Unsubscribe
from remote_configs.resolution.resolver import KEY_SEPARATOR


class YamlFileRemoteProvider(RemoteProvider):
    """Provider reading every section from one YAML document.

    The document root maps section names to section data. Only sections
    named by the requested paths are exposed; a path such as
    ``"configs/themes"`` selects the ``themes`` section.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._snapshot: Mapping[str, object] = MappingProxyType({})
        self._hub = RefreshHub()
        self._sections: set[str] = set()

    def initialize(
        self,
        *,
        name: str,
        paths: set[str],
        symmetric_paths: set[str],
        connected: bool,
        listening: bool,
    ) -> None:
        # Local files have no remote side, so name/symmetric_paths/connected are accepted but unused.
        _ = (name, symmetric_paths, connected)
        self._sections = {item.rsplit(KEY_SEPARATOR, 1)[-1] for item in paths}
        self._hub.listening = listening
        self._snapshot = self._read()

    @property
    def data(self) -> Mapping[str, object]:
        return self._snapshot

    def on_refresh(self, callback: RefreshCallback) -> Unsubscribe:
        return self._hub.add(callback)

    def reload(self) -> None:
        # Re-read the file and swap the snapshot wholesale.
        self._snapshot = self._read()
        self._hub.fire()

    def _read(self) -> Mapping[str, object]:
        if not self.path.exists():
            raise ProviderError(f"Config data file not found: {self.path}")
        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ProviderError(f"Invalid YAML in {self.path}: {exc}") from exc
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ProviderError("Config data root must be a mapping")
        selected = {name: value for name, value in raw.items() if name in self._sections}
        return MappingProxyType(selected)
