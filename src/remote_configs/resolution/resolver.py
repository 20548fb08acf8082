from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass
from typing import TypeVar

from remote_configs.domain.selectors import (
    EnvironmentType,
    PlatformType,
    effective_environment,
    effective_platform,
)
from remote_configs.resolution.merge import deep_merge

KEY_SEPARATOR = "/"
DEFAULT_SECTION_KEY = "default"

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Resolver:
    """Read-only view over one snapshot of the raw configuration store.

    Resolution descends path -> environment merge -> platform override.
    Absence at any stage yields ``None``; nothing here raises for missing
    sections or keys.
    """

    props: Mapping[str, object]
    default_path: str
    environment: EnvironmentType | None = None
    platform: PlatformType | None = None

    def split_key(self, key: str) -> tuple[str, str]:
        # "a/b/c" -> ("a/b", "c"); keys without a separator live in the default path.
        if KEY_SEPARATOR not in key:
            return self.default_path, key
        path, _, leaf = key.rpartition(KEY_SEPARATOR)
        return path, leaf

    def merge_environment(
        self,
        section: Mapping[object, object],
        environment: EnvironmentType | None = None,
    ) -> dict[object, object]:
        merged: dict[object, object] = {}
        defaults = section.get(DEFAULT_SECTION_KEY)
        if isinstance(defaults, Mapping):
            merged = deep_merge(merged, defaults)
        resolved = effective_environment(_prefer(environment, EnvironmentType.SYSTEM, self.environment))
        overrides = section.get(resolved.value)
        if isinstance(overrides, Mapping):
            merged = deep_merge(merged, overrides)
        return merged

    def resolve_platform(
        self,
        data: Mapping[object, object],
        fallback: object,
        platform: PlatformType | None = None,
    ) -> object:
        # Lookup order: leaf[platform] -> fallback[platform] -> fallback itself.
        resolved = effective_platform(_prefer(platform, PlatformType.SYSTEM, self.platform))
        value = data.get(resolved.value)
        if value is not None:
            return value
        if isinstance(fallback, Mapping):
            value = fallback.get(resolved.value)
        return fallback if value is None else value

    def select(
        self,
        key: str,
        *,
        path: str | None = None,
        environment: EnvironmentType | None = None,
        platform: PlatformType | None = None,
    ) -> object:
        section_name, leaf_key = self.split_key(key) if path is None else (path, key)
        section = self.props.get(section_name)
        if not isinstance(section, Mapping):
            return None
        merged = self.merge_environment(section, environment)
        value = merged.get(leaf_key)
        # Only mapping-valued leaves can carry platform overrides.
        if not isinstance(value, Mapping):
            return value
        section_default = section.get(DEFAULT_SECTION_KEY)
        if isinstance(section_default, Mapping):
            section_default = section_default.get(leaf_key)
        # Returned values never alias the raw section.
        section_default = deepcopy(section_default)
        return self.resolve_platform(value, section_default, platform)

    def find_section(
        self,
        name: str,
        *,
        environment: EnvironmentType | None = None,
        platform: PlatformType | None = None,
    ) -> dict[object, object] | None:
        # Bulk section loads (themes etc.) skip the per-key platform step.
        _ = platform
        section = self.props.get(name)
        if not isinstance(section, Mapping):
            return None
        return self.merge_environment(section, environment)


def _prefer(explicit: T | None, system: T, active: T | None) -> T | None:
    # An explicit "system" defers to the active selection, which may itself be ambient.
    if explicit is None or explicit is system:
        return active
    return explicit
