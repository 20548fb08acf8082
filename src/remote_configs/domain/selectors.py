from __future__ import annotations

import os
import sys
from enum import Enum

from .errors import ConfigError

# Process-level override for the ambient environment (e.g. in CI or containers).
ENVIRONMENT_VARIABLE = "REMOTE_CONFIGS_ENVIRONMENT"


class EnvironmentType(str, Enum):
    LIVE = "live"
    TEST = "test"
    SYSTEM = "system"


class PlatformType(str, Enum):
    ANDROID = "android"
    IOS = "ios"
    WEB = "web"
    FUCHSIA = "fuchsia"
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    WASM = "wasm"
    SYSTEM = "system"


_SYS_PLATFORMS: dict[str, PlatformType] = {
    "android": PlatformType.ANDROID,
    "ios": PlatformType.IOS,
    "emscripten": PlatformType.WEB,
    "wasi": PlatformType.WASM,
    "darwin": PlatformType.MACOS,
    "win32": PlatformType.WINDOWS,
    "cygwin": PlatformType.WINDOWS,
    "linux": PlatformType.LINUX,
    "fuchsia": PlatformType.FUCHSIA,
}


def coerce_environment(value: EnvironmentType | str | None) -> EnvironmentType | None:
    # Accept enum members or their string names; None stays None.
    if value is None or isinstance(value, EnvironmentType):
        return value
    try:
        return EnvironmentType(value)
    except ValueError as exc:
        allowed = sorted(item.value for item in EnvironmentType)
        raise ConfigError(f"Unknown environment '{value}'. Allowed: {allowed}") from exc


def coerce_platform(value: PlatformType | str | None) -> PlatformType | None:
    if value is None or isinstance(value, PlatformType):
        return value
    try:
        return PlatformType(value)
    except ValueError as exc:
        allowed = sorted(item.value for item in PlatformType)
        raise ConfigError(f"Unknown platform '{value}'. Allowed: {allowed}") from exc


def detect_environment(
    *,
    environ: dict[str, str] | None = None,
    debug: bool = __debug__,
) -> EnvironmentType:
    # Explicit env var wins; otherwise assertions on (no -O) means test, optimized means live.
    source = os.environ if environ is None else environ
    declared = source.get(ENVIRONMENT_VARIABLE)
    if declared:
        try:
            resolved = EnvironmentType(declared.strip().lower())
        except ValueError:
            resolved = None
        if resolved is not None and resolved is not EnvironmentType.SYSTEM:
            return resolved
    return EnvironmentType.TEST if debug else EnvironmentType.LIVE


def detect_platform(sys_platform: str | None = None) -> PlatformType:
    name = sys.platform if sys_platform is None else sys_platform
    for prefix, platform in _SYS_PLATFORMS.items():
        if name.startswith(prefix):
            return platform
    return PlatformType.SYSTEM


def effective_environment(override: EnvironmentType | None) -> EnvironmentType:
    # "system" is never returned as-is: it always re-resolves at call time.
    if override is not None and override is not EnvironmentType.SYSTEM:
        return override
    return detect_environment()


def effective_platform(override: PlatformType | None) -> PlatformType:
    if override is not None and override is not PlatformType.SYSTEM:
        return override
    return detect_platform()
