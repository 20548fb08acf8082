from __future__ import annotations


class ConfigError(ValueError):
    # Base error for configuration resolution and store setup.
    pass


class ConfigNotFoundError(ConfigError):
    # Raised only by non-null accessors when resolution yields nothing.
    def __init__(self, key: str, kind: object, source: str) -> None:
        kind_name = getattr(kind, "__name__", repr(kind))
        super().__init__(f"{kind_name} not found for '{key}' in '{source}'")
        self.key = key
        self.kind = kind
        self.source = source


class TypeMismatchError(ConfigError):
    # Resolved raw value cannot be coerced into the requested kind.
    pass


class ProviderError(ConfigError):
    # Remote provider failed to load or refresh its snapshot.
    pass


class MergeDepthError(ConfigError):
    # Nested data is deeper than the merge bound (likely cyclic or malformed).
    pass
