from .errors import (
    ConfigError,
    ConfigNotFoundError,
    MergeDepthError,
    ProviderError,
    TypeMismatchError,
)
from .selectors import (
    ENVIRONMENT_VARIABLE,
    EnvironmentType,
    PlatformType,
    coerce_environment,
    coerce_platform,
    detect_environment,
    detect_platform,
    effective_environment,
    effective_platform,
)

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "MergeDepthError",
    "ProviderError",
    "TypeMismatchError",
    "ENVIRONMENT_VARIABLE",
    "EnvironmentType",
    "PlatformType",
    "coerce_environment",
    "coerce_platform",
    "detect_environment",
    "detect_platform",
    "effective_environment",
    "effective_platform",
]
