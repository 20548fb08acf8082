from .loader import load_settings, load_yaml_config
from .settings import (
    APPLICATION_SECTION,
    DAILY_NOTIFICATIONS_SECTION,
    DEFAULT_CONFIG_NAME,
    DEFAULT_CONFIG_PATHS,
    DEFAULT_SYMMETRIC_PATHS,
    SECRETS_SECTION,
    THEMES_SECTION,
    WEEKLY_NOTIFICATIONS_SECTION,
    ConfigsSettings,
)

__all__ = [
    "APPLICATION_SECTION",
    "DAILY_NOTIFICATIONS_SECTION",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_CONFIG_PATHS",
    "DEFAULT_SYMMETRIC_PATHS",
    "SECRETS_SECTION",
    "THEMES_SECTION",
    "WEEKLY_NOTIFICATIONS_SECTION",
    "ConfigsSettings",
    "load_settings",
    "load_yaml_config",
]
