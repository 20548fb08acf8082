from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from remote_configs.domain.selectors import EnvironmentType, PlatformType

# Well-known sections every store asks its provider for.
APPLICATION_SECTION = "application"
DAILY_NOTIFICATIONS_SECTION = "daily_notifications"
WEEKLY_NOTIFICATIONS_SECTION = "weekly_notifications"
THEMES_SECTION = "themes"
SECRETS_SECTION = "secrets"

DEFAULT_CONFIG_NAME = "configs"
DEFAULT_CONFIG_PATHS = frozenset(
    {
        APPLICATION_SECTION,
        DAILY_NOTIFICATIONS_SECTION,
        WEEKLY_NOTIFICATIONS_SECTION,
        SECRETS_SECTION,
        THEMES_SECTION,
    }
)
DEFAULT_SYMMETRIC_PATHS = frozenset({APPLICATION_SECTION})


class ConfigsSettings(BaseModel):
    # Typed view of ConfigStore.init options, loadable from YAML.
    model_config = ConfigDict(extra="forbid")
    name: str = DEFAULT_CONFIG_NAME
    paths: set[str] = Field(default_factory=set)
    symmetric_paths: set[str] = Field(default_factory=set)
    connected: bool = False
    listening: bool = True
    show_logs: bool = True
    default_path: str = Field(default=APPLICATION_SECTION, min_length=1)
    environment: EnvironmentType = EnvironmentType.SYSTEM
    platform: PlatformType = PlatformType.SYSTEM

    def init_kwargs(self) -> dict[str, object]:
        return {
            "name": self.name,
            "paths": set(self.paths),
            "symmetric_paths": set(self.symmetric_paths),
            "connected": self.connected,
            "listening": self.listening,
            "show_logs": self.show_logs,
            "default_path": self.default_path,
            "environment": self.environment,
            "platform": self.platform,
        }
