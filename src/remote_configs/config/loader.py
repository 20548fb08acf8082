from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from remote_configs.config.settings import ConfigsSettings
from remote_configs.domain.errors import ConfigError


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader for store settings; returns a raw mapping for validation.
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_settings(path: Path) -> ConfigsSettings:
    # Fail fast on unknown keys or bad values so misconfiguration surfaces at startup.
    raw = load_yaml_config(path)
    try:
        return ConfigsSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc
