from __future__ import annotations

from pathlib import Path

import pytest

from remote_configs.config.loader import load_settings, load_yaml_config
from remote_configs.config.settings import APPLICATION_SECTION, DEFAULT_CONFIG_NAME, ConfigsSettings
from remote_configs.domain.errors import ConfigError
from remote_configs.domain.selectors import EnvironmentType, PlatformType


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_yaml_config_returns_mapping(tmp_path: Path) -> None:
    data = load_yaml_config(_write(tmp_path, "name: configs\nlistening: false\n"))
    assert data == {"name": "configs", "listening": False}


def test_load_yaml_config_rejects_non_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_yaml_config(_write(tmp_path, "[]\n"))


def test_load_yaml_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_yaml_config(tmp_path / "nope.yml")


def test_load_settings_validates_selectors(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "paths:\n  - configs/themes\nenvironment: live\nplatform: ios\nshow_logs: false\n",
    )
    settings = load_settings(path)
    assert settings.paths == {"configs/themes"}
    assert settings.environment is EnvironmentType.LIVE
    assert settings.platform is PlatformType.IOS
    assert settings.show_logs is False


def test_empty_settings_file_uses_defaults(tmp_path: Path) -> None:
    settings = load_settings(_write(tmp_path, ""))
    assert settings == ConfigsSettings()
    assert settings.name == DEFAULT_CONFIG_NAME
    assert settings.default_path == APPLICATION_SECTION
    assert settings.environment is EnvironmentType.SYSTEM


@pytest.mark.parametrize(
    "text",
    [
        "unknown_key: 1\n",
        "environment: staging\n",
        "default_path: ''\n",
    ],
)
def test_load_settings_fails_fast_on_bad_values(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path, text))


def test_init_kwargs_mirror_fields() -> None:
    settings = ConfigsSettings(paths={"a"}, environment=EnvironmentType.TEST)
    kwargs = settings.init_kwargs()
    assert kwargs["paths"] == {"a"}
    assert kwargs["environment"] is EnvironmentType.TEST
    assert kwargs["platform"] is PlatformType.SYSTEM
    assert set(kwargs) == {
        "name",
        "paths",
        "symmetric_paths",
        "connected",
        "listening",
        "show_logs",
        "default_path",
        "environment",
        "platform",
    }
