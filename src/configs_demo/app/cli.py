from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from remote_configs.adapters.yaml_provider import YamlFileRemoteProvider
from remote_configs.config.loader import load_settings
from remote_configs.config.settings import ConfigsSettings
from remote_configs.domain.errors import ConfigError
from remote_configs.domain.selectors import EnvironmentType, PlatformType
from remote_configs.reactive.view import ConfigView
from remote_configs.store.configs import ConfigStore

# NOTE: This CLI is the example application for the library: it wires a YAML-backed
# provider into a ConfigStore and prints what an app screen would show.

FALLBACK_API_URL = "https://fallback.example.com"
FALLBACK_THEME_COLOR = "blue"
FALLBACK_WELCOME_TEXT = "Welcome!"

_ENVIRONMENTS = [item.value for item in EnvironmentType]
_PLATFORMS = [item.value for item in PlatformType]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="configs-demo", description="Resolve remote configuration values")
    parser.add_argument("--data", required=True, help="Path to YAML document holding all config sections")
    parser.add_argument("--settings", help="Path to YAML store settings")
    parser.add_argument("--environment", choices=_ENVIRONMENTS, help="Override active environment")
    parser.add_argument("--platform", choices=_PLATFORMS, help="Override active platform")
    parser.add_argument(
        "--get",
        action="append",
        default=[],
        metavar="KEY",
        help="Extra key to resolve, e.g. themes/welcome_text (repeatable)",
    )
    parser.add_argument(
        "--switch-environment",
        choices=_ENVIRONMENTS,
        help="Change environment after first render to show reactive updates",
    )
    parser.add_argument("--quiet", action="store_true", help="Disable structured store logs")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_overrides(settings: ConfigsSettings, args: argparse.Namespace) -> None:
    # CLI flags take precedence over the settings file.
    if args.environment is not None:
        settings.environment = EnvironmentType(args.environment)
    if args.platform is not None:
        settings.platform = PlatformType(args.platform)
    if args.quiet:
        settings.show_logs = False


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(Path(args.settings)) if args.settings else ConfigsSettings()
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    apply_overrides(settings, args)

    store = ConfigStore(YamlFileRemoteProvider(Path(args.data)))
    store.init(**settings.init_kwargs())

    api_url = store.get_or_none("api_url", kind=str, default=FALLBACK_API_URL)
    theme_color = store.get_or_none("theme_color", kind=str, default=FALLBACK_THEME_COLOR)
    _print("api_url", api_url)
    _print("theme_color", theme_color)

    view = ConfigView(
        store=store,
        key="welcome_text",
        kind=str,
        initial=FALLBACK_WELCOME_TEXT,
        render=lambda value: _print("welcome_text", value),
    )
    with view:
        if args.switch_environment is not None:
            store.environment = args.switch_environment

    for key in args.get:
        _print(key, store.get_or_none(key))
    return 0


def _print(key: str, value: object) -> None:
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)
    print(f"{key}: {text}")
