from __future__ import annotations

from datetime import UTC

import pytest

from remote_configs.observability.logging import LogMessage, log_to_dict


def test_log_message_requires_known_level_and_message() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="info", message="")
    with pytest.raises(ValueError):
        LogMessage(level="verbose", message="ready")


def test_severity_follows_level_order() -> None:
    assert LogMessage(level="debug", message="x").severity < LogMessage(level="error", message="x").severity


def test_log_to_dict_is_flat_with_utc_z_suffix() -> None:
    message = LogMessage(level="info", message="ready", fields={"name": "configs"})
    payload = log_to_dict(message)
    assert message.timestamp.tzinfo is UTC
    assert payload["level"] == "info"
    assert payload["name"] == "configs"
    assert str(payload["ts"]).endswith("Z")


def test_context_fields_never_shadow_core_keys() -> None:
    payload = log_to_dict(LogMessage(level="warning", message="fallback", fields={"message": "other"}))
    assert payload["message"] == "fallback"
