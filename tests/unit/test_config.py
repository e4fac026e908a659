from __future__ import annotations

import pytest
from pydantic import ValidationError

from common_api.config import ClientSettings, load_settings


def test_defaults_without_environment(monkeypatch) -> None:
    for name in ("BASE_URL", "ACCESS_TOKEN", "APP_CODE", "TIMEOUT_SECONDS"):
        monkeypatch.delenv(f"COMMON_API_{name}", raising=False)

    settings = load_settings()

    assert settings.base_url == "http://localhost:8080/api"
    assert settings.timeout_seconds == 30.0
    assert settings.default_headers() == {
        "Accept": "application/json",
        "User-Agent": "common-api-python/1.0",
    }


def test_environment_is_read_with_prefix(monkeypatch) -> None:
    monkeypatch.setenv("COMMON_API_BASE_URL", "https://api.example.org")
    monkeypatch.setenv("COMMON_API_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("COMMON_API_LOG_JSON", "true")

    settings = load_settings()

    assert settings.base_url == "https://api.example.org"
    assert settings.log_json is True
    assert settings.default_headers()["X-Auth-Token"] == "tok"


def test_overrides_win_over_environment(monkeypatch) -> None:
    monkeypatch.setenv("COMMON_API_BASE_URL", "https://api.example.org")

    settings = load_settings(base_url="http://override.test", token_header="Authorization")

    assert settings.base_url == "http://override.test"
    assert settings.token_header == "Authorization"


def test_custom_token_header() -> None:
    settings = ClientSettings(access_token="abc", token_header="X-Token", app_code="crm")

    headers = settings.default_headers()

    assert headers["X-Token"] == "abc"
    assert headers["X-App-Code"] == "crm"
    assert "X-Auth-Token" not in headers


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(timeout_seconds=0)
