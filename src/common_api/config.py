"""Client configuration.

Settings are read from ``COMMON_API_*`` environment variables. Explicit
keyword overrides passed to :func:`load_settings` win over the environment.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Pydantic settings container for the HTTP client."""

    model_config = SettingsConfigDict(env_prefix="COMMON_API_", extra="ignore")

    base_url: str = Field(
        default="http://localhost:8080/api",
        description="Root URL every API path is resolved against.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds.",
    )
    access_token: str | None = Field(
        default=None,
        description="Access token of the logged-in user or app.",
    )
    token_header: str = Field(
        default="X-Auth-Token",
        description="Header name the access token is sent in.",
    )
    app_code: str | None = Field(
        default=None,
        description="Code of the calling app, sent as X-App-Code.",
    )
    user_agent: str = Field(default="common-api-python/1.0")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    def default_headers(self) -> dict[str, str]:
        """Headers attached to every request."""

        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.access_token:
            headers[self.token_header] = self.access_token
        if self.app_code:
            headers["X-App-Code"] = self.app_code
        return headers


def load_settings(**overrides: Any) -> ClientSettings:
    """Load settings from the environment, applying explicit overrides."""
    return ClientSettings(**overrides)
