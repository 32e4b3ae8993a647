"""Configuration surface for the DirectDebit SDK."""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import API_VERSION, DEFAULT_TIMEOUT, Endpoints, RetryDefaults


class ClientSettings(BaseSettings):
    """Client configuration, read from ``DIRECTDEBIT_*`` environment variables.

    Explicit constructor arguments on the clients take precedence over
    anything loaded here.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTDEBIT_",
        env_file=None,
        extra="ignore",
    )

    access_token: str = ""
    environment: Literal["live", "sandbox"] = "sandbox"
    # Overrides the environment endpoint when set (e.g. a local mock server)
    base_url: str = ""
    api_version: str = API_VERSION

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    max_attempts: int = Field(default=RetryDefaults.MAX_ATTEMPTS, ge=1)
    retry_base_delay: float = Field(default=RetryDefaults.BASE_DELAY, ge=0)
    retry_max_delay: float = Field(default=RetryDefaults.MAX_DELAY, ge=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Resolved base URL for API calls."""
        if self.base_url:
            return self.base_url
        if self.environment == "live":
            return Endpoints.LIVE
        return Endpoints.SANDBOX


@lru_cache
def load_settings() -> ClientSettings:
    """Load settings from the environment once per process."""
    return ClientSettings()
