"""Tests for ClientSettings and load_settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from directdebit_sdk import DirectDebitClient
from directdebit_sdk.config import ClientSettings, load_settings
from directdebit_sdk.constants import API_VERSION, Endpoints


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "DIRECTDEBIT_ACCESS_TOKEN",
        "DIRECTDEBIT_ENVIRONMENT",
        "DIRECTDEBIT_BASE_URL",
        "DIRECTDEBIT_API_VERSION",
        "DIRECTDEBIT_TIMEOUT",
        "DIRECTDEBIT_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield monkeypatch
    load_settings.cache_clear()


class TestClientSettings:
    def test_defaults(self, clean_env):
        settings = ClientSettings()
        assert settings.access_token == ""
        assert settings.environment == "sandbox"
        assert settings.api_version == API_VERSION
        assert settings.timeout == 30.0
        assert settings.max_attempts == 3
        assert settings.endpoint == Endpoints.SANDBOX

    def test_from_environment(self, clean_env):
        clean_env.setenv("DIRECTDEBIT_ACCESS_TOKEN", "env_token")
        clean_env.setenv("DIRECTDEBIT_ENVIRONMENT", "live")
        clean_env.setenv("DIRECTDEBIT_MAX_ATTEMPTS", "5")

        settings = ClientSettings()

        assert settings.access_token == "env_token"
        assert settings.endpoint == Endpoints.LIVE
        assert settings.max_attempts == 5

    def test_base_url_wins(self, clean_env):
        clean_env.setenv("DIRECTDEBIT_BASE_URL", "http://localhost:9000/")
        assert ClientSettings().endpoint == "http://localhost:9000"

    def test_invalid_values(self, clean_env):
        with pytest.raises(ValidationError):
            ClientSettings(environment="staging")
        with pytest.raises(ValidationError):
            ClientSettings(max_attempts=0)
        with pytest.raises(ValidationError):
            ClientSettings(timeout=0)


class TestLoadSettings:
    def test_cached(self, clean_env):
        assert load_settings() is load_settings()

    def test_client_reads_environment(self, clean_env):
        """Should build a client from environment variables alone."""
        clean_env.setenv("DIRECTDEBIT_ACCESS_TOKEN", "env_token")
        clean_env.setenv("DIRECTDEBIT_BASE_URL", "http://localhost:9000")

        client = DirectDebitClient()

        assert client._access_token == "env_token"
        assert client._base_url == "http://localhost:9000"

    def test_arguments_override_environment(self, clean_env):
        clean_env.setenv("DIRECTDEBIT_ACCESS_TOKEN", "env_token")
        clean_env.setenv("DIRECTDEBIT_ENVIRONMENT", "sandbox")

        client = DirectDebitClient("arg_token", environment="live")

        assert client._access_token == "arg_token"
        assert client._base_url == Endpoints.LIVE
