"""Unit tests for environment configuration."""

import pytest

from acvalidator.config import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    ConfigError,
    Settings,
)


@pytest.mark.unit
class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults_with_empty_environment(self) -> None:
        """Nothing set gives defaults and no credentials."""
        settings = Settings.from_env({})

        assert settings.openai_api_key is None
        assert settings.model == DEFAULT_MODEL
        assert settings.max_tokens == DEFAULT_MAX_TOKENS
        assert settings.temperature == DEFAULT_TEMPERATURE
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
        assert settings.git_timeout == DEFAULT_GIT_TIMEOUT
        assert not settings.jira_configured

    def test_reads_credentials(self) -> None:
        """Tracker and model credentials are read."""
        settings = Settings.from_env(
            {
                "OPENAI_API_KEY": "sk-x",
                "JIRA_DOMAIN": "example.atlassian.net",
                "JIRA_EMAIL": "dev@example.com",
                "JIRA_API_TOKEN": "tok",
            }
        )

        assert settings.openai_api_key == "sk-x"
        assert settings.jira_domain == "example.atlassian.net"
        assert settings.jira_configured

    @pytest.mark.parametrize("missing", ["JIRA_DOMAIN", "JIRA_EMAIL", "JIRA_API_TOKEN"])
    def test_any_missing_tracker_credential(self, missing: str) -> None:
        """One missing tracker credential leaves the tracker unconfigured."""
        env = {
            "JIRA_DOMAIN": "example.atlassian.net",
            "JIRA_EMAIL": "dev@example.com",
            "JIRA_API_TOKEN": "tok",
        }
        env[missing] = ""

        assert not Settings.from_env(env).jira_configured

    def test_model_tuning(self) -> None:
        """Model name, token bound and temperature are configurable."""
        settings = Settings.from_env(
            {
                "ACVALIDATOR_MODEL": "gpt-4o-mini",
                "ACVALIDATOR_MAX_TOKENS": "2000",
                "ACVALIDATOR_TEMPERATURE": "0.2",
            }
        )

        assert settings.model == "gpt-4o-mini"
        assert settings.max_tokens == 2000
        assert settings.temperature == 0.2

    @pytest.mark.parametrize("value", ["0", "none", "OFF"])
    def test_timeout_can_be_disabled(self, value: str) -> None:
        """Timeouts can be switched off."""
        settings = Settings.from_env({"ACVALIDATOR_HTTP_TIMEOUT": value})

        assert settings.http_timeout is None

    def test_timeout_value(self) -> None:
        """Timeouts accept seconds."""
        assert Settings.from_env({"ACVALIDATOR_GIT_TIMEOUT": "5"}).git_timeout == 5.0

    def test_malformed_number_raises(self) -> None:
        """Malformed numbers raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env({"ACVALIDATOR_MAX_TOKENS": "lots"})

        assert "ACVALIDATOR_MAX_TOKENS" in str(exc_info.value)
