"""Environment-driven configuration for ac-validator."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MODEL = "gpt-4.1-mini-2025-04-14"
DEFAULT_MAX_TOKENS = 10000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_GIT_TIMEOUT = 60.0

_DISABLED = ("0", "none", "off")


class ConfigError(Exception):
    """Raised when a configuration value is malformed."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Tracker credentials and the model key are optional here: a missing
    tracker credential is refused when a ticket is fetched, a missing model
    key surfaces from the model client at call time.
    """

    openai_api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    jira_domain: str | None = None
    jira_email: str | None = None
    jira_api_token: str | None = None
    http_timeout: float | None = DEFAULT_HTTP_TIMEOUT
    git_timeout: float | None = DEFAULT_GIT_TIMEOUT

    @property
    def jira_configured(self) -> bool:
        """Whether all three tracker credentials are present."""
        return bool(self.jira_domain and self.jira_email and self.jira_api_token)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            model=env.get("ACVALIDATOR_MODEL") or DEFAULT_MODEL,
            max_tokens=_parse_int(env, "ACVALIDATOR_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            temperature=_parse_float(env, "ACVALIDATOR_TEMPERATURE", DEFAULT_TEMPERATURE),
            jira_domain=env.get("JIRA_DOMAIN") or None,
            jira_email=env.get("JIRA_EMAIL") or None,
            jira_api_token=env.get("JIRA_API_TOKEN") or None,
            http_timeout=_parse_timeout(env, "ACVALIDATOR_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            git_timeout=_parse_timeout(env, "ACVALIDATOR_GIT_TIMEOUT", DEFAULT_GIT_TIMEOUT),
        )


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _parse_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _parse_timeout(env: Mapping[str, str], name: str, default: float) -> float | None:
    """Parse a timeout in seconds; '0', 'none' or 'off' disable it."""
    raw = env.get(name)
    if not raw:
        return default
    if raw.strip().lower() in _DISABLED:
        return None
    return _parse_float(env, name, default)
