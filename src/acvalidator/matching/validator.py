"""DiffValidator - Asks a hosted model whether a diff meets a ticket's criteria."""

from __future__ import annotations

from typing import TYPE_CHECKING

import openai

from acvalidator.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from acvalidator.logging import get_logger, sanitize_for_log, truncate_output
from acvalidator.matching.prompts import build_messages

if TYPE_CHECKING:
    from acvalidator.config import Settings

logger = get_logger("matching")

ERROR_PREFIX = "Error validating diff: "


class DiffValidator:
    """Sends a ticket description and a diff to an OpenAI chat model.

    Returns the model's markdown answer as-is. Failures come back as a
    readable string so the form can show them inline.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            api_key: OpenAI API key. A missing key fails at call time.
            model: Chat model name.
            max_tokens: Upper bound on completion length.
            temperature: Sampling temperature.
            timeout: Optional request timeout in seconds.
        """
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self._client: openai.OpenAI | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> DiffValidator:
        """Build a validator from settings."""
        return cls(
            api_key=settings.openai_api_key,
            model=settings.model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            timeout=settings.http_timeout,
        )

    @property
    def client(self) -> openai.OpenAI:
        """Get or create the OpenAI client.

        Raises:
            openai.OpenAIError: If no API key is configured
        """
        if self._client is None:
            self._client = openai.OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def close(self) -> None:
        """Close the OpenAI client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def validate(
        self,
        ticket_description: str,
        diff: str,
        additional_info: str | None = None,
    ) -> str:
        """Check a diff against a ticket description.

        Args:
            ticket_description: Flattened ticket description.
            diff: Git diff text.
            additional_info: Optional notes not present in the ticket.

        Returns:
            The model's markdown answer, or an error description.
        """
        messages = build_messages(ticket_description, diff, additional_info)
        logger.info(
            "Validating diff (%d chars) against ticket (%d chars) with %s",
            len(diff),
            len(ticket_description),
            self.model,
        )
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:  # noqa: BLE001
            logger.error("Model request failed: %s", sanitize_for_log(str(e)))
            return f"{ERROR_PREFIX}{e}"

        if not completion.choices:
            logger.error("Model returned no choices")
            return f"{ERROR_PREFIX}model returned no answer"

        text = completion.choices[0].message.content or ""
        logger.debug("Model answer: %s", truncate_output(text, 1000))
        return text
