"""JiraClient - Reads tickets from the Jira Cloud REST API."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

import httpx

from acvalidator.logging import get_logger, sanitize_for_log
from acvalidator.tracker.document import description_to_text
from acvalidator.tracker.exceptions import TrackerConfigurationError
from acvalidator.tracker.models import Ticket

if TYPE_CHECKING:
    from acvalidator.config import Settings

logger = get_logger("tracker")

# Fields requested for every ticket
TICKET_FIELDS = ("summary", "description", "parent")

MISSING_CONFIGURATION = "Missing Jira configuration. Please check your environment variables."


class JiraClient:
    """Read-only client for Jira issues.

    Authenticates with basic credentials built from an account email and
    an API token.
    """

    def __init__(
        self,
        domain: str,
        email: str,
        api_token: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize the Jira client.

        Args:
            domain: Jira site domain, e.g. "example.atlassian.net"
            email: Account email the API token belongs to
            api_token: Jira API token
            timeout: Optional request timeout in seconds (None disables it)
        """
        self.domain = domain
        self.email = email
        self.api_token = api_token
        self.base_url = f"https://{domain}/rest/api/3"
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> JiraClient:
        """Build a client from settings.

        Raises:
            TrackerConfigurationError: If domain, email or token is missing
        """
        if not (settings.jira_domain and settings.jira_email and settings.jira_api_token):
            logger.error(MISSING_CONFIGURATION)
            raise TrackerConfigurationError(MISSING_CONFIGURATION)
        return cls(
            domain=settings.jira_domain,
            email=settings.jira_email,
            api_token=settings.jira_api_token,
            timeout=settings.http_timeout,
        )

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the Jira API."""
        if self._client is None:
            credentials = base64.b64encode(f"{self.email}:{self.api_token}".encode()).decode()
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Basic {credentials}",
                    "Accept": "application/json",
                    "X-Force-Accept-Language": "true",
                    "Accept-Language": "en",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def get_ticket(self, ticket_id: str) -> Ticket | None:
        """Fetch a ticket by its key.

        Args:
            ticket_id: Issue key, e.g. "PROJ-123"

        Returns:
            Ticket with a flattened description, or None if the ticket
            could not be fetched
        """
        logger.info("Fetching ticket %s", ticket_id)
        try:
            response = self.client.get(
                f"/issue/{ticket_id}",
                params={"fields": ",".join(TICKET_FIELDS)},
            )
        except httpx.HTTPError as e:
            logger.error("Failed to fetch ticket %s: %s", ticket_id, sanitize_for_log(str(e)))
            return None

        if response.status_code != 200:
            logger.error(
                "Failed to fetch ticket %s: %s - %s",
                ticket_id,
                response.status_code,
                response.reason_phrase,
            )
            return None

        try:
            data: dict[str, Any] = response.json()
            fields = data["fields"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Unexpected payload for ticket %s: %s", ticket_id, e)
            return None
        if not isinstance(fields, dict):
            logger.error("Unexpected payload for ticket %s: fields is %r", ticket_id, fields)
            return None

        text = description_to_text(fields.get("description"))
        ticket = Ticket(
            ticket_id=ticket_id,
            title=str(fields.get("summary") or ""),
            description=text,
            markdown_description=text,
        )

        parent = fields.get("parent")
        if isinstance(parent, dict) and parent.get("key"):
            # Parent content is not fetched, only its key is recorded
            ticket.parents = [Ticket.placeholder(parent["key"])]

        logger.info("Fetched ticket %s: %s", ticket_id, ticket.title)
        return ticket
