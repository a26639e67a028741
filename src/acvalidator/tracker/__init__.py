"""Issue Adapter - Fetches Jira tickets and flattens their descriptions."""

from acvalidator.tracker.client import MISSING_CONFIGURATION, TICKET_FIELDS, JiraClient
from acvalidator.tracker.document import description_to_text, flatten_description
from acvalidator.tracker.exceptions import TrackerConfigurationError, TrackerError
from acvalidator.tracker.models import Ticket

__all__ = [
    "MISSING_CONFIGURATION",
    "TICKET_FIELDS",
    "JiraClient",
    "Ticket",
    "TrackerConfigurationError",
    "TrackerError",
    "description_to_text",
    "flatten_description",
]
