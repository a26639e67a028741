"""HTTP API and single-page form for ac-validator."""

from acvalidator.api.app import app, create_app
from acvalidator.api.models import (
    APIResponse,
    FormStateModel,
    GitActionRequest,
    JiraActionRequest,
    LLMActionRequest,
    TicketResponse,
)

__all__ = [
    "APIResponse",
    "FormStateModel",
    "GitActionRequest",
    "JiraActionRequest",
    "LLMActionRequest",
    "TicketResponse",
    "app",
    "create_app",
]
