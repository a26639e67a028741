"""Pydantic models for the JSON API."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, as the page sends them."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Action requests


class GitActionRequest(CamelModel):
    """Request body for POST /api/git."""

    action: str
    project_path: str | None = None
    from_branch: str | None = None
    to_branch: str | None = None
    exclude_patterns: list[str] | None = None


class JiraActionRequest(CamelModel):
    """Request body for POST /api/jira."""

    action: str
    ticket_id: str | None = None


class LLMActionRequest(CamelModel):
    """Request body for POST /api/llm."""

    action: str
    ticket_description: str = ""
    git_diff: str = ""
    additional_info: str | None = None


# Tickets


class TicketResponse(CamelModel):
    """Response model for a ticket."""

    ticket_id: str
    title: str
    description: str
    markdown_description: str
    parents: list[TicketResponse] | None = None


def ticket_to_response(ticket: Any) -> TicketResponse:
    """Convert a Ticket model to TicketResponse."""
    return TicketResponse.model_validate(ticket)


# Form


class FormStateModel(CamelModel):
    """Form state exchanged with the page."""

    project_path: str | None = None
    project_name: str | None = None
    branches: list[str] = Field(default_factory=list)
    working_branch: str | None = None
    target_branch: str | None = None
    ticket_id: str | None = None
    ticket_description: str | None = None
    additional_info: str | None = None
    validation_result: str = ""


def form_state_to_response(state: Any) -> FormStateModel:
    """Convert a FormState to FormStateModel."""
    return FormStateModel.model_validate(state)


class FormActionRequest(CamelModel):
    """Request body for POST /api/form."""

    action: str
    state: FormStateModel = Field(default_factory=FormStateModel)
    value: str | None = None
