"""Data models for the validation form."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FormState:
    """State held by the single-page form between actions.

    Attributes:
        project_path: Path to the selected git repository.
        project_name: Display name derived from the path.
        branches: Local branches of the project.
        working_branch: Branch with the changes (the checked-out branch).
        target_branch: Branch the work will be merged into.
        ticket_id: Jira ticket key.
        ticket_description: Flattened ticket description, or a message.
        additional_info: Notes not present in the ticket description.
        validation_result: Model answer or status message.
    """

    project_path: str | None = None
    project_name: str | None = None
    branches: list[str] = field(default_factory=list)
    working_branch: str | None = None
    target_branch: str | None = None
    ticket_id: str | None = None
    ticket_description: str | None = None
    additional_info: str | None = None
    validation_result: str = ""
