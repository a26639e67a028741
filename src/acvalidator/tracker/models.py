"""Data models for the issue tracker adapter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Ticket:
    """A Jira issue, flattened for display and prompting.

    Attributes:
        ticket_id: Issue key, e.g. ``PROJ-123``.
        title: Issue summary.
        description: Plain-text description.
        markdown_description: Description as shown in the form.
        parents: Parent issues. Only ``ticket_id`` is populated on parents.
    """

    ticket_id: str
    title: str
    description: str
    markdown_description: str
    parents: list[Ticket] | None = None

    @classmethod
    def placeholder(cls, ticket_id: str) -> Ticket:
        """A ticket known only by its key."""
        return cls(ticket_id=ticket_id, title="", description="", markdown_description="")
