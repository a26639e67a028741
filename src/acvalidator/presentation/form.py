"""ValidationForm - Sequences the adapters behind the single-page form."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from acvalidator.logging import get_logger
from acvalidator.presentation.models import FormState
from acvalidator.ticket_ref import infer_ticket_id
from acvalidator.tracker import TrackerError

if TYPE_CHECKING:
    from collections.abc import Callable

    from acvalidator.matching import DiffValidator
    from acvalidator.tracker import JiraClient, Ticket
    from acvalidator.vcs import GitAdapter

logger = get_logger("presentation")

SELECT_PROJECT_AND_BRANCHES = "Please select a project and branches to compare."
NO_TICKET_DESCRIPTION = "No Jira ticket description available."
NO_DIFFERENCES = "No differences found between the selected branches."


class ValidationForm:
    """Handlers for each user action on the form.

    Every handler takes the current state and returns a new one; the form
    itself holds no state between calls.
    """

    def __init__(
        self,
        vcs: GitAdapter,
        tracker_factory: Callable[[], JiraClient],
        validator: DiffValidator,
    ) -> None:
        """Initialize the form.

        Args:
            vcs: Git adapter.
            tracker_factory: Builds a Jira client; may raise TrackerError
                             when the tracker is not configured.
            validator: Model delegate.
        """
        self.vcs = vcs
        self.tracker_factory = tracker_factory
        self.validator = validator

    def reset(self) -> FormState:
        """Clear the form."""
        return FormState()

    def select_project(self, state: FormState, path: str | None) -> FormState:
        """Load branches for a project and pre-fill branches and ticket.

        Args:
            state: Current form state.
            path: Project directory typed or picked by the user.

        Returns:
            Updated state, with the ticket fetched when a ticket id is known.
        """
        if not path or not path.strip():
            return self.reset()

        logger.info("Selecting project %s", path)
        branches = self.vcs.list_branches(path)
        working_branch = self.vcs.current_branch(path)
        default_branch = self.vcs.default_branch(path)

        ticket_id = infer_ticket_id(working_branch) or state.ticket_id or None

        new_state = replace(
            state,
            project_path=path,
            project_name=self.vcs.project_name(path),
            branches=branches,
            working_branch=working_branch or None,
            target_branch=state.target_branch or default_branch,
            ticket_id=ticket_id,
        )
        if not ticket_id:
            return new_state
        return self._fetch_ticket(new_state, ticket_id)

    def set_target_branch(self, state: FormState, branch: str) -> FormState:
        """Choose the branch to merge into."""
        return replace(state, target_branch=branch)

    def set_working_branch(self, state: FormState, branch: str) -> FormState:
        """Choose the working branch, inferring a ticket id if none is set."""
        return replace(
            state,
            working_branch=branch,
            ticket_id=state.ticket_id or infer_ticket_id(branch),
        )

    def change_ticket_id(self, state: FormState, ticket_id: str) -> FormState:
        """Edit the ticket id without fetching."""
        return replace(state, ticket_id=ticket_id)

    def lookup_ticket(self, state: FormState) -> FormState:
        """Fetch the ticket once the ticket field loses focus."""
        if not state.ticket_id:
            return state
        return self._fetch_ticket(state, state.ticket_id)

    def _fetch_ticket(self, state: FormState, ticket_id: str) -> FormState:
        try:
            tracker = self.tracker_factory()
        except TrackerError as e:
            return replace(
                state,
                ticket_id=ticket_id,
                ticket_description=f"Error fetching Jira ticket: {e}",
            )

        try:
            ticket: Ticket | None = tracker.get_ticket(ticket_id)
        finally:
            tracker.close()

        description = (
            ticket.markdown_description if ticket else f"Could not find Jira ticket: {ticket_id}"
        )
        return replace(state, ticket_id=ticket_id, ticket_description=description)

    def validate(self, state: FormState) -> FormState:
        """Diff the selected branches and check them against the ticket."""
        if not state.project_path or not state.working_branch or not state.target_branch:
            return replace(state, validation_result=SELECT_PROJECT_AND_BRANCHES)
        if not state.ticket_description:
            return replace(state, validation_result=NO_TICKET_DESCRIPTION)

        diff = self.vcs.diff(state.project_path, state.target_branch, state.working_branch)
        if not diff:
            return replace(state, validation_result=NO_DIFFERENCES)

        result = self.validator.validate(state.ticket_description, diff, state.additional_info)
        return replace(state, validation_result=result)
