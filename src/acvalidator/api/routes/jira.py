"""Jira endpoint: fetch a ticket."""

from fastapi import APIRouter

from acvalidator.api.dependencies import TrackerFactoryDep
from acvalidator.api.exceptions import InvalidActionError
from acvalidator.api.models import (
    APIResponse,
    JiraActionRequest,
    TicketResponse,
    ticket_to_response,
)

router = APIRouter(tags=["jira"])


@router.post("/jira", response_model=APIResponse[TicketResponse])
def jira_action(
    request: JiraActionRequest, tracker_factory: TrackerFactoryDep
) -> APIResponse[TicketResponse]:
    """Run one tracker action. Unknown tickets come back as null data."""
    if request.action != "getTicket":
        raise InvalidActionError(request.action)

    if not request.ticket_id:
        return APIResponse(data=None)

    jira = tracker_factory()
    try:
        ticket = jira.get_ticket(request.ticket_id)
    finally:
        jira.close()
    return APIResponse(data=ticket_to_response(ticket) if ticket else None)
