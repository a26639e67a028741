"""Form endpoint: one user action on the page, old state in, new state out."""

from fastapi import APIRouter

from acvalidator.api.dependencies import ValidationFormDep
from acvalidator.api.exceptions import InvalidActionError
from acvalidator.api.models import (
    APIResponse,
    FormActionRequest,
    FormStateModel,
    form_state_to_response,
)
from acvalidator.presentation import FormState

router = APIRouter(tags=["form"])


@router.post("/form", response_model=APIResponse[FormStateModel])
def form_action(request: FormActionRequest, form: ValidationFormDep) -> APIResponse[FormStateModel]:
    """Apply a form action and return the updated state."""
    state = FormState(**request.state.model_dump())
    value = request.value or ""

    if request.action == "selectProject":
        new_state = form.select_project(state, value)
    elif request.action == "setWorkingBranch":
        new_state = form.set_working_branch(state, value)
    elif request.action == "setTargetBranch":
        new_state = form.set_target_branch(state, value)
    elif request.action == "changeTicketId":
        new_state = form.change_ticket_id(state, value)
    elif request.action == "lookupTicket":
        new_state = form.lookup_ticket(state)
    elif request.action == "validate":
        new_state = form.validate(state)
    elif request.action == "reset":
        new_state = form.reset()
    else:
        raise InvalidActionError(request.action)

    return APIResponse(data=form_state_to_response(new_state))
