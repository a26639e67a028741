"""Model endpoint: check a diff against a ticket description."""

from fastapi import APIRouter

from acvalidator.api.dependencies import DiffValidatorDep
from acvalidator.api.exceptions import InvalidActionError
from acvalidator.api.models import APIResponse, LLMActionRequest

router = APIRouter(tags=["llm"])


@router.post("/llm", response_model=APIResponse[str])
def llm_action(request: LLMActionRequest, validator: DiffValidatorDep) -> APIResponse[str]:
    """Return the model's markdown verdict (or an error description)."""
    if request.action != "validateDiffAgainstTicket":
        raise InvalidActionError(request.action)

    result = validator.validate(
        request.ticket_description,
        request.git_diff,
        request.additional_info,
    )
    return APIResponse(data=result)
