"""Git endpoint: branches, default branch, diff and project name."""

from fastapi import APIRouter

from acvalidator.api.dependencies import GitAdapterDep
from acvalidator.api.exceptions import InvalidActionError
from acvalidator.api.models import APIResponse, GitActionRequest

router = APIRouter(tags=["git"])

BranchData = list[str] | str | None


@router.post("/git", response_model=APIResponse[BranchData])
def git_action(request: GitActionRequest, vcs: GitAdapterDep) -> APIResponse[BranchData]:
    """Run one git action against a project directory."""
    path = request.project_path

    if request.action == "getBranches":
        return APIResponse(data=vcs.list_branches(path) if path else [])

    if request.action == "getCurrentBranch":
        return APIResponse(data=vcs.current_branch(path) if path else None)

    if request.action == "getDefaultBranch":
        return APIResponse(data=vcs.default_branch(path) if path else None)

    if request.action == "getDiff":
        if not path:
            return APIResponse(data=None)
        from_branch = request.from_branch or vcs.default_branch(path)
        to_branch = request.to_branch or vcs.current_branch(path)
        if not from_branch or not to_branch:
            return APIResponse(data=None)
        return APIResponse(
            data=vcs.diff(path, from_branch, to_branch, request.exclude_patterns)
        )

    if request.action == "getProjectName":
        return APIResponse(data=vcs.project_name(path))

    raise InvalidActionError(request.action)
