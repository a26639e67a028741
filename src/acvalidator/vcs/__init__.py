"""VCS Adapter - Reads branches and diffs from local git repositories."""

from acvalidator.vcs.adapter import (
    DEFAULT_BRANCH_CANDIDATES,
    DEFAULT_EXCLUDE_PATTERNS,
    GitAdapter,
)
from acvalidator.vcs.exceptions import InvalidRefError

__all__ = [
    "DEFAULT_BRANCH_CANDIDATES",
    "DEFAULT_EXCLUDE_PATTERNS",
    "GitAdapter",
    "InvalidRefError",
]
