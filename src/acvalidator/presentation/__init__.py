"""Presentation layer - Form handlers behind the single-page UI."""

from acvalidator.presentation.form import (
    NO_DIFFERENCES,
    NO_TICKET_DESCRIPTION,
    SELECT_PROJECT_AND_BRANCHES,
    ValidationForm,
)
from acvalidator.presentation.models import FormState

__all__ = [
    "NO_DIFFERENCES",
    "NO_TICKET_DESCRIPTION",
    "SELECT_PROJECT_AND_BRANCHES",
    "FormState",
    "ValidationForm",
]
