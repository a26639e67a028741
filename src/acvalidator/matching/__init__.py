"""Matching Delegate - Checks a diff against acceptance criteria with a hosted model."""

from acvalidator.matching.prompts import SYSTEM_PROMPT, build_messages, build_user_prompt
from acvalidator.matching.validator import ERROR_PREFIX, DiffValidator

__all__ = [
    "ERROR_PREFIX",
    "SYSTEM_PROMPT",
    "DiffValidator",
    "build_messages",
    "build_user_prompt",
]
