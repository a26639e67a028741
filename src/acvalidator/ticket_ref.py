"""Infer a ticket key from a branch name.

Grammar::

    branch := (prefix "/")* key "-" number rest
    prefix := [A-Za-z0-9_]+
    key    := one or more characters other than "-"
    number := [0-9]+
    rest   := anything

The longest run of prefixes is tried first, so ``feature/PROJ-123-add-button``
yields ``PROJ-123``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX_RE = re.compile(r"[A-Za-z0-9_]+")
_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class TicketRef:
    """A ticket key split into project key and number."""

    project_key: str
    number: str

    def __str__(self) -> str:
        return f"{self.project_key}-{self.number}"


def _leading_prefixes(segments: list[str]) -> int:
    """Count leading segments that can act as a ``prefix/``; the last never can."""
    count = 0
    for segment in segments[:-1]:
        if not _PREFIX_RE.fullmatch(segment):
            break
        count += 1
    return count


def _match_key(remainder: str) -> TicketRef | None:
    key, sep, rest = remainder.partition("-")
    if not key or not sep:
        return None
    number = _NUMBER_RE.match(rest)
    if number is None:
        return None
    return TicketRef(project_key=key, number=number.group(0))


def parse_branch_name(branch: str | None) -> TicketRef | None:
    """Parse a branch name into a ticket reference.

    Args:
        branch: Branch name, e.g. "feature/PROJ-123-add-button"

    Returns:
        TicketRef, or None if the branch does not name a ticket
    """
    if not branch:
        return None
    segments = branch.split("/")
    for prefixes in range(_leading_prefixes(segments), -1, -1):
        ref = _match_key("/".join(segments[prefixes:]))
        if ref is not None:
            return ref
    return None


def infer_ticket_id(branch: str | None) -> str | None:
    """Ticket key named by a branch, e.g. "PROJ-123", or None."""
    ref = parse_branch_name(branch)
    return str(ref) if ref else None
