"""ac-validator - check a branch diff against a ticket's acceptance criteria."""

__version__ = "0.1.0"
