"""Unit tests for ticket-id inference from branch names."""

import pytest

from acvalidator.ticket_ref import TicketRef, infer_ticket_id, parse_branch_name


@pytest.mark.unit
class TestParseBranchName:
    """Tests for parse_branch_name."""

    def test_prefixed_branch(self) -> None:
        """Prefix and trailing description are ignored."""
        ref = parse_branch_name("feature/PROJ-123-add-button")

        assert ref == TicketRef(project_key="PROJ", number="123")
        assert str(ref) == "PROJ-123"

    def test_bare_ticket_branch(self) -> None:
        """Branch that is just a ticket key."""
        assert infer_ticket_id("PROJ-42") == "PROJ-42"

    def test_multiple_prefixes(self) -> None:
        """Several prefix segments are allowed."""
        assert infer_ticket_id("users/alice/ABC-7_fix") == "ABC-7"

    def test_number_stops_at_first_non_digit(self) -> None:
        """Only the leading digits form the number."""
        assert infer_ticket_id("bugfix/OPS-99abc") == "OPS-99"

    def test_no_ticket_in_branch(self) -> None:
        """Branches without a ticket key give nothing."""
        assert infer_ticket_id("hotfix") is None
        assert parse_branch_name("hotfix") is None

    def test_key_without_number(self) -> None:
        """A dash not followed by digits is not a ticket."""
        assert infer_ticket_id("feature/add-button") is None

    def test_hyphenated_prefix_is_not_a_prefix(self) -> None:
        """Prefix segments are word characters only."""
        assert infer_ticket_id("my-feature/PROJ-1") is None

    def test_empty_or_missing(self) -> None:
        """Empty branch names give nothing."""
        assert infer_ticket_id("") is None
        assert infer_ticket_id(None) is None
