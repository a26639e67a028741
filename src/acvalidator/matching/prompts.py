"""Prompt templates for checking a diff against a ticket's acceptance criteria."""

from __future__ import annotations

SYSTEM_PROMPT = (
    "You are supposed to validate and verify whether the provided git differences "
    "conform to the provided Jira ticket description.\n"
    "Do not send summaries back, only provide feedback on the diff whether there "
    "are any changes required.\n"
    "If no changes are required, just say that.\n"
    "Only note the AC points and whether they are conformed, by prefixed with "
    "checkboxes and the reasoning why it does or doesn't conform."
)

USER_PROMPT_INTRO = (
    "I have a Jira ticket below. Could you tell me whether the implementation "
    "conforms to the description, and if not, what needs to be changed?"
)


def fenced(label: str, body: str) -> str:
    """Wrap text in a labelled plaintext fence, leaving the body untouched."""
    return f"{label}:\n```plaintext\n{body}\n```"


def build_user_prompt(
    ticket_description: str,
    diff: str,
    additional_info: str | None = None,
) -> str:
    """Build the user message embedding ticket and diff verbatim.

    Args:
        ticket_description: Flattened ticket description.
        diff: Git diff text.
        additional_info: Optional notes not present in the ticket.

    Returns:
        The user prompt.
    """
    sections = [
        USER_PROMPT_INTRO,
        fenced("The ticket", ticket_description),
        fenced("The git diff", diff),
    ]
    if additional_info:
        sections.append(fenced("Additional information not present in the ticket", additional_info))
    return "\n\n".join(sections)


def build_messages(
    ticket_description: str,
    diff: str,
    additional_info: str | None = None,
) -> list[dict[str, str]]:
    """Build the system + user chat messages."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": build_user_prompt(ticket_description, diff, additional_info),
        },
    ]
