"""Custom exceptions for the JSON API."""


class InvalidActionError(Exception):
    """Request named an action the endpoint does not offer."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Invalid action: {action}")
        self.action = action
