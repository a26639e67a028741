"""Custom exceptions for the VCS adapter."""


class InvalidRefError(ValueError):
    """Branch or ref name that git would read as an option."""
