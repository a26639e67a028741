"""Custom exceptions for the issue tracker adapter."""


class TrackerError(Exception):
    """Base exception for issue tracker errors."""


class TrackerConfigurationError(TrackerError):
    """Tracker domain, account email or API token is not configured."""
