"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Callable, Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from acvalidator.config import Settings
from acvalidator.matching import DiffValidator
from acvalidator.presentation import ValidationForm
from acvalidator.tracker import JiraClient
from acvalidator.vcs import GitAdapter

# Global Settings instance (initialized on app startup)
_settings: Settings | None = None


def init_settings(settings: Settings | None = None) -> Settings:
    """Initialize the global Settings, reading the environment if none given."""
    global _settings  # noqa: PLW0603
    _settings = settings if settings is not None else Settings.from_env()
    return _settings


def close_settings() -> None:
    """Forget the global Settings."""
    global _settings  # noqa: PLW0603
    _settings = None


def get_settings() -> Settings:
    """Dependency that provides the Settings instance."""
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call init_settings() first.")
    return _settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_git_adapter(settings: SettingsDep) -> GitAdapter:
    """Dependency that provides a GitAdapter."""
    return GitAdapter(timeout=settings.git_timeout)


GitAdapterDep = Annotated[GitAdapter, Depends(get_git_adapter)]


def get_tracker_factory(settings: SettingsDep) -> Callable[[], JiraClient]:
    """Dependency that provides a JiraClient builder.

    Nothing is built until a ticket is fetched. The builder raises
    TrackerConfigurationError when credentials are missing.
    """
    return lambda: JiraClient.from_settings(settings)


TrackerFactoryDep = Annotated[Callable[[], JiraClient], Depends(get_tracker_factory)]


def get_validator(settings: SettingsDep) -> Generator[DiffValidator, None, None]:
    """Dependency that provides a DiffValidator for one request."""
    validator = DiffValidator.from_settings(settings)
    try:
        yield validator
    finally:
        validator.close()


DiffValidatorDep = Annotated[DiffValidator, Depends(get_validator)]


def get_form(
    vcs: GitAdapterDep, tracker_factory: TrackerFactoryDep, validator: DiffValidatorDep
) -> ValidationForm:
    """Dependency that provides the form handlers."""
    return ValidationForm(vcs=vcs, tracker_factory=tracker_factory, validator=validator)


ValidationFormDep = Annotated[ValidationForm, Depends(get_form)]
