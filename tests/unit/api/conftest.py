"""Fixtures for API route tests."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from acvalidator.api import create_app
from acvalidator.api.dependencies import get_git_adapter, get_tracker_factory, get_validator
from acvalidator.config import Settings
from acvalidator.matching import DiffValidator
from acvalidator.tracker import JiraClient
from acvalidator.vcs import GitAdapter


@pytest.fixture
def vcs() -> MagicMock:
    """Mock GitAdapter."""
    mock = MagicMock(spec=GitAdapter)
    mock.list_branches.return_value = ["develop", "feature/PROJ-7-greeting"]
    mock.current_branch.return_value = "feature/PROJ-7-greeting"
    mock.default_branch.return_value = "develop"
    mock.diff.return_value = "diff --git a/app.py b/app.py\n"
    mock.project_name.side_effect = GitAdapter.project_name
    return mock


@pytest.fixture
def jira() -> MagicMock:
    """Mock JiraClient."""
    return MagicMock(spec=JiraClient)


@pytest.fixture
def validator() -> MagicMock:
    """Mock DiffValidator."""
    mock = MagicMock(spec=DiffValidator)
    mock.validate.return_value = "- [x] Greets by name"
    return mock


@pytest.fixture
def app(settings: Settings, vcs: MagicMock, jira: MagicMock, validator: MagicMock) -> FastAPI:
    """Create the app with adapters replaced by mocks."""
    app = create_app(settings)

    def override_get_validator():
        yield validator

    app.dependency_overrides[get_git_adapter] = lambda: vcs
    app.dependency_overrides[get_tracker_factory] = lambda: lambda: jira
    app.dependency_overrides[get_validator] = override_get_validator

    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
