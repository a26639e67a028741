"""Shared pytest fixtures and configuration."""

import shutil
import subprocess
from pathlib import Path

import pytest

from acvalidator.config import Settings


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests against a real git repository")


# Shared fixtures


@pytest.fixture
def settings() -> Settings:
    """Fully configured settings with fake credentials."""
    return Settings(
        openai_api_key="sk-test-key",
        jira_domain="example.atlassian.net",
        jira_email="dev@example.com",
        jira_api_token="jira-token",
    )


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A repository with `main` and a `feature/PROJ-7-add-greeting` branch.

    The feature branch changes a Python file, a JSON file and a snapshot.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "sample-project"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "checkout", "-q", "-b", "main")

    (repo / "app.py").write_text("def greet():\n    return 'hi'\n")
    (repo / "package.json").write_text('{"name": "sample"}\n')
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "Initial commit")

    _git(repo, "checkout", "-q", "-b", "feature/PROJ-7-add-greeting")
    (repo / "app.py").write_text("def greet(name):\n    return f'hello {name}'\n")
    (repo / "package.json").write_text('{"name": "sample", "version": "2"}\n')
    (repo / "ui.snap").write_text("snapshot\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "PROJ-7 add greeting")

    return repo
