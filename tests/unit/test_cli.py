"""Unit tests for the ac-validator CLI."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from acvalidator import __version__
from acvalidator.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep log files out of the working tree and drop handlers afterwards."""
    monkeypatch.setenv("ACVALIDATOR_LOG_DIR", str(tmp_path / "logs"))
    yield
    logger = logging.getLogger("acvalidator")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
class TestServe:
    """Tests for the serve command."""

    def test_runs_uvicorn(self, runner: CliRunner, tmp_path: Path) -> None:
        """The app is served on the requested interface."""
        with patch("acvalidator.cli.uvicorn.run") as mock_run:
            result = runner.invoke(
                main,
                ["serve", "--port", "8080", "--env-file", str(tmp_path / "absent.env")],
            )

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 8080
        assert mock_run.call_args.kwargs["log_level"] == "info"

    def test_loads_env_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """An existing env file is loaded before settings are read."""
        env_file = tmp_path / ".env"
        env_file.write_text("JIRA_DOMAIN=example.atlassian.net\n")

        with (
            patch("acvalidator.cli.uvicorn.run"),
            patch("acvalidator.cli.load_dotenv") as mock_load,
        ):
            result = runner.invoke(main, ["serve", "--env-file", str(env_file)])

        assert result.exit_code == 0, result.output
        mock_load.assert_called_once_with(env_file)

    def test_bad_setting_exits(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Malformed settings are reported and nothing is served."""
        monkeypatch.setenv("ACVALIDATOR_MAX_TOKENS", "lots")

        with patch("acvalidator.cli.uvicorn.run") as mock_run:
            result = runner.invoke(
                main, ["serve", "--env-file", str(tmp_path / "absent.env")]
            )

        assert result.exit_code == 1
        assert "ACVALIDATOR_MAX_TOKENS" in result.output
        mock_run.assert_not_called()


@pytest.mark.unit
def test_version(runner: CliRunner) -> None:
    """--version prints the package version."""
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
