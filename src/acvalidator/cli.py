"""CLI entry point for ac-validator."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import uvicorn
from dotenv import load_dotenv

from acvalidator import __version__
from acvalidator.config import ConfigError, Settings
from acvalidator.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="ac-validator")
def main() -> None:
    """ac-validator - check a branch diff against a Jira ticket."""
    pass


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=3000, type=int, show_default=True, help="Port to listen on")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".env"),
    show_default=True,
    help="Environment file with tracker and model credentials",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def serve(host: str, port: int, env_file: Path, verbose: bool) -> None:
    """Serve the validation form."""
    from acvalidator.api import create_app  # noqa: PLC0415

    if env_file.exists():
        load_dotenv(env_file)

    setup_logging(level="DEBUG" if verbose else None)

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    uvicorn.run(create_app(settings), host=host, port=port, log_level="debug" if verbose else "info")


if __name__ == "__main__":
    main()
