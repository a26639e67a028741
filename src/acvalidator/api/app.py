"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from acvalidator import __version__
from acvalidator.api.dependencies import close_settings, init_settings
from acvalidator.api.exceptions import InvalidActionError
from acvalidator.api.models import APIResponse
from acvalidator.api.routes import form, git, jira, llm, ui
from acvalidator.logging import get_logger
from acvalidator.tracker import TrackerConfigurationError, TrackerError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from acvalidator.config import Settings

logger = get_logger("api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = init_settings(getattr(app.state, "settings", None))
    if not settings.jira_configured:
        logger.warning("Jira credentials not configured; ticket lookups will be refused")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set; validation relies on the client's own lookup")
    yield
    close_settings()


def register_exception_handlers(app: FastAPI) -> None:
    """Map adapter and request errors to ``{"error": ...}`` responses."""

    @app.exception_handler(InvalidActionError)
    async def invalid_action_handler(_request: Request, exc: InvalidActionError) -> JSONResponse:
        logger.warning("Rejected request: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid action")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, f"Invalid request: {exc.errors()}")

    @app.exception_handler(TrackerConfigurationError)
    async def tracker_config_handler(
        _request: Request, exc: TrackerConfigurationError
    ) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(_request: Request, exc: TrackerError) -> JSONResponse:
        logger.error("Tracker error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; read from the environment at startup if None.
    """
    app = FastAPI(
        title="ac-validator",
        description="Check a branch diff against a Jira ticket's acceptance criteria",
        version=__version__,
        lifespan=lifespan,
    )

    # Read by the lifespan manager
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(git.router, prefix="/api")
    app.include_router(jira.router, prefix="/api")
    app.include_router(llm.router, prefix="/api")
    app.include_router(form.router, prefix="/api")
    app.include_router(ui.router)

    return app


# Default app instance
app = create_app()
