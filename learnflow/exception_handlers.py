"""Exception handlers registered on the FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from learnflow.exceptions import LearnFlowError

logger = logging.getLogger(__name__)


async def learnflow_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as ``{"detail": message}`` with its status code."""
    assert isinstance(exc, LearnFlowError)
    if exc.status_code >= 500:  # noqa: PLR2004
        logger.error(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""
    app.add_exception_handler(LearnFlowError, learnflow_error_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
