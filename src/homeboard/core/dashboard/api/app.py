"""
FastAPI application setup for the homeboard dashboard.

Creates the FastAPI app instance and registers routes.
"""

import logging
import traceback
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jinja2 import TemplateError
from pydantic import BaseModel, ValidationError

from homeboard import __version__
from homeboard.core.dashboard.api.routes import anki, goodreads, page

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for API responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    TEMPLATE_ERROR = "TEMPLATE_ERROR"


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error_code: ErrorCode
    message: str
    detail: str | None = None
    request_id: str | None = None


app = FastAPI(
    title="Homeboard API",
    description="Personal dashboard: music-idea calendar, reading and Anki widgets",
    version=__version__,
)

# Static builds served from another origin (site.api_base) fetch the widgets
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Register routes
app.include_router(page.router, tags=["page"])
app.include_router(goodreads.router, prefix="/api", tags=["reading"])
app.include_router(anki.router, prefix="/api", tags=["anki"])


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all uncaught exceptions.

    Logs the full exception with traceback, but returns a clean error
    response to the client.
    """
    logger.error(
        "Unhandled exception on %s %s: %s\n%s",
        request.method,
        request.url.path,
        str(exc),
        traceback.format_exc(),
        extra={"request_id": id(request)},
    )

    error_code = ErrorCode.INTERNAL_ERROR
    error_message = "An internal server error occurred"

    # ValidationError from a broken homeboard.json surfaces here
    if isinstance(exc, ValidationError):
        error_code = ErrorCode.CONFIG_ERROR
        error_message = "Configuration is invalid"
    elif isinstance(exc, TemplateError):
        error_code = ErrorCode.TEMPLATE_ERROR
        error_message = "Page template failed to render"

    body = ErrorResponse(
        error_code=error_code,
        message=error_message,
        detail=str(exc),
        request_id=str(id(request)),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(mode="json"),
    )
