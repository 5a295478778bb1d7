"""Exception handlers producing ``{"error": ...}`` responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from video_studio.utils.errors import ScriptGenerationError, VideoStudioError

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(loc)
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(messages) or "Invalid request"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as client errors."""
    return JSONResponse(
        status_code=400,
        content={"error": _describe_validation_errors(exc)},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def video_studio_exception_handler(
    request: Request, exc: VideoStudioError
) -> JSONResponse:
    """Handle application-specific errors that reached the HTTP boundary."""
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    message = str(exc) if isinstance(exc, ScriptGenerationError) else "Internal server error"
    return JSONResponse(status_code=500, content={"error": message})


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(VideoStudioError, video_studio_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
