"""Maps exceptions to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        errors.setdefault(field, []).append(error["msg"])
    return JSONResponse(status_code=400, content={"error": errors})


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    """Protean domain errors, request body errors, and a logged catch-all."""
    register_exception_handlers(app)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unhandled_error)
