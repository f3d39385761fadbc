"""
Global exception handlers.

- ``RequestValidationError`` (bad body, bad path id, bad query) → 400
  with one ``{"field", "message"}`` entry per problem.
- Anything else that escapes a route → 500 with a fixed message; the
  traceback goes to the log, never to the client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas import ErrorResponse, FieldError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _field_name(loc) -> str:
    # Drop the "body" / "query" / "path" prefix FastAPI puts on every location.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        FieldError(field=_field_name(err.get("loc", ())), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    logger.warning("Validation failed on %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(errors=errors).model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
