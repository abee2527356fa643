"""
Exception handlers rendering every error in one envelope:

    {"error": {"message": <str or list[str]>, "status": <int>}}

- JoblyError subclasses -> their own status and message
- Request validation failures -> 400 with one message per problem
- Starlette HTTP errors (unknown route, bad method) -> their status
- Anything else -> 500, logged with traceback
"""

import logging
from typing import Any
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.errors import JoblyError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: Any) -> JSONResponse:
    """Build the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def _validation_messages(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors into "location.field: message" strings."""
    messages = []
    for err in exc.errors():
        # loc is e.g. ("body", "numEmployees") or ("query", "minSalary")
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return messages


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = _validation_messages(exc)
    logger.info(f"{request.method} {request.url.path} -> 400 {messages}")
    return error_response(status.HTTP_400_BAD_REQUEST, messages)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
