"""Mapping of domain and infrastructure errors to HTTP responses.

Every error body has the shape ``{"error": message}``. Blocked accounts add
``type`` and ``reason``; non-production environments add ``stack``.
"""

import re
import traceback

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from folio.config import Settings
from folio.domain.error import (
    AccountStateError,
    AuthenticationError,
    BusinessRuleViolationError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from folio.util.jwt import JWTError

# Matches the DETAIL line of a PostgreSQL unique violation
DUPLICATE_KEY = re.compile(r"Key \((\w+)\)=\((.*?)\) already exists")

STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (ValueError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def error_body(message: str, exc: Exception, settings: Settings, **extra) -> dict:
    body = {"error": message, **extra}
    if settings.exposes_stack_traces:
        body["stack"] = "".join(traceback.format_exception(exc))
    return body


def duplicate_key_message(exc: IntegrityError) -> str:
    """Readable message for a unique violation.

    Falls back to a generic message when the driver text has no key detail.
    """
    match = DUPLICATE_KEY.search(str(exc.orig) if exc.orig else str(exc))
    if not match:
        match = DUPLICATE_KEY.search(str(exc))
    if match:
        field, value = match.groups()
        return f"The {field} '{value}' already exists"
    return "This record already exists"


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the central exception handlers on ``app``.

    Args:
        app: FastAPI application
        settings: Decides whether stack traces are exposed
    """

    def simple_handler(status_code: int):
        async def handler(request: Request, exc: Exception) -> JSONResponse:
            if status_code >= status.HTTP_403_FORBIDDEN:
                logfire.info(
                    "Request rejected",
                    path=request.url.path,
                    status=status_code,
                    error=str(exc),
                )
            return JSONResponse(
                status_code=status_code, content=error_body(str(exc), exc, settings)
            )

        return handler

    for error_type, status_code in STATUS_BY_ERROR:
        app.add_exception_handler(error_type, simple_handler(status_code))

    @app.exception_handler(AccountStateError)
    async def account_state_handler(
        request: Request, exc: AccountStateError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=error_body(
                str(exc), exc, settings, type=exc.state.value, reason=exc.reason
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            f"{'.'.join(str(part) for part in error['loc'][1:])}: {error['msg']}"
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("; ".join(details) or "Invalid request", exc, settings),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        message = duplicate_key_message(exc)
        logfire.warn("Integrity error", path=request.url.path, error=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(message, exc, settings),
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            _exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error", exc, settings),
        )
