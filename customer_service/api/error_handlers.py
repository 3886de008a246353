# This file defines consistent API error payloads and exception handlers.
# Every endpoint returns the same error shape with request trace fields.
# Domain errors keep their own status codes; unexpected failures become a generic 500 body.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError as FastAPIRequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from customer_service.customers.errors import CustomerServiceError
from customer_service.customers.models import CUSTOMER_TABLE, EMAIL_UNIQUE_CONSTRAINT

LOGGER = logging.getLogger("api")

# Postgres names the constraint; SQLite names the column.
EMAIL_CONFLICT_MARKERS = (EMAIL_UNIQUE_CONSTRAINT, f"{CUSTOMER_TABLE}.email")


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def is_email_conflict(exc: IntegrityError) -> bool:
    """True when the violated constraint is the customer email uniqueness one."""

    detail = str(exc.orig)
    return any(marker in detail for marker in EMAIL_CONFLICT_MARKERS)


def _internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=_error_body(
            request=request,
            error_code="INTERNAL_SERVER_ERROR",
            message="The server encountered an unexpected error.",
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(CustomerServiceError)
    async def customer_error_handler(request: Request, exc: CustomerServiceError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
            ),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        if not is_email_conflict(exc):
            return _internal_error_response(request, exc)

        # Unique-constraint backstop for writes racing past the email check.
        LOGGER.warning("email conflict on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=409,
            content=_error_body(
                request=request,
                error_code="DUPLICATE_RESOURCE",
                message="email already taken",
            ),
        )

    @app.exception_handler(FastAPIRequestValidationError)
    async def validation_error_handler(
        request: Request, exc: FastAPIRequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message="Invalid request parameters.",
                details=_jsonable_errors(exc.errors()),
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="HTTP_ERROR",
                message=str(exc.detail),
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return _internal_error_response(request, exc)


def _jsonable_errors(errors: Any) -> list[dict[str, Any]]:
    # pydantic puts the raw exception under ctx["error"] for custom validators.
    cleaned: list[dict[str, Any]] = []
    for error in errors:
        item = dict(error)
        if "ctx" in item:
            item["ctx"] = {key: str(value) for key, value in item["ctx"].items()}
        cleaned.append(item)
    return cleaned
