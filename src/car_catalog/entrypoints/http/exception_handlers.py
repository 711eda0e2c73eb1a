"""Translate exceptions raised by routes into JSON error bodies.

Every body has the shape ``{"detail": str, "code": str, "errors"?: [...]}``
(see error_responses.py). Domain error context is logged, never returned.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_catalog.domain.errors import DomainError

logger = logging.getLogger(__name__)

HTTP_422 = 422  # HTTP_422_UNPROCESSABLE_CONTENT

# Unknown codes fall back to 400.
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "RECOMMENDATION_IN_PROGRESS": status.HTTP_409_CONFLICT,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "UPSTREAM_ERROR": status.HTTP_502_BAD_GATEWAY,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _request_fields(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def _error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors is not None:
        content["errors"] = errors

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError to its status code via STATUS_CODE_MAP.

    5xx outcomes (store or completion service down, internal errors) are
    logged at ERROR with the error context; client errors at INFO.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    fields = {"error_code": exc.error_code, "detail": exc.message, **_request_fields(request)}

    if status_code >= 500:
        logger.error("Domain error occurred", extra={**fields, "context": exc.context})
    else:
        logger.info("Client error", extra=fields)

    body = exc.to_dict()
    return _error_response(status_code, exc.message, exc.error_code, body.get("errors"))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Shape errors FastAPI raises before a route runs.

    Covers malformed query strings (``price_min=abc``, ``sort=cheapest``)
    and bodies with missing or mistyped fields. The ``body``/``query``
    prefix is dropped from each location so ``field`` is just the name.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_fields(request)},
    )

    return _error_response(HTTP_422, "Invalid request parameters", "VALIDATION_ERROR", errors)


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.info("Value error", extra={"detail": str(exc), **_request_fields(request)})

    return _error_response(HTTP_422, str(exc), "INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log with traceback and hide the details from the client."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, "detail": str(exc), **_request_fields(request)},
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered")
