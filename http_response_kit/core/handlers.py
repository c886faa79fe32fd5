"""FastAPI exception handlers that answer with the canonical error envelope."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from http_response_kit.constants.status_codes import HttpClientErrorCode
from http_response_kit.constants.status_codes import MAX_ERROR_CODE
from http_response_kit.constants.status_codes import MIN_ERROR_CODE
from http_response_kit.core.errors import HttpError
from http_response_kit.responses.formatter import build_error

logger = logging.getLogger(__name__)


def _error_response(error: HttpError, headers: Mapping[str, str] | None = None) -> JSONResponse:
    response_headers = dict(headers) if headers else {}
    if error.retry_after is not None:
        response_headers["Retry-After"] = str(error.retry_after)
    return JSONResponse(status_code=error.code, content=build_error(error), headers=response_headers or None)


_LOCATION_SOURCES = frozenset({"body", "query", "path", "header", "cookie"})


def _validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Describe each validation problem, keeping the raw ``loc`` path."""
    details: list[dict[str, Any]] = []
    for issue in exc.errors():
        loc = list(issue.get("loc") or ())
        source = loc[0] if loc and loc[0] in _LOCATION_SOURCES else None
        path = ".".join(str(part) for part in loc if part not in _LOCATION_SOURCES)
        details.append(
            {
                "loc": loc,
                "field": path or source or "request",
                "issue": str(issue.get("msg", "Invalid value")),
                "kind": str(issue.get("type", "value_error")),
            }
        )
    return details


def _http_exception_error(exc: StarletteHTTPException) -> HttpError:
    code = exc.status_code
    if not MIN_ERROR_CODE <= code <= MAX_ERROR_CODE:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR

    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("message")
        metadata = detail.get("metadata")
        return HttpError(
            code,
            message=str(message) if message else None,
            metadata=metadata if isinstance(metadata, dict) else None,
        )

    message = str(detail) if isinstance(detail, str) and detail else None
    return HttpError(code, message=message)


async def http_error_handler(_: Request, exc: HttpError) -> JSONResponse:
    """Render raised ``HttpError`` instances as error envelopes."""

    if exc.is_server_error():
        logger.error("HTTP %d %s: %s", exc.code, exc.type, exc.message)
    else:
        logger.warning("HTTP %d %s: %s", exc.code, exc.type, exc.message)
    return _error_response(exc)


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to a 422 error envelope."""

    error = HttpError(
        HttpClientErrorCode.UNPROCESSABLE_ENTITY,
        message="Request validation failed",
        metadata={"errors": _validation_details(exc)},
    )
    return _error_response(error)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize Starlette/FastAPI HTTP exceptions to the error envelope."""

    return _error_response(_http_exception_error(exc), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    """Answer unexpected exceptions with a generic 500 envelope."""

    logger.exception("Unhandled exception: %s", type(exc).__name__)
    return _error_response(HttpError(status.HTTP_500_INTERNAL_SERVER_ERROR, cause=exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing error handlers to a FastAPI app."""

    app.add_exception_handler(HttpError, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
