"""Build canonical success and error response envelopes.

Envelopes are plain dictionaries tagged by a literal ``success`` field so they
can be handed straight to any JSON response class::

    envelope = build_success(data={"id": 1}, status_code=201)
    return JSONResponse(status_code=envelope["status_code"], content=envelope)
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from datetime import datetime
from datetime import timezone
from typing import Any
import math

from http_response_kit.constants.status_codes import HttpRedirectCode
from http_response_kit.constants.status_codes import HttpSuccessCode
from http_response_kit.constants.status_codes import NO_BODY_CODES
from http_response_kit.constants.success_definitions import get_success_definition
from http_response_kit.core.config import get_response_transformer
from http_response_kit.core.config import is_development_mode
from http_response_kit.core.config import should_include_timestamp
from http_response_kit.core.errors import DEFAULT_FALLBACK_CODE
from http_response_kit.core.errors import HttpError
from http_response_kit.schemas.envelope import ErrorObject
from http_response_kit.schemas.envelope import PaginationInput
from http_response_kit.schemas.envelope import PaginationMeta

Envelope = dict[str, Any]

PROTECTED_FIELDS = frozenset({"success", "status_code", "error", "timestamp", "metadata", "retry_after"})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp() -> str:
    return _utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _finalize(envelope: Envelope) -> Envelope:
    transformer = get_response_transformer()
    if transformer is not None:
        return transformer(envelope)
    return envelope


def build_success(
    data: Any = None,
    message: str | None = None,
    status_code: int = HttpSuccessCode.OK,
    metadata: Mapping[str, Any] | None = None,
) -> Envelope:
    """Format a success envelope.

    ``data`` is dropped for 204, 205 and 304 even when supplied. ``message``
    and ``metadata`` appear only when non-empty.
    """
    definition = get_success_definition(status_code)

    envelope: Envelope = {
        "success": True,
        "status_code": int(definition.code),
    }
    if should_include_timestamp():
        envelope["timestamp"] = _timestamp()

    if definition.code not in NO_BODY_CODES and data is not None:
        envelope["data"] = data

    if message:
        envelope["message"] = message

    if metadata:
        envelope["metadata"] = dict(metadata)

    return _finalize(envelope)


def build_error(
    error: HttpError,
    *,
    include_stack: bool | None = None,
    additional_fields: Mapping[str, Any] | None = None,
) -> Envelope:
    """Format an error envelope for ``error``.

    ``include_stack`` overrides the development-mode default. Keys of
    ``additional_fields`` that collide with envelope fields are ignored.
    """
    if include_stack is None:
        include_stack = is_development_mode()

    error_object = ErrorObject(
        type=error.type,
        title=error.title,
        message=error.message,
        details=error.details,
        stack=error.stack if include_stack else None,
    )

    envelope: Envelope = {
        "success": False,
        "status_code": error.code,
        "error": error_object.model_dump(exclude_none=True),
    }
    if should_include_timestamp():
        envelope["timestamp"] = _timestamp()

    if error.retry_after is not None:
        envelope["retry_after"] = error.retry_after

    if error.metadata is not None:
        envelope["metadata"] = dict(error.metadata)

    if additional_fields:
        envelope.update({key: value for key, value in additional_fields.items() if key not in PROTECTED_FIELDS})

    return _finalize(envelope)


def build_from_error(
    value: Any,
    *,
    include_stack: bool | None = None,
    additional_fields: Mapping[str, Any] | None = None,
    fallback_code: int | None = None,
) -> Envelope:
    """Convert any caught value to an ``HttpError`` and format it."""
    error = HttpError.from_error(value, fallback_code if fallback_code is not None else DEFAULT_FALLBACK_CODE)
    return build_error(error, include_stack=include_stack, additional_fields=additional_fields)


def build_paginated(
    items: Sequence[Any],
    pagination: PaginationInput | Mapping[str, Any],
    message: str | None = None,
) -> Envelope:
    """Format a success envelope carrying one page of ``items``.

    A non-positive ``limit`` is clamped to 1 and the clamped value is echoed.
    """
    params = PaginationInput.model_validate(pagination)

    limit = params.limit if params.limit > 0 else 1
    total_pages = params.total_pages if params.total_pages is not None else math.ceil(params.total / limit)

    meta = PaginationMeta(
        page=params.page,
        limit=limit,
        total=params.total,
        total_pages=total_pages,
        has_next=params.page < total_pages,
        has_prev=params.page > 1,
    )
    return build_success(
        data=list(items),
        message=message,
        metadata={"pagination": meta.model_dump()},
    )


def ok(data: Any = None, message: str | None = None) -> Envelope:
    return build_success(data=data, message=message, status_code=HttpSuccessCode.OK)


def created(data: Any = None, message: str | None = None) -> Envelope:
    return build_success(data=data, message=message, status_code=HttpSuccessCode.CREATED)


def accepted(data: Any = None, message: str | None = None) -> Envelope:
    return build_success(data=data, message=message, status_code=HttpSuccessCode.ACCEPTED)


def no_content() -> Envelope:
    return build_success(status_code=HttpSuccessCode.NO_CONTENT)


def partial_content(data: Any = None, message: str | None = None) -> Envelope:
    return build_success(data=data, message=message, status_code=HttpSuccessCode.PARTIAL_CONTENT)


def not_modified() -> Envelope:
    return build_success(status_code=HttpRedirectCode.NOT_MODIFIED)


def is_success_response(envelope: Any) -> bool:
    return isinstance(envelope, Mapping) and envelope.get("success") is True


def is_error_response(envelope: Any) -> bool:
    return isinstance(envelope, Mapping) and envelope.get("success") is False
