"""Canonical definitions for non-error HTTP status codes (2xx, 3xx, 1xx)."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class SuccessDefinition:
    """Static metadata describing one non-error HTTP status code."""

    code: int
    description: str


def _build_table(entries: Iterable[SuccessDefinition]) -> Mapping[int, SuccessDefinition]:
    table: dict[int, SuccessDefinition] = {}
    for entry in entries:
        if entry.code in table:
            raise ValueError(f"Duplicate success definition for status code {entry.code}")
        table[entry.code] = entry
    return MappingProxyType(table)


HTTP_SUCCESS_DEFINITIONS: Mapping[int, SuccessDefinition] = _build_table(
    (
        SuccessDefinition(200, "The request has succeeded."),
        SuccessDefinition(201, "The request has been fulfilled and resulted in a new resource being created."),
        SuccessDefinition(
            202,
            "The request has been accepted for processing, but the processing has not been completed.",
        ),
        SuccessDefinition(203, "The returned meta-information is from a local or third-party copy."),
        SuccessDefinition(204, "The server successfully processed the request and is not returning any content."),
        SuccessDefinition(
            205,
            "The server successfully processed the request and requires the requester to reset the document view.",
        ),
        SuccessDefinition(
            206,
            "The server is delivering only part of the resource due to a range header sent by the client.",
        ),
        SuccessDefinition(207, "The message body contains multiple status codes for multiple independent operations."),
        SuccessDefinition(
            208,
            "The members of a DAV binding have already been enumerated in a preceding part of the response.",
        ),
        SuccessDefinition(
            226,
            "The server has fulfilled a GET request and the response is a representation of the result "
            "of one or more instance-manipulations.",
        ),
    )
)

HTTP_REDIRECT_DEFINITIONS: Mapping[int, SuccessDefinition] = _build_table(
    (
        SuccessDefinition(300, "The request has more than one possible response."),
        SuccessDefinition(301, "The URL of the requested resource has been changed permanently."),
        SuccessDefinition(302, "The URI of the requested resource has been changed temporarily."),
        SuccessDefinition(303, "The response can be found under another URI using the GET method."),
        SuccessDefinition(
            304,
            "The resource has not been modified since the version specified by the request headers.",
        ),
        SuccessDefinition(305, "The requested resource must be accessed through the proxy."),
        SuccessDefinition(
            307,
            "The request should be repeated with another URI but future requests should use the original URI.",
        ),
        SuccessDefinition(308, "The request and all future requests should be repeated using another URI."),
    )
)

HTTP_INFO_DEFINITIONS: Mapping[int, SuccessDefinition] = _build_table(
    (
        SuccessDefinition(
            100,
            "The initial part of a request has been received and has not yet been rejected by the server.",
        ),
        SuccessDefinition(101, "The server is switching protocols as requested by the client."),
        SuccessDefinition(
            102,
            "The server has received and is processing the request, but no response is available yet.",
        ),
        SuccessDefinition(103, "The server is sending some response headers before the final response."),
    )
)

_LOOKUP_ORDER = (HTTP_SUCCESS_DEFINITIONS, HTTP_REDIRECT_DEFINITIONS, HTTP_INFO_DEFINITIONS)


def get_success_definition(code: int) -> SuccessDefinition:
    """Return the definition for ``code``; unmapped codes keep their value."""
    for table in _LOOKUP_ORDER:
        definition = table.get(code)
        if definition is not None:
            return definition
    return SuccessDefinition(
        code=code,
        description="The request was processed with a non-standard status code.",
    )


resolve_success_definition = get_success_definition
