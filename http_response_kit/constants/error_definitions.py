"""Canonical definitions for HTTP error status codes (4xx and 5xx)."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from http_response_kit.constants.status_codes import MIN_SERVER_ERROR_CODE


@dataclass(frozen=True)
class ErrorDefinition:
    """Static metadata describing one HTTP error status code."""

    code: int
    type: str
    title: str
    details: str
    retry_after: int | None = None
    resolution: str | None = None


def _build_table(entries: Iterable[ErrorDefinition]) -> Mapping[int, ErrorDefinition]:
    table: dict[int, ErrorDefinition] = {}
    for entry in entries:
        if entry.code in table:
            raise ValueError(f"Duplicate error definition for status code {entry.code}")
        table[entry.code] = entry
    return MappingProxyType(table)


HTTP_ERROR_DEFINITIONS: Mapping[int, ErrorDefinition] = _build_table(
    (
        # 4xx client errors
        ErrorDefinition(
            code=400,
            type="bad_request",
            title="Bad Request",
            details="The request cannot be processed due to invalid syntax or missing parameters.",
        ),
        ErrorDefinition(
            code=401,
            type="unauthorized",
            title="Unauthorized",
            details="Authentication is required and has failed or not yet been provided.",
        ),
        ErrorDefinition(
            code=402,
            type="payment_required",
            title="Payment Required",
            details="Payment is required to access this resource.",
        ),
        ErrorDefinition(
            code=403,
            type="forbidden",
            title="Forbidden",
            details="The server understood the request but refuses to authorize it.",
        ),
        ErrorDefinition(
            code=404,
            type="not_found",
            title="Not Found",
            details="The requested resource could not be found.",
        ),
        ErrorDefinition(
            code=405,
            type="method_not_allowed",
            title="Method Not Allowed",
            details="The method specified in the request is not allowed for the resource.",
        ),
        ErrorDefinition(
            code=406,
            type="not_acceptable",
            title="Not Acceptable",
            details="The resource is not available in a format acceptable to the client.",
        ),
        ErrorDefinition(
            code=407,
            type="proxy_authentication_required",
            title="Proxy Authentication Required",
            details="Authentication with the proxy is required.",
        ),
        ErrorDefinition(
            code=408,
            type="request_timeout",
            title="Request Timeout",
            details="The server timed out waiting for the request.",
        ),
        ErrorDefinition(
            code=409,
            type="conflict",
            title="Conflict",
            details="The request conflicts with the current state of the resource.",
        ),
        ErrorDefinition(
            code=410,
            type="gone",
            title="Gone",
            details="The requested resource is no longer available and will not be available again.",
        ),
        ErrorDefinition(
            code=411,
            type="length_required",
            title="Length Required",
            details="The request did not specify the length of its content, which is required.",
        ),
        ErrorDefinition(
            code=412,
            type="precondition_failed",
            title="Precondition Failed",
            details="One or more conditions in the request header fields evaluated to false.",
        ),
        ErrorDefinition(
            code=413,
            type="payload_too_large",
            title="Payload Too Large",
            details="The request payload is larger than the server is willing to process.",
        ),
        ErrorDefinition(
            code=414,
            type="uri_too_long",
            title="URI Too Long",
            details="The URI provided was too long for the server to process.",
        ),
        ErrorDefinition(
            code=415,
            type="unsupported_media_type",
            title="Unsupported Media Type",
            details="The media format of the requested data is not supported by the server.",
        ),
        ErrorDefinition(
            code=416,
            type="range_not_satisfiable",
            title="Range Not Satisfiable",
            details="The range specified in the request header cannot be fulfilled.",
        ),
        ErrorDefinition(
            code=417,
            type="expectation_failed",
            title="Expectation Failed",
            details="The server cannot meet the requirements of the Expect request-header field.",
        ),
        ErrorDefinition(
            code=418,
            type="im_a_teapot",
            title="I'm a Teapot",
            details="The server refuses to brew coffee because it is, permanently, a teapot.",
        ),
        ErrorDefinition(
            code=421,
            type="misdirected_request",
            title="Misdirected Request",
            details="The request was directed at a server that is not able to produce a response.",
        ),
        ErrorDefinition(
            code=422,
            type="unprocessable_entity",
            title="Unprocessable Entity",
            details="The request was well-formed but was unable to be followed due to semantic errors.",
        ),
        ErrorDefinition(
            code=423,
            type="locked",
            title="Locked",
            details="The resource that is being accessed is locked.",
        ),
        ErrorDefinition(
            code=424,
            type="failed_dependency",
            title="Failed Dependency",
            details="The request failed because it depended on another request that failed.",
        ),
        ErrorDefinition(
            code=425,
            type="too_early",
            title="Too Early",
            details="The server is unwilling to risk processing a request that might be replayed.",
        ),
        ErrorDefinition(
            code=426,
            type="upgrade_required",
            title="Upgrade Required",
            details="The client should switch to a different protocol.",
        ),
        ErrorDefinition(
            code=428,
            type="precondition_required",
            title="Precondition Required",
            details="The origin server requires the request to be conditional.",
        ),
        ErrorDefinition(
            code=429,
            type="too_many_requests",
            title="Too Many Requests",
            details="The user has sent too many requests in a given amount of time.",
            retry_after=60,
        ),
        ErrorDefinition(
            code=431,
            type="request_header_fields_too_large",
            title="Request Header Fields Too Large",
            details="The server is unwilling to process the request because its header fields are too large.",
        ),
        ErrorDefinition(
            code=451,
            type="unavailable_for_legal_reasons",
            title="Unavailable For Legal Reasons",
            details="The resource is unavailable due to legal demands.",
        ),
        # 5xx server errors
        ErrorDefinition(
            code=500,
            type="internal_server_error",
            title="Internal Server Error",
            details="An unexpected error occurred on the server.",
        ),
        ErrorDefinition(
            code=501,
            type="not_implemented",
            title="Not Implemented",
            details="The server does not support the functionality required to fulfill the request.",
        ),
        ErrorDefinition(
            code=502,
            type="bad_gateway",
            title="Bad Gateway",
            details="The server received an invalid response from an upstream server.",
        ),
        ErrorDefinition(
            code=503,
            type="service_unavailable",
            title="Service Unavailable",
            details=(
                "The server is currently unable to handle the request due to temporary overloading or maintenance."
            ),
            retry_after=60,
            resolution="Try again after a short period or contact support.",
        ),
        ErrorDefinition(
            code=504,
            type="gateway_timeout",
            title="Gateway Timeout",
            details="The server did not receive a timely response from an upstream server.",
        ),
        ErrorDefinition(
            code=505,
            type="http_version_not_supported",
            title="HTTP Version Not Supported",
            details="The server does not support the HTTP protocol version used in the request.",
        ),
        ErrorDefinition(
            code=506,
            type="variant_also_negotiates",
            title="Variant Also Negotiates",
            details="The server has an internal configuration error during content negotiation.",
        ),
        ErrorDefinition(
            code=507,
            type="insufficient_storage",
            title="Insufficient Storage",
            details="The server is unable to store the representation needed to complete the request.",
        ),
        ErrorDefinition(
            code=508,
            type="loop_detected",
            title="Loop Detected",
            details="The server detected an infinite loop while processing the request.",
        ),
        ErrorDefinition(
            code=509,
            type="bandwidth_limit_exceeded",
            title="Bandwidth Limit Exceeded",
            details="The server has exceeded the bandwidth limit.",
        ),
        ErrorDefinition(
            code=510,
            type="not_extended",
            title="Not Extended",
            details="Further extensions to the request are required for the server to fulfill it.",
        ),
        ErrorDefinition(
            code=511,
            type="network_authentication_required",
            title="Network Authentication Required",
            details="The client needs to authenticate to gain network access.",
        ),
    )
)


def get_error_definition(code: int) -> ErrorDefinition:
    """Return the definition for ``code``, synthesizing one for unmapped codes.

    The fallback keeps the caller's exact code and is classified as a client
    or server error by numeric range, never by table membership.
    """
    definition = HTTP_ERROR_DEFINITIONS.get(code)
    if definition is not None:
        return definition

    if code < MIN_SERVER_ERROR_CODE:
        return ErrorDefinition(
            code=code,
            type="unknown_client_error",
            title="Unknown Client Error",
            details="The request failed with a non-standard client error status code.",
        )
    return ErrorDefinition(
        code=code,
        type="unknown_server_error",
        title="Unknown Server Error",
        details="The server failed with a non-standard server error status code.",
    )


resolve_error_definition = get_error_definition
