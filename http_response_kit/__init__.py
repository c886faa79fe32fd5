"""Standardized HTTP errors and response envelopes."""

from http_response_kit.constants.error_definitions import HTTP_ERROR_DEFINITIONS
from http_response_kit.constants.error_definitions import ErrorDefinition
from http_response_kit.constants.error_definitions import get_error_definition
from http_response_kit.constants.error_definitions import resolve_error_definition
from http_response_kit.constants.status_codes import HttpClientErrorCode
from http_response_kit.constants.status_codes import HttpInfoCode
from http_response_kit.constants.status_codes import HttpRedirectCode
from http_response_kit.constants.status_codes import HttpServerErrorCode
from http_response_kit.constants.status_codes import HttpSuccessCode
from http_response_kit.constants.success_definitions import HTTP_INFO_DEFINITIONS
from http_response_kit.constants.success_definitions import HTTP_REDIRECT_DEFINITIONS
from http_response_kit.constants.success_definitions import HTTP_SUCCESS_DEFINITIONS
from http_response_kit.constants.success_definitions import SuccessDefinition
from http_response_kit.constants.success_definitions import get_success_definition
from http_response_kit.constants.success_definitions import resolve_success_definition
from http_response_kit.core.config import LibraryConfig
from http_response_kit.core.config import configure
from http_response_kit.core.config import get_config
from http_response_kit.core.config import get_custom_message
from http_response_kit.core.config import get_response_transformer
from http_response_kit.core.config import is_development_mode
from http_response_kit.core.config import reset_config
from http_response_kit.core.config import should_include_timestamp
from http_response_kit.core.errors import HttpError
from http_response_kit.core.errors import StatusCodeRangeError
from http_response_kit.core.errors import is_http_error
from http_response_kit.responses.formatter import PROTECTED_FIELDS
from http_response_kit.responses.formatter import accepted
from http_response_kit.responses.formatter import build_error
from http_response_kit.responses.formatter import build_from_error
from http_response_kit.responses.formatter import build_paginated
from http_response_kit.responses.formatter import build_success
from http_response_kit.responses.formatter import created
from http_response_kit.responses.formatter import is_error_response
from http_response_kit.responses.formatter import is_success_response
from http_response_kit.responses.formatter import no_content
from http_response_kit.responses.formatter import not_modified
from http_response_kit.responses.formatter import ok
from http_response_kit.responses.formatter import partial_content
from http_response_kit.schemas.envelope import PaginationInput
from http_response_kit.schemas.envelope import PaginationMeta

__version__ = "1.0.0"

__all__ = [
    "HTTP_ERROR_DEFINITIONS",
    "HTTP_INFO_DEFINITIONS",
    "HTTP_REDIRECT_DEFINITIONS",
    "HTTP_SUCCESS_DEFINITIONS",
    "PROTECTED_FIELDS",
    "ErrorDefinition",
    "HttpClientErrorCode",
    "HttpError",
    "HttpInfoCode",
    "HttpRedirectCode",
    "HttpServerErrorCode",
    "HttpSuccessCode",
    "LibraryConfig",
    "PaginationInput",
    "PaginationMeta",
    "StatusCodeRangeError",
    "SuccessDefinition",
    "accepted",
    "build_error",
    "build_from_error",
    "build_paginated",
    "build_success",
    "configure",
    "created",
    "get_config",
    "get_custom_message",
    "get_error_definition",
    "get_response_transformer",
    "get_success_definition",
    "is_development_mode",
    "is_error_response",
    "is_http_error",
    "is_success_response",
    "no_content",
    "not_modified",
    "ok",
    "partial_content",
    "reset_config",
    "resolve_error_definition",
    "resolve_success_definition",
    "should_include_timestamp",
]
