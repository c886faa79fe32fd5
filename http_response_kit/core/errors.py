"""HTTP error value carrying a status code and its canonical definition."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import logging
import traceback

from http_response_kit.constants.error_definitions import get_error_definition
from http_response_kit.constants.status_codes import MAX_ERROR_CODE
from http_response_kit.constants.status_codes import MIN_ERROR_CODE
from http_response_kit.constants.status_codes import MIN_SERVER_ERROR_CODE
from http_response_kit.core.config import get_custom_message

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_CODE = 500


class StatusCodeRangeError(ValueError):
    """Raised when an error status code falls outside 400-599."""

    def __init__(self, code: Any) -> None:
        super().__init__(f"HTTP error status code must be an integer between 400 and 599, got {code!r}")
        self.code = code


def _validate_error_code(code: Any) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise StatusCodeRangeError(code)
    if not MIN_ERROR_CODE <= code <= MAX_ERROR_CODE:
        raise StatusCodeRangeError(code)
    return int(code)


def _construction_site() -> traceback.StackSummary:
    frames = traceback.extract_stack()
    while frames and frames[-1].filename == __file__:
        frames.pop()
    return frames


def _restore(cls: type[HttpError], code: int, options: dict[str, Any]) -> HttpError:
    return cls(code, **options)


class HttpError(Exception):
    """A single HTTP error occurrence.

    Raise it like any exception or hand it to the response formatter to get
    the error envelope. ``message`` is the user-facing text while ``details``
    always holds the canonical description of the status code.

    >>> HttpError(404, message="User not found").details
    'The requested resource could not be found.'
    """

    def __init__(
        self,
        code: int,
        *,
        message: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
        retry_after: int | None = None,
    ) -> None:
        code = _validate_error_code(code)
        definition = get_error_definition(code)

        if message is None:
            message = get_custom_message(code)
        if message is None:
            message = definition.details

        super().__init__(message)
        self._code = definition.code
        self._type = definition.type
        self._title = definition.title
        self._details = definition.details
        self._message = message
        self._metadata = dict(metadata) if metadata is not None else None
        self._cause = cause
        self._retry_after = retry_after if retry_after is not None else definition.retry_after
        if cause is not None:
            self.__cause__ = cause
        self._origin = _construction_site()

    def __reduce__(self) -> tuple[Any, ...]:
        options = {
            "message": self._message,
            "metadata": self._metadata,
            "cause": self._cause,
            "retry_after": self._retry_after,
        }
        return (_restore, (type(self), self._code, options))

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def code(self) -> int:
        return self._code

    @property
    def type(self) -> str:
        return self._type

    @property
    def title(self) -> str:
        return self._title

    @property
    def details(self) -> str:
        return self._details

    @property
    def message(self) -> str:
        return self._message

    @property
    def metadata(self) -> dict[str, Any] | None:
        return self._metadata

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def retry_after(self) -> int | None:
        return self._retry_after

    @property
    def stack(self) -> str:
        """Formatted traceback, including chained causes.

        Errors that were never raised report the frames that constructed them.
        """
        if self.__traceback__ is not None:
            return "".join(traceback.format_exception(type(self), self, self.__traceback__))
        return "".join(
            [
                "Stack (most recent call last):\n",
                *self._origin.format(),
                *traceback.format_exception(type(self), self, None),
            ]
        )

    def __repr__(self) -> str:
        return f"{self.name}(code={self._code}, type={self._type!r}, message={self._message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe projection of the error."""
        return {
            "name": self.name,
            "code": self._code,
            "type": self._type,
            "title": self._title,
            "message": self._message,
            "details": self._details,
            "metadata": self._metadata,
            "retry_after": self._retry_after,
        }

    def is_client_error(self) -> bool:
        return MIN_ERROR_CODE <= self._code < MIN_SERVER_ERROR_CODE

    def is_server_error(self) -> bool:
        return MIN_SERVER_ERROR_CODE <= self._code <= MAX_ERROR_CODE

    # -- conversion helpers --------------------------------------------------

    @classmethod
    def from_error(cls, value: Any, fallback_code: int = DEFAULT_FALLBACK_CODE) -> HttpError:
        """Convert any caught value into an ``HttpError``.

        Existing ``HttpError`` instances pass through untouched. Exceptions are
        wrapped with their text as message and kept as ``cause``; any other
        value is stringified.
        """
        fallback_code = _validate_error_code(fallback_code)

        if isinstance(value, HttpError):
            return value

        if isinstance(value, BaseException):
            logger.debug("Wrapping %s as HTTP %d", type(value).__name__, fallback_code)
            return cls(fallback_code, message=str(value) or None, cause=value)

        return cls(fallback_code, message=str(value))

    @classmethod
    def from_status(cls, code: int, **options: Any) -> HttpError:
        """Build an error for a known status code."""
        return cls(code, **options)

    @staticmethod
    def is_http_error(value: Any) -> bool:
        return isinstance(value, HttpError)

    # -- 4xx factories -------------------------------------------------------

    @classmethod
    def bad_request(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(400, message=message, metadata=metadata)

    @classmethod
    def unauthorized(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(401, message=message, metadata=metadata)

    @classmethod
    def payment_required(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(402, message=message, metadata=metadata)

    @classmethod
    def forbidden(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(403, message=message, metadata=metadata)

    @classmethod
    def not_found(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(404, message=message, metadata=metadata)

    @classmethod
    def method_not_allowed(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(405, message=message, metadata=metadata)

    @classmethod
    def not_acceptable(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(406, message=message, metadata=metadata)

    @classmethod
    def proxy_authentication_required(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(407, message=message, metadata=metadata)

    @classmethod
    def request_timeout(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(408, message=message, metadata=metadata)

    @classmethod
    def conflict(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(409, message=message, metadata=metadata)

    @classmethod
    def gone(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(410, message=message, metadata=metadata)

    @classmethod
    def length_required(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(411, message=message, metadata=metadata)

    @classmethod
    def precondition_failed(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(412, message=message, metadata=metadata)

    @classmethod
    def payload_too_large(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(413, message=message, metadata=metadata)

    @classmethod
    def uri_too_long(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(414, message=message, metadata=metadata)

    @classmethod
    def unsupported_media_type(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(415, message=message, metadata=metadata)

    @classmethod
    def range_not_satisfiable(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(416, message=message, metadata=metadata)

    @classmethod
    def expectation_failed(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(417, message=message, metadata=metadata)

    @classmethod
    def im_a_teapot(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(418, message=message, metadata=metadata)

    @classmethod
    def misdirected_request(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(421, message=message, metadata=metadata)

    @classmethod
    def unprocessable_entity(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(422, message=message, metadata=metadata)

    @classmethod
    def locked(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(423, message=message, metadata=metadata)

    @classmethod
    def failed_dependency(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(424, message=message, metadata=metadata)

    @classmethod
    def too_early(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(425, message=message, metadata=metadata)

    @classmethod
    def upgrade_required(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(426, message=message, metadata=metadata)

    @classmethod
    def precondition_required(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(428, message=message, metadata=metadata)

    @classmethod
    def too_many_requests(
        cls,
        message: str | None = None,
        retry_after: int | None = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> HttpError:
        return cls(429, message=message, metadata=metadata, retry_after=retry_after)

    @classmethod
    def request_header_fields_too_large(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(431, message=message, metadata=metadata)

    @classmethod
    def unavailable_for_legal_reasons(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(451, message=message, metadata=metadata)

    # -- 5xx factories -------------------------------------------------------

    @classmethod
    def internal_server_error(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(500, message=message, metadata=metadata)

    @classmethod
    def not_implemented(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(501, message=message, metadata=metadata)

    @classmethod
    def bad_gateway(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(502, message=message, metadata=metadata)

    @classmethod
    def service_unavailable(
        cls,
        message: str | None = None,
        retry_after: int | None = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> HttpError:
        return cls(503, message=message, metadata=metadata, retry_after=retry_after)

    @classmethod
    def gateway_timeout(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(504, message=message, metadata=metadata)

    @classmethod
    def http_version_not_supported(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(505, message=message, metadata=metadata)

    @classmethod
    def variant_also_negotiates(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(506, message=message, metadata=metadata)

    @classmethod
    def insufficient_storage(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(507, message=message, metadata=metadata)

    @classmethod
    def loop_detected(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(508, message=message, metadata=metadata)

    @classmethod
    def bandwidth_limit_exceeded(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(509, message=message, metadata=metadata)

    @classmethod
    def not_extended(cls, message: str | None = None, metadata: Mapping[str, Any] | None = None) -> HttpError:
        return cls(510, message=message, metadata=metadata)

    @classmethod
    def network_authentication_required(
        cls, message: str | None = None, metadata: Mapping[str, Any] | None = None
    ) -> HttpError:
        return cls(511, message=message, metadata=metadata)


def is_http_error(value: Any) -> bool:
    """Return whether ``value`` is an ``HttpError``."""
    return isinstance(value, HttpError)
