"""Unit tests for success, error and paginated envelope formatting."""

from __future__ import annotations

import json

import pytest

from http_response_kit.constants.status_codes import HttpSuccessCode
from http_response_kit.core.config import configure
from http_response_kit.core.errors import HttpError
from http_response_kit.core.errors import StatusCodeRangeError
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

TIMESTAMP = "2026-02-28T12:00:00.000Z"


def test_success_envelope_shape(frozen_clock) -> None:
    envelope = build_success(data={"id": 1}, message="Test success")

    assert envelope == {
        "success": True,
        "status_code": 200,
        "timestamp": TIMESTAMP,
        "data": {"id": 1},
        "message": "Test success",
    }


def test_success_envelope_is_json_serializable(frozen_clock) -> None:
    envelope = created({"id": 2})

    assert json.loads(json.dumps(envelope))["status_code"] == 201


def test_success_optional_fields_are_omitted_when_empty(frozen_clock) -> None:
    envelope = build_success(message="", metadata={})

    assert envelope == {"success": True, "status_code": 200, "timestamp": TIMESTAMP}


def test_success_keeps_falsy_but_present_data() -> None:
    assert build_success(data=[])["data"] == []
    assert build_success(data=0)["data"] == 0


def test_success_metadata_is_included_when_present() -> None:
    assert build_success(metadata={"trace": "abc"})["metadata"] == {"trace": "abc"}


def test_unmapped_success_code_is_echoed() -> None:
    envelope = build_success(status_code=299)

    assert envelope["status_code"] == 299
    assert envelope["success"] is True


@pytest.mark.parametrize("status_code", [204, 205, 304])
def test_no_body_codes_drop_data(status_code: int) -> None:
    envelope = build_success(data="x", status_code=status_code)

    assert envelope["status_code"] == status_code
    assert "data" not in envelope


def test_timestamp_can_be_disabled() -> None:
    configure(include_timestamp=False)

    assert "timestamp" not in build_success()
    assert "timestamp" not in build_error(HttpError(400))


def test_convenience_wrappers_use_fixed_codes() -> None:
    assert ok("a")["status_code"] == 200
    assert created("a", "Made")["message"] == "Made"
    assert accepted()["status_code"] == 202
    assert no_content()["status_code"] == 204
    assert "data" not in no_content()
    assert partial_content([1, 2, 3], "Partial")["data"] == [1, 2, 3]
    assert partial_content([1, 2, 3])["status_code"] == 206
    assert not_modified()["status_code"] == 304
    assert "data" not in not_modified()


def test_status_code_enum_is_echoed_as_plain_int() -> None:
    envelope = build_success(status_code=HttpSuccessCode.CREATED)

    assert type(envelope["status_code"]) is int


def test_error_envelope_shape(frozen_clock) -> None:
    envelope = build_error(HttpError(404, message="Not found test"))

    assert envelope == {
        "success": False,
        "status_code": 404,
        "timestamp": TIMESTAMP,
        "error": {
            "type": "not_found",
            "title": "Not Found",
            "message": "Not found test",
            "details": "The requested resource could not be found.",
        },
    }


def test_error_envelope_round_trips_message_and_details() -> None:
    error = HttpError(422, message="Email is invalid")

    envelope = build_error(error)

    assert envelope["error"]["message"] == error.message
    assert envelope["error"]["details"] == error.details


def test_error_envelope_includes_retry_after_and_metadata() -> None:
    envelope = build_error(HttpError.too_many_requests("Wait", 60, {"limit": 100}))

    assert envelope["retry_after"] == 60
    assert envelope["metadata"] == {"limit": 100}


def test_error_envelope_omits_retry_after_without_hint() -> None:
    assert "retry_after" not in build_error(HttpError(400))
    assert "metadata" not in build_error(HttpError(400))


def test_error_envelope_keeps_explicit_empty_metadata() -> None:
    envelope = build_error(HttpError(400, metadata={}))

    assert envelope["metadata"] == {}


def test_additional_fields_cannot_override_protected_fields() -> None:
    envelope = build_error(
        HttpError(400),
        additional_fields={"status_code": 999, "success": True, "tag": "ok"},
    )

    assert envelope["status_code"] == 400
    assert envelope["success"] is False
    assert envelope["tag"] == "ok"


def test_every_protected_field_is_ignored_in_additional_fields(frozen_clock) -> None:
    error = HttpError.too_many_requests("Wait", 60, {"limit": 100})
    baseline = build_error(error)

    envelope = build_error(
        error,
        additional_fields={
            "success": True,
            "status_code": 200,
            "error": None,
            "timestamp": "never",
            "metadata": {},
            "retry_after": 999,
            "request_id": "abc",
        },
    )

    assert envelope == {**baseline, "request_id": "abc"}


def test_stack_is_separate_from_details_when_requested() -> None:
    envelope = build_error(HttpError(500), include_stack=True)

    assert "HttpError" in envelope["error"]["stack"]
    assert envelope["error"]["details"] == "An unexpected error occurred on the server."


def _build_unraised_not_found() -> HttpError:
    return HttpError.not_found("missing")


def test_stack_of_unraised_error_lists_caller_frames() -> None:
    stack = build_error(_build_unraised_not_found(), include_stack=True)["error"]["stack"]

    assert "_build_unraised_not_found" in stack
    assert stack.strip().endswith("HttpError: missing")


def test_stack_follows_development_mode_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    assert "stack" not in build_error(HttpError(500))["error"]

    monkeypatch.setenv("APP_ENV", "development")
    assert "stack" in build_error(HttpError(500))["error"]


def test_explicit_include_stack_wins_over_development_mode() -> None:
    configure(is_development=True)

    assert "stack" not in build_error(HttpError(500), include_stack=False)["error"]


def test_build_from_error_wraps_foreign_exceptions() -> None:
    envelope = build_from_error(RuntimeError("Crash"))

    assert envelope["status_code"] == 500
    assert envelope["error"]["message"] == "Crash"


def test_build_from_error_uses_fallback_code() -> None:
    envelope = build_from_error(RuntimeError("Crash"), fallback_code=503)

    assert envelope["status_code"] == 503
    assert envelope["retry_after"] == 60


def test_build_from_error_keeps_http_errors() -> None:
    envelope = build_from_error(HttpError.conflict("Taken"), fallback_code=400)

    assert envelope["status_code"] == 409
    assert envelope["error"]["message"] == "Taken"


def test_build_from_error_rejects_invalid_fallback_code() -> None:
    with pytest.raises(StatusCodeRangeError):
        build_from_error(RuntimeError("Crash"), fallback_code=200)


def test_paginated_envelope() -> None:
    envelope = build_paginated([1, 2, 3], {"page": 2, "limit": 3, "total": 10}, "Page two")

    assert envelope["data"] == [1, 2, 3]
    assert envelope["message"] == "Page two"
    assert envelope["metadata"]["pagination"] == {
        "page": 2,
        "limit": 3,
        "total": 10,
        "total_pages": 4,
        "has_next": True,
        "has_prev": True,
    }


def test_paginated_zero_limit_is_clamped() -> None:
    pagination = build_paginated([1], {"page": 1, "limit": 0, "total": 10})["metadata"]["pagination"]

    assert pagination["limit"] == 1
    assert pagination["total_pages"] == 10
    assert pagination["has_next"] is True
    assert pagination["has_prev"] is False


def test_paginated_negative_limit_is_clamped() -> None:
    pagination = build_paginated([], {"page": 1, "limit": -5, "total": 3})["metadata"]["pagination"]

    assert pagination["limit"] == 1
    assert pagination["total_pages"] == 3


def test_paginated_explicit_total_pages_wins() -> None:
    by_alias = build_paginated([], {"page": 3, "limit": 10, "total": 5, "totalPages": 3})
    by_model = build_paginated([], PaginationInput(page=1, limit=10, total=5, total_pages=2))

    assert by_alias["metadata"]["pagination"]["total_pages"] == 3
    assert by_alias["metadata"]["pagination"]["has_next"] is False
    assert by_model["metadata"]["pagination"]["total_pages"] == 2
    assert by_model["metadata"]["pagination"]["has_next"] is True


def test_paginated_empty_result() -> None:
    envelope = build_paginated([], {"page": 1, "limit": 20, "total": 0})

    assert envelope["data"] == []
    assert envelope["metadata"]["pagination"]["total_pages"] == 0
    assert envelope["metadata"]["pagination"]["has_next"] is False


def test_transformer_runs_last_for_both_shapes() -> None:
    def stamp(envelope: dict) -> dict:
        envelope = dict(envelope)
        envelope.pop("timestamp", None)
        envelope["api_version"] = "v1"
        return envelope

    configure(response_transformer=stamp)

    success = build_success(data="test")
    error = build_error(HttpError(400))

    assert success["api_version"] == "v1"
    assert error["api_version"] == "v1"
    assert "timestamp" not in success
    assert "timestamp" not in error


def test_type_guards_discriminate_on_success_field() -> None:
    success = ok()
    error = build_from_error(RuntimeError())

    assert is_success_response(success) is True
    assert is_error_response(success) is False
    assert is_success_response(error) is False
    assert is_error_response(error) is True
    assert is_success_response({"success": 1}) is False
    assert is_error_response(None) is False
