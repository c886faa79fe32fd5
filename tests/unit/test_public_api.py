"""Unit tests for the package-level exports."""

from __future__ import annotations

import http_response_kit


def test_config_accessors_are_exported_next_to_configure() -> None:
    http_response_kit.configure(include_timestamp=False, custom_messages={404: "Gone fishing"})

    assert http_response_kit.should_include_timestamp() is False
    assert http_response_kit.get_custom_message(404) == "Gone fishing"
    assert http_response_kit.get_response_transformer() is None


def test_all_names_resolve() -> None:
    for name in http_response_kit.__all__:
        assert hasattr(http_response_kit, name), name

    assert {"get_custom_message", "should_include_timestamp", "get_response_transformer"} <= set(
        http_response_kit.__all__
    )
