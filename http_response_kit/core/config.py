"""Process-wide library configuration."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from types import MappingProxyType
from typing import Any
import logging
import os

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE = "APP_ENV"
DEVELOPMENT_ENVIRONMENT = "development"
DEFAULT_INCLUDE_TIMESTAMP = True

ResponseTransformer = Callable[[dict[str, Any]], dict[str, Any]]


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


def _environment_is_development() -> bool:
    return os.getenv(ENVIRONMENT_VARIABLE, "").strip().lower() == DEVELOPMENT_ENVIRONMENT


@dataclass(frozen=True)
class LibraryConfig:
    """Immutable snapshot of the library settings.

    ``is_development`` left as ``None`` means the mode follows the ``APP_ENV``
    environment variable, re-read on every check.
    """

    is_development: bool | None = None
    include_timestamp: bool = DEFAULT_INCLUDE_TIMESTAMP
    custom_messages: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    response_transformer: ResponseTransformer | None = None

    def safe_for_logging(self) -> dict[str, Any]:
        """Return a compact summary of the settings suitable for logs."""
        return {
            "is_development": self.is_development,
            "include_timestamp": self.include_timestamp,
            "custom_message_codes": sorted(self.custom_messages),
            "response_transformer": getattr(self.response_transformer, "__name__", None),
        }


class ConfigStore:
    """Holder of the current settings with merge and reset semantics."""

    def __init__(self) -> None:
        self._config = LibraryConfig()

    def snapshot(self) -> LibraryConfig:
        return self._config

    def merge(
        self,
        *,
        is_development: bool | None = _UNSET,
        include_timestamp: bool = _UNSET,
        custom_messages: Mapping[int, str] | None = _UNSET,
        response_transformer: ResponseTransformer | None = _UNSET,
    ) -> LibraryConfig:
        """Apply a partial update.

        ``custom_messages`` is merged key by key into the existing messages;
        every other given field replaces the current value.
        """
        changes: dict[str, Any] = {}
        if is_development is not _UNSET:
            changes["is_development"] = is_development
        if include_timestamp is not _UNSET:
            changes["include_timestamp"] = include_timestamp
        if response_transformer is not _UNSET:
            changes["response_transformer"] = response_transformer
        if custom_messages is not _UNSET and custom_messages:
            merged = dict(self._config.custom_messages)
            merged.update({int(code): str(text) for code, text in custom_messages.items()})
            changes["custom_messages"] = MappingProxyType(merged)

        self._config = replace(self._config, **changes)
        logger.debug("Library configuration updated: %s", self._config.safe_for_logging())
        return self._config

    def reset(self) -> None:
        self._config = LibraryConfig()
        logger.debug("Library configuration reset to defaults")


_store = ConfigStore()


def configure(
    *,
    is_development: bool | None = _UNSET,
    include_timestamp: bool = _UNSET,
    custom_messages: Mapping[int, str] | None = _UNSET,
    response_transformer: ResponseTransformer | None = _UNSET,
) -> None:
    """Update the global configuration.

    Example::

        configure(include_timestamp=False, custom_messages={404: "Nothing here"})
    """
    _store.merge(
        is_development=is_development,
        include_timestamp=include_timestamp,
        custom_messages=custom_messages,
        response_transformer=response_transformer,
    )


def get_config() -> LibraryConfig:
    """Return the current immutable configuration snapshot."""
    return _store.snapshot()


def reset_config() -> None:
    """Restore the built-in defaults, dropping all custom messages."""
    _store.reset()


def is_development_mode() -> bool:
    configured = _store.snapshot().is_development
    if configured is None:
        return _environment_is_development()
    return configured


def should_include_timestamp() -> bool:
    return _store.snapshot().include_timestamp


def get_custom_message(code: int) -> str | None:
    return _store.snapshot().custom_messages.get(code)


def get_response_transformer() -> ResponseTransformer | None:
    return _store.snapshot().response_transformer
