"""Shared pytest fixtures for the http_response_kit test suites."""

from collections.abc import Generator
from datetime import datetime
from datetime import timezone
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

FIXED_NOW = datetime(2026, 2, 28, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from default settings and a neutral environment."""
    from http_response_kit.core.config import reset_config

    monkeypatch.delenv("APP_ENV", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin envelope timestamps to a known instant."""
    from http_response_kit.responses import formatter

    monkeypatch.setattr(formatter, "_utc_now", lambda: FIXED_NOW)
    return FIXED_NOW
