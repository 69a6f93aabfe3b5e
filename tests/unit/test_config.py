"""Tests for Settings validation and defaults."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "unit-test-secret",
}


def test_search_defaults() -> None:
    settings = Settings(_env_file=None, **REQUIRED)
    assert settings.search_min_query_length == 2
    assert settings.search_max_results == 100
    assert settings.search_audit_excerpt_length == 50
    assert settings.search_store_timeout_seconds > 0
    assert 0 < settings.search_audit_timeout_seconds < settings.request_timeout_seconds


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None, secret_key="unit-test-secret")


def test_secret_key_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError, match="SECRET_KEY is required"):
        Settings(_env_file=None, database_url=REQUIRED["database_url"])


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("search_min_query_length", 0),
        ("search_max_results", 0),
        ("search_audit_excerpt_length", 0),
        ("search_store_timeout_seconds", 0),
        ("search_audit_timeout_seconds", 0),
    ],
)
def test_search_limits_must_be_positive(field: str, value: float) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **REQUIRED, **{field: value})


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "25")
    monkeypatch.setenv("SEARCH_RATE_LIMIT", "5/second")
    settings = Settings(_env_file=None, **REQUIRED)
    assert settings.search_max_results == 25
    assert settings.search_rate_limit == "5/second"
