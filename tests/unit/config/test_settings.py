# tests/unit/config/test_settings.py
from __future__ import annotations

from collections.abc import Generator
from datetime import timedelta

import pytest
from pydantic import ValidationError

from rediscache_api.config.settings import Environment, Settings, get_settings


@pytest.fixture
def fresh_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/2")
    monkeypatch.setenv("REDIS_KEY_PREFIX", "Shop_")
    monkeypatch.setenv("PRODUCT_CACHE_TTL_MINUTES", "3")

    s = Settings()

    assert s.environment == Environment.STAGING
    assert s.redis_url == "redis://cache:6379/2"
    assert s.redis_key_prefix == "Shop_"
    assert s.product_cache_ttl == timedelta(minutes=3)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "REDIS_KEY_PREFIX",
        "CACHE_DEFAULT_TTL_MINUTES",
        "PRODUCT_CACHE_TTL_MINUTES",
        "PRODUCT_LIST_CACHE_TTL_MINUTES",
        "CATALOG_ITEM_LATENCY_S",
        "CATALOG_LIST_LATENCY_S",
        "ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    s = Settings()

    assert s.redis_key_prefix == "RedisApi_"
    assert s.cache_default_ttl == timedelta(minutes=30)
    assert s.product_cache_ttl == timedelta(minutes=10)
    assert s.product_list_cache_ttl == timedelta(minutes=5)
    assert s.catalog_item_latency_s == 1.0
    assert s.catalog_list_latency_s == 2.0
    assert s.cors_allow_origins == []


def test_redis_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REDIS_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings()


def test_cors_origins_are_split_and_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", " https://a.example , https://b.example,")

    s = Settings()

    assert s.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_wildcard_cors_rejected_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    with pytest.raises(ValidationError):
        Settings()


def test_wildcard_cors_allowed_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    assert Settings().cors_allow_origins == ["*"]


def test_get_settings_wraps_validation_errors(
    monkeypatch: pytest.MonkeyPatch, fresh_settings_cache: None
) -> None:
    monkeypatch.delenv("REDIS_URL", raising=False)
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()


def test_get_settings_is_cached(fresh_settings_cache: None) -> None:
    assert get_settings() is get_settings()
