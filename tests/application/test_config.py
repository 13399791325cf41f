"""Tests for environment-based settings."""

import pytest

from application.config import load_settings

ENV_VARS = [
    "DATABASE_URL",
    "REDIS_URL",
    "CUSTOMER_SERVICE_URL",
    "PRODUCT_SERVICE_URL",
    "REQUEST_TIMEOUT",
    "CACHE_TIMEOUT",
    "DB_TIMEOUT",
    "CACHE_WRITE_STRICT",
    "LOG_LEVEL",
    "HOST",
    "PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Test suite for load_settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://user:pass@db:5432/transactions")

        settings = load_settings()

        assert settings.database_url == "postgresql://user:pass@db:5432/transactions"
        assert settings.redis_url == "redis://localhost:6379/0"
        assert settings.request_timeout == 5.0
        assert settings.cache_write_strict is True
        assert settings.port == 8083

    def test_database_url_is_required(self):
        with pytest.raises(KeyError):
            load_settings()

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False), ("off", False)],
    )
    def test_cache_write_policy_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("CACHE_WRITE_STRICT", value)

        assert load_settings().cache_write_strict is expected

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("CUSTOMER_SERVICE_URL", "http://customer-service:8081")
        monkeypatch.setenv("PRODUCT_SERVICE_URL", "http://product-service:8082")
        monkeypatch.setenv("REQUEST_TIMEOUT", "1.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("PORT", "9000")

        settings = load_settings()

        assert settings.customer_service_url == "http://customer-service:8081"
        assert settings.product_service_url == "http://product-service:8082"
        assert settings.request_timeout == 1.5
        assert settings.log_level == "DEBUG"
        assert settings.port == 9000
