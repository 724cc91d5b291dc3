"""Unit tests for Settings."""

import pytest
from pydantic import SecretStr, ValidationError

from threadit_config.settings import Settings


def _settings(**overrides) -> Settings:
    values = {
        "session_secret": SecretStr("test-session-secret"),
        "postgres_password": SecretStr("test-password"),
    }
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    def test_session_defaults(self):
        settings = _settings()

        assert settings.session_cookie_name == "qid"
        assert settings.session_cookie_samesite == "lax"
        assert settings.session_max_age_seconds == 3650 * 24 * 60 * 60

    def test_reset_token_defaults(self):
        settings = _settings()

        assert settings.reset_token_prefix == "forget-password:"
        assert settings.reset_token_ttl_seconds == 3 * 24 * 60 * 60

    def test_database_url_is_built_from_parts(self):
        settings = _settings(
            postgres_host="db",
            postgres_port=5433,
            postgres_user="threadit",
            postgres_db="threadit_test",
        )

        assert settings.database_url.startswith("postgresql+asyncpg://threadit:")
        assert settings.database_url.endswith("@db:5433/threadit_test")

    def test_cors_origins_split_on_commas(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_secrets_are_not_printed(self):
        settings = _settings()

        assert "test-session-secret" not in repr(settings)

    def test_missing_session_secret_is_rejected(self, monkeypatch):
        monkeypatch.delenv("SESSION_SECRET", raising=False)

        with pytest.raises(ValidationError):
            Settings(postgres_password=SecretStr("x"), _env_file=None)
