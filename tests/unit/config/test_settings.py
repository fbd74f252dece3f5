"""Unit tests for application settings."""

import pydantic
import pytest

from papertrail.config import PLACEHOLDER_SECRET, AuthSettings, Settings


class TestApiUrls:
    def test_development_urls(self):
        settings = Settings(environment="development", host="localhost", port=5000)

        assert settings.api.base_url == "http://localhost:5000"
        assert settings.api.frontend_url == "http://localhost:8080"
        assert (
            settings.auth.google_callback_url
            == "http://localhost:5000/auth/google/callback"
        )

    def test_deployed_urls_use_https(self):
        settings = Settings(
            environment="staging",
            host="api.papertrail.app",
            frontend_host="papertrail.app",
        )

        assert settings.api.base_url == "https://api.papertrail.app"
        assert settings.api.frontend_url == "https://papertrail.app"
        assert (
            settings.auth.google_callback_url
            == "https://api.papertrail.app/auth/google/callback"
        )


class TestSigningSecret:
    """Production refuses the placeholder signing secret."""

    def test_production_with_placeholder_secret_fails(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(
                environment="production",
                auth=AuthSettings(jwt_secret=PLACEHOLDER_SECRET),
            )

    def test_production_with_real_secret_loads(self):
        settings = Settings(
            environment="production",
            auth=AuthSettings(jwt_secret="a-long-random-production-secret"),
        )

        assert settings.auth.jwt_secret == "a-long-random-production-secret"

    def test_development_allows_placeholder(self):
        settings = Settings(
            environment="development",
            auth=AuthSettings(jwt_secret=PLACEHOLDER_SECRET),
        )

        assert settings.auth.session_expiry_hours == 24
        assert settings.auth.otp_ttl_minutes == 5
