"""Unit tests for SessionService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from papertrail.config import AuthSettings
from papertrail.domain.error import UnverifiedAccountError
from papertrail.domain.model import Account
from papertrail.domain.model.common import utc_now
from papertrail.domain.service import SessionService
from papertrail.domain.value import AccountId
from papertrail.util.jwt import (
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
    SessionTokenError,
)
from tests.conftest import FrozenClock

SECRET = "test-secret-for-session-tokens-0123456789"


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret=SECRET, session_expiry_hours=24)


@pytest.fixture
def verified_account():
    return Account(
        id=AccountId(uuid4()),
        email="alice@example.com",
        name="Alice",
        is_verified=True,
    )


def tamper_signature(token: str) -> str:
    """Replace the first character of the signature segment."""
    header, payload, signature = token.split(".")
    replacement = "A" if signature[0] != "A" else "B"
    return ".".join([header, payload, replacement + signature[1:]])


class TestIssue:
    """Tests for SessionService.issue."""

    def test_issue_for_unverified_account_raises(self, auth_settings):
        """Unverified accounts never receive a session token."""
        service = SessionService(auth_settings)
        account = Account(id=AccountId(uuid4()), email="bob@example.com")

        with pytest.raises(UnverifiedAccountError):
            service.issue(account)

    def test_expiry_uses_configured_lifetime(self, auth_settings, verified_account):
        """expires_at should be issue time plus the session lifetime."""
        clock = FrozenClock(utc_now())
        service = SessionService(auth_settings, clock=clock)

        session = service.issue(verified_account)

        assert session.expires_at == clock.now + timedelta(hours=24)


class TestValidate:
    """Tests for SessionService.validate."""

    def test_round_trip_recovers_identity(self, auth_settings, verified_account):
        """A fresh token should validate to the same account id and email."""
        service = SessionService(auth_settings)
        session = service.issue(verified_account)

        identity = service.validate(session.token)

        assert identity.account_id == verified_account.id
        assert identity.email == verified_account.email

    def test_expired_token_raises(self, auth_settings, verified_account):
        """A token past its lifetime should fail as expired."""
        clock = FrozenClock(utc_now() - timedelta(hours=25))
        service = SessionService(auth_settings, clock=clock)
        session = service.issue(verified_account)

        with pytest.raises(ExpiredTokenError):
            service.validate(session.token)

    def test_token_at_exact_lifetime_is_expired(self, auth_settings, verified_account):
        """A token is expired from the instant its lifetime runs out."""
        clock = FrozenClock(
            utc_now() - timedelta(hours=auth_settings.session_expiry_hours)
        )
        service = SessionService(auth_settings, clock=clock)
        session = service.issue(verified_account)

        with pytest.raises(ExpiredTokenError):
            service.validate(session.token)

    def test_token_just_inside_lifetime_is_valid(self, auth_settings, verified_account):
        """A token issued one minute short of its lifetime still validates."""
        clock = FrozenClock(
            utc_now()
            - timedelta(hours=auth_settings.session_expiry_hours)
            + timedelta(minutes=1)
        )
        service = SessionService(auth_settings, clock=clock)
        session = service.issue(verified_account)

        identity = service.validate(session.token)

        assert identity.account_id == verified_account.id

    def test_tampered_signature_raises_malformed(self, auth_settings, verified_account):
        """Changing one signature character should break verification."""
        service = SessionService(auth_settings)
        session = service.issue(verified_account)

        with pytest.raises(MalformedTokenError):
            service.validate(tamper_signature(session.token))

    def test_token_signed_with_other_secret_raises(self, auth_settings, verified_account):
        """Tokens from a different secret should not validate."""
        other = SessionService(AuthSettings(jwt_secret="another-secret-entirely-9876543210"))
        token = other.issue(verified_account).token

        with pytest.raises(MalformedTokenError):
            SessionService(auth_settings).validate(token)

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_raises(self, auth_settings, token):
        """No credential at all is its own failure kind."""
        with pytest.raises(MissingTokenError):
            SessionService(auth_settings).validate(token)

    def test_garbage_token_raises_malformed(self, auth_settings):
        """A string that is not a JWT should be malformed."""
        with pytest.raises(MalformedTokenError):
            SessionService(auth_settings).validate("not-a-jwt")

    def test_all_failures_share_base_error(self, auth_settings):
        """Every validation failure is a SessionTokenError."""
        with pytest.raises(SessionTokenError):
            SessionService(auth_settings).validate("a.b.c")
