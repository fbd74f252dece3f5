"""Unit tests for session token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from papertrail.config import AuthSettings
from papertrail.util.jwt import (
    ExpiredTokenError,
    InvalidClaimsError,
    MalformedTokenError,
    MissingTokenError,
    create_token,
    verify_token,
)

SETTINGS = AuthSettings(jwt_secret="jwt-util-test-secret-0123456789abcdef")


def now() -> datetime:
    return datetime.now(timezone.utc)


class TestCreateAndVerify:
    """Tests for create_token and verify_token."""

    def test_claims_survive_round_trip(self):
        account_id = uuid4()
        issued_at = now()
        token = create_token(
            str(account_id),
            "alice@example.com",
            issued_at,
            issued_at + timedelta(hours=1),
            SETTINGS,
        )

        payload = verify_token(token, SETTINGS)

        assert payload.sub == account_id
        assert payload.email == "alice@example.com"
        assert int(payload.exp.timestamp()) == int(
            (issued_at + timedelta(hours=1)).timestamp()
        )

    def test_token_uses_hs256(self):
        token = create_token(
            str(uuid4()), "a@example.com", now(), now() + timedelta(hours=1), SETTINGS
        )
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_expired_token(self):
        issued_at = now() - timedelta(hours=2)
        token = create_token(
            str(uuid4()),
            "a@example.com",
            issued_at,
            issued_at + timedelta(hours=1),
            SETTINGS,
        )

        with pytest.raises(ExpiredTokenError):
            verify_token(token, SETTINGS)

    def test_missing_token(self):
        with pytest.raises(MissingTokenError):
            verify_token(None, SETTINGS)

    def test_malformed_token(self):
        with pytest.raises(MalformedTokenError):
            verify_token("definitely.not.valid", SETTINGS)

    def test_missing_email_claim(self):
        """A correctly signed token without an email claim is rejected."""
        token = jwt.encode(
            {"sub": str(uuid4()), "iat": now(), "exp": now() + timedelta(hours=1)},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidClaimsError):
            verify_token(token, SETTINGS)

    def test_missing_exp_claim(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "email": "a@example.com", "iat": now()},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidClaimsError):
            verify_token(token, SETTINGS)

    def test_non_uuid_subject(self):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": "a@example.com",
                "iat": now(),
                "exp": now() + timedelta(hours=1),
            },
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidClaimsError):
            verify_token(token, SETTINGS)

    def test_unsigned_token_rejected(self):
        """alg=none tokens must never validate."""
        token = jwt.encode(
            {
                "sub": str(uuid4()),
                "email": "a@example.com",
                "iat": now(),
                "exp": now() + timedelta(hours=1),
            },
            None,
            algorithm="none",
        )

        with pytest.raises(MalformedTokenError):
            verify_token(token, SETTINGS)
