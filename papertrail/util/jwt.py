"""JWT session token utilities."""

from datetime import datetime
from uuid import UUID

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from papertrail.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: UUID  # Account ID
    email: str
    iat: datetime
    exp: datetime


class SessionTokenError(Exception):
    """Base error for session token validation failures."""

    pass


class MissingTokenError(SessionTokenError):
    """No bearer credential was presented."""

    pass


class MalformedTokenError(SessionTokenError):
    """Credential could not be parsed or its signature did not verify."""

    pass


class ExpiredTokenError(SessionTokenError):
    """Credential is past its expiry claim."""

    pass


class InvalidClaimsError(SessionTokenError):
    """Credential verified but lacks the required identity claims."""

    pass


def create_token(
    account_id: str,
    email: str,
    issued_at: datetime,
    expires_at: datetime,
    settings: AuthSettings,
) -> str:
    """Create a signed session token.

    Args:
        account_id: Account ID, stored in the ``sub`` claim
        email: Account email
        issued_at: Issued-at instant (timezone-aware)
        expires_at: Expiry instant (timezone-aware)
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": account_id,
        "email": email,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str | None, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        MissingTokenError: If no token was given
        MalformedTokenError: If the token cannot be decoded or the signature is wrong
        ExpiredTokenError: If the ``exp`` claim has passed
        InvalidClaimsError: If identity claims are missing or ill-typed
    """
    if not token:
        raise MissingTokenError("No session token presented")

    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise InvalidClaimsError(f"Token is missing a required claim: {e.claim}")
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Invalid token: {e}")

    try:
        return TokenPayload(**claims)
    except PydanticValidationError as e:
        raise InvalidClaimsError(f"Token claims are invalid: {e.error_count()} errors")
