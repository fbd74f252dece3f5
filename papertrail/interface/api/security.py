"""Bearer-token guard for protected routes."""

import logging

from fastapi import HTTPException, status

from papertrail.domain.service import SessionService
from papertrail.domain.value import SessionIdentity
from papertrail.util.jwt import SessionTokenError

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = "Not authorized"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the credential out of an ``Authorization: Bearer <token>`` header.

    Any other scheme is treated as no credential at all.
    """
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    credentials = credentials.strip()
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials


def unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NOT_AUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate(
    authorization: str | None, session_service: SessionService
) -> SessionIdentity:
    """Validate the request's bearer token.

    Every validation failure collapses to the same 401 response.

    Args:
        authorization: Raw ``Authorization`` header value
        session_service: Session token domain service

    Returns:
        Identity carried by the token

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    try:
        return session_service.validate(extract_bearer_token(authorization))
    except SessionTokenError as e:
        logger.info(f"Rejected request credential: {type(e).__name__}")
        raise unauthorized()
