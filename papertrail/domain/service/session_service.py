"""Session token domain service."""

from datetime import datetime, timedelta
from typing import Callable

import logfire
from pydantic import BaseModel

from papertrail.config import AuthSettings
from papertrail.domain.error import UnverifiedAccountError
from papertrail.domain.model import Account
from papertrail.domain.model.common import utc_now
from papertrail.domain.value import AccountId, SessionIdentity
from papertrail.util.jwt import SessionTokenError, create_token, verify_token

from .base import Service


class IssuedSession(BaseModel):
    """A freshly signed session token and its expiry."""

    token: str
    expires_at: datetime


class SessionService(Service):
    """Domain service issuing and validating stateless session tokens."""

    def __init__(
        self,
        auth_settings: AuthSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
            clock: Source of the current time
        """
        self.auth_settings = auth_settings
        self.clock = clock

    @property
    def session_lifetime(self) -> timedelta:
        return timedelta(hours=self.auth_settings.session_expiry_hours)

    def issue(self, account: Account) -> IssuedSession:
        """Sign a session token for a verified account.

        Args:
            account: Account to authenticate

        Returns:
            Signed token and its expiry

        Raises:
            UnverifiedAccountError: If the account has not been verified
        """
        with logfire.span("session_service.issue", account_id=str(account.id)):
            if not account.is_verified:
                logfire.warn(
                    "Session refused for unverified account",
                    account_id=str(account.id),
                )
                raise UnverifiedAccountError(str(account.id))

            issued_at = self.clock()
            expires_at = issued_at + self.session_lifetime
            token = create_token(
                str(account.id), account.email, issued_at, expires_at, self.auth_settings
            )
            logfire.info(
                "Session issued",
                account_id=str(account.id),
                expires_at=expires_at.isoformat(),
            )
            return IssuedSession(token=token, expires_at=expires_at)

    def validate(self, token: str | None) -> SessionIdentity:
        """Validate a bearer token and recover the authenticated identity.

        Args:
            token: Raw token, or None if the request carried none

        Returns:
            Identity carried by the token

        Raises:
            SessionTokenError: Missing, malformed, expired or claim-less token
        """
        with logfire.span("session_service.validate"):
            try:
                payload = verify_token(token, self.auth_settings)
            except SessionTokenError as e:
                logfire.info(
                    "Session token rejected", reason=type(e).__name__, error=str(e)
                )
                raise

            return SessionIdentity(
                account_id=AccountId(payload.sub),
                email=payload.email,
                expires_at=payload.exp,
            )
