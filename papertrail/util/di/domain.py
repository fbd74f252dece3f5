"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from papertrail.adapter.google.client import GoogleOAuthClient
from papertrail.config import AuthSettings
from papertrail.domain.repository import AccountRepository, NoteRepository
from papertrail.domain.service import (
    AuthService,
    IdentityService,
    NoteService,
    OTPDeliveryChannel,
    OTPService,
    SessionService,
)
from papertrail.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_otp_service(
        self,
        account_repository: AccountRepository,
        delivery_channel: OTPDeliveryChannel,
        auth_settings: AuthSettings,
    ) -> OTPService:
        """Provide one-time passcode domain service."""
        return OTPService(
            account_repository=account_repository,
            delivery_channel=delivery_channel,
            otp_ttl=timedelta(minutes=auth_settings.otp_ttl_minutes),
        )

    @provide
    def get_identity_service(
        self, account_repository: AccountRepository
    ) -> IdentityService:
        """Provide account identity domain service."""
        return IdentityService(account_repository=account_repository)

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_auth_service(self, oauth_client: GoogleOAuthClient) -> AuthService:
        """Provide federated authentication domain service."""
        return AuthService(oauth_client=oauth_client)

    @provide
    def get_note_service(self, note_repository: NoteRepository) -> NoteService:
        """Provide note domain service."""
        return NoteService(note_repository=note_repository)
