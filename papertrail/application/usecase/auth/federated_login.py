"""Federated (Google) login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from papertrail.application.usecase.auth.account_info import AccountInfo
from papertrail.application.usecase.base import BaseUseCase
from papertrail.domain.service import AuthService, IdentityService, SessionService


class FederatedLoginRequest(BaseModel):
    """Login request from the OAuth callback.

    These parameters come from the provider in the callback URL.
    """

    code: str  # OAuth authorization code
    state: str  # State parameter for CSRF verification


class FederatedLoginResponse(BaseModel):
    """Federated login response."""

    token: str
    expires_at: datetime
    account: AccountInfo


class FederatedLoginUseCase(BaseUseCase):
    """Use case for completing a Google sign-in."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        session_service: SessionService,
    ) -> None:
        """Initialize federated login use case.

        Args:
            auth_service: Provider redirect flow domain service
            identity_service: Account resolution domain service
            session_service: Session token domain service
        """
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.session_service = session_service

    async def execute(self, request: FederatedLoginRequest) -> FederatedLoginResponse:
        """Execute federated login flow.

        Steps:
        1. Exchange the callback code for the provider's identity assertion
        2. Resolve the assertion to one account (link, merge or create)
        3. Issue a session token

        Raises:
            ProviderError: If the provider flow fails
        """
        with logfire.span("federated_login.execute"):
            identity = await self.auth_service.complete_login(request.code, request.state)
            account = await self.identity_service.resolve_federated(identity)
            session = self.session_service.issue(account)

            logfire.info("Federated sign-in complete", account_id=str(account.id))

            return FederatedLoginResponse(
                token=session.token,
                expires_at=session.expires_at,
                account=AccountInfo.from_account(account),
            )
