"""Get current account use case."""

from pydantic import BaseModel

from papertrail.application.usecase.auth.account_info import AccountInfo
from papertrail.application.usecase.base import BaseUseCase
from papertrail.domain.service import IdentityService, SessionService


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    token: str | None  # Bearer token, None if the request carried none


class GetCurrentAccountUseCase(BaseUseCase):
    """Use case for loading the account behind a session token."""

    def __init__(
        self, session_service: SessionService, identity_service: IdentityService
    ) -> None:
        """Initialize get current account use case.

        Args:
            session_service: Session token domain service
            identity_service: Account identity domain service
        """
        self.session_service = session_service
        self.identity_service = identity_service

    async def execute(self, request: GetCurrentAccountRequest) -> AccountInfo:
        """Validate the token and load its account.

        Raises:
            SessionTokenError: If the token is missing or invalid
            NotFoundError: If the token's account no longer exists
        """
        identity = self.session_service.validate(request.token)
        account = await self.identity_service.get_by_id(identity.account_id)
        return AccountInfo.from_account(account)
