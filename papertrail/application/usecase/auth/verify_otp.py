"""Verify OTP use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, EmailStr, Field

from papertrail.application.usecase.auth.account_info import AccountInfo
from papertrail.application.usecase.base import BaseUseCase
from papertrail.domain.service import OTPService, SessionService


class VerifyOTPRequest(BaseModel):
    """Redeem a passcode."""

    email: EmailStr
    otp: str = Field(pattern=r"^\d{6}$")


class VerifyOTPResponse(BaseModel):
    """Session issued after a successful verification."""

    token: str
    expires_at: datetime
    account: AccountInfo


class VerifyOTPUseCase(BaseUseCase):
    """Use case for verifying a passcode and starting a session."""

    def __init__(self, otp_service: OTPService, session_service: SessionService) -> None:
        """Initialize verify OTP use case.

        Args:
            otp_service: OTP domain service
            session_service: Session token domain service
        """
        self.otp_service = otp_service
        self.session_service = session_service

    async def execute(self, request: VerifyOTPRequest) -> VerifyOTPResponse:
        """Execute verification.

        Steps:
        1. Verify the passcode (clears it and marks the account verified)
        2. Issue a session token for the account

        Raises:
            AccountNotFoundError: Unknown email
            InvalidOrExpiredOTPError: Missing, wrong or expired passcode
        """
        account = await self.otp_service.verify(str(request.email), request.otp)
        session = self.session_service.issue(account)

        logfire.info("OTP sign-in complete", account_id=str(account.id))

        return VerifyOTPResponse(
            token=session.token,
            expires_at=session.expires_at,
            account=AccountInfo.from_account(account),
        )
