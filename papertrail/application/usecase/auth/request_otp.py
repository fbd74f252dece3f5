"""Request OTP use case."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from papertrail.application.usecase.base import BaseUseCase
from papertrail.domain.service import OTPService
from papertrail.domain.value import AccountProfile, OtpMode


class RequestOTPRequest(BaseModel):
    """Request a passcode for signup or login."""

    email: EmailStr
    mode: OtpMode
    name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    dob: Optional[date] = None

    @model_validator(mode="after")
    def require_profile_for_signup(self) -> "RequestOTPRequest":
        """Signup must carry a name and date of birth."""
        if self.mode == OtpMode.SIGNUP and (self.name is None or self.dob is None):
            raise ValueError("name and dob are required for signup")
        return self


class RequestOTPResponse(BaseModel):
    """Request OTP response."""

    ok: bool
    message: str


class RequestOTPUseCase(BaseUseCase):
    """Use case for issuing and delivering a one-time passcode."""

    def __init__(self, otp_service: OTPService) -> None:
        """Initialize request OTP use case.

        Args:
            otp_service: OTP domain service
        """
        self.otp_service = otp_service

    async def execute(self, request: RequestOTPRequest) -> RequestOTPResponse:
        """Issue a passcode.

        Raises:
            AccountNotFoundError: Login for an unknown email
            DeliveryFailedError: The passcode could not be sent
        """
        profile = None
        if request.mode == OtpMode.SIGNUP:
            profile = AccountProfile(name=request.name, date_of_birth=request.dob)

        await self.otp_service.issue(str(request.email), request.mode, profile)

        return RequestOTPResponse(ok=True, message="OTP sent to your email")
