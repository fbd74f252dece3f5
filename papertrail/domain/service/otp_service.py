"""One-time passcode domain service."""

import secrets
from datetime import datetime, timedelta
from typing import Callable, NoReturn, Optional

import logfire

from papertrail.domain.error import (
    AccountNotFoundError,
    DeliveryFailedError,
    InvalidOrExpiredOTPError,
    ValidationError,
)
from papertrail.domain.model import Account
from papertrail.domain.model.common import utc_now
from papertrail.domain.repository import AccountRepository
from papertrail.domain.value import (
    AccountProfile,
    OtpCode,
    OtpMode,
    PendingOtp,
    normalize_email,
)

from .base import Service


class OTPDeliveryChannel:
    """Outbound channel that hands a passcode to the account holder."""

    async def send(self, email: str, code: OtpCode) -> None:
        """Deliver a passcode.

        Args:
            email: Recipient address
            code: Passcode to deliver

        Raises:
            DeliveryFailedError: If the channel could not accept the message
        """
        raise NotImplementedError


def generate_otp_code() -> OtpCode:
    """Draw a 6-digit code uniformly from [100000, 999999]."""
    return OtpCode(str(100000 + secrets.randbelow(900000)))


class OTPService(Service):
    """Domain service issuing and verifying one-time passcodes.

    Each account holds at most one pending passcode. Issuing replaces it,
    verifying clears it.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        delivery_channel: OTPDeliveryChannel,
        otp_ttl: timedelta = timedelta(minutes=5),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize OTP service.

        Args:
            account_repository: Account repository
            delivery_channel: Channel used to send passcodes
            otp_ttl: Lifetime of an issued passcode
            clock: Source of the current time
        """
        self.account_repository = account_repository
        self.delivery_channel = delivery_channel
        self.otp_ttl = otp_ttl
        self.clock = clock

    async def issue(
        self,
        email: str,
        mode: OtpMode,
        profile: Optional[AccountProfile] = None,
    ) -> Account:
        """Issue a fresh passcode for an email and deliver it.

        Signup creates the account if needed. Login requires it to exist.
        The passcode is persisted before delivery is attempted, so a delivery
        failure leaves a valid code in place.

        Args:
            email: Account email
            mode: Signup or login
            profile: Name and date of birth, required for signup

        Returns:
            The account carrying the new pending passcode

        Raises:
            ValidationError: If signup is requested without a profile
            AccountNotFoundError: If login is requested for an unknown email
            DeliveryFailedError: If the passcode could not be delivered
        """
        email = normalize_email(email)

        with logfire.span("otp_service.issue", email=email, mode=mode.value):
            if mode == OtpMode.SIGNUP:
                if profile is None:
                    raise ValidationError("Name and date of birth are required for signup")
                account, created = await self.account_repository.find_or_create(
                    email, name=profile.name, date_of_birth=profile.date_of_birth
                )
                if created:
                    logfire.info("Account created", account_id=str(account.id))
            else:
                account = await self.account_repository.find_by_email(email)
                if account is None:
                    logfire.warn("OTP login requested for unknown email", email=email)
                    raise AccountNotFoundError(email)

            now = self.clock()
            pending = PendingOtp(code=generate_otp_code(), expires_at=now + self.otp_ttl)
            account = await self.account_repository.apply_otp(account.id, pending)
            logfire.info(
                "OTP issued",
                account_id=str(account.id),
                expires_at=pending.expires_at.isoformat(),
            )

            try:
                await self.delivery_channel.send(email, pending.code)
            except DeliveryFailedError as e:
                logfire.error(
                    "OTP delivery failed",
                    account_id=str(account.id),
                    error=str(e),
                )
                raise

            logfire.info("OTP delivered", account_id=str(account.id))
            return account

    async def verify(self, email: str, code: str) -> Account:
        """Redeem a passcode.

        Args:
            email: Account email
            code: Submitted passcode

        Returns:
            The verified account with its passcode cleared

        Raises:
            AccountNotFoundError: If no account matches the email
            InvalidOrExpiredOTPError: If no code is pending, the code differs,
                or the code has expired
        """
        email = normalize_email(email)

        with logfire.span("otp_service.verify", email=email):
            account = await self.account_repository.find_by_email(email)
            if account is None:
                logfire.warn("OTP verification for unknown email", email=email)
                raise AccountNotFoundError(email)

            now = self.clock()
            verified = await self.account_repository.consume_otp(account.id, code, now)
            if verified is None:
                self._reject(account, self._rejection_reason(account, code, now))

            logfire.info("OTP verified", account_id=str(verified.id))
            return verified

    @staticmethod
    def _rejection_reason(account: Account, code: str, now: datetime) -> str:
        """Explain a failed redemption from the account as read before it."""
        pending = account.pending_otp
        if pending is None:
            return "no_pending_otp"
        if not pending.matches(code):
            return "code_mismatch"
        if pending.is_expired(now):
            return "expired"
        # The read matched but the conditional write did not
        return "consumed_or_superseded"

    def _reject(self, account: Account, reason: str) -> NoReturn:
        """Log the specific failure and raise the undifferentiated error."""
        logfire.warn(
            "OTP verification rejected", account_id=str(account.id), reason=reason
        )
        raise InvalidOrExpiredOTPError()
