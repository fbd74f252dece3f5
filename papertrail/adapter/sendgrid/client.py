"""SendGrid OTP delivery channel.

Sends passcode emails through the SendGrid v3 mail send API.
"""

import httpx
import logfire

from papertrail.domain.error import DeliveryFailedError
from papertrail.domain.service.otp_service import OTPDeliveryChannel
from papertrail.domain.value import OtpCode

OTP_SUBJECT = "Your OTP Code"


def render_otp_message(code: OtpCode, ttl_minutes: int) -> str:
    """Render the plain-text passcode email body."""
    return f"Your OTP is {code.root}. It will expire in {ttl_minutes} minutes."


class SendGridDeliveryChannel(OTPDeliveryChannel):
    """Base class for email delivery channels.

    Provides type distinction for dependency injection.
    """

    pass


class RealSendGridDeliveryChannel(SendGridDeliveryChannel):
    """Delivers passcodes by email through SendGrid."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        ttl_minutes: int = 5,
        timeout: float = 10.0,
    ) -> None:
        """Initialize SendGrid channel.

        Args:
            api_key: SendGrid API key
            from_address: Verified sender address
            ttl_minutes: Passcode lifetime quoted in the message
            timeout: HTTP timeout in seconds
        """
        self.api_key = api_key
        self.from_address = from_address
        self.ttl_minutes = ttl_minutes
        self.timeout = timeout

        self.send_url = "https://api.sendgrid.com/v3/mail/send"

    async def send(self, email: str, code: OtpCode) -> None:
        """Send a passcode email.

        Args:
            email: Recipient address
            code: Passcode to deliver

        Raises:
            DeliveryFailedError: If SendGrid does not accept the message
        """
        payload = {
            "personalizations": [{"to": [{"email": email}]}],
            "from": {"email": self.from_address},
            "subject": OTP_SUBJECT,
            "content": [
                {
                    "type": "text/plain",
                    "value": render_otp_message(code, self.ttl_minutes),
                }
            ],
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.send_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("SendGrid HTTP error", error=str(e))
            raise DeliveryFailedError(f"HTTP error sending OTP email: {e}")

        # SendGrid answers 202 Accepted when the message is queued
        if response.status_code != 202:
            logfire.error(
                "SendGrid rejected OTP email",
                status_code=response.status_code,
                error=response.text,
            )
            raise DeliveryFailedError(f"SendGrid returned {response.status_code}")


class MockSendGridDeliveryChannel(SendGridDeliveryChannel):
    """Mock delivery channel for testing.

    Records every passcode instead of sending it.
    """

    def __init__(self, fail: bool = False):
        """Initialize mock channel.

        Args:
            fail: If True, every send raises DeliveryFailedError
        """
        self.fail = fail
        self.sent: list[tuple[str, OtpCode]] = []

    async def send(self, email: str, code: OtpCode) -> None:
        if self.fail:
            raise DeliveryFailedError("Mock delivery failure")
        self.sent.append((email, code))

    def last_code_for(self, email: str) -> str | None:
        """Return the most recent code sent to an address, if any."""
        for recipient, code in reversed(self.sent):
            if recipient == email:
                return code.root
        return None
