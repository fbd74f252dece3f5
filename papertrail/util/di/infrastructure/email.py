"""Email delivery infrastructure providers."""

from dishka import Scope, provide

from papertrail.adapter.sendgrid.client import RealSendGridDeliveryChannel
from papertrail.config import Settings
from papertrail.domain.service import OTPDeliveryChannel
from papertrail.util.di.base import ProviderBase
from papertrail.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email delivery component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_delivery_channel(self, settings: Settings) -> OTPDeliveryChannel:
        """Provide SendGrid OTP delivery channel.

        Raises:
            ConfigurationError: If the SendGrid API key is not configured
        """
        if not settings.email.sendgrid_api_key:
            raise ConfigurationError("SendGrid API key must be configured")

        return RealSendGridDeliveryChannel(
            api_key=settings.email.sendgrid_api_key,
            from_address=settings.email.from_address,
            ttl_minutes=settings.auth.otp_ttl_minutes,
            timeout=settings.email.timeout_seconds,
        )
