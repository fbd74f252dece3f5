"""SendGrid email delivery adapter."""

from .client import (
    MockSendGridDeliveryChannel,
    RealSendGridDeliveryChannel,
    SendGridDeliveryChannel,
)

__all__ = [
    "MockSendGridDeliveryChannel",
    "RealSendGridDeliveryChannel",
    "SendGridDeliveryChannel",
]
