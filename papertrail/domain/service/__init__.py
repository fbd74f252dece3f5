"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .identity_service import IdentityService
from .note_service import NoteService
from .otp_service import OTPDeliveryChannel, OTPService, generate_otp_code
from .session_service import IssuedSession, SessionService

__all__ = [
    "AuthService",
    "IdentityService",
    "IssuedSession",
    "NoteService",
    "OAuthClient",
    "OTPDeliveryChannel",
    "OTPService",
    "Service",
    "SessionService",
    "generate_otp_code",
]
