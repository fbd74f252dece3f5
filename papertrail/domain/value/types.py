"""Domain value objects for PaperTrail.

Value objects are immutable and defined by their values, not identity.
"""

import re
import secrets
from datetime import date, datetime
from enum import Enum

from pydantic import field_validator

from papertrail.domain.value.common import RootValueObject, ValueObject
from papertrail.domain.value.identifiers import AccountId


def normalize_email(email: str) -> str:
    """Normalise an email address for storage and comparison.

    Emails are the merge key between sign-in paths and are compared
    case-insensitively.
    """
    return email.strip().lower()


class OtpMode(str, Enum):
    """Whether a passcode request may create an account."""

    SIGNUP = "signup"
    LOGIN = "login"


class OtpCode(RootValueObject[str]):
    """Six-digit numeric one-time passcode."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is exactly six digits without a leading zero."""
        if not re.match(r"^[1-9][0-9]{5}$", v):
            raise ValueError("OTP code must be 6 digits in range 100000-999999")
        return v


class PendingOtp(ValueObject):
    """The single outstanding passcode stored on an account."""

    code: OtpCode
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Return True once ``now`` has reached the expiry instant."""
        return now >= self.expires_at

    def matches(self, submitted: str) -> bool:
        """Compare a submitted code in constant time."""
        return secrets.compare_digest(
            self.code.root.encode("utf-8"), submitted.encode("utf-8")
        )


class AccountProfile(ValueObject):
    """Profile captured by an email-OTP signup."""

    name: str
    date_of_birth: date


class FederatedIdentity(ValueObject):
    """Identity asserted by an external provider after its redirect flow.

    The provider has already verified the email.
    """

    external_id: str  # Provider subject identifier
    email: str
    display_name: str | None = None

    @field_validator("email")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Normalise the asserted email."""
        return normalize_email(v)


class SessionIdentity(ValueObject):
    """Authenticated identity recovered from a session token."""

    account_id: AccountId
    email: str
    expires_at: datetime
