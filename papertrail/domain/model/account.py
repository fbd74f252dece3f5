"""Account aggregate root.

An account is reachable through two sign-in paths, email OTP and Google,
and email is the key that merges them.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator

from papertrail.domain.model.common import DomainModel, utc_now
from papertrail.domain.value import AccountId, PendingOtp, normalize_email


class Account(DomainModel):
    """Account aggregate root - the only identity entity.

    Exactly one account exists per email. ``pending_otp`` holds at most one
    outstanding passcode and is replaced by each new request.
    """

    id: AccountId
    email: str
    name: Optional[str] = None  # Required for OTP signup, optional for federated accounts
    date_of_birth: Optional[date] = None  # Only set by OTP signup
    federated_id: Optional[str] = None  # Google subject ID, unique when present
    is_verified: bool = False  # Never reverts once True
    pending_otp: Optional[PendingOtp] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("email")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Store emails normalised so lookups are case-insensitive."""
        return normalize_email(v)
