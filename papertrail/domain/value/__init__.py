"""Domain value objects for PaperTrail."""

from papertrail.domain.value.identifiers import AccountId, NoteId
from papertrail.domain.value.types import (
    AccountProfile,
    FederatedIdentity,
    OtpCode,
    OtpMode,
    PendingOtp,
    SessionIdentity,
    normalize_email,
)

__all__ = [
    # Identifiers
    "AccountId",
    "NoteId",
    # Types
    "AccountProfile",
    "FederatedIdentity",
    "OtpCode",
    "OtpMode",
    "PendingOtp",
    "SessionIdentity",
    "normalize_email",
]
