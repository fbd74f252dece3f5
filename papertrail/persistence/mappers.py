"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from papertrail.domain.model import Account, Note
from papertrail.domain.value import AccountId, NoteId, OtpCode, PendingOtp


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    The pending passcode is stored as two nullable columns and is only
    present when both are set.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    pending_otp = None
    if row.get("otp_code") and row.get("otp_expires_at"):
        pending_otp = PendingOtp(
            code=OtpCode(row["otp_code"]), expires_at=row["otp_expires_at"]
        )

    return Account(
        id=AccountId(_uuid(row["id"])),
        email=row["email"],
        name=row.get("name"),
        date_of_birth=row.get("date_of_birth"),
        federated_id=row.get("federated_id"),
        is_verified=row["is_verified"],
        pending_otp=pending_otp,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = account.model_dump(exclude={"pending_otp"})
    data["otp_code"] = account.pending_otp.code.root if account.pending_otp else None
    data["otp_expires_at"] = (
        account.pending_otp.expires_at if account.pending_otp else None
    )
    return data


def row_to_note(row: Dict[str, Any]) -> Note:
    """Convert database row to Note domain model."""
    return Note(
        id=NoteId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
    )


def note_to_dict(note: Note) -> Dict[str, Any]:
    """Convert Note domain model to database dict."""
    return note.model_dump()
