"""Domain model entities for PaperTrail."""

from papertrail.domain.model.account import Account
from papertrail.domain.model.note import Note

__all__ = [
    "Account",
    "Note",
]
