"""Repository interfaces for the PaperTrail domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from papertrail.domain.repository.account import AccountRepository
from papertrail.domain.repository.note import NoteRepository

__all__ = [
    "AccountRepository",
    "NoteRepository",
]
