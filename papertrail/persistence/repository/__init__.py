"""PostgreSQL repository implementations."""

from papertrail.persistence.repository.account import PostgresAccountRepository
from papertrail.persistence.repository.note import PostgresNoteRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresNoteRepository",
]
