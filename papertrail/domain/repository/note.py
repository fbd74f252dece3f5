"""Note repository interface."""

from abc import ABC, abstractmethod

from papertrail.domain.model.note import Note
from papertrail.domain.value import AccountId, NoteId


class NoteRepository(ABC):
    """Repository for notes. Every read and delete is scoped to an owner."""

    @abstractmethod
    async def save(self, note: Note) -> Note:
        """Save a note."""
        pass

    @abstractmethod
    async def find_all_by_account(self, account_id: AccountId) -> list[Note]:
        """List an account's notes, newest first."""
        pass

    @abstractmethod
    async def delete_owned(self, note_id: NoteId, account_id: AccountId) -> bool:
        """Delete a note if it belongs to the account.

        Returns:
            True if a note was deleted, False otherwise
        """
        pass
