"""Note domain service."""

from uuid import uuid4

import logfire

from papertrail.domain.error import NotFoundError
from papertrail.domain.model import Note
from papertrail.domain.repository import NoteRepository
from papertrail.domain.value import AccountId, NoteId

from .base import Service


class NoteService(Service):
    """Domain service for an account's notes."""

    def __init__(self, note_repository: NoteRepository) -> None:
        """Initialize note service.

        Args:
            note_repository: Note repository
        """
        self.note_repository = note_repository

    async def create_note(self, account_id: AccountId, title: str, content: str) -> Note:
        with logfire.span("note_service.create_note", account_id=str(account_id)):
            note = Note(
                id=NoteId(uuid4()),
                account_id=account_id,
                title=title,
                content=content,
            )
            saved = await self.note_repository.save(note)
            logfire.info(
                "Note created", note_id=str(saved.id), account_id=str(account_id)
            )
            return saved

    async def list_notes(self, account_id: AccountId) -> list[Note]:
        with logfire.span("note_service.list_notes", account_id=str(account_id)):
            notes = await self.note_repository.find_all_by_account(account_id)
            logfire.info(
                "Notes retrieved", account_id=str(account_id), count=len(notes)
            )
            return notes

    async def delete_note(self, note_id: NoteId, account_id: AccountId) -> None:
        """Delete a note owned by the account.

        Notes owned by other accounts are reported as missing.

        Raises:
            NotFoundError: If the account has no such note
        """
        with logfire.span(
            "note_service.delete_note",
            note_id=str(note_id),
            account_id=str(account_id),
        ):
            deleted = await self.note_repository.delete_owned(note_id, account_id)
            if not deleted:
                logfire.warn(
                    "Note not found for account",
                    note_id=str(note_id),
                    account_id=str(account_id),
                )
                raise NotFoundError("Note", str(note_id))
            logfire.info("Note deleted", note_id=str(note_id))
