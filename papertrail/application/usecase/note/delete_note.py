"""Delete note use case."""

from pydantic import BaseModel

from papertrail.application.usecase.base import BaseUseCase
from papertrail.domain.service import NoteService
from papertrail.domain.value import AccountId, NoteId


class DeleteNoteRequest(BaseModel):
    """Delete note request."""

    note_id: NoteId
    account_id: AccountId


class DeleteNoteUseCase(BaseUseCase):
    """Use case for deleting one of the caller's notes."""

    def __init__(self, note_service: NoteService) -> None:
        self.note_service = note_service

    async def execute(self, request: DeleteNoteRequest) -> None:
        """Delete the note.

        Raises:
            NotFoundError: If the caller owns no such note
        """
        await self.note_service.delete_note(request.note_id, request.account_id)
