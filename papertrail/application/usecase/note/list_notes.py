"""List notes use case."""

from pydantic import BaseModel

from papertrail.application.usecase.base import BaseUseCase
from papertrail.application.usecase.note.note_info import NoteInfo
from papertrail.domain.service import NoteService
from papertrail.domain.value import AccountId


class ListNotesRequest(BaseModel):
    """List notes request."""

    account_id: AccountId


class ListNotesResponse(BaseModel):
    """An account's notes, newest first."""

    notes: list[NoteInfo]


class ListNotesUseCase(BaseUseCase):
    """Use case for listing an account's notes."""

    def __init__(self, note_service: NoteService) -> None:
        self.note_service = note_service

    async def execute(self, request: ListNotesRequest) -> ListNotesResponse:
        notes = await self.note_service.list_notes(request.account_id)
        return ListNotesResponse(notes=[NoteInfo.from_note(n) for n in notes])
