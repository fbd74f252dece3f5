"""Create note use case."""

from pydantic import BaseModel, Field

from papertrail.application.usecase.base import BaseUseCase
from papertrail.application.usecase.note.note_info import NoteInfo
from papertrail.domain.service import NoteService
from papertrail.domain.value import AccountId


class CreateNoteRequest(BaseModel):
    """Create note request."""

    account_id: AccountId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10000)


class CreateNoteUseCase(BaseUseCase):
    """Use case for creating a note."""

    def __init__(self, note_service: NoteService) -> None:
        self.note_service = note_service

    async def execute(self, request: CreateNoteRequest) -> NoteInfo:
        note = await self.note_service.create_note(
            request.account_id, request.title, request.content
        )
        return NoteInfo.from_note(note)
