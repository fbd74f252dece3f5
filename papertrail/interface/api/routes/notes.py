"""Note routes. Every route requires a bearer token."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Response, status
from pydantic import BaseModel, Field

from papertrail.application.usecase.note import (
    CreateNoteUseCase,
    DeleteNoteUseCase,
    ListNotesUseCase,
)
from papertrail.application.usecase.note.create_note import CreateNoteRequest
from papertrail.application.usecase.note.delete_note import DeleteNoteRequest
from papertrail.application.usecase.note.list_notes import (
    ListNotesRequest,
    ListNotesResponse,
)
from papertrail.application.usecase.note.note_info import NoteInfo
from papertrail.domain.error import NotFoundError
from papertrail.domain.service import SessionService
from papertrail.domain.value import NoteId
from papertrail.interface.api.security import authenticate

router = APIRouter(prefix="/notes", tags=["notes"], route_class=DishkaRoute)


class CreateNoteAPIRequest(BaseModel):
    """API request for creating a note (without the owner)."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10000)


@router.post("", response_model=NoteInfo, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: CreateNoteAPIRequest,
    create_note_use_case: FromDishka[CreateNoteUseCase],
    session_service: FromDishka[SessionService],
    authorization: str | None = Header(default=None),
) -> NoteInfo:
    """Create a note owned by the caller."""
    identity = authenticate(authorization, session_service)
    return await create_note_use_case.execute(
        CreateNoteRequest(
            account_id=identity.account_id,
            title=request.title,
            content=request.content,
        )
    )


@router.get("", response_model=ListNotesResponse)
async def list_notes(
    list_notes_use_case: FromDishka[ListNotesUseCase],
    session_service: FromDishka[SessionService],
    authorization: str | None = Header(default=None),
) -> ListNotesResponse:
    """List the caller's notes, newest first."""
    identity = authenticate(authorization, session_service)
    return await list_notes_use_case.execute(
        ListNotesRequest(account_id=identity.account_id)
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    delete_note_use_case: FromDishka[DeleteNoteUseCase],
    session_service: FromDishka[SessionService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete one of the caller's notes.

    Notes belonging to other accounts are reported as not found.
    """
    identity = authenticate(authorization, session_service)
    try:
        await delete_note_use_case.execute(
            DeleteNoteRequest(note_id=NoteId(note_id), account_id=identity.account_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
