"""Unit tests for the note use cases."""

from uuid import UUID, uuid4

import pydantic
import pytest
from dishka import AsyncContainer

from papertrail.application.usecase.note import (
    CreateNoteUseCase,
    DeleteNoteUseCase,
    ListNotesUseCase,
)
from papertrail.application.usecase.note.create_note import CreateNoteRequest
from papertrail.application.usecase.note.delete_note import DeleteNoteRequest
from papertrail.application.usecase.note.list_notes import ListNotesRequest
from papertrail.domain.error import NotFoundError
from papertrail.domain.value import AccountId, NoteId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNoteUseCases:
    @pytest.mark.asyncio
    async def test_create_then_list(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateNoteUseCase)
        list_notes = await unit_env.get(ListNotesUseCase)
        owner = AccountId(uuid4())

        created = await create.execute(
            CreateNoteRequest(account_id=owner, title="Groceries", content="Milk")
        )
        listed = await list_notes.execute(ListNotesRequest(account_id=owner))

        assert [n.note_id for n in listed.notes] == [created.note_id]
        assert listed.notes[0].title == "Groceries"

    @pytest.mark.asyncio
    async def test_delete_someone_elses_note(self, unit_env: AsyncContainer):
        create = await unit_env.get(CreateNoteUseCase)
        delete = await unit_env.get(DeleteNoteUseCase)
        owner = AccountId(uuid4())
        created = await create.execute(
            CreateNoteRequest(account_id=owner, title="Mine", content="Private")
        )

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteNoteRequest(
                    note_id=NoteId(UUID(created.note_id)),
                    account_id=AccountId(uuid4()),
                )
            )

    def test_empty_title_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CreateNoteRequest(account_id=AccountId(uuid4()), title="", content="x")
