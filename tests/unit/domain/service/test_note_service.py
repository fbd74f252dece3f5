"""Unit tests for NoteService."""

from uuid import uuid4

import pytest

from papertrail.domain.error import NotFoundError
from papertrail.domain.service import NoteService
from papertrail.domain.value import AccountId, NoteId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNoteService:
    """Tests for NoteService."""

    @pytest.mark.asyncio
    async def test_create_and_list_newest_first(self, unit_env):
        """Notes should be listed newest first."""
        # Arrange
        note_service = await unit_env.get(NoteService)
        owner = AccountId(uuid4())

        # Act
        first = await note_service.create_note(owner, "First", "one")
        second = await note_service.create_note(owner, "Second", "two")
        notes = await note_service.list_notes(owner)

        # Assert
        assert {n.id for n in notes} == {first.id, second.id}
        assert notes[0].created_at >= notes[1].created_at

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_owner(self, unit_env):
        """An account only sees its own notes."""
        note_service = await unit_env.get(NoteService)
        alice = AccountId(uuid4())
        bob = AccountId(uuid4())
        await note_service.create_note(alice, "Alice's", "private")

        assert await note_service.list_notes(bob) == []

    @pytest.mark.asyncio
    async def test_delete_own_note(self, unit_env):
        """Deleting an owned note removes it."""
        note_service = await unit_env.get(NoteService)
        owner = AccountId(uuid4())
        note = await note_service.create_note(owner, "Title", "content")

        await note_service.delete_note(note.id, owner)

        assert await note_service.list_notes(owner) == []

    @pytest.mark.asyncio
    async def test_delete_other_accounts_note_raises(self, unit_env):
        """Another account's note is reported as missing and kept."""
        note_service = await unit_env.get(NoteService)
        owner = AccountId(uuid4())
        intruder = AccountId(uuid4())
        note = await note_service.create_note(owner, "Title", "content")

        with pytest.raises(NotFoundError):
            await note_service.delete_note(note.id, intruder)

        assert len(await note_service.list_notes(owner)) == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_note_raises(self, unit_env):
        note_service = await unit_env.get(NoteService)

        with pytest.raises(NotFoundError):
            await note_service.delete_note(NoteId(uuid4()), AccountId(uuid4()))
