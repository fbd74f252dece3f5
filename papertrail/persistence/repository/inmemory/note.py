"""In-memory note repository for testing."""

from papertrail.domain.model.note import Note
from papertrail.domain.repository.note import NoteRepository
from papertrail.domain.value import AccountId, NoteId


class InMemoryNoteRepository(NoteRepository):
    """In-memory implementation of NoteRepository for testing."""

    def __init__(self) -> None:
        self._notes: dict[NoteId, Note] = {}

    async def save(self, note: Note) -> Note:
        self._notes[note.id] = note
        return note

    async def find_all_by_account(self, account_id: AccountId) -> list[Note]:
        notes = [n for n in self._notes.values() if n.account_id == account_id]
        return sorted(notes, key=lambda n: n.created_at, reverse=True)

    async def delete_owned(self, note_id: NoteId, account_id: AccountId) -> bool:
        note = self._notes.get(note_id)
        if note is None or note.account_id != account_id:
            return False
        del self._notes[note_id]
        return True
