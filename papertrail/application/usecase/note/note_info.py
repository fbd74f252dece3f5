"""Note payload shared by the note use cases."""

from datetime import datetime

from pydantic import BaseModel

from papertrail.domain.model import Note


class NoteInfo(BaseModel):
    """Note information for responses."""

    note_id: str
    title: str
    content: str
    created_at: datetime

    @classmethod
    def from_note(cls, note: Note) -> "NoteInfo":
        return cls(
            note_id=str(note.id),
            title=note.title,
            content=note.content,
            created_at=note.created_at,
        )
