"""Note use cases."""

from .create_note import CreateNoteUseCase
from .delete_note import DeleteNoteUseCase
from .list_notes import ListNotesUseCase

__all__ = ["CreateNoteUseCase", "DeleteNoteUseCase", "ListNotesUseCase"]
