"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .note import InMemoryNoteRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryNoteRepository",
]
