"""Mock persistence providers for testing."""

from dishka import Scope, provide

from papertrail.domain.repository import AccountRepository, NoteRepository
from papertrail.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryNoteRepository,
)
from papertrail.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests served by
    one container. Each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide(scope=Scope.APP)
    def get_note_repository(self) -> NoteRepository:
        """Provide in-memory note repository."""
        return InMemoryNoteRepository()
