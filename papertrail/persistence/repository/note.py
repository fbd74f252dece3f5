"""PostgreSQL implementation of Note repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from papertrail.domain.model import Note
from papertrail.domain.repository import NoteRepository
from papertrail.domain.value import AccountId, NoteId
from papertrail.persistence.mappers import note_to_dict, row_to_note
from papertrail.persistence.tables import notes_table


class PostgresNoteRepository(NoteRepository):
    """PostgreSQL implementation of NoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, note: Note) -> Note:
        stmt = notes_table.insert().values(**note_to_dict(note))
        await self.session.execute(stmt)
        await self.session.flush()
        return note

    async def find_all_by_account(self, account_id: AccountId) -> list[Note]:
        stmt = (
            select(notes_table)
            .where(notes_table.c.account_id == account_id)
            .order_by(notes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_note(dict(row)) for row in result.mappings().all()]

    async def delete_owned(self, note_id: NoteId, account_id: AccountId) -> bool:
        stmt = (
            delete(notes_table)
            .where(notes_table.c.id == note_id)
            .where(notes_table.c.account_id == account_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
