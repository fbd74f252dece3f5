"""PostgreSQL implementation of Account repository."""

from datetime import date, datetime
from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papertrail.domain.error import DuplicateAccountError, NotFoundError
from papertrail.domain.model import Account
from papertrail.domain.model.common import utc_now
from papertrail.domain.repository import AccountRepository
from papertrail.domain.value import AccountId, PendingOtp
from papertrail.persistence.mappers import account_to_dict, row_to_account
from papertrail.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, condition) -> Optional[Account]:
        stmt = select(accounts_table).where(condition)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by normalised email."""
        return await self._find_one(accounts_table.c.email == email)

    async def find_by_federated_id(self, federated_id: str) -> Optional[Account]:
        """Find an account by federated subject ID."""
        return await self._find_one(accounts_table.c.federated_id == federated_id)

    async def find_or_create(
        self,
        email: str,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> tuple[Account, bool]:
        """Insert the account unless the email exists, then read it back.

        ``ON CONFLICT (email) DO NOTHING`` makes concurrent signups for one
        email resolve to a single row.
        """
        now = utc_now()
        stmt = (
            insert(accounts_table)
            .values(
                id=uuid4(),
                email=email,
                name=name,
                date_of_birth=date_of_birth,
                is_verified=False,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_nothing(index_elements=["email"])
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None

        account = await self.find_by_email(email)
        if account is None:
            # Unreachable unless the row was deleted between statements
            raise NotFoundError("Account", email)
        return account, created

    async def apply_otp(
        self, account_id: AccountId, pending_otp: PendingOtp
    ) -> Account:
        """Replace the pending passcode in a single-row update."""
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(
                otp_code=pending_otp.code.root,
                otp_expires_at=pending_otp.expires_at,
                updated_at=utc_now(),
            )
            .returning(*accounts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Account", str(account_id))
        await self.session.flush()
        return row_to_account(dict(row))

    async def consume_otp(
        self, account_id: AccountId, code: str, now: datetime
    ) -> Optional[Account]:
        """Redeem the passcode with a conditional single-row update.

        The ``WHERE`` clause re-checks code and expiry against the stored row,
        so only one of several concurrent redemptions can match.
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .where(accounts_table.c.otp_code == code)
            .where(accounts_table.c.otp_expires_at > now)
            .values(
                otp_code=None,
                otp_expires_at=None,
                is_verified=True,
                updated_at=now,
            )
            .returning(*accounts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_account(dict(row)) if row else None

    async def link_federated(self, account_id: AccountId, federated_id: str) -> Account:
        """Write only the federation columns.

        Raises:
            NotFoundError: If the account does not exist
            DuplicateAccountError: If another account holds the federated ID
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(federated_id=federated_id, is_verified=True, updated_at=utc_now())
            .returning(*accounts_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except IntegrityError:
            raise DuplicateAccountError("federated_id", federated_id)

        if row is None:
            raise NotFoundError("Account", str(account_id))
        return row_to_account(dict(row))

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Unique violations are rolled back to a savepoint so the surrounding
        request transaction stays usable.

        Raises:
            DuplicateAccountError: If email or federated ID is already taken
        """
        existing = await self.find_by_id(account.id)
        account_dict = account_to_dict(account)

        try:
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        accounts_table.update()
                        .where(accounts_table.c.id == account.id)
                        .values(**account_dict)
                    )
                else:
                    stmt = accounts_table.insert().values(**account_dict)
                await self.session.execute(stmt)
        except IntegrityError as e:
            detail = str(e.orig)
            if "federated_id" in detail:
                raise DuplicateAccountError("federated_id", account.federated_id or "")
            raise DuplicateAccountError("email", account.email)

        return account
