"""In-memory account repository for testing."""

from datetime import date, datetime
from typing import Optional
from uuid import uuid4

from papertrail.domain.error import DuplicateAccountError, NotFoundError
from papertrail.domain.model.account import Account
from papertrail.domain.model.common import utc_now
from papertrail.domain.repository.account import AccountRepository
from papertrail.domain.value import AccountId, PendingOtp


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Methods never await between reading and writing, so each call is atomic
    on a single event loop. Uniqueness of email and federated ID is enforced
    like the database constraints.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_federated_id(self, federated_id: str) -> Optional[Account]:
        """Find an account by federated subject ID."""
        for account in self._accounts.values():
            if account.federated_id == federated_id:
                return account
        return None

    async def find_or_create(
        self,
        email: str,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> tuple[Account, bool]:
        """Return the account for an email, creating it if absent."""
        for account in self._accounts.values():
            if account.email == email:
                return account, False

        account = Account(
            id=AccountId(uuid4()),
            email=email,
            name=name,
            date_of_birth=date_of_birth,
        )
        self._accounts[account.id] = account
        return account, True

    async def apply_otp(
        self, account_id: AccountId, pending_otp: PendingOtp
    ) -> Account:
        """Replace the pending passcode on an account."""
        account = self._accounts.get(account_id)
        if account is None:
            raise NotFoundError("Account", str(account_id))
        updated = account.model_copy(
            update={"pending_otp": pending_otp, "updated_at": utc_now()}
        )
        self._accounts[account_id] = updated
        return updated

    async def consume_otp(
        self, account_id: AccountId, code: str, now: datetime
    ) -> Optional[Account]:
        """Clear a matching, unexpired passcode and mark the account verified."""
        account = self._accounts.get(account_id)
        if account is None or account.pending_otp is None:
            return None
        pending = account.pending_otp
        if not pending.matches(code) or pending.is_expired(now):
            return None
        verified = account.model_copy(
            update={"pending_otp": None, "is_verified": True, "updated_at": now}
        )
        self._accounts[account_id] = verified
        return verified

    async def link_federated(self, account_id: AccountId, federated_id: str) -> Account:
        """Attach a federated subject ID without touching other fields."""
        account = self._accounts.get(account_id)
        if account is None:
            raise NotFoundError("Account", str(account_id))
        for other in self._accounts.values():
            if other.id != account_id and other.federated_id == federated_id:
                raise DuplicateAccountError("federated_id", federated_id)
        linked = account.model_copy(
            update={
                "federated_id": federated_id,
                "is_verified": True,
                "updated_at": utc_now(),
            }
        )
        self._accounts[account_id] = linked
        return linked

    async def save(self, account: Account) -> Account:
        """Save or update an account."""
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            if other.email == account.email:
                raise DuplicateAccountError("email", account.email)
            if account.federated_id and other.federated_id == account.federated_id:
                raise DuplicateAccountError("federated_id", account.federated_id)
        self._accounts[account.id] = account
        return account
