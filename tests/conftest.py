"""Test configuration and fixtures."""

import asyncio
from datetime import datetime, timedelta, timezone

import logfire

from papertrail.persistence.repository.inmemory import InMemoryAccountRepository

# Keep spans local; nothing is sent during tests
logfire.configure(send_to_logfire=False, console=False)


class FrozenClock:
    """Controllable clock for expiry tests.

    Call the instance to read the time; ``advance`` moves it forward.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class SuspendingAccountRepository(InMemoryAccountRepository):
    """In-memory repository that yields to the event loop like a database.

    Reads return before yielding, so the caller resumes with a snapshot other
    tasks may already have changed. ``save`` yields before writing, as the
    PostgreSQL version reads before its update. The single-statement writes
    (``apply_otp``, ``consume_otp``, ``link_federated``) stay atomic.
    """

    async def find_by_id(self, account_id):
        account = await super().find_by_id(account_id)
        await asyncio.sleep(0)
        return account

    async def find_by_email(self, email):
        account = await super().find_by_email(email)
        await asyncio.sleep(0)
        return account

    async def find_by_federated_id(self, federated_id):
        account = await super().find_by_federated_id(federated_id)
        await asyncio.sleep(0)
        return account

    async def save(self, account):
        await asyncio.sleep(0)
        return await super().save(account)
