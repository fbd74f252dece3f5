"""Account identity domain service."""

from uuid import uuid4

import logfire

from papertrail.domain.error import DuplicateAccountError, NotFoundError
from papertrail.domain.model import Account
from papertrail.domain.repository import AccountRepository
from papertrail.domain.value import AccountId, FederatedIdentity

from .base import Service

DEFAULT_DISPLAY_NAME = "User"


class IdentityService(Service):
    """Domain service resolving sign-ins to a single account per email."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize identity service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get an account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        with logfire.span("identity_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if account is None:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def resolve_federated(self, identity: FederatedIdentity) -> Account:
        """Map a federated identity assertion to exactly one account.

        Resolution order: existing federated link, then an account with the
        same email (which is linked and marked verified), then a new account.
        A lost creation race is retried once so concurrent callbacks for the
        same email converge on the same account.

        Args:
            identity: Provider-asserted identity

        Returns:
            The resolved account
        """
        with logfire.span(
            "identity_service.resolve_federated",
            external_id=identity.external_id,
            email=identity.email,
        ):
            try:
                return await self._resolve(identity)
            except DuplicateAccountError as e:
                logfire.warn(
                    "Concurrent federated sign-in detected, re-resolving",
                    field=e.field,
                )
                return await self._resolve(identity)

    async def _resolve(self, identity: FederatedIdentity) -> Account:
        account = await self.account_repository.find_by_federated_id(
            identity.external_id
        )
        if account is not None:
            logfire.info(
                "Federated identity resolved", account_id=str(account.id), path="linked"
            )
            return account

        account = await self.account_repository.find_by_email(identity.email)
        if account is not None:
            saved = await self.account_repository.link_federated(
                account.id, identity.external_id
            )
            logfire.info(
                "Federated identity linked to existing account",
                account_id=str(saved.id),
                path="merged",
            )
            return saved

        created = Account(
            id=AccountId(uuid4()),
            email=identity.email,
            name=identity.display_name or DEFAULT_DISPLAY_NAME,
            federated_id=identity.external_id,
            is_verified=True,
        )
        saved = await self.account_repository.save(created)
        logfire.info(
            "Account created from federated identity",
            account_id=str(saved.id),
            path="created",
        )
        return saved
