"""Account repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from papertrail.domain.model.account import Account
from papertrail.domain.value import AccountId, PendingOtp


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Implementations must make ``find_or_create``, ``apply_otp``, ``consume_otp``
    and ``link_federated`` single atomic writes so concurrent requests for one
    email cannot overwrite each other. ``save`` writes every column and is only
    used for new accounts and whole-record updates.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email (already normalised).

        Args:
            email: The account's email

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_federated_id(self, federated_id: str) -> Optional[Account]:
        """Find an account by its federated provider subject ID.

        Args:
            federated_id: External identity provider subject ID

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_or_create(
        self,
        email: str,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> tuple[Account, bool]:
        """Atomically return the account for an email, creating it if absent.

        Profile fields are only used when the account is created.

        Args:
            email: Normalised email
            name: Display name for a new account
            date_of_birth: Date of birth for a new account

        Returns:
            Tuple of (account, created)
        """
        pass

    @abstractmethod
    async def apply_otp(
        self, account_id: AccountId, pending_otp: PendingOtp
    ) -> Account:
        """Atomically replace the pending passcode on an account.

        Args:
            account_id: Account to update
            pending_otp: New passcode and expiry

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account does not exist
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            DuplicateAccountError: If email or federated ID is taken by another account
        """
        pass

    @abstractmethod
    async def consume_otp(
        self, account_id: AccountId, code: str, now: datetime
    ) -> Optional[Account]:
        """Atomically redeem the pending passcode if it matches and is live.

        The passcode is cleared and the account marked verified only when the
        stored code equals ``code`` and has not expired at ``now``. A code
        replaced by a newer one no longer matches.

        Args:
            account_id: Account redeeming the code
            code: Submitted passcode
            now: Current instant

        Returns:
            The verified account, or None if nothing was redeemed
        """
        pass

    @abstractmethod
    async def link_federated(self, account_id: AccountId, federated_id: str) -> Account:
        """Attach a federated subject ID and mark the account verified.

        Only the federation columns are written, so a passcode issued
        concurrently is left untouched.

        Args:
            account_id: Account to link
            federated_id: External identity provider subject ID

        Returns:
            The linked account

        Raises:
            NotFoundError: If the account does not exist
            DuplicateAccountError: If another account holds the federated ID
        """
        pass
