"""Account identity payload shared by the auth use cases."""

from datetime import date

from pydantic import BaseModel

from papertrail.domain.model import Account


class AccountInfo(BaseModel):
    """Account information returned after authentication."""

    account_id: str
    email: str
    name: str | None
    date_of_birth: date | None
    is_verified: bool

    @classmethod
    def from_account(cls, account: Account) -> "AccountInfo":
        return cls(
            account_id=str(account.id),
            email=account.email,
            name=account.name,
            date_of_birth=account.date_of_birth,
            is_verified=account.is_verified,
        )
