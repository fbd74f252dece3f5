"""Note entity."""

from datetime import datetime

from pydantic import Field

from papertrail.domain.model.common import DomainModel, utc_now
from papertrail.domain.value import AccountId, NoteId


class Note(DomainModel):
    """A note owned by exactly one account."""

    id: NoteId
    account_id: AccountId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utc_now)
