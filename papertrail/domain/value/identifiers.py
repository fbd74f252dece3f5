"""Strongly typed identifiers for PaperTrail domain entities."""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
NoteId = NewType("NoteId", UUID)
