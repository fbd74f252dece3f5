"""SQLAlchemy table definitions for PaperTrail.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (one row per email, shared by both sign-in paths)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),  # Stored normalised
    Column("name", String(255), nullable=True),
    Column("date_of_birth", Date, nullable=True),
    Column("federated_id", String(255), nullable=True),  # Google "sub"
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column("otp_code", String(6), nullable=True),
    Column("otp_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_accounts_email"),
    UniqueConstraint("federated_id", name="uq_accounts_federated_id"),
)

# ============================================================================
# NOTES TABLE
# ============================================================================
notes_table = Table(
    "notes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_notes_account_created", notes_table.c.account_id, notes_table.c.created_at)
