"""initial_schema

Create the foundational schema for PaperTrail:
- Accounts (one per email, shared by email OTP and Google sign-in)
- Notes (owned by an account)

Revision ID: 3c41d7e2a9b0
Revises:
Create Date: 2026-10-19 10:12:44.381920

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d7e2a9b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() lives in pgcrypto before PostgreSQL 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),  # Stored lowercase
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("federated_id", sa.String(255), nullable=True),  # Google "sub"
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("otp_code", sa.String(6), nullable=True),
        sa.Column("otp_expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
        # NULLs are distinct, so accounts without a Google link never collide
        sa.UniqueConstraint("federated_id", name="uq_accounts_federated_id"),
    )

    # ========================================================================
    # NOTES table
    # ========================================================================
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notes_account_created", "notes", ["account_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_notes_account_created", table_name="notes")
    op.drop_table("notes")
    op.drop_table("accounts")
