"""initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM, JSONB, UUID

from alembic import op

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    sa.Enum("user", "admin", name="account_role").create(op.get_bind(), checkfirst=True)
    sa.Enum("pending", "approved", "banned", name="account_status").create(
        op.get_bind(), checkfirst=True
    )
    # Types already exist; stop create_table from emitting CREATE TYPE again
    account_role = ENUM(name="account_role", create_type=False)
    account_status = ENUM(name="account_status", create_type=False)

    op.create_table(
        "accounts",
        sa.Column("student_id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.String(128), nullable=False),
        sa.Column("gender", sa.String(32), nullable=False),
        # Blob references
        sa.Column("id_card", sa.String(512), nullable=False),
        sa.Column("photo", sa.String(512), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("role", account_role, nullable=False, server_default="user"),
        sa.Column("status", account_status, nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_status", "accounts", ["status"])

    # No foreign key on owner_id: deleting an account leaves its listings behind.
    op.create_table(
        "listings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("available_from", sa.Date(), nullable=False),
        sa.Column("gender", sa.String(32), nullable=False),
        sa.Column("rent", sa.Numeric(10, 2), nullable=False),
        sa.Column("location", sa.String(512), nullable=False),
        sa.Column("images", JSONB, nullable=False, server_default=sa.text("'[]'")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_listings_owner_id", "listings", ["owner_id"])


def downgrade() -> None:
    op.drop_table("listings")
    op.drop_table("accounts")
    sa.Enum(name="account_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="account_role").drop(op.get_bind(), checkfirst=True)
