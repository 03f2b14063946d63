# ruff: noqa: I001
"""Processed-transaction fingerprint table.

Revision ID: 0001_tm_processed
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001_tm_processed"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "tm_processed_transactions",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("fingerprint_sha256", sa.CHAR(64), nullable=False),
        sa.Column("profile", sa.String(), nullable=False),
        sa.Column("tx_date", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("payee", sa.Text(), nullable=True),
        sa.Column(
            "processed_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.UniqueConstraint("fingerprint_sha256", name="uniq_tm_processed_fingerprint"),
    )

    # Lookups by profile when inspecting what a given export already sent
    op.create_index(
        "ix_tm_processed_profile_date",
        "tm_processed_transactions",
        ["profile", "tx_date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_tm_processed_profile_date", table_name="tm_processed_transactions")
    op.drop_table("tm_processed_transactions")
