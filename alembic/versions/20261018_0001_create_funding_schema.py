"""create funding schema

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "industries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "startups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("industry_id", sa.Integer(), nullable=False),
        sa.Column(
            "current_status",
            sa.String(length=16),
            nullable=False,
            comment="active, closed, public",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint(
            "current_status IN ('active', 'closed', 'public')",
            name="ck_startups_current_status",
        ),
        sa.ForeignKeyConstraint(["industry_id"], ["industries.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_startups_industry_id", "startups", ["industry_id"], unique=False)

    op.create_table(
        "funding_rounds",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("startup_id", sa.Integer(), nullable=False),
        sa.Column("round_type", sa.String(length=50), nullable=False,
                  comment="seed, series_a, series_b, ..."),
        sa.Column("raised_amount_usd", sa.BigInteger(), nullable=True),
        sa.Column("announced_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["startup_id"], ["startups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_funding_rounds_startup_id", "funding_rounds", ["startup_id"], unique=False)
    op.create_index(
        "ix_funding_rounds_startup_announced_date",
        "funding_rounds",
        ["startup_id", "announced_date"],
        unique=False,
    )

    op.create_table(
        "startup_audit",
        sa.Column("audit_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("startup_name", sa.String(length=100), nullable=True),
        sa.Column("action_type", sa.String(length=50), nullable=False),
        sa.Column("action_time", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("audit_id"),
    )
    op.create_index("ix_startup_audit_action_time", "startup_audit", ["action_time"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_startup_audit_action_time", table_name="startup_audit")
    op.drop_table("startup_audit")
    op.drop_index("ix_funding_rounds_startup_announced_date", table_name="funding_rounds")
    op.drop_index("ix_funding_rounds_startup_id", table_name="funding_rounds")
    op.drop_table("funding_rounds")
    op.drop_index("ix_startups_industry_id", table_name="startups")
    op.drop_table("startups")
    op.drop_table("industries")
