"""Participants table.

Revision ID: 001_participants
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_participants"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "participants",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("participation", sa.Float, nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "participation >= 0 AND participation <= 100",
            name="ck_participants_participation_range",
        ),
    )
    op.create_index(
        "ix_participants_first_name", "participants", ["first_name"],
    )


def downgrade() -> None:
    op.drop_index("ix_participants_first_name", table_name="participants")
    op.drop_table("participants")
