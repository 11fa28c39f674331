"""Create publier_projets table

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Append-only lead intake table
    op.create_table(
        "publier_projets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(length=10), nullable=False),
        sa.Column("postal", sa.String(length=5), nullable=False),
        sa.Column("surface", sa.String(length=4), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("budget", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("photo_name", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_publier_projets_created_at"),
        "publier_projets",
        ["created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_publier_projets_created_at"), table_name="publier_projets")
    op.drop_table("publier_projets")
