"""Initial schema: author table

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

from authorhub.infrastructure.database.types import BinaryUUID

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "author",
        sa.Column("id", BinaryUUID(), primary_key=True),
        sa.Column("activation_token", sa.CHAR(32), nullable=True),
        sa.Column("avatar_url", sa.String(255), nullable=True),
        sa.Column("email", sa.String(128), nullable=False),
        sa.Column("password_hash", sa.CHAR(97), nullable=False),
        sa.Column("username", sa.String(32), nullable=False),
        sa.UniqueConstraint("email", name="uq_author_email"),
        sa.UniqueConstraint("username", name="uq_author_username"),
    )


def downgrade() -> None:
    op.drop_table("author")
