"""Initial migration: visits table.

Revision ID: 001
Revises: None
Create Date: 2025-09-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "visits",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("latitude", sa.Double, nullable=False),
        sa.Column("longitude", sa.Double, nullable=False),
        sa.Column("residence_type", sa.String(32), nullable=False),
        sa.Column("answer_status", sa.String(32), nullable=False),
        sa.Column("response_type", sa.String(32), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
    )
    op.create_index("ix_visits_timestamp", "visits", ["timestamp"])


def downgrade() -> None:
    op.drop_index("ix_visits_timestamp", table_name="visits")
    op.drop_table("visits")
