"""Initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "personal_data",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("national_id", sa.String(length=32), nullable=True),
        sa.Column("state_id", sa.String(length=32), nullable=True),
        sa.Column("license_number", sa.String(length=32), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personal_data_national_id", "personal_data", ["national_id"])
    op.create_index("ix_personal_data_state_id", "personal_data", ["state_id"])
    op.create_index("ix_personal_data_license_number", "personal_data", ["license_number"])


def downgrade() -> None:
    op.drop_index("ix_personal_data_license_number", table_name="personal_data")
    op.drop_index("ix_personal_data_state_id", table_name="personal_data")
    op.drop_index("ix_personal_data_national_id", table_name="personal_data")
    op.drop_table("personal_data")
