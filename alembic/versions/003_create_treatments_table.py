"""create treatments table

Revision ID: 003
Revises: 002
Create Date: 2025-09-24 19:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "treatments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("vet", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("cost", sa.Numeric(10, 2), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["pet_id"], ["pets.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_treatments_id", "treatments", ["id"], unique=False)
    op.create_index("ix_treatments_pet_id", "treatments", ["pet_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_treatments_pet_id", table_name="treatments")
    op.drop_index("ix_treatments_id", table_name="treatments")
    op.drop_table("treatments")
