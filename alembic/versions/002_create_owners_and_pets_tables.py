"""create owners and pets tables

Revision ID: 002
Revises: 001
Create Date: 2025-09-23 20:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_owners_id", "owners", ["id"], unique=False)

    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("species", sa.String(100), nullable=False),
        sa.Column("breed", sa.String(100), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"]),
    )
    op.create_index("ix_pets_id", "pets", ["id"], unique=False)
    op.create_index("ix_pets_owner_id", "pets", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_pets_owner_id", table_name="pets")
    op.drop_index("ix_pets_id", table_name="pets")
    op.drop_table("pets")
    op.drop_index("ix_owners_id", table_name="owners")
    op.drop_table("owners")
