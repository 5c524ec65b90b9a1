"""Create resource table (self-referencing tree).

Revision ID: 20261019100000
Revises: 20261019000000
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019100000"
down_revision: Union[str, None] = "20261019000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "resource",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("permission", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("icon", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("url", sa.String(length=1024), nullable=False, server_default=""),
        sa.ForeignKeyConstraint(["parent_id"], ["resource.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resource_parent_id"), "resource", ["parent_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_resource_parent_id"), table_name="resource")
    op.drop_table("resource")
