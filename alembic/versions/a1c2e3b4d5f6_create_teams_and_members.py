"""create teams and members tables

Revision ID: a1c2e3b4d5f6
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1c2e3b4d5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("team_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("team_id"),
    )
    op.create_table(
        "members",
        sa.Column("member_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["team_id"], ["teams.team_id"]),
        sa.PrimaryKeyConstraint("member_id"),
    )
    op.create_index("ix_members_team_id", "members", ["team_id"])


def downgrade() -> None:
    op.drop_index("ix_members_team_id", table_name="members")
    op.drop_table("members")
    op.drop_table("teams")
