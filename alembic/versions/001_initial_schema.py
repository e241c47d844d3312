"""Initial schema - team, player, match, player_score.

Revision ID: 001_initial
Revises: None
Create Date: 2023-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "team",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "player",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("guardian", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("team_id", sa.Integer, sa.ForeignKey("team.id"), nullable=False),
    )

    op.create_table(
        "match",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("team_a_id", sa.Integer, sa.ForeignKey("team.id"), nullable=False),
        sa.Column("team_b_id", sa.Integer, sa.ForeignKey("team.id"), nullable=False),
        sa.Column("stadium", sa.String(100), nullable=False),
        sa.Column("match_datetime", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "player_score",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("player_id", sa.Integer, sa.ForeignKey("player.id"), nullable=False),
        sa.Column(
            "match_id", sa.Integer,
            sa.ForeignKey("match.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("minute", sa.Integer, nullable=False),
        sa.Column("own_goal", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_player_score_match_id", "player_score", ["match_id"])


def downgrade() -> None:
    op.drop_index("ix_player_score_match_id", table_name="player_score")
    op.drop_table("player_score")
    op.drop_table("match")
    op.drop_table("player")
    op.drop_table("team")
