"""Seed demo data - teams E1..E3, players J1..J6, matches 1..3 and their goals.

Revision ID: 002_seed_data
Revises: 001_initial
Create Date: 2023-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from foot.db.seed import (
    SEED_MATCHES, SEED_PLAYERS, SEED_SCORES, SEED_TABLES, SEED_TEAMS,
)

revision: str = "002_seed_data"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    meta = sa.MetaData()
    meta.reflect(bind=op.get_bind(), only=SEED_TABLES)
    op.bulk_insert(meta.tables["team"], SEED_TEAMS)
    op.bulk_insert(meta.tables["player"], SEED_PLAYERS)
    op.bulk_insert(meta.tables["match"], SEED_MATCHES)
    op.bulk_insert(meta.tables["player_score"], SEED_SCORES)
    if op.get_bind().dialect.name == "postgresql":
        for table in SEED_TABLES:
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('\"{table}\"', 'id'), "
                f"(SELECT MAX(id) FROM \"{table}\"))",
            )


def downgrade() -> None:
    for table in reversed(SEED_TABLES):
        op.execute(f'DELETE FROM "{table}"')
