"""Demo Seed Data - teams, players, matches and goals for local runs and tests.

Invariants:
    - Ids are explicit so fixtures and migrations agree on references
    - Match 2 (E2 vs E3): J3 scores at 70, J6 (E3) own goal at 80 -> E2 2, E3 0
    - Match 3 (E1 vs E3) has no goals

Usage:
    python -m foot.db.seed
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from foot.config import get_settings
from foot.db.session import create_session_factory
from foot.infrastructure.observability import setup_logging
from foot.models import MatchEntity, PlayerEntity, PlayerScoreEntity, TeamEntity

logger = logging.getLogger(__name__)

SEED_TABLES = ("team", "player", "match", "player_score")
KICK_OFF = datetime(2023, 1, 1, 14, 0, tzinfo=timezone.utc)

SEED_TEAMS = [
    {"id": 1, "name": "E1"},
    {"id": 2, "name": "E2"},
    {"id": 3, "name": "E3"},
]

SEED_PLAYERS = [
    {"id": 1, "name": "J1", "guardian": False, "team_id": 1},
    {"id": 2, "name": "J2", "guardian": False, "team_id": 2},
    {"id": 3, "name": "J3", "guardian": False, "team_id": 2},
    {"id": 4, "name": "J4", "guardian": False, "team_id": 2},
    {"id": 5, "name": "J5", "guardian": True, "team_id": 3},
    {"id": 6, "name": "J6", "guardian": False, "team_id": 3},
]

SEED_MATCHES = [
    {"id": 1, "team_a_id": 1, "team_b_id": 2, "stadium": "S2", "match_datetime": KICK_OFF},
    {"id": 2, "team_a_id": 2, "team_b_id": 3, "stadium": "S2", "match_datetime": KICK_OFF},
    {"id": 3, "team_a_id": 1, "team_b_id": 3, "stadium": "S2", "match_datetime": KICK_OFF},
]

SEED_SCORES = [
    # Match 1: E1 4 - 2 E2
    {"id": 1, "player_id": 1, "match_id": 1, "minute": 10, "own_goal": False},
    {"id": 2, "player_id": 1, "match_id": 1, "minute": 20, "own_goal": False},
    {"id": 3, "player_id": 1, "match_id": 1, "minute": 30, "own_goal": False},
    {"id": 4, "player_id": 2, "match_id": 1, "minute": 40, "own_goal": False},
    {"id": 5, "player_id": 4, "match_id": 1, "minute": 50, "own_goal": True},
    {"id": 6, "player_id": 3, "match_id": 1, "minute": 60, "own_goal": False},
    # Match 2: E2 2 - 0 E3
    {"id": 7, "player_id": 3, "match_id": 2, "minute": 70, "own_goal": False},
    {"id": 8, "player_id": 6, "match_id": 2, "minute": 80, "own_goal": True},
]


async def seed_database(db: AsyncSession) -> None:
    """Insert all demo fixtures and commit."""
    db.add_all(TeamEntity(**row) for row in SEED_TEAMS)
    await db.flush()
    db.add_all(PlayerEntity(**row) for row in SEED_PLAYERS)
    db.add_all(MatchEntity(**row) for row in SEED_MATCHES)
    await db.flush()
    db.add_all(PlayerScoreEntity(**row) for row in SEED_SCORES)
    await db.flush()
    if db.bind.dialect.name == "postgresql":
        await _reset_sequences(db)
    await db.commit()
    logger.info(
        f"Seeded {len(SEED_TEAMS)} teams, {len(SEED_PLAYERS)} players, "
        f"{len(SEED_MATCHES)} matches",
    )


async def _reset_sequences(db: AsyncSession) -> None:
    """Explicit ids bypass the serial sequences; move them past the seeded rows."""
    for table in SEED_TABLES:
        await db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('\"{table}\"', 'id'), "
            f"(SELECT MAX(id) FROM \"{table}\"))",
        ))


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    session_factory = create_session_factory(settings.database_url)
    async with session_factory() as db:
        await seed_database(db)


if __name__ == "__main__":
    asyncio.run(_main())
