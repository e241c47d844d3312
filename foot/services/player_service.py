"""Player Service - list, create and partially update players.

Invariants:
    - create_players / update_players resolve every item before committing:
      one unknown team or player id rejects the whole batch
    - Partial updates only change fields present in the request
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from foot.core.domain import Player, PlayerUpdate
from foot.services.composition import build_repositories

logger = logging.getLogger(__name__)


class PlayerService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repos = build_repositories(db)

    async def get_players(
        self, name: str | None = None, team_name: str | None = None,
    ) -> list[Player]:
        entities = await self.repos.players.find_all(name=name, team_name=team_name)
        return [self.repos.player_mapper.to_domain(e) for e in entities]

    async def create_players(self, players: list[Player]) -> list[Player]:
        entities = [await self.repos.player_mapper.to_entity(p) for p in players]
        await self.repos.players.save_all(entities)
        await self.db.commit()
        logger.info(f"Created {len(entities)} player(s)")
        return [self.repos.player_mapper.to_domain(e) for e in entities]

    async def update_players(self, updates: list[PlayerUpdate]) -> list[Player]:
        entities = [
            await self.repos.player_mapper.to_entity_update(u) for u in updates
        ]
        await self.db.commit()
        for entity in entities:
            logger.info(
                f"Updated player {entity.id}", extra={"player_id": entity.id},
            )
        return [self.repos.player_mapper.to_domain(e) for e in entities]
