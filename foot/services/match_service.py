"""Match Service - read matches and record goal events.

Invariants:
    - add_goals is all-or-nothing: the whole batch is validated (minute rule,
      players belong to the match) and resolved before a single commit
    - A rejected batch leaves the match untouched
    - The returned Match is reloaded after commit so scores reflect the new goals
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from foot.core.domain import Match, PlayerScorer
from foot.core.errors import ErrorContext, FootError, ResourceNotFoundError
from foot.core.goal_rules import (
    check_goals_valid, check_players_in_match, check_scorers_identified,
)
from foot.models import MatchEntity
from foot.repositories.match_mapper import to_domain_team
from foot.services.composition import build_repositories

logger = logging.getLogger(__name__)


class MatchService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repos = build_repositories(db)

    async def get_matches(self) -> list[Match]:
        entities = await self.repos.matches.find_all()
        return [self.repos.match_mapper.to_domain(e) for e in entities]

    async def get_match_by_id(self, match_id: int) -> Match:
        entity = await self._get_match_entity(match_id)
        return self.repos.match_mapper.to_domain(entity)

    async def add_goals(self, match_id: int, scorers: list[PlayerScorer]) -> Match:
        """Append goal events to a match and return the rescored match."""
        entity = await self._get_match_entity(match_id)
        try:
            check_scorers_identified(scorers)
            check_goals_valid(scorers)
            resolved = [
                await self.repos.player_mapper.to_entity_scorer(match_id, s)
                for s in scorers
            ]
            # The stored player is authoritative for team membership
            check_players_in_match(
                to_domain_team(entity.team_a),
                to_domain_team(entity.team_b),
                [self.repos.player_mapper.to_domain_scorer(r) for r in resolved],
                match_id,
            )
        except FootError as e:
            logger.warning(
                f"Rejected {len(scorers)} goal(s) for match {match_id}: {e.message}",
                extra={"match_id": match_id, "error_code": e.code},
            )
            raise

        self.db.add_all(resolved)
        await self.db.commit()
        logger.info(
            f"Recorded {len(resolved)} goal(s) for match {match_id}",
            extra={"match_id": match_id, "goal_count": len(resolved)},
        )
        refreshed = await self.repos.matches.find_by_id(match_id, refresh=True)
        return self.repos.match_mapper.to_domain(refreshed)

    async def _get_match_entity(self, match_id: int) -> MatchEntity:
        entity = await self.repos.matches.find_by_id(match_id)
        if entity is None:
            raise ResourceNotFoundError(
                "Match", str(match_id), ErrorContext(match_id=match_id),
            )
        return entity
