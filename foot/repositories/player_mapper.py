"""Player Mapper - converts player and goal entities to domain objects and back.

Invariants:
    - Only converter permitted to perform lookups while converting
    - Entity -> domain reads the eagerly loaded team association
    - Domain -> entity resolves every reference eagerly and raises
      ResourceNotFoundError on the first missing one (player, match or team)
    - Partial updates only touch fields that are not None

Design Decisions:
    - Collaborating repositories injected via constructor, no container
    - Team-not-found fails loudly, like player/match-not-found, so a player is
      never persisted with an unset team
"""

from foot.core.domain import Player, PlayerScorer, PlayerUpdate
from foot.core.errors import ErrorContext, ResourceNotFoundError
from foot.models import PlayerEntity, PlayerScoreEntity
from foot.repositories.repositories import (
    MatchRepository, PlayerRepository, TeamRepository,
)


class PlayerMapper:
    """Entity <-> domain conversion for Player, PlayerScorer and PlayerUpdate."""

    def __init__(
        self,
        match_repository: MatchRepository,
        player_repository: PlayerRepository,
        team_repository: TeamRepository,
    ):
        self.match_repository = match_repository
        self.player_repository = player_repository
        self.team_repository = team_repository

    def to_domain(self, entity: PlayerEntity) -> Player:
        return Player(
            id=entity.id,
            name=entity.name,
            is_guardian=entity.guardian,
            team_name=entity.team.name,
        )

    def to_domain_scorer(self, entity: PlayerScoreEntity) -> PlayerScorer:
        return PlayerScorer(
            player=self.to_domain(entity.player),
            minute=entity.minute,
            is_own_goal=entity.own_goal,
            id=entity.id,
        )

    async def to_entity_scorer(
        self, match_id: int, scorer: PlayerScorer,
    ) -> PlayerScoreEntity:
        """Build a persistable goal event from a player reference and a match id.

        The goal id is left to the store: new events never reuse a client id.
        """
        player = await self._get_player(scorer.player.id)
        match = await self.match_repository.find_by_id(match_id)
        if match is None:
            raise ResourceNotFoundError(
                "Match", str(match_id), ErrorContext(match_id=match_id),
            )
        return PlayerScoreEntity(
            player=player,
            match=match,
            own_goal=scorer.is_own_goal,
            minute=scorer.minute,
        )

    async def to_entity(self, domain: Player) -> PlayerEntity:
        team = await self.team_repository.find_by_name(domain.team_name)
        if team is None:
            raise ResourceNotFoundError("Team", domain.team_name)
        return PlayerEntity(
            id=domain.id,
            name=domain.name,
            team=team,
            guardian=domain.is_guardian,
        )

    async def to_entity_update(self, domain: PlayerUpdate) -> PlayerEntity:
        """Apply a partial update onto the persisted player."""
        entity = await self._get_player(domain.id)
        if domain.name is not None:
            entity.name = domain.name
        if domain.is_guardian is not None:
            entity.guardian = domain.is_guardian
        return entity

    async def _get_player(self, player_id: int | None) -> PlayerEntity:
        entity = (
            await self.player_repository.find_by_id(player_id)
            if player_id is not None else None
        )
        if entity is None:
            raise ResourceNotFoundError(
                "Player", str(player_id), ErrorContext(player_id=player_id),
            )
        return entity
