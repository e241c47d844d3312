"""Composition - wires repositories and persistence mappers for one DB session.

Design Decisions:
    - Explicit constructor composition instead of a DI container
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from foot.repositories.match_mapper import MatchMapper
from foot.repositories.player_mapper import PlayerMapper
from foot.repositories.repositories import (
    MatchRepository, PlayerRepository, TeamRepository,
)


@dataclass
class Repositories:
    teams: TeamRepository
    players: PlayerRepository
    matches: MatchRepository
    player_mapper: PlayerMapper
    match_mapper: MatchMapper


def build_repositories(db: AsyncSession) -> Repositories:
    teams = TeamRepository(db)
    players = PlayerRepository(db)
    matches = MatchRepository(db)
    player_mapper = PlayerMapper(matches, players, teams)
    return Repositories(
        teams=teams,
        players=players,
        matches=matches,
        player_mapper=player_mapper,
        match_mapper=MatchMapper(player_mapper),
    )
