"""Repository classes for database lookups."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from foot.models import MatchEntity, PlayerEntity, TeamEntity


class TeamRepository:
    """Repository for TeamEntity operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> list[TeamEntity]:
        result = await self.session.execute(
            select(TeamEntity).order_by(TeamEntity.id)
        )
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> TeamEntity | None:
        """Get a team by its unique name."""
        result = await self.session.execute(
            select(TeamEntity).where(TeamEntity.name == name)
        )
        return result.scalar_one_or_none()


class PlayerRepository:
    """Repository for PlayerEntity operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, player_id: int) -> PlayerEntity | None:
        return await self.session.get(PlayerEntity, player_id)

    async def find_all(
        self, name: str | None = None, team_name: str | None = None,
    ) -> list[PlayerEntity]:
        """List players, optionally filtered by (partial) name and team name."""
        query = select(PlayerEntity).order_by(PlayerEntity.id)
        if name:
            query = query.where(PlayerEntity.name.ilike(f"%{name}%"))
        if team_name:
            query = query.join(PlayerEntity.team).where(TeamEntity.name == team_name)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def save_all(self, players: list[PlayerEntity]) -> list[PlayerEntity]:
        """Add players to the session and flush to assign ids."""
        self.session.add_all(players)
        await self.session.flush()
        return players


class MatchRepository:
    """Repository for MatchEntity operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(
        self, match_id: int, refresh: bool = False,
    ) -> MatchEntity | None:
        """Get a match by id; refresh=True reloads it and its goals from the DB."""
        result = await self.session.execute(
            select(MatchEntity)
            .where(MatchEntity.id == match_id)
            .execution_options(populate_existing=refresh)
        )
        return result.scalar_one_or_none()

    async def find_all(self) -> list[MatchEntity]:
        result = await self.session.execute(
            select(MatchEntity).order_by(MatchEntity.id)
        )
        return list(result.scalars().all())
