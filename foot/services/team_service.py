"""Team Service - read-only access to teams."""

from sqlalchemy.ext.asyncio import AsyncSession

from foot.core.domain import Team
from foot.repositories.match_mapper import to_domain_team
from foot.repositories.repositories import TeamRepository


class TeamService:

    def __init__(self, db: AsyncSession):
        self.teams = TeamRepository(db)

    async def get_teams(self) -> list[Team]:
        return [to_domain_team(e) for e in await self.teams.find_all()]
