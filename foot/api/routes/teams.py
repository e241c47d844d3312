"""Team Routes - read-only team listing."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from foot import schemas
from foot.api.mappers import to_rest_team
from foot.infrastructure.database import get_db
from foot.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=list[schemas.Team])
async def get_teams(db: AsyncSession = Depends(get_db)):
    teams = await TeamService(db).get_teams()
    return [to_rest_team(t) for t in teams]
