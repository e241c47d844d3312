"""Player Routes - list, create and partially update players."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from foot import schemas
from foot.api.mappers import player_rest_mapper
from foot.infrastructure.database import get_db
from foot.services.player_service import PlayerService

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=list[schemas.Player])
async def get_players(
    name: str | None = Query(None),
    team_name: str | None = Query(None, alias="teamName"),
    db: AsyncSession = Depends(get_db),
):
    players = await PlayerService(db).get_players(name=name, team_name=team_name)
    return [player_rest_mapper.to_rest(p) for p in players]


@router.post(
    "", response_model=list[schemas.Player],
    status_code=status.HTTP_201_CREATED,
)
async def create_players(
    body: list[schemas.NewPlayer], db: AsyncSession = Depends(get_db),
):
    players = [player_rest_mapper.to_domain(p) for p in body]
    created = await PlayerService(db).create_players(players)
    return [player_rest_mapper.to_rest(p) for p in created]


@router.put("", response_model=list[schemas.Player])
async def update_players(
    body: list[schemas.PlayerUpdate], db: AsyncSession = Depends(get_db),
):
    """Partial update: fields missing from an item are left unchanged."""
    updates = [player_rest_mapper.to_domain_update(u) for u in body]
    updated = await PlayerService(db).update_players(updates)
    return [player_rest_mapper.to_rest(p) for p in updated]
