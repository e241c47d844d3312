"""Match Routes - read matches and post goal events.

Invariants:
    - POST /matches/{id}/goals returns the whole updated match
    - A goal after minute 90 yields 400 with the offending player's name
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from foot import schemas
from foot.api.mappers import match_rest_mapper, scorer_rest_mapper
from foot.infrastructure.database import get_db
from foot.services.match_service import MatchService

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=list[schemas.Match])
async def get_matches(db: AsyncSession = Depends(get_db)):
    matches = await MatchService(db).get_matches()
    return [match_rest_mapper.to_rest(m) for m in matches]


@router.get("/{match_id}", response_model=schemas.Match)
async def get_match_by_id(match_id: int, db: AsyncSession = Depends(get_db)):
    match = await MatchService(db).get_match_by_id(match_id)
    return match_rest_mapper.to_rest(match)


@router.post("/{match_id}/goals", response_model=schemas.Match)
async def add_goals(
    match_id: int,
    body: list[schemas.PlayerScorer],
    db: AsyncSession = Depends(get_db),
):
    """Add a batch of goals to a match. All-or-nothing."""
    scorers = [scorer_rest_mapper.to_domain(s) for s in body]
    match = await MatchService(db).add_goals(match_id, scorers)
    return match_rest_mapper.to_rest(match)
