"""Match Schemas - wire representation of matches, sides and goal events.

Invariants:
    - PlayerScorer wire names differ from the domain: scoreTime <-> minute, isOG <-> is_own_goal
    - id is assigned by the store; an id sent with a new goal is ignored
    - scoreTime is non-negative; the upper bound is a business rule (core/goal_rules.py)
      so that it surfaces with its own message
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from foot.core.domain_types import MIN_GOAL_MINUTE
from foot.schemas.player import Player


class Team(BaseModel):
    id: int
    name: str


class PlayerScorer(BaseModel):
    """One goal event - request body item of POST /matches/{id}/goals."""
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    player: Player
    score_time: int = Field(ge=MIN_GOAL_MINUTE, alias="scoreTime")
    is_og: bool = Field(False, alias="isOG")


class TeamMatch(BaseModel):
    team: Team
    score: int
    scorers: list[PlayerScorer]


class Match(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    team_a: TeamMatch = Field(alias="teamA")
    team_b: TeamMatch = Field(alias="teamB")
    stadium: str
    datetime: dt.datetime
